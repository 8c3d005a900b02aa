"""
Unit tests for template directory discovery and template.yaml metadata.
"""

import pytest

from create_cave_app.templates import TemplateInfo, dirs_of, load_template_info

pytestmark = pytest.mark.unit


class TestDirsOf:
    """Test subdirectory scanning."""

    def test_sorted_subdirectories(self, tmp_path):
        for name in ("zeta", "alpha", "mid"):
            (tmp_path / name).mkdir()
        assert dirs_of(tmp_path) == ["alpha", "mid", "zeta"]

    def test_skips_files_and_hidden(self, tmp_path):
        (tmp_path / "tutorial").mkdir()
        (tmp_path / ".git").mkdir()
        (tmp_path / "README.md").write_text("hi")
        assert dirs_of(tmp_path) == ["tutorial"]

    def test_missing_root_is_empty(self, tmp_path):
        assert dirs_of(tmp_path / "missing") == []

    def test_accepts_str(self, tmp_path):
        (tmp_path / "basic").mkdir()
        assert dirs_of(str(tmp_path)) == ["basic"]


class TestLoadTemplateInfo:
    """Test template.yaml parsing."""

    def test_no_metadata_file(self, tmp_path):
        info = load_template_info("basic", tmp_path)
        assert info == TemplateInfo(name="basic", path=tmp_path.resolve())

    def test_description_and_extra_fields(self, tmp_path):
        (tmp_path / "template.yaml").write_text(
            """description: |
  Tutorial app with a map view
tags: [map, tutorial]
"""
        )
        info = load_template_info("tutorial", tmp_path)
        assert info.description == "Tutorial app with a map view"
        assert info.metadata == {"tags": ["map", "tutorial"]}

    def test_invalid_yaml_is_ignored(self, tmp_path, caplog):
        (tmp_path / "template.yaml").write_text("description: [unclosed\n")
        info = load_template_info("broken", tmp_path)
        assert info.description == ""
        assert "Failed to parse" in caplog.text

    def test_non_mapping_yaml_is_ignored(self, tmp_path):
        (tmp_path / "template.yaml").write_text("- just\n- a list\n")
        info = load_template_info("listy", tmp_path)
        assert info.description == ""
        assert info.metadata == {}

    def test_non_string_description_converted(self, tmp_path, caplog):
        (tmp_path / "template.yaml").write_text("description: 3\n")
        info = load_template_info("numbered", tmp_path)
        assert info.description == "3"
        assert "Non-string description" in caplog.text

    def test_empty_description(self, tmp_path):
        (tmp_path / "template.yaml").write_text("description:\n")
        assert load_template_info("blank", tmp_path).description == ""

    def test_to_dict(self, tmp_path):
        info = TemplateInfo(name="basic", path=tmp_path, description="Basic")
        data = info.to_dict()
        assert data["name"] == "basic"
        assert data["path"] == str(tmp_path)
        assert data["description"] == "Basic"
