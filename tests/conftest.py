"""
Shared pytest fixtures and configuration for create-cave-app.

Example Usage:
    # Run unit tests only
    pytest -m unit

    # Run everything, including CLI runs against temporary directories
    pytest
"""

from pathlib import Path

import pytest

from create_cave_app.templates import build_registry

EXAMPLE_NAMES = ("tutorial", "basic")


def make_template(path: Path, description: str | None = None) -> Path:
    """Create a small template tree at path."""
    (path / "client" / "src").mkdir(parents=True)
    (path / "README.md").write_text(f"# {path.name}\n")
    (path / "client" / "src" / "index.js").write_text("export default null\n")
    if description is not None:
        (path / "template.yaml").write_text(f"description: {description}\n")
    return path


@pytest.fixture
def templates_dir(tmp_path):
    """Templates root holding the bundled-style 'base' default template."""
    root = tmp_path / "templates"
    make_template(root / "base", description="Minimal app")
    return root


@pytest.fixture
def examples_dir(tmp_path):
    """Examples root with one subdirectory per example template."""
    root = tmp_path / "examples"
    for name in EXAMPLE_NAMES:
        make_template(root / name)
    return root


@pytest.fixture
def libs_dir(tmp_path):
    """Directory of CAVE library packages."""
    root = tmp_path / "packages"
    for name in ("core", "map", "ui"):
        (root / name).mkdir(parents=True)
        (root / name / "index.js").write_text(f"export const name = '{name}'\n")
    return root


@pytest.fixture
def registry(templates_dir, examples_dir):
    """Registry built from the temporary templates and examples roots."""
    return build_registry(templates_dir / "base", examples_dir)
