"""
Template discovery on disk.

A template is any directory under a templates or examples root. Each may
carry an optional template.yaml describing it:

    description: Step-by-step tutorial app with a map view
    tags: [map, tutorial]

The metadata is only used for listing; resolution never depends on it.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from create_cave_app.constants import TEMPLATE_METADATA_FILENAME

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TemplateInfo:
    """
    A discovered template directory with its metadata.

    Attributes:
        name: Template identifier
        path: Absolute path to the template directory
        description: Human-readable description (from template.yaml)
        metadata: Any additional template.yaml fields
    """

    name: str
    path: Path
    description: str = ""
    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dict."""
        return {
            "name": self.name,
            "path": str(self.path),
            "description": self.description,
            "metadata": self.metadata,
        }


def dirs_of(root: str | Path) -> list[str]:
    """
    List the names of the subdirectories of a root directory.

    Hidden entries (leading dot) are skipped. A missing root yields an
    empty list rather than an error, since an install without bundled
    examples is valid.

    Args:
        root: Directory to scan

    Returns:
        Sorted subdirectory names

    Example:
        >>> dirs_of("resources/examples")
        ['basic', 'tutorial']
    """
    root = Path(root)
    if not root.is_dir():
        logger.debug(f"Template root not found: {root}")
        return []

    return sorted(
        entry.name
        for entry in root.iterdir()
        if entry.is_dir() and not entry.name.startswith(".")
    )


def load_template_info(name: str, path: str | Path) -> TemplateInfo:
    """
    Describe a template directory.

    Reads template.yaml from the directory when present. Malformed metadata
    is logged and ignored so a bad description never hides a template.

    Args:
        name: Identifier the template is registered under
        path: Template directory

    Returns:
        TemplateInfo for the directory
    """
    path = Path(path).resolve()
    metadata_path = path / TEMPLATE_METADATA_FILENAME
    if not metadata_path.is_file():
        return TemplateInfo(name=name, path=path)

    try:
        metadata = yaml.safe_load(metadata_path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        logger.warning(f"Failed to parse {metadata_path}: {e}")
        metadata = {}

    if not isinstance(metadata, dict):
        logger.warning(f"Ignoring non-mapping metadata in {metadata_path}")
        metadata = {}

    description = metadata.pop("description", "")
    if description is None:
        description = ""
    elif not isinstance(description, str):
        logger.warning(f"Non-string description in {metadata_path}, converting to text")
        description = str(description)
    description = description.strip()

    return TemplateInfo(
        name=name,
        path=path,
        description=description,
        metadata=metadata,
    )
