"""
Template registry and resolution.

The registry maps template identifiers to source directories. It is built
once at startup from a fixed default template plus every directory found
under an examples root, and is read-only afterwards. Callers pass it
explicitly to resolve() rather than reaching for a module-level instance.
"""

import logging
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING, Iterator

from create_cave_app.constants import DEFAULT_TEMPLATE_NAME
from create_cave_app.errors import TemplateNotFoundError
from create_cave_app.templates.discovery import TemplateInfo, dirs_of, load_template_info

if TYPE_CHECKING:
    from create_cave_app.config import Config

logger = logging.getLogger(__name__)


class TemplateRegistry(Mapping):
    """
    Immutable mapping from template identifier to absolute directory path.

    Example:
        registry = build_registry("resources/templates/base", "resources/examples")
        registry.names()  # ['default', 'basic', 'tutorial']
        path = resolve(registry, "tutorial")
    """

    def __init__(self, entries: Mapping[str, Path]):
        self._entries = MappingProxyType(
            {name: Path(path).resolve() for name, path in entries.items()}
        )

    def __getitem__(self, name: str) -> Path:
        return self._entries[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"TemplateRegistry({self.names()!r})"

    def names(self) -> list[str]:
        """Return template identifiers in registration order."""
        return list(self._entries)

    def describe(self) -> list[TemplateInfo]:
        """Return metadata for every registered template."""
        return [load_template_info(name, path) for name, path in self._entries.items()]

    @classmethod
    def from_config(cls, config: "Config") -> "TemplateRegistry":
        """
        Build a registry from the configured template locations.

        Args:
            config: Loaded configuration

        Returns:
            Registry with the default template and all discovered examples
        """
        return build_registry(config.default_template_dir, config.examples_dir)


def build_registry(
    default_dir: str | Path,
    examples_dir: str | Path,
    default_name: str = DEFAULT_TEMPLATE_NAME,
) -> TemplateRegistry:
    """
    Build the template registry.

    The default identifier is always registered, even when default_dir does
    not exist; that failure surfaces at resolution time. An example directory
    sharing the default identifier is skipped so the fixed default wins.

    Args:
        default_dir: Bundled default template directory
        examples_dir: Root whose subdirectories become templates
        default_name: Reserved identifier for the default template

    Returns:
        Populated TemplateRegistry
    """
    examples_dir = Path(examples_dir)
    entries: dict[str, Path] = {default_name: Path(default_dir)}

    for name in dirs_of(examples_dir):
        if name == default_name:
            logger.warning(
                f"Example '{name}' in {examples_dir} shadows the reserved "
                f"default template and is ignored"
            )
            continue
        entries[name] = examples_dir / name

    registry = TemplateRegistry(entries)
    logger.debug(f"Registered {len(registry)} templates: {registry.names()}")
    return registry


def resolve(registry: Mapping[str, Path], requested_name: str | None = None) -> Path:
    """
    Resolve a template identifier to its source directory.

    Args:
        registry: Identifier to directory mapping
        requested_name: Template identifier, or None for the default

    Returns:
        Absolute path of the template directory

    Raises:
        TemplateNotFoundError: If the identifier is unknown or its directory
            no longer exists
    """
    name = requested_name if requested_name is not None else DEFAULT_TEMPLATE_NAME

    path = registry.get(name)
    if path is None or not Path(path).is_dir():
        if path is not None:
            logger.debug(f"Template '{name}' is registered but missing on disk: {path}")
        raise TemplateNotFoundError(name, list(registry))

    logger.debug(f"Resolved template '{name}' -> {path}")
    return Path(path)
