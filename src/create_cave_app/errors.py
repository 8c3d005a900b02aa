"""
Error types raised by create-cave-app.

All errors derive from CaveAppError so the CLI can report them uniformly
and exit with status 1.
"""

from pathlib import Path
from typing import Iterable


class CaveAppError(Exception):
    """Base class for create-cave-app errors."""


class TemplateNotFoundError(CaveAppError):
    """
    Raised when a requested template cannot be resolved.

    Covers both unknown identifiers and identifiers whose directory has
    disappeared since the registry was built.

    Attributes:
        name: The requested template identifier
        available: Valid identifiers at the time of the lookup
    """

    def __init__(self, name: str, available: Iterable[str]):
        self.name = name
        self.available = list(available)
        super().__init__(
            f"Template not found: '{name}'. "
            f"Available templates: {', '.join(self.available)}"
        )


class ProjectExistsError(CaveAppError):
    """Raised when the target project directory exists and is not empty."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(
            f"Target directory is not empty: {path}. "
            f"Use --overwrite to copy into it anyway."
        )


class LibraryNotFoundError(CaveAppError):
    """Raised when a CAVE library directory is missing from the libs dir."""

    def __init__(self, name: str, libs_dir: Path):
        self.name = name
        self.libs_dir = libs_dir
        super().__init__(f"Library '{name}' not found in {libs_dir}")


class ManifestError(CaveAppError):
    """Raised when the package manifest is missing or malformed."""


class ConfigError(CaveAppError):
    """Raised when a config file is unparseable or holds invalid values."""
