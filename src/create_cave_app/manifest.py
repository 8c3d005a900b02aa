"""
Package manifest loading.

The manifest is read once at startup into a PackageManifest and its values
are passed down to whatever needs them (e.g. --version output).

Format (manifest.toml):

    [package]
    name = "create-cave-app"
    version = "0.1.0"
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from create_cave_app.constants import PACKAGE_MANIFEST_PATH
from create_cave_app.errors import ManifestError

logger = logging.getLogger(__name__)

# Try to import tomllib (Python 3.11+) or tomli
try:
    import tomllib
except ImportError:
    import tomli as tomllib


@dataclass(frozen=True)
class PackageManifest:
    """Name and version of the installed tool."""

    name: str
    version: str
    description: str = ""

    @classmethod
    def from_toml(cls, path: str | Path) -> "PackageManifest":
        """
        Load a manifest from a TOML file.

        Args:
            path: Path to manifest.toml

        Returns:
            Loaded PackageManifest

        Raises:
            ManifestError: If the file is missing, unparseable, or lacks
                the [package] name/version keys
        """
        path = Path(path)
        if not path.is_file():
            raise ManifestError(f"Manifest not found: {path}")

        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ManifestError(f"Invalid manifest {path}: {e}") from e

        package = data.get("package")
        if not isinstance(package, dict):
            raise ManifestError(f"Manifest {path} has no [package] table")

        missing = [key for key in ("name", "version") if not package.get(key)]
        if missing:
            raise ManifestError(f"Manifest {path} missing keys: {missing}")

        return cls(
            name=str(package["name"]),
            version=str(package["version"]),
            description=str(package.get("description", "")),
        )


def load_manifest(path: str | Path | None = None) -> PackageManifest:
    """Load the bundled manifest, or the one at path if given."""
    manifest = PackageManifest.from_toml(path or PACKAGE_MANIFEST_PATH)
    logger.debug(f"Loaded manifest: {manifest.name} {manifest.version}")
    return manifest
