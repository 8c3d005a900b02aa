"""
TOML-based configuration for create-cave-app.

Supports profiles so a monorepo checkout can point the tool at its own
examples and library packages while an installed copy uses the bundled
resources.

Example config (cave.toml):

    [default]
    default_template = "base"

    [dev]
    examples_dir = "../../examples"
    libs_dir = "../../packages"
    libs = ["core", "map", "ui"]

    [dev.install]
    lib_parent = "client/src"
    lib_folder_name = "mit-cave"

Relative paths in a TOML file are resolved against the file's directory.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from create_cave_app.constants import (
    DEFAULT_LIBS_DIRNAMES,
    DEFAULT_TEMPLATE_DIRNAME,
    LIB_PARENT_DIR,
    PACKAGE_EXAMPLES_DIR,
    PACKAGE_TEMPLATES_DIR,
    TARGET_PROJECT_LIB_FOLDER_NAME,
)
from create_cave_app.errors import ConfigError

logger = logging.getLogger(__name__)

# Try to import tomllib (Python 3.11+) or tomli
try:
    import tomllib
except ImportError:
    import tomli as tomllib

_PATH_KEYS = ("templates_dir", "examples_dir", "libs_dir")


@dataclass
class InstallConfig:
    """Where CAVE libraries are placed inside a generated project."""

    lib_parent: str = LIB_PARENT_DIR  # Relative to the project root
    lib_folder_name: str = TARGET_PROJECT_LIB_FOLDER_NAME
    overwrite: bool = False  # Copy into a non-empty target directory


@dataclass
class Config:
    """Complete configuration for project scaffolding."""

    templates_dir: str = str(PACKAGE_TEMPLATES_DIR)
    examples_dir: str = str(PACKAGE_EXAMPLES_DIR)
    default_template: str = DEFAULT_TEMPLATE_DIRNAME  # Dirname under templates_dir
    libs_dir: str | None = None  # None = do not install libraries
    libs: list[str] = field(default_factory=lambda: list(DEFAULT_LIBS_DIRNAMES))

    install: InstallConfig = field(default_factory=InstallConfig)

    @property
    def default_template_dir(self) -> Path:
        """Directory of the template registered as 'default'."""
        return Path(self.templates_dir) / self.default_template

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Config":
        """Create config from dictionary.

        Raises:
            ConfigError: If libs or the install table hold invalid values
        """
        data = dict(data)
        install_data = data.pop("install", {})

        unknown = set(data) - {f for f in cls.__dataclass_fields__ if f != "install"}
        if unknown:
            logger.warning(f"Ignoring unknown config keys: {sorted(unknown)}")

        if not isinstance(install_data, dict):
            raise ConfigError(f"[install] must be a table, got {type(install_data).__name__}")
        try:
            install = InstallConfig(**install_data)
        except TypeError as e:
            raise ConfigError(f"Invalid [install] settings: {e}") from e

        defaults = cls()
        libs = data.get("libs", defaults.libs)
        if not isinstance(libs, (list, tuple)) or not all(isinstance(name, str) for name in libs):
            raise ConfigError(f"libs must be a list of library names, got {libs!r}")

        return cls(
            templates_dir=data.get("templates_dir", defaults.templates_dir),
            examples_dir=data.get("examples_dir", defaults.examples_dir),
            default_template=data.get("default_template", defaults.default_template),
            libs_dir=data.get("libs_dir"),
            libs=list(libs),
            install=install,
        )

    @classmethod
    def from_toml(cls, path: str | Path, profile: str = "default") -> "Config":
        """
        Load config from TOML file.

        Args:
            path: Path to TOML config file
            profile: Profile name to load (default: "default")

        Returns:
            Loaded Config

        Raises:
            FileNotFoundError: If the config file doesn't exist
            KeyError: If the profile is not defined in the file
            ConfigError: If the file is not valid TOML or holds invalid values
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid config file {path}: {e}") from e

        if profile not in data:
            available = list(data.keys())
            raise KeyError(
                f"Profile '{profile}' not found in config. "
                f"Available: {available}"
            )

        profile_data = dict(data[profile])
        base_dir = path.resolve().parent
        for key in _PATH_KEYS:
            value = profile_data.get(key)
            if value is not None and not Path(value).is_absolute():
                profile_data[key] = str(base_dir / value)

        logger.info(f"Loaded config profile: {profile}")
        return cls.from_dict(profile_data)

    def to_dict(self) -> dict[str, Any]:
        """Serialize config to dictionary."""
        return {
            "templates_dir": self.templates_dir,
            "examples_dir": self.examples_dir,
            "default_template": self.default_template,
            "libs_dir": self.libs_dir,
            "libs": list(self.libs),
            "install": {
                "lib_parent": self.install.lib_parent,
                "lib_folder_name": self.install.lib_folder_name,
                "overwrite": self.install.overwrite,
            },
        }


def load_config(path: str | Path | None = None, profile: str = "default") -> Config:
    """
    Load configuration from a TOML file, or defaults when no path is given.

    Args:
        path: Optional path to TOML config file
        profile: Profile name within TOML file

    Returns:
        Loaded Config
    """
    if path is not None:
        return Config.from_toml(path, profile)
    return Config()
