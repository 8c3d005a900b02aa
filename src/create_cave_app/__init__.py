"""
create-cave-app: bootstrap a CAVE web application from a template.

Main exports:
- TemplateRegistry, build_registry, resolve: Template lookup
- create_project, install_libs: Copy a template (and libraries) into a project
- Config, load_config: TOML configuration with profiles
- PackageManifest, load_manifest: Tool name and version
"""

__version__ = "0.1.0"

from create_cave_app.config import Config, InstallConfig, load_config
from create_cave_app.errors import (
    CaveAppError,
    ConfigError,
    LibraryNotFoundError,
    ManifestError,
    ProjectExistsError,
    TemplateNotFoundError,
)
from create_cave_app.manifest import PackageManifest, load_manifest
from create_cave_app.project import create_project, install_libs
from create_cave_app.templates import TemplateInfo, TemplateRegistry, build_registry, dirs_of, resolve

__all__ = [
    # Version
    "__version__",
    # Templates
    "TemplateInfo",
    "TemplateRegistry",
    "build_registry",
    "dirs_of",
    "resolve",
    # Project
    "create_project",
    "install_libs",
    # Config
    "Config",
    "InstallConfig",
    "load_config",
    "PackageManifest",
    "load_manifest",
    # Errors
    "CaveAppError",
    "TemplateNotFoundError",
    "ProjectExistsError",
    "LibraryNotFoundError",
    "ManifestError",
    "ConfigError",
]
