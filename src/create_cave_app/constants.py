"""
Fixed locations and defaults for create-cave-app.

Paths are resolved relative to the installed package so the bundled
templates are found regardless of the working directory.
"""

from pathlib import Path

PACKAGE_ROOT = Path(__file__).resolve().parent
RESOURCES_DIR = PACKAGE_ROOT / "resources"

PACKAGE_TEMPLATES_DIR = RESOURCES_DIR / "templates"
PACKAGE_EXAMPLES_DIR = RESOURCES_DIR / "examples"
PACKAGE_MANIFEST_PATH = PACKAGE_ROOT / "manifest.toml"

# Reserved identifier selected when no --template is given
DEFAULT_TEMPLATE_NAME = "default"
DEFAULT_TEMPLATE_DIRNAME = "base"

DEFAULT_LIBS_DIRNAMES: tuple[str, ...] = (
    "core",
    "data",
    "map",
    "model",
    "pads",
    "route",
    "scenario",
    "session",
    "ui",
    "util",
)

# Libraries land in <project>/<LIB_PARENT_DIR>/<TARGET_PROJECT_LIB_FOLDER_NAME>
LIB_PARENT_DIR = "client/src"
TARGET_PROJECT_LIB_FOLDER_NAME = "mit-cave"

# Optional per-template metadata file, never copied into projects
TEMPLATE_METADATA_FILENAME = "template.yaml"

# Entries skipped when copying template and library trees
IGNORED_NAMES: tuple[str, ...] = (".git", "node_modules", "__pycache__", ".DS_Store")
