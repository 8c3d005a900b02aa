"""
Project materialization: copy a resolved template into a new project.

Usage:
    template_dir = resolve(registry, "tutorial")
    create_project(template_dir, Path("my-app"))
    install_libs(Path("packages"), Path("my-app"), ["core", "map"])
"""

import logging
import shutil
from pathlib import Path
from typing import Iterable

from create_cave_app.constants import (
    IGNORED_NAMES,
    LIB_PARENT_DIR,
    TARGET_PROJECT_LIB_FOLDER_NAME,
    TEMPLATE_METADATA_FILENAME,
)
from create_cave_app.errors import LibraryNotFoundError, ProjectExistsError

logger = logging.getLogger(__name__)


def _is_empty_dir(path: Path) -> bool:
    return not any(path.iterdir())


def create_project(
    template_dir: str | Path,
    target_dir: str | Path,
    overwrite: bool = False,
) -> Path:
    """
    Copy a template tree into the target project directory.

    The template's template.yaml and VCS/dependency clutter are not copied.

    Args:
        template_dir: Resolved template directory
        target_dir: Project directory to create
        overwrite: Copy into an existing non-empty directory

    Returns:
        Absolute path of the project directory

    Raises:
        ProjectExistsError: If target_dir is a non-empty directory (or a
            file) and overwrite is False
    """
    template_dir = Path(template_dir)
    target_dir = Path(target_dir).resolve()

    if target_dir.exists():
        if not target_dir.is_dir():
            raise ProjectExistsError(target_dir)
        if not overwrite and not _is_empty_dir(target_dir):
            raise ProjectExistsError(target_dir)

    ignore = shutil.ignore_patterns(TEMPLATE_METADATA_FILENAME, *IGNORED_NAMES)
    shutil.copytree(template_dir, target_dir, ignore=ignore, dirs_exist_ok=True)

    logger.info(f"Created project at {target_dir} from {template_dir.name}")
    return target_dir


def install_libs(
    libs_dir: str | Path,
    target_dir: str | Path,
    names: Iterable[str],
    lib_parent: str = LIB_PARENT_DIR,
    lib_folder_name: str = TARGET_PROJECT_LIB_FOLDER_NAME,
) -> list[Path]:
    """
    Copy CAVE library packages into a generated project.

    Each library is copied to <target_dir>/<lib_parent>/<lib_folder_name>/<name>.
    All names are checked before anything is copied.

    Args:
        libs_dir: Directory holding one subdirectory per library
        target_dir: Generated project directory
        names: Library directory names to install
        lib_parent: Directory inside the project that holds the lib folder
        lib_folder_name: Name of the lib folder

    Returns:
        Installed library paths, in the order given

    Raises:
        LibraryNotFoundError: If any named library is missing
    """
    libs_dir = Path(libs_dir)
    names = list(names)

    for name in names:
        if not (libs_dir / name).is_dir():
            raise LibraryNotFoundError(name, libs_dir)

    dest_root = Path(target_dir) / lib_parent / lib_folder_name
    ignore = shutil.ignore_patterns(*IGNORED_NAMES)

    installed = []
    for name in names:
        dest = dest_root / name
        shutil.copytree(libs_dir / name, dest, ignore=ignore, dirs_exist_ok=True)
        logger.debug(f"Installed library {name} -> {dest}")
        installed.append(dest)

    logger.info(f"Installed {len(installed)} libraries into {dest_root}")
    return installed
