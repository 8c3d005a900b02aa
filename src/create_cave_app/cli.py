"""
Command-line entry point for create-cave-app.

Usage:
    create-cave-app my-app
    create-cave-app my-app --template tutorial
    create-cave-app --list-templates
    create-cave-app my-app --config cave.toml --profile dev

The CLI only wires things together: it loads the manifest and config,
builds the template registry, resolves the requested template and hands
the result to the copy step.
"""

import argparse
import logging
import sys
from pathlib import Path

from create_cave_app.config import Config, load_config
from create_cave_app.errors import CaveAppError, ManifestError
from create_cave_app.manifest import PackageManifest, load_manifest
from create_cave_app.project import create_project, install_libs
from create_cave_app.templates import TemplateRegistry, resolve

logger = logging.getLogger(__name__)


def create_parser(manifest: PackageManifest) -> argparse.ArgumentParser:
    """
    Create the argument parser.

    Args:
        manifest: Loaded package manifest, used for --version

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog=manifest.name,
        description=manifest.description or "Bootstrap a CAVE web application",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "project_dir",
        nargs="?",
        type=Path,
        help="Directory to create the project in",
    )
    parser.add_argument(
        "--template",
        "-t",
        default=None,
        help="Template to copy (default: 'default')",
    )
    parser.add_argument(
        "--list-templates",
        action="store_true",
        help="List available templates and exit",
    )

    # Config file
    parser.add_argument("--config", type=Path, default=None, help="Path to TOML config file")
    parser.add_argument("--profile", default="default", help="Config profile to use")

    # Overrides
    parser.add_argument("--examples-dir", type=Path, default=None, help="Override examples root")
    parser.add_argument("--libs-dir", type=Path, default=None, help="Install CAVE libraries from this directory")
    parser.add_argument("--overwrite", action="store_true", help="Copy into a non-empty directory")

    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {manifest.version}")
    return parser


def load_runtime_config(args: argparse.Namespace) -> Config:
    """
    Load configuration from TOML file + CLI overrides.

    Priority (highest to lowest):
    1. CLI arguments
    2. TOML config file
    3. Defaults
    """
    config = load_config(args.config, args.profile)

    if args.examples_dir is not None:
        config.examples_dir = str(args.examples_dir)
    if args.libs_dir is not None:
        config.libs_dir = str(args.libs_dir)
    if args.overwrite:
        config.install.overwrite = True

    return config


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for CLI use."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )
    logging.getLogger("create_cave_app").setLevel(level)


def print_templates(registry: TemplateRegistry) -> None:
    """Print registered templates with their descriptions."""
    for info in registry.describe():
        if info.description:
            print(f"{info.name:<16} {info.description}")
        else:
            print(info.name)


def run(args: argparse.Namespace, config: Config) -> Path | None:
    """
    Scaffold a project from parsed arguments.

    Returns:
        Project directory, or None when only listing templates

    Raises:
        CaveAppError: On unknown templates or copy failures
    """
    registry = TemplateRegistry.from_config(config)

    if args.list_templates:
        print_templates(registry)
        return None

    template_dir = resolve(registry, args.template)
    project_dir = create_project(template_dir, args.project_dir, overwrite=config.install.overwrite)

    if config.libs_dir is not None:
        install_libs(
            config.libs_dir,
            project_dir,
            config.libs,
            lib_parent=config.install.lib_parent,
            lib_folder_name=config.install.lib_folder_name,
        )

    print(f"Created {project_dir}")
    return project_dir


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return the process exit code."""
    try:
        manifest = load_manifest()
    except ManifestError as e:
        setup_logging()
        logger.error(str(e))
        return 1

    parser = create_parser(manifest)
    args = parser.parse_args(argv)

    if args.project_dir is None and not args.list_templates:
        parser.error("project_dir is required unless --list-templates is given")

    setup_logging(args.verbose)

    try:
        config = load_runtime_config(args)
        run(args, config)
    except (CaveAppError, FileNotFoundError, KeyError) as e:
        logger.error(str(e))
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
