"""Project path helpers for autoinstall."""

import os
from pathlib import Path

MANIFEST_FILENAME = "package.json"
MODULES_DIRNAME = "node_modules"
BABELRC_FILENAME = ".babelrc"
CONFIG_FILENAME = ".autoinstallrc"


def get_project_root(project: str | os.PathLike | None = None) -> Path:
    """Return the project root, defaulting to the current working directory."""
    if project is None:
        return Path.cwd()
    return Path(project)


def get_manifest_path(root: Path) -> Path:
    return root / MANIFEST_FILENAME


def get_babelrc_path(root: Path) -> Path:
    return root / BABELRC_FILENAME


def get_package_path(root: Path, package: str) -> str:
    """Return the install location of a package under node_modules.

    Joined with '/' so scoped names keep their separator on every platform.
    """
    return "/".join([str(root), MODULES_DIRNAME, package])


def get_config_path(root: Path) -> Path:
    """Return path to the project's autoinstall config file.

    Priority:
    1. AUTOINSTALL_CONFIG environment variable (if set)
    2. <project root>/.autoinstallrc
    """
    if "AUTOINSTALL_CONFIG" in os.environ:
        return Path(os.environ["AUTOINSTALL_CONFIG"])
    return root / CONFIG_FILENAME
