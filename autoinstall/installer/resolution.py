"""Decide whether a module identifier needs installing."""

import logging
import re
from pathlib import Path
from typing import TYPE_CHECKING

from autoinstall.errors import ModuleNotFound
from autoinstall.paths import get_package_path

if TYPE_CHECKING:
    from .dependencies import FilesystemProbe, ModuleLocator

# Webpack's "!!" prefix disables configured loaders; such requests name
# loader internals, not packages. Single "!" prefixes are not matched.
LOADER_PATTERN = re.compile(r"^!!")

_logging = logging.getLogger(__name__)


def package_name(identifier: str) -> str:
    """Return the installable package for a module identifier.

    >>> package_name("@namespaced/module/sub/path")
    '@namespaced/module'
    >>> package_name("react/proptypes")
    'react'
    """
    segments = identifier.split("/")
    if identifier.startswith("@"):
        return "/".join(segments[:2])
    return segments[0]


def is_local(identifier: str) -> bool:
    return identifier.startswith((".", "/"))


def is_loader_request(identifier: str) -> bool:
    return LOADER_PATTERN.search(identifier) is not None


class ResolutionClassifier:
    """Classify module identifiers as "needs install" or "already satisfied".

    classify() returns the package name to install, or None when nothing needs
    installing. Only ModuleNotFound from the locator is interpreted; every
    other locator failure propagates unchanged.
    """

    def __init__(self, root: Path, locator: "ModuleLocator", probe: "FilesystemProbe"):
        self.root = root
        self.locator = locator
        self.probe = probe

    def classify(self, identifier: str | None) -> str | None:
        if not identifier:
            return None

        if is_local(identifier) or is_loader_request(identifier):
            _logging.debug(f"Skipping {identifier}: not an installable package")
            return None

        try:
            self.locator.resolve(identifier)
            return None
        except ModuleNotFound:
            pass

        package = package_name(identifier)

        if self.probe.is_symlink(get_package_path(self.root, package)):
            _logging.debug(f"Skipping {package}: linked into node_modules")
            return None

        _logging.debug(f"{identifier} needs {package}")
        return package

    def missing(self, identifiers: list[str]) -> list[str]:
        """Classify identifiers in order, returning each missing package once."""
        packages: list[str] = []
        for identifier in identifiers:
            package = self.classify(identifier)
            if package and package not in packages:
                packages.append(package)
        return packages


__all__ = [
    "LOADER_PATTERN",
    "package_name",
    "is_local",
    "is_loader_request",
    "ResolutionClassifier",
]
