"""Collaborators consulted while deciding what to install.

Each collaborator is described by a Protocol so the classifier and the
installer can be driven by fakes in tests. The default implementations here
work against a real project directory.
"""

import json
import logging
import os
import stat
from pathlib import Path
from typing import Protocol

from autoinstall.errors import ManifestError, ModuleNotFound, ResolutionError
from autoinstall.execution import ProcessResult
from autoinstall.paths import get_manifest_path

from .models import Manifest
from .resolution import package_name

NOT_FOUND_STATUS = 3

# Built-in modules and the global folders (NODE_PATH, ~/.node_modules,
# <prefix>/lib/node) only. The project's own node_modules is not searched:
# an undeclared package there still needs to be saved.
_GLOBAL_RESOLVE_SCRIPT = """
var Module = require("module");
var id = process.argv[1];
if (Module.builtinModules.indexOf(id.replace(/^node:/, "")) !== -1) process.exit(0);
process.exit(Module._findPath(id, Module.globalPaths) ? 0 : %d);
""" % NOT_FOUND_STATUS

_logging = logging.getLogger(__name__)


class ModuleLocator(Protocol):
    def resolve(self, identifier: str) -> None:
        """Return if identifier resolves, raise ModuleNotFound otherwise."""
        ...


class FilesystemProbe(Protocol):
    def is_symlink(self, path: str) -> bool: ...


class ProcessRunner(Protocol):
    def run(
        self,
        binary: str,
        args: list[str],
        capture: bool = True,
        check: bool = True,
    ) -> ProcessResult: ...


class ManifestStore(Protocol):
    def exists(self) -> bool: ...

    def read(self) -> Manifest: ...


class JsonManifestStore:
    """package.json in a project root."""

    def __init__(self, root: Path):
        self.path = get_manifest_path(root)

    def exists(self) -> bool:
        return self.path.is_file()

    def read(self) -> Manifest:
        if not self.exists():
            raise ManifestError(f"Cannot find module '{self.path}'")

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise ManifestError(f"Failed to read {self.path}: {e}") from e

        if not isinstance(data, dict):
            raise ManifestError(f"{self.path} must contain a JSON object")

        sections = {}
        for key in ("dependencies", "devDependencies"):
            value = data.get(key)
            if value is None:
                value = {}
            if not isinstance(value, dict):
                raise ManifestError(f"{self.path} field '{key}' must be an object")
            sections[key] = value

        return Manifest(
            dependencies=sections["dependencies"],
            dev_dependencies=sections["devDependencies"],
        )


class LocalFilesystemProbe:
    def is_symlink(self, path: str) -> bool:
        try:
            st = os.lstat(path)
        except FileNotFoundError:
            return False
        return stat.S_ISLNK(st.st_mode)


class ProjectModuleLocator:
    """Resolve identifiers the way a project would see them.

    A module counts as resolvable when its package is declared in package.json
    (dependencies or devDependencies), or when Node finds it among its
    built-in modules or on a global search path.
    """

    def __init__(self, manifest: ManifestStore, runner: ProcessRunner, node: str = "node"):
        self.manifest = manifest
        self.runner = runner
        self.node = node

    def resolve(self, identifier: str) -> None:
        package = package_name(identifier)
        if self.manifest.read().declares(package):
            _logging.debug(f"{package} is declared in package.json")
            return

        result = self.runner.run(
            self.node,
            ["-e", _GLOBAL_RESOLVE_SCRIPT, identifier],
            capture=True,
            check=False,
        )
        if result.returncode == 0:
            _logging.debug(f"{identifier} resolved as a built-in or global module")
            return
        if result.returncode == NOT_FOUND_STATUS:
            raise ModuleNotFound(identifier)

        stderr = (result.stderr or b"").decode(errors="replace").strip()
        raise ResolutionError(
            f"Resolving '{identifier}' failed with status {result.returncode}: {stderr}"
        )


__all__ = [
    "ModuleLocator",
    "FilesystemProbe",
    "ProcessRunner",
    "ManifestStore",
    "JsonManifestStore",
    "LocalFilesystemProbe",
    "ProjectModuleLocator",
]
