"""Installer engine: module classification, npm installs and peer resolution."""

from .babel import BabelrcReader, CompilerConfigReader, parse_babel_config
from .dependencies import (
    FilesystemProbe,
    JsonManifestStore,
    LocalFilesystemProbe,
    ManifestStore,
    ModuleLocator,
    ProcessRunner,
    ProjectModuleLocator,
)
from .installation import Installer
from .models import (
    BABEL_CORE,
    BabelConfig,
    InstallOptions,
    InstallRequest,
    Manifest,
    PeerWarning,
)
from .peers import parse_peer_warnings
from .resolution import (
    ResolutionClassifier,
    is_loader_request,
    is_local,
    package_name,
)

__all__ = [
    "BABEL_CORE",
    "BabelConfig",
    "InstallOptions",
    "InstallRequest",
    "Manifest",
    "PeerWarning",
    "ModuleLocator",
    "FilesystemProbe",
    "ProcessRunner",
    "ManifestStore",
    "CompilerConfigReader",
    "JsonManifestStore",
    "LocalFilesystemProbe",
    "ProjectModuleLocator",
    "BabelrcReader",
    "parse_babel_config",
    "parse_peer_warnings",
    "package_name",
    "is_local",
    "is_loader_request",
    "ResolutionClassifier",
    "Installer",
]
