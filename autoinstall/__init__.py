"""Install the npm packages a build configuration references but lacks."""

import logging

from .errors import (
    AutoinstallError,
    ConfigError,
    ManifestError,
    ModuleNotFound,
    ProcessFailure,
    ResolutionError,
    format_error,
    format_suggestion,
)
from .execution import ProcessResult, SubprocessRunner
from .config import load_options, merge_options, validate_options
from .installer import (
    InstallOptions,
    Installer,
    ResolutionClassifier,
    package_name,
    parse_peer_warnings,
)

__version__ = "0.1.0"

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def setup_logging(debug: bool = False) -> None:
    """Configure root logging for CLI use. DEBUG with --debug, WARNING otherwise."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format=LOG_FORMAT,
        force=True,
    )


__all__ = [
    "AutoinstallError",
    "ConfigError",
    "ManifestError",
    "ModuleNotFound",
    "ProcessFailure",
    "ResolutionError",
    "format_error",
    "format_suggestion",
    "ProcessResult",
    "SubprocessRunner",
    "load_options",
    "merge_options",
    "validate_options",
    "InstallOptions",
    "Installer",
    "ResolutionClassifier",
    "package_name",
    "parse_peer_warnings",
    "setup_logging",
]
