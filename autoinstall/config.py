"""Loading install options from .autoinstallrc.

The file is YAML (so plain JSON works too) holding a single mapping:

    save: true
    saveExact: false
    dev: false
    registry: https://registry.npmjs.com/
    peerDependencies: true
    quiet: false
    npm: npm
"""

import logging
from pathlib import Path

import yaml

from .errors import ConfigError, format_field_error
from .installer.models import InstallOptions
from .paths import get_config_path

_logging = logging.getLogger(__name__)

# file key -> (InstallOptions attribute, expected type)
OPTION_FIELDS = {
    "save": ("save", bool),
    "saveExact": ("save_exact", bool),
    "dev": ("save_dev", bool),
    "registry": ("registry", str),
    "peerDependencies": ("peer_dependencies", bool),
    "quiet": ("quiet", bool),
    "npm": ("npm", str),
}


def validate_options(data: object, source: str = ".autoinstallrc") -> InstallOptions:
    """Validate a raw mapping and convert it to InstallOptions.

    Raises:
        ConfigError: If data is not a mapping, has unknown keys or wrong types
    """
    if data is None:
        return InstallOptions()
    if not isinstance(data, dict):
        raise ConfigError(f"{source} must contain a mapping, got {type(data).__name__}")

    unknown = sorted(set(data) - set(OPTION_FIELDS))
    if unknown:
        raise ConfigError(
            f"{source} has unknown fields: {', '.join(map(str, unknown))}. "
            f"Allowed fields: {', '.join(OPTION_FIELDS)}"
        )

    values = {}
    for key, value in data.items():
        attr, expected = OPTION_FIELDS[key]
        if value is None and expected is str:
            continue
        if not isinstance(value, expected):
            raise ConfigError(
                format_field_error(source, key, f"must be a {expected.__name__}")
            )
        if expected is str and not value.strip():
            raise ConfigError(format_field_error(source, key, "must be a non-empty string"))
        values[attr] = value

    return InstallOptions(**values)


def load_options(root: Path) -> InstallOptions:
    """Load options for a project, falling back to defaults when no file exists."""
    config_path = get_config_path(root)
    if not config_path.exists():
        _logging.debug(f"No config at {config_path}, using defaults")
        return InstallOptions()

    try:
        with open(config_path) as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Failed to load {config_path}: {e}") from e

    _logging.debug(f"Loaded config from {config_path}")
    return validate_options(data, str(config_path))


def merge_options(base: InstallOptions, **overrides) -> InstallOptions:
    """Return base with every override that is not None applied."""
    values = {k: v for k, v in overrides.items() if v is not None}
    return InstallOptions(**{**base.__dict__, **values})


__all__ = ["OPTION_FIELDS", "validate_options", "load_options", "merge_options"]
