"""Reading Babel plugin and preset names from .babelrc."""

from pathlib import Path
from typing import Any, Protocol

from autoinstall.errors import ConfigError
from autoinstall.json_parser import load_jsonish
from autoinstall.paths import get_babelrc_path

from .models import BabelConfig


class CompilerConfigReader(Protocol):
    def exists(self) -> bool: ...

    def read(self) -> BabelConfig: ...


def _entry_names(entries: Any, field: str, source: str) -> list[str]:
    # Entries are "name" or ["name", {options}].
    if entries is None:
        return []
    if not isinstance(entries, list):
        raise ConfigError(f"{source} field '{field}' must be a list")

    names = []
    for i, entry in enumerate(entries):
        if isinstance(entry, list) and entry:
            entry = entry[0]
        if not isinstance(entry, str) or not entry:
            raise ConfigError(f"{source} field '{field}[{i}]' must be a name")
        names.append(entry)
    return names


def parse_babel_config(data: Any, source: str = ".babelrc") -> BabelConfig:
    """Collect plugins and presets, top level first, then each env section."""
    if not isinstance(data, dict):
        raise ConfigError(f"{source} must contain a JSON object")

    config = BabelConfig(
        plugins=_entry_names(data.get("plugins"), "plugins", source),
        presets=_entry_names(data.get("presets"), "presets", source),
    )

    envs = data.get("env")
    if envs is None:
        envs = {}
    if not isinstance(envs, dict):
        raise ConfigError(f"{source} field 'env' must be an object")
    for env_name, env in envs.items():
        if not isinstance(env, dict):
            raise ConfigError(f"{source} field 'env.{env_name}' must be an object")
        config.plugins += _entry_names(env.get("plugins"), f"env.{env_name}.plugins", source)
        config.presets += _entry_names(env.get("presets"), f"env.{env_name}.presets", source)

    return config


class BabelrcReader:
    def __init__(self, root: Path):
        self.path = get_babelrc_path(root)

    def exists(self) -> bool:
        return self.path.is_file()

    def read(self) -> BabelConfig:
        try:
            text = self.path.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigError(f"Failed to read {self.path}: {e}") from e
        return parse_babel_config(load_jsonish(text, str(self.path)), str(self.path))


__all__ = ["CompilerConfigReader", "BabelrcReader", "parse_babel_config"]
