"""Data models for the installation system."""

from dataclasses import dataclass, field

BABEL_CORE = "babel-core"


@dataclass
class Manifest:
    dependencies: dict[str, str] = field(default_factory=dict)
    dev_dependencies: dict[str, str] = field(default_factory=dict)

    def declares(self, package: str) -> bool:
        return package in self.dependencies or package in self.dev_dependencies


@dataclass
class InstallOptions:
    save: bool = False
    save_exact: bool = False
    save_dev: bool = False
    registry: str | None = None
    peer_dependencies: bool = True
    quiet: bool = False
    npm: str = "npm"

    def flags(self) -> list[str]:
        flags = []
        if self.save:
            flags.append("--save")
        if self.save_dev:
            flags.append("--save-dev")
        if self.save_exact:
            flags.append("--save-exact")
        if self.registry:
            flags.append(f"--registry='{self.registry}'")
        return flags

    def for_peers(self) -> "InstallOptions":
        """Options for a nested peer install: nothing persisted is forwarded."""
        return InstallOptions(quiet=self.quiet, npm=self.npm)


@dataclass
class InstallRequest:
    specs: list[str]
    options: InstallOptions = field(default_factory=InstallOptions)

    @property
    def args(self) -> list[str]:
        return ["install", *self.specs, *self.options.flags()]


@dataclass(frozen=True)
class PeerWarning:
    name: str
    version_range: str

    @property
    def spec(self) -> str:
        return f'{self.name}@"{self.version_range}"'


@dataclass
class BabelConfig:
    plugins: list[str] = field(default_factory=list)
    presets: list[str] = field(default_factory=list)

    def dependencies(self) -> list[str]:
        """Package names to check, in declaration order, babel-core first."""
        names = [BABEL_CORE]
        names += [_normalize(p, "plugin") for p in self.plugins]
        names += [_normalize(p, "preset") for p in self.presets]
        return names


def _normalize(name: str, kind: str) -> str:
    # Babel lets configs drop the babel-plugin-/babel-preset- prefix.
    prefix = f"babel-{kind}-"
    if name.startswith(("@", ".", "/")) or name.startswith(prefix):
        return name
    return prefix + name


__all__ = [
    "BABEL_CORE",
    "Manifest",
    "InstallOptions",
    "InstallRequest",
    "PeerWarning",
    "BabelConfig",
]
