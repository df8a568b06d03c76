"""Pytest fixtures and fake collaborators for autoinstall tests."""

import tempfile
from pathlib import Path
from typing import Callable, Generator

import pytest

from autoinstall.errors import ModuleNotFound
from autoinstall.execution import ProcessResult
from autoinstall.installer import (
    BabelConfig,
    Installer,
    InstallOptions,
    Manifest,
    ResolutionClassifier,
)

PROJECT_ROOT = Path("/work/app")


class FakeRunner:
    """Records every command; `handler(binary, args)` may supply a result."""

    def __init__(self, handler: Callable | None = None):
        self.calls: list[dict] = []
        self.handler = handler

    def run(self, binary, args, capture=True, check=True):
        self.calls.append(
            {"binary": binary, "args": list(args), "capture": capture, "check": check}
        )
        if self.handler:
            result = self.handler(binary, list(args))
            if result is not None:
                return result
        return ProcessResult(returncode=0, stdout=None)

    @property
    def args(self) -> list[list[str]]:
        return [call["args"] for call in self.calls]


class FakeLocator:
    def __init__(self, resolvable=(), error: Exception | None = None):
        self.resolvable = set(resolvable)
        self.error = error
        self.calls: list[str] = []

    def resolve(self, identifier):
        self.calls.append(identifier)
        if self.error:
            raise self.error
        if identifier not in self.resolvable:
            raise ModuleNotFound(identifier)


class FakeProbe:
    def __init__(self, links=()):
        self.links = set(links)
        self.calls: list[str] = []

    def is_symlink(self, path):
        self.calls.append(path)
        return path in self.links


class FakeManifest:
    def __init__(self, exists=True, manifest: Manifest | None = None):
        self._exists = exists
        self.manifest = manifest or Manifest()

    def exists(self):
        return self._exists

    def read(self):
        return self.manifest


class FakeBabel:
    def __init__(self, config: BabelConfig | None = None):
        self.config = config
        self.reads = 0

    def exists(self):
        return self.config is not None

    def read(self):
        self.reads += 1
        return self.config


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def locator() -> FakeLocator:
    return FakeLocator(resolvable={"path", "cross-spawn", "expect"})


@pytest.fixture
def probe() -> FakeProbe:
    return FakeProbe()


@pytest.fixture
def classifier(locator, probe) -> ResolutionClassifier:
    return ResolutionClassifier(PROJECT_ROOT, locator, probe)


@pytest.fixture
def make_installer(runner, classifier) -> Callable[..., Installer]:
    """Factory for installers wired to fakes."""

    def _create(manifest=None, babel=None, options=None, classifier_=None):
        return Installer(
            PROJECT_ROOT,
            runner,
            manifest or FakeManifest(),
            classifier_ or classifier,
            babel or FakeBabel(),
            options or InstallOptions(quiet=True),
        )

    return _create


@pytest.fixture
def installer(make_installer) -> Installer:
    return make_installer()
