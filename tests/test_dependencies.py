"""Tests for the default collaborators."""

import json
import os

import pytest

from autoinstall.errors import ManifestError, ModuleNotFound, ResolutionError
from autoinstall.execution import ProcessResult
from autoinstall.installer import (
    JsonManifestStore,
    LocalFilesystemProbe,
    Manifest,
    ProjectModuleLocator,
    ResolutionClassifier,
)

from .conftest import FakeManifest, FakeProbe, FakeRunner


def _write_manifest(root, data):
    (root / "package.json").write_text(json.dumps(data))


class TestJsonManifestStore:
    def test_missing(self, temp_dir):
        store = JsonManifestStore(temp_dir)

        assert not store.exists()
        with pytest.raises(ManifestError, match="Cannot find module"):
            store.read()

    def test_reads_dependencies(self, temp_dir):
        _write_manifest(
            temp_dir,
            {
                "name": "app",
                "dependencies": {"cross-spawn": "^2.0.0"},
                "devDependencies": {"expect": "^1.13.0"},
            },
        )
        store = JsonManifestStore(temp_dir)

        assert store.exists()
        manifest = store.read()
        assert manifest.dependencies == {"cross-spawn": "^2.0.0"}
        assert manifest.dev_dependencies == {"expect": "^1.13.0"}

    def test_missing_sections(self, temp_dir):
        _write_manifest(temp_dir, {"name": "app"})
        assert JsonManifestStore(temp_dir).read() == Manifest()

    def test_invalid_json(self, temp_dir):
        (temp_dir / "package.json").write_text("{not json")
        with pytest.raises(ManifestError, match="Failed to read"):
            JsonManifestStore(temp_dir).read()

    def test_invalid_section(self, temp_dir):
        _write_manifest(temp_dir, {"dependencies": ["react"]})
        with pytest.raises(ManifestError, match="'dependencies' must be an object"):
            JsonManifestStore(temp_dir).read()

    @pytest.mark.parametrize("value", [[], "", 0, False])
    def test_falsy_non_object_section(self, temp_dir, value):
        _write_manifest(temp_dir, {"dependencies": value})
        with pytest.raises(ManifestError, match="'dependencies' must be an object"):
            JsonManifestStore(temp_dir).read()

    def test_null_section(self, temp_dir):
        _write_manifest(temp_dir, {"devDependencies": None})
        assert JsonManifestStore(temp_dir).read() == Manifest()

    def test_not_an_object(self, temp_dir):
        _write_manifest(temp_dir, ["react"])
        with pytest.raises(ManifestError, match="must contain a JSON object"):
            JsonManifestStore(temp_dir).read()


class TestLocalFilesystemProbe:
    def test_symlink(self, temp_dir):
        target = temp_dir / "target"
        target.mkdir()
        link = temp_dir / "link"
        os.symlink(target, link)

        assert LocalFilesystemProbe().is_symlink(str(link)) is True

    def test_directory(self, temp_dir):
        assert LocalFilesystemProbe().is_symlink(str(temp_dir)) is False

    def test_missing(self, temp_dir):
        assert LocalFilesystemProbe().is_symlink(str(temp_dir / "nope")) is False


class TestProjectModuleLocator:
    def _locator(self, returncode=0, stderr=None, manifest=None):
        runner = FakeRunner(lambda binary, args: ProcessResult(returncode, None, stderr))
        store = FakeManifest(
            manifest=manifest
            or Manifest(
                dependencies={"cross-spawn": "^2.0.0"},
                dev_dependencies={"expect": "^1.13.0"},
            )
        )
        return ProjectModuleLocator(store, runner), runner

    def test_declared_dependency(self):
        locator, runner = self._locator(returncode=3)
        locator.resolve("cross-spawn")
        assert runner.calls == []

    def test_declared_dev_dependency(self):
        locator, runner = self._locator(returncode=3)
        locator.resolve("expect/lib/spy")
        assert runner.calls == []

    def test_global_module(self):
        locator, runner = self._locator(returncode=0)
        locator.resolve("path")

        assert len(runner.calls) == 1
        call = runner.calls[0]
        assert call["binary"] == "node"
        assert call["args"][0] == "-e"
        assert call["args"][-1] == "path"
        assert call["check"] is False

    def test_not_found(self):
        locator, _ = self._locator(returncode=3)
        with pytest.raises(ModuleNotFound) as exc_info:
            locator.resolve("react/proptypes")
        assert exc_info.value.identifier == "react/proptypes"

    def test_other_failure(self):
        locator, _ = self._locator(returncode=1, stderr=b"SyntaxError: boom")
        with pytest.raises(ResolutionError, match="SyntaxError: boom"):
            locator.resolve("react")

    def test_missing_manifest_propagates(self, temp_dir):
        runner = FakeRunner()
        locator = ProjectModuleLocator(JsonManifestStore(temp_dir), runner)
        classifier = ResolutionClassifier(temp_dir, locator, FakeProbe())

        with pytest.raises(ManifestError, match="Cannot find module"):
            classifier.classify("anything")
        assert runner.calls == []

    def test_installed_but_not_saved(self):
        locator, _ = self._locator(returncode=3)
        classifier = ResolutionClassifier("/work/app", locator, FakeProbe())

        assert classifier.classify("yargs") == "yargs"
