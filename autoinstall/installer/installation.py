"""Install orchestration: manifest bootstrap, batch installs and peer resolution."""

import logging
from collections.abc import Iterable
from pathlib import Path

import click

from autoinstall.execution import SubprocessRunner
from autoinstall.paths import get_project_root

from .babel import BabelrcReader, CompilerConfigReader
from .dependencies import (
    JsonManifestStore,
    LocalFilesystemProbe,
    ManifestStore,
    ProcessRunner,
    ProjectModuleLocator,
)
from .models import InstallOptions, InstallRequest
from .peers import parse_peer_warnings
from .resolution import ResolutionClassifier

_logging = logging.getLogger(__name__)


class Installer:
    """Drive npm for one project.

    Everything runs synchronously: each npm invocation finishes before the
    next one starts, and a ProcessFailure from the runner propagates
    unchanged to the caller.
    """

    def __init__(
        self,
        root: Path,
        runner: ProcessRunner,
        manifest: ManifestStore,
        classifier: ResolutionClassifier,
        babel: CompilerConfigReader,
        options: InstallOptions | None = None,
    ):
        self.root = root
        self.runner = runner
        self.manifest = manifest
        self.classifier = classifier
        self.babel = babel
        self.options = options or InstallOptions()

    @classmethod
    def for_project(
        cls,
        project=None,
        options: InstallOptions | None = None,
        node: str = "node",
    ) -> "Installer":
        """Build an installer wired to the real filesystem and npm."""
        root = get_project_root(project)
        runner = SubprocessRunner(cwd=root)
        manifest = JsonManifestStore(root)
        classifier = ResolutionClassifier(
            root,
            ProjectModuleLocator(manifest, runner, node=node),
            LocalFilesystemProbe(),
        )
        return cls(root, runner, manifest, classifier, BabelrcReader(root), options)

    def _notify(self, message: str, options: InstallOptions) -> None:
        if not options.quiet:
            click.echo(message, err=True)

    def ensure_manifest(self) -> None:
        """Create a default package.json with `npm init -y` if there is none."""
        if self.manifest.exists():
            return

        self._notify("Initializing package.json...", self.options)
        self.runner.run(self.options.npm, ["init", "-y"], capture=False)

    def ensure_compiler_plugins(self, options: InstallOptions | None = None) -> list[str]:
        """Install babel-core and every plugin/preset .babelrc names, if missing."""
        if not self.babel.exists():
            return []

        config = self.babel.read()
        missing = []
        for name in config.dependencies():
            package = self.classifier.classify(name)
            if package and package not in missing:
                missing.append(package)

        return self.install(missing, options)

    def ensure(self, identifiers: Iterable[str], options: InstallOptions | None = None) -> list[str]:
        """Bootstrap the manifest, then install whatever identifiers are missing."""
        self.ensure_manifest()
        return self.install(self.classifier.missing(list(identifiers)), options)

    def install(self, names=None, options: InstallOptions | None = None) -> list[str]:
        """Install one package name or an ordered list of them in one npm call.

        Unmet peer dependencies reported by npm are installed afterwards with
        the exact range npm printed, depth first in the order reported, until
        an install reports no more. Returns every spec passed to npm.
        """
        if not names:
            return []
        if isinstance(names, str):
            names = [names]
        names = list(names)
        if not names:
            return []

        options = options or self.options
        pending = [InstallRequest(names, options)]
        installed: list[str] = []

        while pending:
            request = pending.pop()
            self._notify(f"Installing {' '.join(request.specs)}...", request.options)

            result = self.runner.run(request.options.npm, request.args, capture=True)
            installed.extend(request.specs)

            output = result.output
            if output and not request.options.quiet:
                click.echo(output, nl=not output.endswith("\n"))

            if not options.peer_dependencies:
                continue

            peers = parse_peer_warnings(output)
            for warning in peers:
                _logging.debug(f"Unmet peer dependency: {warning.spec}")
            peer_options = request.options.for_peers()
            pending.extend(
                InstallRequest([warning.spec], peer_options) for warning in reversed(peers)
            )

        return installed


__all__ = ["Installer"]
