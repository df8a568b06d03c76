"""Install command implementation."""

import logging
import sys

import click

from autoinstall import AutoinstallError, ProcessFailure, format_error

from .utils import build_installer, flag_or_none

_logging = logging.getLogger(__name__)


@click.command()
@click.argument("identifiers", nargs=-1, required=True)
@click.option("--save", "-S", is_flag=True, help="Save to dependencies")
@click.option("--dev", "-D", is_flag=True, help="Save to devDependencies")
@click.option("--save-exact", "-E", is_flag=True, help="Save an exact version")
@click.option("--registry", default=None, help="Use a custom npm registry URL")
@click.option("--no-peers", is_flag=True, help="Do not install unmet peer dependencies")
@click.option("--quiet", "-q", is_flag=True, help="Suppress progress output")
@click.pass_context
def install(
    ctx,
    identifiers: tuple[str, ...],
    save: bool,
    dev: bool,
    save_exact: bool,
    registry: str | None,
    no_peers: bool,
    quiet: bool,
):
    """Install the packages behind IDENTIFIERS that are not yet available.

    Identifiers may be module paths such as 'react/proptypes' or
    '@scope/pkg/sub'; only the package part is installed. Relative paths,
    loader requests and modules that already resolve are skipped.
    """
    try:
        installer = build_installer(
            ctx,
            save=flag_or_none(save),
            save_dev=flag_or_none(dev),
            save_exact=flag_or_none(save_exact),
            registry=registry,
            peer_dependencies=False if no_peers else None,
            quiet=flag_or_none(quiet),
        )
        installed = installer.ensure(identifiers)
    except ProcessFailure as e:
        click.echo(format_error(str(e)), err=True)
        _logging.debug(f"Return code: {e.returncode}")
        sys.exit(e.returncode if e.returncode and e.returncode > 0 else 1)
    except AutoinstallError as e:
        click.echo(format_error(str(e)), err=True)
        sys.exit(1)

    if not installed:
        click.echo("Nothing to install.")
    elif not installer.options.quiet:
        click.echo(f"✅ Installed {', '.join(installed)}")
