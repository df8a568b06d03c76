"""Babel command implementation."""

import sys

import click

from autoinstall import AutoinstallError, format_error

from .utils import build_installer, flag_or_none


@click.command()
@click.option("--save", "-S", is_flag=True, help="Save to dependencies")
@click.option("--dev", "-D", is_flag=True, help="Save to devDependencies")
@click.pass_context
def babel(ctx, save: bool, dev: bool):
    """Install babel-core and the plugins and presets listed in .babelrc."""
    try:
        installer = build_installer(
            ctx, save=flag_or_none(save), save_dev=flag_or_none(dev)
        )
        if not installer.babel.exists():
            click.echo(f"No .babelrc found in {installer.root}.")
            return
        installed = installer.ensure_compiler_plugins()
    except AutoinstallError as e:
        click.echo(format_error(str(e)), err=True)
        sys.exit(1)

    if installed:
        click.echo(f"✅ Installed {', '.join(installed)}")
    else:
        click.echo("All Babel plugins and presets are installed.")
