"""Init command implementation."""

import sys

import click

from autoinstall import AutoinstallError, format_error

from .utils import build_installer


@click.command(name="init")
@click.pass_context
def init(ctx):
    """Create a default package.json with `npm init -y` if none exists."""
    try:
        installer = build_installer(ctx)
        if installer.manifest.exists():
            click.echo(f"package.json already exists in {installer.root}")
            return
        installer.ensure_manifest()
    except AutoinstallError as e:
        click.echo(format_error(str(e)), err=True)
        sys.exit(1)

    click.echo("✅ package.json created")
