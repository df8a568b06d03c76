"""Check command implementation."""

import sys

import click

from autoinstall import AutoinstallError, format_error

from .utils import build_installer


@click.command()
@click.argument("identifiers", nargs=-1, required=True)
@click.pass_context
def check(ctx, identifiers: tuple[str, ...]):
    """Report which module identifiers need a package installed.

    Prints one line per identifier. Exits with status 2 when anything is
    missing, so scripts can use it as a guard.
    """
    try:
        installer = build_installer(ctx)
        results = [(i, installer.classifier.classify(i)) for i in identifiers]
    except AutoinstallError as e:
        click.echo(format_error(str(e)), err=True)
        sys.exit(1)

    missing = False
    for identifier, package in results:
        if package:
            missing = True
            click.echo(f"{identifier}: missing (install {package})")
        else:
            click.echo(f"{identifier}: ok")

    if missing:
        sys.exit(2)
