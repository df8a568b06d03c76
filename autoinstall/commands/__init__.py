"""CLI command definitions for autoinstall."""

import click

from autoinstall.commands.babel import babel
from autoinstall.commands.check import check
from autoinstall.commands.init import init
from autoinstall.commands.install import install


@click.group()
@click.option("--debug", is_flag=True, help="Enable debug output for troubleshooting")
@click.option(
    "--project",
    "-C",
    type=click.Path(exists=True, file_okay=False),
    default=None,
    help="Project root (default: current directory)",
)
@click.pass_context
def cli(ctx, debug, project):
    """Install npm packages referenced by a build configuration."""
    ctx.ensure_object(dict)
    ctx.obj["debug"] = debug
    ctx.obj["project"] = project


cli.add_command(check)
cli.add_command(install)
cli.add_command(babel)
cli.add_command(init)

__all__ = ["cli"]


if __name__ == "__main__":
    cli()
