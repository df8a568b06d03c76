"""Shared helpers for commands."""

import click

from autoinstall import Installer, load_options, merge_options, setup_logging
from autoinstall.paths import get_project_root


def build_installer(ctx: click.Context, **overrides) -> Installer:
    """Create an Installer for the --project root with config + CLI options.

    Args:
        ctx: Click context carrying 'debug' and 'project' from the group
        **overrides: InstallOptions fields from command flags; None means unset

    Raises:
        ConfigError: If .autoinstallrc is invalid
    """
    setup_logging(ctx.obj.get("debug", False))
    root = get_project_root(ctx.obj.get("project"))
    options = merge_options(load_options(root), **overrides)
    return Installer.for_project(root, options)


def flag_or_none(value: bool) -> bool | None:
    """Map an unset click flag to None so config file values are kept."""
    return True if value else None
