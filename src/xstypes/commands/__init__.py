"""Subcommand modules for xstypes.

Provides register_commands() which uses deferred imports to keep
``xstypes --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from xstypes.commands.check import check, validate
    from xstypes.commands.types import describe, types

    cli.add_command(check)
    cli.add_command(validate)
    cli.add_command(types)
    cli.add_command(describe)
