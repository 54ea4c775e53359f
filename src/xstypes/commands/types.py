"""Commands: list the catalog and describe a single type."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from xstypes.commands._base import XsCommand

if TYPE_CHECKING:
    from xstypes.commands._context import AppContext


@click.command(
    cls=XsCommand,
    examples="""\
  xstypes types
  xstypes --json types""",
)
@click.pass_obj
def types(app: AppContext) -> None:
    """List every built-in type with its representation and coercion sources."""
    app.emit(app.service.list_types())


@click.command(
    cls=XsCommand,
    examples="""\
  xstypes describe unsignedLong
  xstypes describe xs:dateTime
  xstypes describe XsGMonthDay""",
)
@click.argument("type_name")
@click.pass_obj
def describe(app: AppContext, type_name: str) -> None:
    """Show representation, bounds, and coercion sources for TYPE_NAME."""
    app.emit(app.service.describe(type_name))
