"""Commands: check (coerce + validate) and validate (lexical only)."""

from __future__ import annotations

from collections.abc import Callable
from datetime import date, datetime, time, timedelta
from pathlib import Path
from typing import TYPE_CHECKING, Any
from urllib.parse import urlsplit

import click

from xstypes.commands._base import XsCommand

if TYPE_CHECKING:
    from xstypes.commands._context import AppContext


def _pair(raw: str) -> tuple[int, int]:
    parts = [part.strip() for part in raw.split(",")]
    if len(parts) != 2:
        msg = f"expected two comma-separated integers, got {raw!r}"
        raise ValueError(msg)
    return int(parts[0]), int(parts[1])


def _seconds(raw: str) -> timedelta:
    return timedelta(seconds=float(raw))


SHAPE_PARSERS: dict[str, Callable[[str], Any]] = {
    "text": str,
    "int": int,
    "float": float,
    "datetime": datetime.fromisoformat,
    "date": date.fromisoformat,
    "time": time.fromisoformat,
    "seconds": _seconds,
    "pair": _pair,
    "uri": urlsplit,
}


def parse_host_value(raw: str, shape: str) -> Any:
    """Build the host value the engine sees for ``--as SHAPE``."""
    try:
        return SHAPE_PARSERS[shape](raw)
    except ValueError as exc:
        raise click.BadParameter(f"{raw!r} is not a valid {shape}: {exc}") from exc


@click.command(
    cls=XsCommand,
    examples="""\
  xstypes check byte 127 --as int
  xstypes check long 9223372036854775807
  xstypes check gDay 7 --as int
  xstypes check gYearMonth 2024,5 --as pair
  xstypes check dateTime 2024-05-01T10:30:00.5+05:30 --as datetime
  xstypes check duration 93784.25 --as seconds
  xstypes check base64Binary ./payload.txt --as file
  xstypes --json check anyURI https://example.com --as uri""",
)
@click.argument("type_name")
@click.argument("value")
@click.option(
    "--as",
    "shape",
    type=click.Choice(sorted([*SHAPE_PARSERS, "file"])),
    default="text",
    show_default=True,
    help="Host shape to build from VALUE before coercion.",
)
@click.pass_obj
def check(app: AppContext, type_name: str, value: str, shape: str) -> None:
    """Coerce VALUE to TYPE_NAME if needed, then validate it."""
    if shape == "file":
        path = Path(value)
        if not path.is_file():
            raise click.BadParameter(f"No such file: {value}")
        with path.open("rb") as stream:
            result = app.service.check(type_name, stream)
        app.emit(result)
        return
    app.emit(app.service.check(type_name, parse_host_value(value, shape)))


@click.command(
    cls=XsCommand,
    examples="""\
  xstypes validate gMonth -- --11
  xstypes validate anyURI mailto:user@example.com""",
)
@click.argument("type_name")
@click.argument("value")
@click.pass_obj
def validate(app: AppContext, type_name: str, value: str) -> None:
    """Validate VALUE as text against TYPE_NAME without coercion."""
    app.emit(app.service.validate(type_name, value))
