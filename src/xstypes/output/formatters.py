"""Rich/JSON output helpers.

The CLI renders ServiceResult for humans (Rich output, colors) or
machines (--json). The formatter layer adapts ServiceResult to the
requested output mode.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel
from rich.markup import escape
from rich.table import Table

from xstypes.output.console import create_console, get_output, style_for_kind

if TYPE_CHECKING:
    from xstypes.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Rendering flags derived from the global CLI options."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def _render_scalar(value: Any) -> str:
    if isinstance(value, (dict, list)):
        return _json.dumps(value, separators=(",", ":"))
    if isinstance(value, str):
        return repr(value)
    return str(value)


def _types_table(types: list[dict[str, Any]]) -> Table:
    table = Table(show_header=True, header_style="xs.key", box=None)
    table.add_column("type", style="xs.type")
    table.add_column("alias")
    table.add_column("kind")
    table.add_column("coerces from")
    for entry in types:
        kind = entry["kind"]
        table.add_row(
            entry["type"],
            entry["alias"],
            f"[{style_for_kind(kind)}]{kind}[/]" if style_for_kind(kind) else kind,
            ", ".join(entry["sources"]) or "-",
        )
    return table


def _format_human(result: ServiceResult, settings: OutputSettings) -> str:
    console = create_console(no_color=True)
    if not result.ok:
        error = result.error
        message = error.message if error else "Unknown error"
        code = f" [{error.code}]" if error else ""
        console.print(
            f"[xs.error]ERROR[/]: {result.op}{escape(code)}: {escape(message)}", soft_wrap=True
        )
        if settings.verbose and error and error.detail:
            for key, value in error.detail.items():
                line = f"  [xs.key]{key}[/]: {escape(_render_scalar(value))}"
                console.print(line, soft_wrap=True)
        return get_output(console).rstrip("\n")

    if settings.quiet and "value" in result.data:
        return str(result.data["value"])

    console.print(f"[xs.ok]OK[/]: [xs.op]{result.op}[/]")
    types = result.data.get("types")
    if isinstance(types, list):
        console.print(_types_table(types))
        console.print(f"  [xs.key]count[/]: {result.data.get('count', len(types))}")
    else:
        for key, value in result.data.items():
            line = f"  [xs.key]{key}[/]: {escape(_render_scalar(value))}"
            console.print(line, soft_wrap=True)
    return get_output(console).rstrip("\n")


def format_result(
    result: ServiceResult,
    *,
    settings: OutputSettings | None = None,
    json_output: bool = False,
) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        settings: Output flags. When given, *json_output* is ignored.
        json_output: Shortcut for ``OutputSettings(json_output=True)``.
    """
    if settings is None:
        settings = OutputSettings(json_output=json_output)
    if settings.json_output:
        return result.model_dump_json(indent=2)
    return _format_human(result, settings)
