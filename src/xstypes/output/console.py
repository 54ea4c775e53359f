"""Rich console and theme for human-readable output.

Every console writes into its own ``StringIO`` so formatters can return a
plain string; the CLI decides where that string goes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

from xstypes.domain.catalog import RepresentationKind

_NUMERIC_STYLE = "magenta"

# One style per representation kind; integer and decimal kinds share one.
KIND_STYLES: dict[str, str] = {
    RepresentationKind.TEXT: "green",
    RepresentationKind.BOOLEAN: "yellow",
    RepresentationKind.NATIVE_INTEGER: _NUMERIC_STYLE,
    RepresentationKind.ARBITRARY_INTEGER: _NUMERIC_STYLE,
    RepresentationKind.ARBITRARY_DECIMAL: _NUMERIC_STYLE,
}

XS_THEME = Theme(
    {
        "xs.ok": "bold green",
        "xs.error": "bold red",
        "xs.warning": "bold yellow",
        "xs.op": "bold cyan",
        "xs.key": "dim",
        "xs.type": "bold blue",
        **{f"xs.kind.{kind}": style for kind, style in KIND_STYLES.items()},
    }
)

DEFAULT_WIDTH = 120


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Console rendering into a buffer; *width* pins wrapping for tests."""
    return Console(
        file=StringIO(),
        theme=XS_THEME,
        no_color=no_color,
        highlight=False,
        width=width or DEFAULT_WIDTH,
    )


def get_output(console: Console) -> str:
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_kind(kind: str) -> str:
    """Theme style name for a representation kind, or ``""`` if unknown."""
    return f"xs.kind.{kind}" if kind in KIND_STYLES else ""
