"""Click classes that understand an ``examples=`` keyword.

Any command or group built with ``examples="..."`` gets an eager
``--examples`` flag that prints the text and exits before arguments are
validated, so ``xstypes check --examples`` works without TYPE or VALUE.
"""

from __future__ import annotations

import inspect
import textwrap
from typing import Any

import click


def _print_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    examples = getattr(ctx.command, "examples", None) or ""
    click.echo(f"Examples for '{ctx.command_path}':\n")
    click.echo(textwrap.indent(inspect.cleandoc(examples), "  "))
    ctx.exit(0)


def _examples_option() -> click.Option:
    return click.Option(
        ["--examples"],
        is_flag=True,
        expose_value=False,
        is_eager=True,
        callback=_print_examples,
        help="Show usage examples and exit.",
    )


class _ExamplesMixin:
    examples: str | None

    def _init_examples(self, examples: str | None) -> None:
        self.examples = examples
        if examples:
            self.params.append(_examples_option())  # type: ignore[attr-defined]


class XsCommand(_ExamplesMixin, click.Command):
    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._init_examples(examples)


class XsGroup(_ExamplesMixin, click.Group):
    """Group whose subcommands default to :class:`XsCommand`."""

    command_class = XsCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._init_examples(examples)
