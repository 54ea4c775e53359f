"""AppContext: per-invocation state handed to every command.

The root group builds one from :class:`XsSettings`; commands receive it
through ``@click.pass_obj`` and hand their ``ServiceResult`` to
:meth:`AppContext.emit`.
"""

from __future__ import annotations

from functools import cached_property
from typing import TYPE_CHECKING

import click

from xstypes.config.logging import configure_logging
from xstypes.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from xstypes.config.settings import XsSettings
    from xstypes.services.result import ServiceResult
    from xstypes.services.typecheck import TypeCheckService


class AppContext:
    """Settings, output flags, and the lazily built type-check service."""

    def __init__(self, settings: XsSettings) -> None:
        self.settings = settings
        self.output = OutputSettings(
            json_output=settings.json_output,
            quiet=settings.quiet,
            verbose=settings.verbose,
        )
        configure_logging(
            verbose=settings.verbose,
            quiet=settings.quiet,
            log_json=settings.log_json,
        )

    @cached_property
    def service(self) -> TypeCheckService:
        from xstypes.services.typecheck import TypeCheckService

        return TypeCheckService.from_settings(self.settings)

    def emit(self, result: ServiceResult) -> None:
        """Print *result*; failures go to stderr and exit with status 1."""
        text = format_result(result, settings=self.output)
        if not result.ok:
            click.echo(text, err=True)
            raise SystemExit(1)
        click.echo(text)
