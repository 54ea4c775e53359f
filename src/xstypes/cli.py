"""Root CLI group for xstypes with global flags and command registration."""

from __future__ import annotations

import click

from xstypes import __version__
from xstypes.commands import register_commands
from xstypes.commands._base import XsGroup
from xstypes.commands._context import AppContext
from xstypes.config.settings import XsSettings


@click.group(
    cls=XsGroup,
    invoke_without_command=True,
    examples="""\
  xstypes types
  xstypes check gDay 7 --as int
  xstypes -v check float 1e39
  xstypes -c ./xstypes.toml check base64Binary ./payload.txt --as file""",
)
@click.version_option(version=__version__, prog_name="xstypes")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """xstypes: XML Schema primitive type validation and coercion."""
    ctx.ensure_object(dict)
    settings = XsSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
