"""Tests for --examples flag on CLI commands."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from xstypes.cli import cli

# (CLI args, expected keywords in output)
EXAMPLES_COMMANDS: list[tuple[list[str], list[str]]] = [
    (["--examples"], ["xstypes types"]),
    (["check", "--examples"], ["--as pair", "--as file"]),
    (["validate", "--examples"], ["xstypes validate gMonth"]),
    (["types", "--examples"], ["xstypes --json types"]),
    (["describe", "--examples"], ["xs:dateTime"]),
]


@pytest.mark.parametrize(("args", "keywords"), EXAMPLES_COMMANDS)
def test_examples_flag(cli_runner: CliRunner, args: list[str], keywords: list[str]) -> None:
    result = cli_runner.invoke(cli, args)
    assert result.exit_code == 0, result.output
    assert "Examples for" in result.output
    for keyword in keywords:
        assert keyword in result.output


def test_examples_listed_in_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["check", "--help"])
    assert "--examples" in result.output
