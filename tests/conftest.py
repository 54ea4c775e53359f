"""Shared pytest fixtures and test helpers for xstypes tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from xstypes.domain.sources import CoercionOptions
from xstypes.services.typecheck import TypeCheckService


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def service() -> TypeCheckService:
    """Type-check service with default coercion options."""
    return TypeCheckService(CoercionOptions())


@pytest.fixture(autouse=True)
def _no_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's XSTYPES_* environment out of the tests."""
    monkeypatch.delenv("XSTYPES_CONFIG", raising=False)
    monkeypatch.delenv("XSTYPES_BINARY__LINE_LENGTH", raising=False)
    monkeypatch.delenv("XSTYPES_BINARY__SOURCE_ENCODING", raising=False)


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp directory so no stray xstypes.toml is discovered.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` on command test
    classes.
    """
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root and xstypes logger state after each test.

    The CLI reconfigures logging on every invocation; without this the root
    handler would keep pointing at a CliRunner stream that is closed.
    """
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    xs = logging.getLogger("xstypes")
    xs_level = xs.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    xs.setLevel(xs_level)
