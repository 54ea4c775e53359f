"""Locating and reading ``xstypes.toml``.

Lookup order: the file named by ``XSTYPES_CONFIG`` (if set, it wins even
when missing), then the first ``xstypes.toml`` found walking up from the
start directory to the filesystem root.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

import click

CONFIG_FILENAME = "xstypes.toml"
CONFIG_ENV_VAR = "XSTYPES_CONFIG"


def _candidates(start: Path) -> list[Path]:
    return [directory / CONFIG_FILENAME for directory in (start, *start.parents)]


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file that applies to *start* (default: cwd), if any."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None
    for candidate in _candidates((start or Path.cwd()).resolve()):
        if candidate.is_file():
            return candidate
    return None


def read_toml(path: Path) -> dict[str, Any]:
    """Parse *path*; malformed TOML is reported as a CLI error."""
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise click.ClickException(msg) from exc
