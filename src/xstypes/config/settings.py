"""Unified settings: CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs (CLI flags passed by Click)
  2. Env vars with the ``XSTYPES_`` prefix, ``__`` for nesting
     (``XSTYPES_BINARY__LINE_LENGTH=0``)
  3. ``xstypes.toml`` discovered via walk-up
  4. Code defaults baked into the section models
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Any

import click
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from xstypes.config.discovery import find_config, read_toml
from xstypes.config.models import BinaryConfig, XsConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Settings layer backed by one TOML file.

    Sections are checked against :class:`XsConfig` up front so a bad value
    is reported with the file it came from.
    """

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._path = toml_path
        self._data: dict[str, Any] = read_toml(toml_path) if toml_path else {}
        try:
            XsConfig.model_validate(self._data)
        except ValidationError as exc:
            msg = f"Invalid config in {toml_path}: {exc}"
            raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._data.get(field_name), field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# The TOML path has to reach settings_customise_sources, which pydantic
# calls as a classmethod with no per-instance arguments.
_construction = threading.local()


def _resolve_config_path(config_path: str | None, start: Path | None) -> Path | None:
    """An explicit ``--config`` that does not exist means "no file", not walk-up."""
    if config_path:
        path = Path(config_path)
        return path if path.is_file() else None
    return find_config(start)


class XsSettings(BaseSettings):
    """Settings for the xstypes CLI and service layer.

    Attributes:
        config_path: The TOML file that was loaded, if any.
        binary: ``[binary]`` section driving base64Binary coercion.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "XSTYPES_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    binary: BinaryConfig = Field(default_factory=BinaryConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        toml = TomlSettingsSource(settings_cls, getattr(_construction, "toml_path", None))
        return (init_settings, env_settings, toml)

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> XsSettings:
        """Build settings for one CLI invocation.

        *start* is where the walk-up search begins (default: cwd). CLI
        flags override every other layer.
        """
        toml_path = _resolve_config_path(config_path, start)
        _construction.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **cli_flags)
        finally:
            _construction.toml_path = None
