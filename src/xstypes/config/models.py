"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, xstypes.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, NonNegativeInt, field_validator


class BinaryConfig(BaseModel):
    """[binary] section: base64Binary coercion."""

    model_config = {"frozen": True}

    source_encoding: str = "utf-8"
    line_length: NonNegativeInt = 76

    @field_validator("source_encoding")
    @classmethod
    def _known_encoding(cls, value: str) -> str:
        import codecs

        try:
            codecs.lookup(value)
        except LookupError as exc:
            msg = f"Unknown encoding: {value}"
            raise ValueError(msg) from exc
        return value


class XsConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    binary: BinaryConfig = Field(default_factory=BinaryConfig)
