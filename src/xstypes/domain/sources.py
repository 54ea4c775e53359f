"""Host value shapes accepted by coercion rules.

Coercion dispatch works on an explicit tag: :func:`classify_source` maps a
host value to exactly one :class:`SourceKind` and every rule in the
catalog names the tag it converts from. Order matters in the classifier:
``bool`` is checked before ``int`` and ``datetime`` before ``date``.
"""

from __future__ import annotations

import io
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from enum import StrEnum
from typing import Any
from urllib.parse import ParseResult, SplitResult

from pydantic import AnyUrl, BaseModel, NonNegativeInt
from pydantic_core import Url

from xstypes.domain.bounds import is_integer


class SourceKind(StrEnum):
    """Tag identifying the shape of a value handed to the engine."""

    TEXT = "text"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    FLOAT = "float"
    DECIMAL = "decimal"
    DATETIME = "datetime"
    DATE = "date"
    TIME = "time"
    DURATION = "duration"
    TIMEDELTA = "timedelta"
    INT_PAIR = "int_pair"
    BINARY_STREAM = "binary_stream"
    BYTES = "bytes"
    URI = "uri"
    OTHER = "other"


class DurationValue(BaseModel):
    """A signed duration with calendar and clock components.

    All components are magnitudes; the sign lives in ``negative``.
    ``nanoseconds`` may exceed one second and is carried into ``seconds``
    when the duration is rendered.
    """

    model_config = {"frozen": True}

    negative: bool = False
    years: NonNegativeInt = 0
    months: NonNegativeInt = 0
    weeks: NonNegativeInt = 0
    days: NonNegativeInt = 0
    hours: NonNegativeInt = 0
    minutes: NonNegativeInt = 0
    seconds: NonNegativeInt = 0
    nanoseconds: NonNegativeInt = 0

    @classmethod
    def from_timedelta(cls, delta: timedelta) -> DurationValue:
        """Split a timedelta into days plus clock time of the day part."""
        negative = delta < timedelta(0)
        if negative:
            delta = -delta
        hours, remainder = divmod(delta.seconds, 3600)
        minutes, seconds = divmod(remainder, 60)
        return cls(
            negative=negative,
            days=delta.days,
            hours=hours,
            minutes=minutes,
            seconds=seconds,
            nanoseconds=delta.microseconds * 1000,
        )


@dataclass(frozen=True)
class CoercionOptions:
    """Tunables for the coercions that have any.

    Attributes:
        source_encoding: Encoding used to decode byte streams before they
            are re-encoded as UTF-8.
        base64_line_length: Characters per base64 output line; each line
            ends with ``\\n``. ``0`` disables wrapping.
    """

    source_encoding: str = "utf-8"
    base64_line_length: int = 76


DEFAULT_OPTIONS = CoercionOptions()

_URI_TYPES = (SplitResult, ParseResult, AnyUrl, Url)


def _is_int_pair(value: Any) -> bool:
    return (
        isinstance(value, (tuple, list))
        and len(value) == 2
        and all(is_integer(item) for item in value)
    )


def classify_source(value: Any) -> SourceKind:
    """Return the tag for *value*'s shape."""
    if isinstance(value, str):
        return SourceKind.TEXT
    if isinstance(value, bool):
        return SourceKind.BOOLEAN
    if isinstance(value, int):
        return SourceKind.INTEGER
    if isinstance(value, float):
        return SourceKind.FLOAT
    if isinstance(value, Decimal):
        return SourceKind.DECIMAL
    if isinstance(value, datetime):
        return SourceKind.DATETIME
    if isinstance(value, date):
        return SourceKind.DATE
    if isinstance(value, time):
        return SourceKind.TIME
    if isinstance(value, DurationValue):
        return SourceKind.DURATION
    if isinstance(value, timedelta):
        return SourceKind.TIMEDELTA
    if _is_int_pair(value):
        return SourceKind.INT_PAIR
    if isinstance(value, io.IOBase):
        return SourceKind.BINARY_STREAM
    if isinstance(value, (bytes, bytearray, memoryview)):
        return SourceKind.BYTES
    if isinstance(value, _URI_TYPES):
        return SourceKind.URI
    return SourceKind.OTHER
