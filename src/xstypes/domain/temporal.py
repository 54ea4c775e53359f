"""Date/time coercion into the XML Schema lexical forms.

All forms share one algorithm: render the type's fixed field set, append
trimmed sub-second digits (dateTime and time only), then append the
timezone suffix (dateTime, time and date only).

Timezone descriptor of a host value:

- floating: no tzinfo, or a tzinfo that reports no offset -> no suffix
- UTC: ``datetime.UTC`` or a zoneinfo zone named for UTC -> ``Z``
- fixed offset: anything else -> ``+HH:MM`` / ``-HH:MM`` (seconds dropped)
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, date, datetime, time, tzinfo
from enum import StrEnum

UTC_ZONE_KEYS = frozenset(
    {"UTC", "Etc/UTC", "Etc/UCT", "UCT", "Etc/Universal", "Universal", "Etc/Zulu", "Zulu"}
)


class TimezoneKind(StrEnum):
    FLOATING = "floating"
    UTC = "utc"
    OFFSET = "offset"


@dataclass(frozen=True)
class TimezoneDescriptor:
    """Timezone of a host value, reduced to what the lexical forms need."""

    kind: TimezoneKind
    offset_minutes: int = 0

    @property
    def suffix(self) -> str:
        if self.kind is TimezoneKind.FLOATING:
            return ""
        if self.kind is TimezoneKind.UTC:
            return "Z"
        sign = "-" if self.offset_minutes < 0 else "+"
        hours, minutes = divmod(abs(self.offset_minutes), 60)
        return f"{sign}{hours:02d}:{minutes:02d}"


FLOATING = TimezoneDescriptor(TimezoneKind.FLOATING)


def _is_utc_zone(tz: tzinfo) -> bool:
    if tz is UTC:
        return True
    return getattr(tz, "key", None) in UTC_ZONE_KEYS


def describe_timezone(value: date | time) -> TimezoneDescriptor:
    """Classify the timezone of a datetime, time, or (always floating) date."""
    if not isinstance(value, (datetime, time)):
        return FLOATING
    tz = value.tzinfo
    if tz is None:
        return FLOATING
    offset = value.utcoffset()
    if offset is None:
        return FLOATING
    if _is_utc_zone(tz):
        return TimezoneDescriptor(TimezoneKind.UTC)
    total_seconds = int(offset.total_seconds())
    sign = -1 if total_seconds < 0 else 1
    return TimezoneDescriptor(TimezoneKind.OFFSET, sign * (abs(total_seconds) // 60))


def fraction_digits(microsecond: int) -> str:
    """Render sub-second precision as ``.digits``, trimmed, or ``""`` when zero."""
    if not microsecond:
        return ""
    return "." + f"{microsecond * 1000:09d}".rstrip("0")


def _ymd(value: date) -> str:
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def _hms(value: datetime | time) -> str:
    return f"{value.hour:02d}:{value.minute:02d}:{value.second:02d}"


# --- dateTime / time / date ---


def datetime_lexical(value: datetime) -> str:
    """``YYYY-MM-DDTHH:MM:SS[.f][tz]``"""
    text = f"{_ymd(value)}T{_hms(value)}{fraction_digits(value.microsecond)}"
    return text + describe_timezone(value).suffix


def time_lexical(value: datetime | time) -> str:
    """``HH:MM:SS[.f][tz]``"""
    text = _hms(value) + fraction_digits(value.microsecond)
    return text + describe_timezone(value).suffix


def date_lexical(value: date) -> str:
    """``YYYY-MM-DD[tz]``"""
    return _ymd(value) + describe_timezone(value).suffix


# --- Gregorian fragments (no sub-second digits, no timezone) ---


def gyearmonth_lexical(value: date) -> str:
    return f"{value.year:04d}-{value.month:02d}"


def gyearmonth_from_pair(pair: tuple[int, int] | list[int]) -> str:
    """``%02d-%02d``: the year is not padded to four digits on this path."""
    year, month = pair
    return f"{year:02d}-{month:02d}"


def gyear_lexical(value: date) -> str:
    return f"{value.year:04d}"


def gmonthday_lexical(value: date) -> str:
    return f"--{value.month:02d}-{value.day:02d}"


def gmonthday_from_pair(pair: tuple[int, int] | list[int]) -> str:
    month, day = pair
    return f"--{month:02d}-{day:02d}"


def gday_lexical(value: date) -> str:
    return f"---{value.day:02d}"


def gday_from_integer(day: int) -> str:
    return f"---{day:02d}"


def gmonth_lexical(value: date) -> str:
    return f"--{value.month:02d}"


def gmonth_from_integer(month: int) -> str:
    return f"--{month:02d}"
