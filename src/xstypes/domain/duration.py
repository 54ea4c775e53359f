"""Duration coercion into ``[-]PnYnMnDTnHnMn[.f]S``.

Unit breakdown follows calendar rules for the date part and clock rules
for the time part:

- years and months share one month count (12 months roll into a year)
- weeks fold into days; days never roll into months
- hours and minutes share one minute count (60 minutes roll into an hour)
- nanoseconds carry into seconds; seconds never roll into minutes
"""

from __future__ import annotations

from dataclasses import dataclass

from xstypes.domain.sources import DurationValue

NANOS_PER_SECOND = 1_000_000_000


@dataclass(frozen=True)
class DurationParts:
    """Normalized magnitudes, ready for formatting."""

    negative: bool
    years: int
    months: int
    days: int
    hours: int
    minutes: int
    seconds: int
    nanoseconds: int


def decompose(value: DurationValue) -> DurationParts:
    years, months = divmod(value.years * 12 + value.months, 12)
    hours, minutes = divmod(value.hours * 60 + value.minutes, 60)
    carry, nanoseconds = divmod(value.nanoseconds, NANOS_PER_SECOND)
    return DurationParts(
        negative=value.negative,
        years=years,
        months=months,
        days=value.weeks * 7 + value.days,
        hours=hours,
        minutes=minutes,
        seconds=value.seconds + carry,
        nanoseconds=nanoseconds,
    )


def seconds_field(seconds: int, nanoseconds: int) -> str:
    """``S`` or ``S.fff`` with trailing zeros trimmed from the fraction."""
    if not nanoseconds:
        return str(seconds)
    return f"{seconds}.{nanoseconds:09d}".rstrip("0")


def duration_lexical(value: DurationValue) -> str:
    parts = decompose(value)
    sign = "-" if parts.negative else ""
    return (
        f"{sign}P{parts.years}Y{parts.months}M{parts.days}D"
        f"T{parts.hours}H{parts.minutes}M"
        f"{seconds_field(parts.seconds, parts.nanoseconds)}S"
    )
