"""Arbitrary-precision integer and decimal rules.

Integers are plain Python ints. Decimals, floats, and doubles are
:class:`decimal.Decimal` values, which can also hold NaN and the two
infinities. Float and double range checks go through
:class:`fractions.Fraction` so the boundary constants are exact powers of
two and no native float rounding takes part in the comparison.

Boundary policy:

- float:  ``FLOAT_MIN <= |v| <= FLOAT_MAX`` (inclusive)
- double: ``DOUBLE_MIN < |v| < DOUBLE_MAX`` (exclusive)

Exact zero of either sign is accepted by both. Values whose decimal
exponent is clearly past a bound are rejected before any exact
arithmetic, so text such as ``"1e99999999"`` is answered immediately.
"""

from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation
from fractions import Fraction

from xstypes.domain.errors import CoercionFailed

FLOAT_MAX = Fraction(2**24) * Fraction(2) ** 104
FLOAT_MIN = Fraction(2**24) * Fraction(2) ** -149
DOUBLE_MAX = Fraction(2**53) * Fraction(2) ** 970
DOUBLE_MIN = Fraction(2**53) * Fraction(2) ** -1075

# Decimal.adjusted() of each bound: 2**128 ~ 3.4e38, 2**-125 ~ 2.4e-38,
# 2**1023 ~ 9.0e307, 2**-1022 ~ 2.2e-308.
FLOAT_EXPONENTS = (-38, 38)
DOUBLE_EXPONENTS = (-308, 307)

# Ints longer than this many bits are summarised in messages.
SHORT_INTEGER_BITS = 256

INTEGER_TEXT = re.compile(r"[+-]?\d+", re.ASCII)
DECIMAL_TEXT = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)

_SPECIAL_DECIMALS: dict[str, Decimal] = {
    "inf": Decimal("Infinity"),
    "+inf": Decimal("Infinity"),
    "-inf": Decimal("-Infinity"),
    "infinity": Decimal("Infinity"),
    "+infinity": Decimal("Infinity"),
    "-infinity": Decimal("-Infinity"),
    "nan": Decimal("NaN"),
}


# --- Integers ---


def is_positive(value: int) -> bool:
    return value > 0


def is_non_negative(value: int) -> bool:
    return value >= 0


def is_negative(value: int) -> bool:
    return value < 0


def is_non_positive(value: int) -> bool:
    return value <= 0


def parse_integer_text(type_name: str, text: str) -> int:
    """Parse base-10 integer text such as ``"-42"`` or ``" 7 "``."""
    stripped = text.strip()
    if INTEGER_TEXT.fullmatch(stripped) is None:
        raise CoercionFailed(
            type_name,
            f"Malformed integer text: {text!r}",
            {"text": text},
        )
    # int(str) refuses more than 4300 digits; Decimal has no such limit.
    return int(Decimal(stripped))


# --- Decimals ---


def is_special(value: Decimal) -> bool:
    """True for NaN (quiet or signalling) and the infinities."""
    return value.is_nan() or value.is_infinite()


def is_finite_decimal(value: Decimal) -> bool:
    return not is_special(value)


def decimal_from_float(value: float) -> Decimal:
    """Convert a native float using its shortest round-trip representation."""
    return Decimal(repr(value))


def decimal_from_integer(value: int) -> Decimal:
    return Decimal(value)


def parse_decimal_text(type_name: str, text: str) -> Decimal:
    """Parse decimal or scientific text, plus ``INF``/``-INF``/``NaN``."""
    stripped = text.strip()
    special = _SPECIAL_DECIMALS.get(stripped.lower())
    if special is not None:
        return special
    if DECIMAL_TEXT.fullmatch(stripped) is None:
        raise CoercionFailed(
            type_name,
            f"Malformed numeric text: {text!r}",
            {"text": text},
        )
    try:
        return Decimal(stripped)
    except InvalidOperation as exc:
        raise CoercionFailed(type_name, f"Malformed numeric text: {text!r}") from exc


def _magnitude(value: Decimal) -> Fraction:
    return abs(Fraction(value))


def _exponent_within(value: Decimal, exponents: tuple[int, int]) -> bool:
    """False when *value* is an order of magnitude or more past a bound."""
    low, high = exponents
    return low <= value.adjusted() <= high


def float_in_range(value: Decimal) -> bool:
    """Single-precision membership; bounds are inclusive."""
    if is_special(value) or value.is_zero():
        return True
    if not _exponent_within(value, FLOAT_EXPONENTS):
        return False
    return FLOAT_MIN <= _magnitude(value) <= FLOAT_MAX


def double_in_range(value: Decimal) -> bool:
    """Double-precision membership; bounds are exclusive."""
    if is_special(value) or value.is_zero():
        return True
    if not _exponent_within(value, DOUBLE_EXPONENTS):
        return False
    return DOUBLE_MIN < _magnitude(value) < DOUBLE_MAX


# --- Display ---


def integer_text(value: int) -> str:
    """All decimal digits of *value*, with no int-to-str length limit."""
    return str(Decimal(value))


def short_number(value: int | Decimal) -> str:
    """Display form for messages: long ints become ``1.234568E+5000``."""
    if isinstance(value, int) and value.bit_length() > SHORT_INTEGER_BITS:
        return f"{Decimal(value):.6E}"
    return str(value)
