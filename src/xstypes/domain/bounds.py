"""Range checks for the machine-width integer types.

Python ints are exact at any magnitude, so every comparison here is exact
and the 64-bit bounds need no special handling.
"""

from __future__ import annotations

BYTE = (-128, 127)
UNSIGNED_BYTE = (0, 255)
SHORT = (-32768, 32767)
UNSIGNED_SHORT = (0, 65535)
INT = (-2147483648, 2147483647)
UNSIGNED_INT = (0, 4294967295)
LONG = (-9223372036854775808, 9223372036854775807)
UNSIGNED_LONG = (0, 18446744073709551615)

INTEGER_BOUNDS: dict[str, tuple[int, int]] = {
    "byte": BYTE,
    "unsignedByte": UNSIGNED_BYTE,
    "short": SHORT,
    "unsignedShort": UNSIGNED_SHORT,
    "int": INT,
    "unsignedInt": UNSIGNED_INT,
    "long": LONG,
    "unsignedLong": UNSIGNED_LONG,
}


def is_integer(value: object) -> bool:
    """True for ints that are not bools."""
    return isinstance(value, int) and not isinstance(value, bool)


def in_range(value: int, minimum: int, maximum: int) -> bool:
    """Inclusive range check: ``minimum <= value <= maximum``."""
    return minimum <= value <= maximum


def bounded(type_name: str) -> tuple[int, int]:
    """Return the ``(min, max)`` pair for a bounded integer type."""
    return INTEGER_BOUNDS[type_name]
