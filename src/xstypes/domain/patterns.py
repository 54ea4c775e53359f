"""Lexical patterns for the string-represented types.

Every pattern is compiled with ``re.ASCII`` and matched with
``fullmatch``: the whole string must match, and a trailing newline is not
tolerated.
"""

from __future__ import annotations

import re
from collections.abc import Callable

_TZ = r"Z?(?:[-+]\d{2}:?\d{2})?"

LEXICAL_PATTERNS: dict[str, re.Pattern[str]] = {
    "duration": re.compile(r"-?P\d+Y\d+M\d+DT\d+H\d+M\d+(?:\.\d+)?S", re.ASCII),
    "dateTime": re.compile(
        r"-?\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(?:\.\d+)?" + _TZ, re.ASCII
    ),
    "time": re.compile(r"\d{2}:\d{2}:\d{2}(?:\.\d+)?" + _TZ, re.ASCII),
    "date": re.compile(r"-?\d{4}-\d{2}-\d{2}" + _TZ, re.ASCII),
    "gYearMonth": re.compile(r"\d{4}-\d{2}", re.ASCII),
    "gYear": re.compile(r"\d{4}", re.ASCII),
    "gMonthDay": re.compile(r"--\d{2}-\d{2}", re.ASCII),
    "gDay": re.compile(r"---\d{2}", re.ASCII),
    "gMonth": re.compile(r"--\d{2}", re.ASCII),
    # Zero or more lines; the empty string is a valid (empty) binary value.
    "base64Binary": re.compile(r"(?:[A-Za-z0-9=+/]+\r?\n)*[A-Za-z0-9=+/]*", re.ASCII),
    "anyURI": re.compile(r"\w+://.*", re.ASCII),
}


def matches(type_name: str, text: str) -> bool:
    """Check whether *text* is in the lexical space of *type_name*."""
    pattern = LEXICAL_PATTERNS.get(type_name)
    if pattern is None:
        return False
    return pattern.fullmatch(text) is not None


def matcher(type_name: str) -> Callable[[str], bool]:
    """Return a one-argument predicate bound to *type_name*'s pattern."""
    pattern = LEXICAL_PATTERNS[type_name]

    def _match(text: str) -> bool:
        return pattern.fullmatch(text) is not None

    return _match
