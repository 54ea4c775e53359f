"""URI coercion: structured URI values to their string form."""

from __future__ import annotations

from urllib.parse import ParseResult, SplitResult

from pydantic import AnyUrl
from pydantic_core import Url


def uri_text(value: SplitResult | ParseResult | AnyUrl | Url) -> str:
    if isinstance(value, (SplitResult, ParseResult)):
        return value.geturl()
    return str(value)
