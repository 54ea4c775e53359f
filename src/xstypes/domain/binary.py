"""Base64 coercion for streams and raw bytes.

The content is decoded with the configured source encoding, re-encoded as
UTF-8, then base64 encoded with the standard alphabet and padding. Output
is wrapped MIME-style: every line, including the last, ends with ``\\n``.

The engine reads the stream to exhaustion exactly once and never closes
it; the caller owns the stream.
"""

from __future__ import annotations

import base64
import logging
from typing import IO, Any

from xstypes.domain.errors import CoercionFailed
from xstypes.domain.sources import DEFAULT_OPTIONS, CoercionOptions

TYPE_NAME = "base64Binary"

logger = logging.getLogger(__name__)


def read_stream(stream: IO[Any]) -> str | bytes:
    """Drain *stream* from its current position."""
    try:
        return stream.read()
    except (OSError, ValueError) as exc:
        raise CoercionFailed(TYPE_NAME, f"Stream read failed: {exc}") from exc


def to_utf8(content: str | bytes, source_encoding: str) -> bytes:
    """Interpret *content* as text and return its UTF-8 encoding."""
    if isinstance(content, str):
        text = content
    else:
        try:
            text = bytes(content).decode(source_encoding)
        except (UnicodeDecodeError, LookupError) as exc:
            raise CoercionFailed(
                TYPE_NAME,
                f"Content is not valid {source_encoding}: {exc}",
                {"source_encoding": source_encoding},
            ) from exc
    try:
        return text.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise CoercionFailed(TYPE_NAME, f"Content cannot be encoded as UTF-8: {exc}") from exc


def encode_base64(data: bytes, line_length: int = 76) -> str:
    """Standard base64 with padding, wrapped at *line_length* characters."""
    encoded = base64.b64encode(data).decode("ascii")
    if not encoded or line_length <= 0:
        return encoded
    lines = [encoded[i : i + line_length] for i in range(0, len(encoded), line_length)]
    return "\n".join(lines) + "\n"


def base64_from_bytes(data: bytes | bytearray | memoryview, options: CoercionOptions) -> str:
    utf8 = to_utf8(bytes(data), options.source_encoding)
    return encode_base64(utf8, options.base64_line_length)


def base64_from_stream(stream: IO[Any], options: CoercionOptions = DEFAULT_OPTIONS) -> str:
    content = read_stream(stream)
    if content is None:
        raise CoercionFailed(TYPE_NAME, "Stream returned no data (non-blocking stream?)")
    logger.debug("Read %d units from stream for base64 coercion", len(content))
    utf8 = to_utf8(content, options.source_encoding)
    return encode_base64(utf8, options.base64_line_length)
