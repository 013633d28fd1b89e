"""Server-sent-event line handling for chat completion streams.

``LineAccumulator`` turns arbitrarily chunked text into complete lines and
``parse_sse_line`` maps one line to the text fragment it carries, if any.
Both are pure and synchronous so they can be tested without a transport.
"""
from __future__ import annotations

from typing import List, Optional

from pydantic import ValidationError

from ..constants import SSE_DATA_PREFIX, SSE_DONE_SENTINEL
from ..models import StreamingDelta


class LineAccumulator:
    """Buffer decoded text and release it one ``"\\n"``-terminated line at a time.

    Text after the last newline stays buffered until more arrives. Whatever
    is still buffered when the stream ends is never released.
    """

    def __init__(self) -> None:
        self._buffer = ""

    def feed(self, text: str) -> List[str]:
        """Append ``text`` and return the lines it completed, without terminators."""
        if not text:
            return []
        self._buffer += text
        *lines, self._buffer = self._buffer.split("\n")
        return lines

    @property
    def pending(self) -> str:
        return self._buffer


def parse_sse_line(line: str) -> Optional[str]:
    """Return the content fragment carried by one SSE line, or ``None``.

    Lines are trimmed first. Empty lines, comments and any field other than
    ``data:`` are ignored, as is the ``[DONE]`` sentinel. A payload that does
    not decode as a :class:`StreamingDelta`, or whose first choice carries no
    content, yields ``None`` rather than an error.
    """
    trimmed = line.strip()
    if not trimmed.startswith(SSE_DATA_PREFIX):
        return None
    payload = trimmed[len(SSE_DATA_PREFIX):]
    if payload == SSE_DONE_SENTINEL:
        return None
    try:
        delta = StreamingDelta.model_validate_json(payload)
    except ValidationError:
        return None
    return delta.first_content or None


__all__ = ["LineAccumulator", "parse_sse_line"]
