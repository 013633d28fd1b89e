"""Streaming package.

Exposes the SSE line handling and the fragment stream returned by
``HTTPExecutor.stream`` under a single namespace.
"""

from .line_parser import LineAccumulator, parse_sse_line
from .fragment_stream import FragmentStream

__all__ = [
    "LineAccumulator",
    "parse_sse_line",
    "FragmentStream",
]
