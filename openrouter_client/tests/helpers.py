"""Shared test doubles for HTTP and streaming tests.

``ChunkedStream`` feeds a response body to ``httpx`` in caller-chosen chunks
so line reassembly, mid-stream failures and cancellation can be exercised
without a network.
"""
from __future__ import annotations

import asyncio
import json
from typing import Any, Dict, Iterable, List, Optional

import httpx

API_KEY = "sk-or-v1-unit-key"  # pragma: allowlist secret - fake credential for tests


class ChunkedStream(httpx.AsyncByteStream):
    """Async byte stream yielding ``chunks``, then optionally failing or stalling."""

    def __init__(
        self,
        chunks: Iterable[bytes],
        error: Optional[Exception] = None,
        stall: bool = False,
    ) -> None:
        self._chunks = list(chunks)
        self._error = error
        self._stall = stall
        self.closed = False

    async def __aiter__(self):
        for chunk in self._chunks:
            yield chunk
        if self._error is not None:
            raise self._error
        if self._stall:
            await asyncio.Event().wait()

    async def aclose(self) -> None:
        self.closed = True


def delta_line(content: Optional[str], delta_id: str = "gen-1") -> str:
    """Return one SSE ``data:`` line carrying ``content`` as the first choice delta."""
    payload: Dict[str, Any] = {
        "id": delta_id,
        "provider": "OpenAI",
        "model": "openai/gpt-4o",
        "object": "chat.completion.chunk",
        "created": 1735689600,
        "choices": [{"index": 0, "delta": {"role": "assistant", "content": content}, "finish_reason": None}],
    }
    return f"data: {json.dumps(payload)}\n"


def sse_body(*fragments: Optional[str], done: bool = True) -> bytes:
    lines: List[str] = [delta_line(f) + "\n" for f in fragments]
    if done:
        lines.append("data: [DONE]\n\n")
    return "".join(lines).encode("utf-8")


def chat_response_payload(content: str = "Hello there!") -> Dict[str, Any]:
    return {
        "id": "gen-123",
        "model": "openai/gpt-4o",
        "choices": [{"message": {"role": "assistant", "content": content}, "finish_reason": "stop"}],
        "usage": {"prompt_tokens": 10, "completion_tokens": 3, "total_tokens": 13},
    }


def error_payload(code: int, message: str, metadata: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    error: Dict[str, Any] = {"code": code, "message": message}
    if metadata is not None:
        error["metadata"] = metadata
    return {"error": error}


def api_key_payload(**overrides: Any) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "hash": "abc123",
        "name": "ci",
        "label": "sk-or-v1-abc...xyz",
        "disabled": False,
        "limit": 10.0,
        "limit_remaining": 7.5,
        "limit_reset": "monthly",
        "include_byok_in_limit": False,
        "usage": 2.5,
        "usage_daily": 0.5,
        "usage_weekly": 1.0,
        "usage_monthly": 2.5,
        "byok_usage": 0.0,
        "byok_usage_daily": 0.0,
        "byok_usage_weekly": 0.0,
        "byok_usage_monthly": 0.0,
        "created_at": "2025-08-24T10:30:00Z",
        "updated_at": "2025-08-24T15:45:00.123Z",
        "expires_at": None,
    }
    payload.update(overrides)
    return payload


__all__ = [
    "API_KEY",
    "ChunkedStream",
    "delta_line",
    "sse_body",
    "chat_response_payload",
    "error_payload",
    "api_key_payload",
]
