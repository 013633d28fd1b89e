"""HTTP timeout configuration for the client.

The transport timeout is the only timeout the client applies; there is no
overall deadline and no retry. ``get_timeout_config()`` returns a
process-cached :class:`TimeoutConfig`, parsing the environment on first use
only. Supported environment variable (optional):

    OPENROUTER_HTTP_TIMEOUT_SECONDS

The cache is refreshed when the variable's raw value changes so tests can
adjust it at runtime with ``monkeypatch.setenv``.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

import httpx

from .constants import DEFAULT_HTTP_TIMEOUT

HTTP_TIMEOUT_ENV = "OPENROUTER_HTTP_TIMEOUT_SECONDS"


@dataclass(frozen=True)
class TimeoutConfig:
    """Normalized timeout values (seconds).

    Attributes:
        http_timeout_seconds: Per-phase timeout applied to connect, read,
            write and pool acquisition. For a streaming response the read
            timeout bounds the gap between two chunks, not the whole stream.
    """

    http_timeout_seconds: float = DEFAULT_HTTP_TIMEOUT

    def as_httpx(self) -> httpx.Timeout:
        return httpx.Timeout(self.http_timeout_seconds)


_CACHED: Optional[TimeoutConfig] = None
_ENV_GUARD: Optional[str] = None


def _parse_env_float(name: str, default: float) -> float:
    """Parse a positive float from ``name``; return ``default`` when unset or invalid."""
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        val = float(raw)
    except ValueError:
        return default
    return val if val > 0 else default


def get_timeout_config() -> TimeoutConfig:
    """Return the process-cached :class:`TimeoutConfig`."""
    global _CACHED, _ENV_GUARD  # noqa: PLW0603 - documented module cache
    guard = os.getenv(HTTP_TIMEOUT_ENV, "")
    if _CACHED is not None and _ENV_GUARD == guard:
        return _CACHED
    _CACHED = TimeoutConfig(http_timeout_seconds=_parse_env_float(HTTP_TIMEOUT_ENV, DEFAULT_HTTP_TIMEOUT))
    _ENV_GUARD = guard
    return _CACHED


__all__ = ["TimeoutConfig", "get_timeout_config", "HTTP_TIMEOUT_ENV"]
