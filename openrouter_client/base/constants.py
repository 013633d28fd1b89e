"""Base shared constants for the OpenRouter client.

Central location to avoid scattering magic strings and default numbers.

Security
--------
This module contains only generic sentinel strings and numeric defaults.
There are no credentials or tokens embedded.

# pragma: allowlist secret
"""
from __future__ import annotations

# Public API root; endpoint paths are appended verbatim
DEFAULT_BASE_URL = "https://openrouter.ai/api/v1"

# Missing credential sentinel
MISSING_API_KEY_ERROR = "missing_api_key"  # pragma: allowlist secret - generic placeholder string, not a real secret

# Request headers
AUTHORIZATION_HEADER = "Authorization"
CONTENT_TYPE_HEADER = "Content-Type"
REFERER_HEADER = "HTTP-Referer"
TITLE_HEADER = "X-Title"
JSON_CONTENT_TYPE = "application/json"

# Server-sent events
SSE_DATA_PREFIX = "data: "
SSE_DONE_SENTINEL = "[DONE]"

# Default HTTP timeouts (seconds)
DEFAULT_HTTP_TIMEOUT = 60.0  # per-phase (connect, read, write) request timeout

__all__ = [
    "DEFAULT_BASE_URL",
    "MISSING_API_KEY_ERROR",
    "AUTHORIZATION_HEADER",
    "CONTENT_TYPE_HEADER",
    "REFERER_HEADER",
    "TITLE_HEADER",
    "JSON_CONTENT_TYPE",
    "SSE_DATA_PREFIX",
    "SSE_DONE_SENTINEL",
    "DEFAULT_HTTP_TIMEOUT",
]
