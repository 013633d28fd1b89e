"""
Normalized client error kinds (taxonomy).

Defines the `ErrorKind` enumeration carried by every `OpenRouterError`. The
first block mirrors the HTTP status table used by the API; the second block
covers failures raised locally by the client. Values are lowercase
snake_case and are considered a stable public contract for logging.
"""
from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Enumerated error kinds representing failure categories."""

    BAD_REQUEST = "bad_request"
    INVALID_CREDENTIALS = "invalid_credentials"
    INSUFFICIENT_CREDITS = "insufficient_credits"
    MODERATION = "moderation"
    REQUEST_TIMEOUT = "request_timeout"
    RATE_LIMITED = "rate_limited"
    MODEL_DOWN = "model_down"
    NO_AVAILABLE_PROVIDER = "no_available_provider"
    UNKNOWN = "unknown"

    INVALID_URL = "invalid_url"
    TRANSPORT = "transport"
    ENCODING = "encoding"
    DECODING = "decoding"
    STREAMING_FAILURE = "streaming_failure"


__all__ = ["ErrorKind"]
