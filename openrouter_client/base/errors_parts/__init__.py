"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `openrouter_client.base.errors` for the stable surface.
"""

from .error_kind import ErrorKind
from .error_response import ErrorDetail, ErrorResponse
from .openrouter_error import OpenRouterError, DecodingError, UNKNOWN_ERROR_MESSAGE
from .classification import classify_status, decode_error_body, kind_for_status

__all__ = [
    "ErrorKind",
    "ErrorDetail",
    "ErrorResponse",
    "OpenRouterError",
    "DecodingError",
    "UNKNOWN_ERROR_MESSAGE",
    "classify_status",
    "decode_error_body",
    "kind_for_status",
]
