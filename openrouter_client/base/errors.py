"""Unified client error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``openrouter_client.base.errors_parts`` to maintain a stable import path.
"""

from .errors_parts.error_kind import ErrorKind
from .errors_parts.error_response import ErrorDetail, ErrorResponse
from .errors_parts.openrouter_error import OpenRouterError, DecodingError, UNKNOWN_ERROR_MESSAGE
from .errors_parts.classification import classify_status, decode_error_body, kind_for_status

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
