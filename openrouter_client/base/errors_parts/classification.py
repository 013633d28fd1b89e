"""
Error classification helpers mapping HTTP status codes to `OpenRouterError`.

Implements the status-to-kind table and the best-effort decoding of the
API's error envelope. Both functions are pure; neither performs I/O.
"""
from __future__ import annotations

from typing import Dict, Optional, Union

from pydantic import ValidationError

from .error_kind import ErrorKind
from .error_response import ErrorResponse
from .openrouter_error import OpenRouterError, UNKNOWN_ERROR_MESSAGE


_HTTP_STATUS_MAP: Dict[int, ErrorKind] = {
    400: ErrorKind.BAD_REQUEST,
    401: ErrorKind.INVALID_CREDENTIALS,
    402: ErrorKind.INSUFFICIENT_CREDITS,
    403: ErrorKind.MODERATION,
    408: ErrorKind.REQUEST_TIMEOUT,
    429: ErrorKind.RATE_LIMITED,
    502: ErrorKind.MODEL_DOWN,
    503: ErrorKind.NO_AVAILABLE_PROVIDER,
}


def kind_for_status(status_code: int) -> ErrorKind:
    """Return the :class:`ErrorKind` for ``status_code`` (``UNKNOWN`` if unmapped)."""
    return _HTTP_STATUS_MAP.get(status_code, ErrorKind.UNKNOWN)


def decode_error_body(content: Union[bytes, str, None]) -> Optional[ErrorResponse]:
    """Decode an API error envelope, returning ``None`` when it is absent.

    Never raises: an empty body, invalid JSON or a body of another shape all
    yield ``None``.
    """
    if not content:
        return None
    try:
        return ErrorResponse.model_validate_json(content)
    except ValidationError:
        return None


def classify_status(status_code: int, error_body: Optional[ErrorResponse] = None) -> OpenRouterError:
    """Build the classified error for ``status_code``.

    The message defaults to ``"Unknown error occurred"`` when no error body
    could be decoded; the body's metadata mapping is carried verbatim.
    """
    detail = error_body.error if error_body is not None else None
    return OpenRouterError(
        kind=kind_for_status(status_code),
        message=detail.message if detail is not None else UNKNOWN_ERROR_MESSAGE,
        metadata=detail.metadata if detail is not None else None,
        status_code=status_code,
    )


__all__ = [
    "classify_status",
    "decode_error_body",
    "kind_for_status",
    "_HTTP_STATUS_MAP",
]
