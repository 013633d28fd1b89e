"""
Structured client error exception types.

`OpenRouterError` wraps every failure surfaced by the client with a
normalized `ErrorKind`, a human-readable message and the optional metadata
mapping returned by the API. `DecodingError` is the specialised form raised
when a union-typed payload matches none of its variants.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence, Union

from .error_kind import ErrorKind

UNKNOWN_ERROR_MESSAGE = "Unknown error occurred"

_KIND_LABELS: Dict[ErrorKind, str] = {
    ErrorKind.BAD_REQUEST: "Bad Request",
    ErrorKind.INVALID_CREDENTIALS: "Invalid Credentials",
    ErrorKind.INSUFFICIENT_CREDITS: "Insufficient Credits",
    ErrorKind.MODERATION: "Moderation Error",
    ErrorKind.REQUEST_TIMEOUT: "Request Timeout",
    ErrorKind.RATE_LIMITED: "Rate Limited",
    ErrorKind.MODEL_DOWN: "Model Down",
    ErrorKind.NO_AVAILABLE_PROVIDER: "No Available Provider",
    ErrorKind.INVALID_URL: "Invalid URL",
    ErrorKind.TRANSPORT: "Transport Error",
    ErrorKind.ENCODING: "Encoding Error",
    ErrorKind.DECODING: "Decoding Error",
    ErrorKind.STREAMING_FAILURE: "Streaming Failure",
}


@dataclass(eq=False)
class OpenRouterError(Exception):
    """Represents a classified client error.

    Attributes:
        kind: Normalized :class:`ErrorKind` for the failure.
        message: Human-readable error message.
        metadata: Optional metadata mapping from the API error body, verbatim.
        status_code: HTTP (or embedded error) status code when one applies.
        raw: Optional original exception for diagnostics.
    """

    kind: ErrorKind
    message: str = UNKNOWN_ERROR_MESSAGE
    metadata: Optional[Dict[str, Any]] = None
    status_code: Optional[int] = None
    raw: Optional[BaseException] = None

    @property
    def description(self) -> str:
        """Return the labelled message, e.g. ``"Rate Limited: slow down"``."""
        if self.kind is ErrorKind.UNKNOWN:
            return f"Unknown Error ({self.status_code}): {self.message}"
        return f"{_KIND_LABELS[self.kind]}: {self.message}"

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.description


class DecodingError(OpenRouterError, ValueError):
    """Raised when a union-typed value matches none of its variants.

    Subclasses ``ValueError`` so that, when raised inside a pydantic
    validator, it is reported as part of a ``ValidationError``.

    Attributes:
        type_name: Name of the union type being decoded.
        path: Location of the value inside the enclosing document.
        value: The offending value (or discriminator value).
    """

    def __init__(
        self,
        type_name: str,
        message: str,
        path: Sequence[Union[str, int]] = (),
        value: Any = None,
    ) -> None:
        self.type_name = type_name
        self.path = tuple(path)
        self.value = value
        location = ".".join(str(p) for p in self.path) or "<root>"
        super().__init__(kind=ErrorKind.DECODING, message=f"{type_name} at {location}: {message}")


__all__ = ["OpenRouterError", "DecodingError", "UNKNOWN_ERROR_MESSAGE"]
