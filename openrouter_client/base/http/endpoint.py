"""Endpoint descriptors for every API operation.

An :class:`Endpoint` is a pure description of one call: HTTP method, path
relative to the base URL, query parameters, optional body and the status
code that signals success. Building one performs no I/O.

Query parameters are an ordered list of ``(name, value)`` pairs holding only
the filters that were supplied, or ``None`` when there are none.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple, Union

from ..models import ChatRequest, CreateAPIKeyRequest, UpdateAPIKeyRequest, WireModel

QueryParams = List[Tuple[str, str]]


class HTTPMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PATCH = "PATCH"
    DELETE = "DELETE"


def _bool_param(value: bool) -> str:
    return "true" if value else "false"


def _query(*pairs: Tuple[str, Optional[str]]) -> Optional[QueryParams]:
    items = [(name, value) for name, value in pairs if value is not None]
    return items or None


@dataclass(frozen=True)
class Endpoint:
    """Description of one API operation.

    Attributes:
        method: HTTP method.
        path: Path appended verbatim to the configured base URL.
        query: Ordered query parameters, or ``None``.
        body: Request body model serialized with ``to_wire()``, or ``None``.
        expected_status: Status code that signals success.
    """

    method: HTTPMethod
    path: str
    query: Optional[QueryParams] = None
    body: Optional[WireModel] = None
    expected_status: int = 200

    # ---- chat -------------------------------------------------------------

    @classmethod
    def chat_completions(cls, request: ChatRequest) -> "Endpoint":
        return cls(HTTPMethod.POST, "/chat/completions", body=request)

    # ---- models -----------------------------------------------------------

    @classmethod
    def list_models(
        cls,
        category: Optional[str] = None,
        supported_parameters: Optional[str] = None,
        use_rss: Optional[str] = None,
        use_rss_chat_links: Optional[str] = None,
    ) -> "Endpoint":
        """List available models, optionally filtered.

        ``use_rss`` and ``use_rss_chat_links`` are passed through as given;
        the server interprets them as boolean flags.
        """
        query = _query(
            ("category", category),
            ("supported_parameters", supported_parameters),
            ("use_rss", use_rss),
            ("use_rss_chat_links", use_rss_chat_links),
        )
        return cls(HTTPMethod.GET, "/models", query=query)

    @classmethod
    def list_models_for_user(cls) -> "Endpoint":
        return cls(HTTPMethod.GET, "/models/user")

    # ---- API keys ---------------------------------------------------------

    @classmethod
    def list_keys(cls, include_disabled: Optional[bool] = None, offset: Optional[Union[int, str]] = None) -> "Endpoint":
        query = _query(
            ("include_disabled", _bool_param(include_disabled) if include_disabled is not None else None),
            ("offset", str(offset) if offset is not None else None),
        )
        return cls(HTTPMethod.GET, "/keys", query=query)

    @classmethod
    def create_key(cls, request: CreateAPIKeyRequest) -> "Endpoint":
        return cls(HTTPMethod.POST, "/keys", body=request, expected_status=201)

    @classmethod
    def get_key(cls, key_hash: str) -> "Endpoint":
        return cls(HTTPMethod.GET, f"/keys/{key_hash}")

    @classmethod
    def update_key(cls, key_hash: str, request: UpdateAPIKeyRequest) -> "Endpoint":
        return cls(HTTPMethod.PATCH, f"/keys/{key_hash}", body=request)

    @classmethod
    def delete_key(cls, key_hash: str) -> "Endpoint":
        return cls(HTTPMethod.DELETE, f"/keys/{key_hash}")

    @classmethod
    def get_current_key(cls) -> "Endpoint":
        return cls(HTTPMethod.GET, "/key")


__all__ = ["Endpoint", "HTTPMethod", "QueryParams"]
