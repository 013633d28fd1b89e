"""Translate an :class:`Endpoint` into a concrete ``httpx.Request``.

Header contract:
    - ``Authorization: Bearer <api_key>`` on every request.
    - ``HTTP-Referer`` / ``X-Title`` only when the site URL / site name are
      configured.
    - ``Content-Type: application/json`` only when a body is attached.

Failures surface before any network I/O: an unusable URL raises
``OpenRouterError`` of kind ``INVALID_URL`` and a body that cannot be
serialized raises kind ``ENCODING``.
"""
from __future__ import annotations

import json
from typing import TYPE_CHECKING, Dict

import httpx
from pydantic_core import PydanticSerializationError

from ..constants import (
    AUTHORIZATION_HEADER,
    CONTENT_TYPE_HEADER,
    JSON_CONTENT_TYPE,
    REFERER_HEADER,
    TITLE_HEADER,
)
from ..errors import ErrorKind, OpenRouterError
from .endpoint import Endpoint

if TYPE_CHECKING:  # pragma: no cover - typing only
    from ...config import ClientConfig


class RequestBuilder:
    """Build requests for one immutable :class:`ClientConfig`."""

    def __init__(self, config: "ClientConfig") -> None:
        self._config = config

    def _url(self, endpoint: Endpoint) -> httpx.URL:
        raw = f"{self._config.base_url}{endpoint.path}"
        try:
            url = httpx.URL(raw)
        except httpx.InvalidURL as exc:
            raise OpenRouterError(kind=ErrorKind.INVALID_URL, message=raw, raw=exc) from exc
        if not url.scheme or not url.host:
            raise OpenRouterError(kind=ErrorKind.INVALID_URL, message=raw)
        return url

    def headers(self) -> Dict[str, str]:
        headers = {AUTHORIZATION_HEADER: f"Bearer {self._config.api_key}"}
        if self._config.site_url:
            headers[REFERER_HEADER] = self._config.site_url
        if self._config.site_name:
            headers[TITLE_HEADER] = self._config.site_name
        return headers

    def _encode_body(self, endpoint: Endpoint) -> bytes:
        try:
            payload = endpoint.body.to_wire()
            return json.dumps(payload, ensure_ascii=False, allow_nan=False).encode("utf-8")
        except (PydanticSerializationError, TypeError, ValueError) as exc:
            raise OpenRouterError(
                kind=ErrorKind.ENCODING,
                message=f"{type(endpoint.body).__name__}: {exc}",
                raw=exc,
            ) from exc

    def build(self, endpoint: Endpoint) -> httpx.Request:
        """Return the ``httpx.Request`` for ``endpoint``.

        Raises:
            OpenRouterError: kind ``INVALID_URL`` or ``ENCODING``.
        """
        url = self._url(endpoint)
        headers = self.headers()
        content = None
        if endpoint.body is not None:
            content = self._encode_body(endpoint)
            headers[CONTENT_TYPE_HEADER] = JSON_CONTENT_TYPE
        return httpx.Request(
            endpoint.method.value,
            url,
            params=endpoint.query,
            headers=headers,
            content=content,
        )


__all__ = ["RequestBuilder"]
