"""OpenRouter client facade.

Summary:
- One immutable :class:`ClientConfig` per client; nothing is mutated after
  construction, so one client may serve concurrent calls without locking.
- One owned ``httpx.AsyncClient`` (connection reuse is a transport concern),
  released by ``aclose()`` or by leaving ``async with``.
- Chat, model listing and key management are exposed as services sharing a
  single :class:`HTTPExecutor`.

Example::

    async with OpenRouterClient() as client:
        response = await client.chat.send(
            ChatRequest(model="openrouter/auto", messages=[Message(role="user", content="Hi")])
        )
"""
from __future__ import annotations

from typing import Any, Dict, Optional

import httpx

from .base.http import HTTPExecutor, RequestBuilder, create_async_client
from .base.logging import get_logger, log_event
from .config import ClientConfig, load_client_config
from .services import ChatService, KeysService, ModelsService

_logger = get_logger(__name__)


class OpenRouterClient:
    """Entry point for the OpenRouter API.

    Arguments left as ``None`` are resolved through :func:`load_client_config`
    (config file, then environment). A missing API key raises
    ``OpenRouterError`` of kind ``INVALID_CREDENTIALS``.

    Args:
        api_key: Bearer credential.
        base_url: API root, ``https://openrouter.ai/api/v1`` by default.
        site_url: Optional referring site sent as ``HTTP-Referer``.
        site_name: Optional application name sent as ``X-Title``.
        timeout_seconds: Per-phase transport timeout.
        config: Fully resolved settings; when given, the other settings
            arguments and the environment are ignored.
        transport: Optional ``httpx`` transport for the owned client.
        http_client: Optional caller-owned ``httpx.AsyncClient``; it is used
            as-is and never closed by this client.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        site_url: Optional[str] = None,
        site_name: Optional[str] = None,
        *,
        timeout_seconds: Optional[float] = None,
        config: Optional[ClientConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        overrides: Dict[str, Any] = {
            "api_key": api_key,
            "base_url": base_url,
            "site_url": site_url,
            "site_name": site_name,
            "timeout_seconds": timeout_seconds,
        }
        self._config = config if config is not None else load_client_config(overrides)
        self._owns_http_client = http_client is None
        self._http_client = http_client or create_async_client(self._config, transport=transport)
        executor = HTTPExecutor(self._http_client, RequestBuilder(self._config))
        self._chat = ChatService(executor)
        self._models = ModelsService(executor)
        self._keys = KeysService(executor)
        log_event(
            _logger,
            "client.init",
            base_url=self._config.base_url,
            owns_http_client=self._owns_http_client,
        )

    @classmethod
    def from_config(
        cls,
        config: ClientConfig,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> "OpenRouterClient":
        """Build a client from an already resolved :class:`ClientConfig`."""
        return cls(config=config, transport=transport, http_client=http_client)

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def chat(self) -> ChatService:
        return self._chat

    @property
    def models(self) -> ModelsService:
        return self._models

    @property
    def keys(self) -> KeysService:
        return self._keys

    async def aclose(self) -> None:
        """Release the owned HTTP client. Safe to call more than once."""
        if self._owns_http_client:
            await self._http_client.aclose()

    async def __aenter__(self) -> "OpenRouterClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()


__all__ = ["OpenRouterClient"]
