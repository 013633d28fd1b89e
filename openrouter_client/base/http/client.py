"""Async HTTP client construction.

Purpose:
    Provide the single factory through which an ``OpenRouterClient`` obtains
    its ``httpx.AsyncClient``. Timeouts derive from the ``ClientConfig``
    (falling back to :func:`get_timeout_config`) and no numeric literals are
    scattered across call sites.

Lifecycle & cleanup:
    - Each ``OpenRouterClient`` owns exactly one ``httpx.AsyncClient``;
      connection reuse is handled by its pool.
    - The owner closes it with ``aclose()``. A client passed in by the caller
      is never closed by the library.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Optional

import httpx

if TYPE_CHECKING:  # pragma: no cover - typing only
    from ...config import ClientConfig

_POOL_LIMITS: Dict[str, object] = {
    "max_keepalive_connections": 20,
    "max_connections": 100,
    "keepalive_expiry": 30,
}


def create_async_client(
    config: "ClientConfig",
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.AsyncClient:
    """Return a new ``httpx.AsyncClient`` configured for ``config``.

    Parameters:
        config: Client settings supplying the transport timeout.
        transport: Optional transport override (e.g. ``httpx.MockTransport``
            in tests).
    """
    return httpx.AsyncClient(
        timeout=config.timeout(),
        limits=httpx.Limits(**_POOL_LIMITS),
        transport=transport,
    )


__all__ = ["create_async_client"]
