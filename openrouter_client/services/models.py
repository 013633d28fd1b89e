"""Model listing service."""
from __future__ import annotations

from typing import Optional

from ..base.http import Endpoint, HTTPExecutor
from ..base.models import ModelsListResponse


class ModelsService:
    def __init__(self, executor: HTTPExecutor) -> None:
        self._executor = executor

    async def list(
        self,
        category: Optional[str] = None,
        supported_parameters: Optional[str] = None,
        use_rss: Optional[str] = None,
        use_rss_chat_links: Optional[str] = None,
    ) -> ModelsListResponse:
        """List available models; only supplied filters are sent."""
        endpoint = Endpoint.list_models(
            category=category,
            supported_parameters=supported_parameters,
            use_rss=use_rss,
            use_rss_chat_links=use_rss_chat_links,
        )
        return await self._executor.execute(endpoint, ModelsListResponse)

    async def list_for_user(self) -> ModelsListResponse:
        """List models filtered by the account's provider preferences."""
        return await self._executor.execute(Endpoint.list_models_for_user(), ModelsListResponse)


__all__ = ["ModelsService"]
