"""API key management service.

All operations except ``get_current`` require a provisioning key.
"""
from __future__ import annotations

from typing import Optional, Union

from ..base.http import Endpoint, HTTPExecutor
from ..base.models import (
    APIKeyListResponse,
    APIKeyResponse,
    CreateAPIKeyRequest,
    CreateAPIKeyResponse,
    CurrentAPIKeyResponse,
    DeleteAPIKeyResponse,
    UpdateAPIKeyRequest,
)


class KeysService:
    def __init__(self, executor: HTTPExecutor) -> None:
        self._executor = executor

    async def list(
        self,
        include_disabled: Optional[bool] = None,
        offset: Optional[Union[int, str]] = None,
    ) -> APIKeyListResponse:
        return await self._executor.execute(Endpoint.list_keys(include_disabled, offset), APIKeyListResponse)

    async def create(self, request: CreateAPIKeyRequest) -> CreateAPIKeyResponse:
        """Create a key; the secret is only ever returned by this call."""
        return await self._executor.execute(Endpoint.create_key(request), CreateAPIKeyResponse)

    async def get(self, key_hash: str) -> APIKeyResponse:
        return await self._executor.execute(Endpoint.get_key(key_hash), APIKeyResponse)

    async def update(self, key_hash: str, request: UpdateAPIKeyRequest) -> APIKeyResponse:
        return await self._executor.execute(Endpoint.update_key(key_hash, request), APIKeyResponse)

    async def delete(self, key_hash: str) -> DeleteAPIKeyResponse:
        return await self._executor.execute(Endpoint.delete_key(key_hash), DeleteAPIKeyResponse)

    async def get_current(self) -> CurrentAPIKeyResponse:
        """Describe the key the client authenticates with."""
        return await self._executor.execute(Endpoint.get_current_key(), CurrentAPIKeyResponse)


__all__ = ["KeysService"]
