"""Cancellable async iterator of streamed text fragments."""
from __future__ import annotations

from typing import AsyncGenerator, Optional, Type
from types import TracebackType


class FragmentStream:
    """Async iterator over the text fragments of one streaming completion.

    Wraps the generator that owns the open HTTP response. Closing the stream
    (``aclose()``, leaving an ``async with`` block, or cancelling the task
    that iterates it) exits the response context and releases the
    connection; no fragment is produced afterwards.

    Usage::

        async with client.chat.stream(request) as fragments:
            async for text in fragments:
                print(text, end="")
    """

    def __init__(self, source: AsyncGenerator[str, None]) -> None:
        self._source = source
        self._closed = False

    def __aiter__(self) -> "FragmentStream":
        return self

    async def __anext__(self) -> str:
        if self._closed:
            raise StopAsyncIteration
        return await self._source.__anext__()

    async def aclose(self) -> None:
        """Stop the stream and release the underlying connection. Idempotent."""
        if self._closed:
            return
        self._closed = True
        await self._source.aclose()

    @property
    def closed(self) -> bool:
        return self._closed

    async def __aenter__(self) -> "FragmentStream":
        return self

    async def __aexit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        await self.aclose()


__all__ = ["FragmentStream"]
