"""Chat completion service."""
from __future__ import annotations

from ..base.http import Endpoint, HTTPExecutor
from ..base.models import ChatRequest, ChatResponse
from ..base.streaming import FragmentStream


class ChatService:
    """Send chat completions, whole or streamed."""

    def __init__(self, executor: HTTPExecutor) -> None:
        self._executor = executor

    async def send(self, request: ChatRequest) -> ChatResponse:
        """Send ``request`` and return the complete response.

        The request is sent exactly as given, including its ``stream`` flag.
        """
        return await self._executor.execute(Endpoint.chat_completions(request), ChatResponse)

    def stream(self, request: ChatRequest) -> FragmentStream:
        """Stream the completion of ``request`` as text fragments.

        Streaming is always enabled on a copy of ``request``, whatever its own
        ``stream`` value; the caller's instance is unchanged.
        """
        return self._executor.stream(Endpoint.chat_completions(request.with_streaming()))


__all__ = ["ChatService"]
