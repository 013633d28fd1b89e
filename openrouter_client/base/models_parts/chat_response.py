"""
ChatResponse DTO for a non-streaming chat completion.

Carries the completion id, the ordered choices, the model that served the
request and, when reported, token usage.
"""
from __future__ import annotations

from typing import List, Optional

from .usage import Usage
from .wire_model import WireModel


class ResponseMessage(WireModel):
    """Message generated by the model."""

    role: str
    content: Optional[str] = None


class Choice(WireModel):
    message: ResponseMessage
    finish_reason: Optional[str] = None


class ChatResponse(WireModel):
    """Response from the chat completions endpoint.

    Attributes:
        id: Completion identifier.
        choices: Ordered completion choices.
        model: Model identifier echoed back by the server.
        usage: Token usage, when reported.
    """

    id: str
    choices: List[Choice]
    model: str
    usage: Optional[Usage] = None

    @property
    def content(self) -> Optional[str]:
        """Return the first choice's message content, if any."""
        if not self.choices:
            return None
        return self.choices[0].message.content


__all__ = ["ResponseMessage", "Choice", "ChatResponse"]
