"""
StreamingDelta DTO: one decoded server-sent-event payload.

Each ``data:`` line of a streaming response carries one delta with the
per-choice incremental content fragments. Usage is only present on the final
event by server convention.
"""
from __future__ import annotations

from typing import Any, List, Optional

from .usage import Usage
from .wire_model import WireModel


class Delta(WireModel):
    role: Optional[str] = None
    content: Optional[str] = None


class DeltaChoice(WireModel):
    delta: Delta
    index: int
    finish_reason: Optional[str] = None
    logprobs: Optional[Any] = None


class StreamingDelta(WireModel):
    """One incremental streaming payload."""

    id: str
    provider: Optional[str] = None
    model: Optional[str] = None
    object: Optional[str] = None
    created: Optional[int] = None
    choices: List[DeltaChoice]
    usage: Optional[Usage] = None

    @property
    def first_content(self) -> Optional[str]:
        """Return the first choice's content fragment, if any."""
        if not self.choices:
            return None
        return self.choices[0].delta.content


__all__ = ["Delta", "DeltaChoice", "StreamingDelta"]
