"""
ChatRequest DTO for the chat completions endpoint.

The request carries the conversation (``messages`` or a bare ``prompt``),
model selection and routing hints, sampling parameters, and optional
structured-output, tool and reasoning directives. Every field besides
``model`` is optional; absent fields are omitted from the serialized payload
rather than sent as ``null``.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional

from .message import Message
from .tool import Tool, ToolChoice
from .wire_model import WireModel


class ResponseFormat(WireModel):
    """Response format directive, e.g. ``ResponseFormat(type="json_object")``."""

    type: str
    json_schema: Optional[Dict[str, Any]] = None


class ProviderPreferences(WireModel):
    """Provider routing preferences: ordered provider names to try."""

    order: List[str]
    allow_fallbacks: Optional[bool] = None


class ReasoningEffort(str, Enum):
    """Effort level for models with extended reasoning."""

    MINIMAL = "minimal"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class ReasoningConfiguration(WireModel):
    effort: ReasoningEffort


class ChatRequest(WireModel):
    """Outbound chat completion payload.

    Attributes:
        model: Target model identifier.
        messages: Ordered conversation; either this or ``prompt`` is expected.
        prompt: Plain prompt string alternative to ``messages``.
        models: Alternate model identifiers used for routing.
        route: Routing strategy (e.g. ``"fallback"``).
        transforms: Prompt transforms applied server-side.
        stream: Streaming flag; overridden to ``True`` by the streaming call.
        logit_bias: Token id to bias weight.
        provider: Provider routing preferences.
        reasoning: Reasoning effort configuration.
    """

    model: str
    messages: Optional[List[Message]] = None
    prompt: Optional[str] = None
    models: Optional[List[str]] = None
    route: Optional[str] = None
    transforms: Optional[List[str]] = None

    temperature: Optional[float] = None
    top_p: Optional[float] = None
    top_k: Optional[int] = None
    frequency_penalty: Optional[float] = None
    presence_penalty: Optional[float] = None
    repetition_penalty: Optional[float] = None
    seed: Optional[int] = None
    max_tokens: Optional[int] = None
    stop: Optional[List[str]] = None

    stream: Optional[bool] = None
    response_format: Optional[ResponseFormat] = None
    tools: Optional[List[Tool]] = None
    tool_choice: Optional[ToolChoice] = None
    logit_bias: Optional[Dict[int, float]] = None
    provider: Optional[ProviderPreferences] = None
    reasoning: Optional[ReasoningConfiguration] = None

    def with_streaming(self) -> "ChatRequest":
        """Return a copy with ``stream`` forced to ``True``."""
        return self.model_copy(update={"stream": True})


__all__ = [
    "ResponseFormat",
    "ProviderPreferences",
    "ReasoningEffort",
    "ReasoningConfiguration",
    "ChatRequest",
]
