"""
Wire data model public surface.

This module re-exports the one-concern-per-file implementations under
``openrouter_client.base.models_parts`` to preserve a stable import path.
All models are immutable pydantic values serialized with ``to_wire()``.
"""

from .models_parts.wire_model import WireModel
from .models_parts.content_part import ContentPart, ImageContent, ImageUrl, TextContent
from .models_parts.codec import decode_content, decode_content_part
from .models_parts.message import Message, MessageContent, Role
from .models_parts.tool import FunctionDescription, FunctionToolChoice, Tool, ToolChoice, ToolChoiceFunction
from .models_parts.chat_request import (
    ChatRequest,
    ProviderPreferences,
    ReasoningConfiguration,
    ReasoningEffort,
    ResponseFormat,
)
from .models_parts.usage import OutputTokensDetails, Usage
from .models_parts.chat_response import ChatResponse, Choice, ResponseMessage
from .models_parts.streaming_delta import Delta, DeltaChoice, StreamingDelta
from .models_parts.model_info import (
    DefaultParameters,
    ModelArchitecture,
    ModelInfo,
    ModelsListResponse,
    PerRequestLimits,
    PublicPricing,
    TopProviderInfo,
)
from .models_parts.api_keys import (
    APIKey,
    APIKeyLimitReset,
    APIKeyListResponse,
    APIKeyResponse,
    CreateAPIKeyRequest,
    CreateAPIKeyResponse,
    CurrentAPIKey,
    CurrentAPIKeyResponse,
    DeleteAPIKeyResponse,
    RateLimit,
    UpdateAPIKeyRequest,
)

__all__ = [
    "WireModel",
    "ContentPart",
    "ImageContent",
    "ImageUrl",
    "TextContent",
    "decode_content",
    "decode_content_part",
    "Message",
    "MessageContent",
    "Role",
    "FunctionDescription",
    "FunctionToolChoice",
    "Tool",
    "ToolChoice",
    "ToolChoiceFunction",
    "ChatRequest",
    "ProviderPreferences",
    "ReasoningConfiguration",
    "ReasoningEffort",
    "ResponseFormat",
    "OutputTokensDetails",
    "Usage",
    "ChatResponse",
    "Choice",
    "ResponseMessage",
    "Delta",
    "DeltaChoice",
    "StreamingDelta",
    "DefaultParameters",
    "ModelArchitecture",
    "ModelInfo",
    "ModelsListResponse",
    "PerRequestLimits",
    "PublicPricing",
    "TopProviderInfo",
    "APIKey",
    "APIKeyLimitReset",
    "APIKeyListResponse",
    "APIKeyResponse",
    "CreateAPIKeyRequest",
    "CreateAPIKeyResponse",
    "CurrentAPIKey",
    "CurrentAPIKeyResponse",
    "DeleteAPIKeyResponse",
    "RateLimit",
    "UpdateAPIKeyRequest",
]
