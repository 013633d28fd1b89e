"""Models parts package public surface.

Re-exports individual DTOs so callers can import from
`openrouter_client.base.models_parts` if needed, while
`openrouter_client.base.models` remains the primary stable import path.
"""

from .wire_model import WireModel
from .content_part import ContentPart, ImageContent, ImageUrl, TextContent
from .codec import decode_content, decode_content_part
from .message import Message, MessageContent, Role
from .tool import FunctionDescription, FunctionToolChoice, Tool, ToolChoice, ToolChoiceFunction
from .chat_request import (
    ChatRequest,
    ProviderPreferences,
    ReasoningConfiguration,
    ReasoningEffort,
    ResponseFormat,
)
from .usage import OutputTokensDetails, Usage
from .chat_response import ChatResponse, Choice, ResponseMessage
from .streaming_delta import Delta, DeltaChoice, StreamingDelta
from .model_info import (
    DefaultParameters,
    ModelArchitecture,
    ModelInfo,
    ModelsListResponse,
    PerRequestLimits,
    PublicPricing,
    TopProviderInfo,
)
from .api_keys import (
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
