"""
Model listing DTOs returned by ``/models`` and ``/models/user``.

Enumerated server values (tokenizer group, instruct type, modalities,
supported parameters) are kept as plain strings so that a newly introduced
value never breaks decoding of the whole listing.
"""
from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from .wire_model import WireModel


class PublicPricing(WireModel):
    """Per-unit prices, as decimal strings in USD."""

    prompt: str
    completion: str
    request: Optional[str] = None
    image: Optional[str] = None
    image_token: Optional[str] = None
    image_output: Optional[str] = None
    audio: Optional[str] = None
    input_audio_cache: Optional[str] = None
    web_search: Optional[str] = None
    internal_reasoning: Optional[str] = None
    input_cache_read: Optional[str] = None
    input_cache_write: Optional[str] = None
    discount: Optional[float] = None


class ModelArchitecture(WireModel):
    tokenizer: Optional[str] = None
    instruct_type: Optional[str] = None
    modality: Optional[str] = None
    input_modalities: List[str] = Field(default_factory=list)
    output_modalities: List[str] = Field(default_factory=list)


class TopProviderInfo(WireModel):
    context_length: Optional[int] = None
    max_completion_tokens: Optional[int] = None
    is_moderated: bool


class PerRequestLimits(WireModel):
    prompt_tokens: int
    completion_tokens: int


class DefaultParameters(WireModel):
    temperature: Optional[float] = None
    top_p: Optional[float] = None
    frequency_penalty: Optional[float] = None


class ModelInfo(WireModel):
    """A single model listing entry.

    Attributes:
        id: Stable model identifier used in ``ChatRequest.model``.
        canonical_slug: Permanent slug for the model version.
        name: Human-friendly display name.
        created: Unix timestamp of when the model was added.
        pricing: Per-unit pricing.
        context_length: Maximum context window, when known.
        supported_parameters: Request parameters the model honours.
    """

    id: str
    canonical_slug: str
    hugging_face_id: Optional[str] = None
    name: str
    created: int
    description: Optional[str] = None
    pricing: PublicPricing
    context_length: Optional[int] = None
    architecture: ModelArchitecture
    top_provider: TopProviderInfo
    per_request_limits: Optional[PerRequestLimits] = None
    supported_parameters: List[str] = Field(default_factory=list)
    default_parameters: Optional[DefaultParameters] = None


class ModelsListResponse(WireModel):
    data: List[ModelInfo]


__all__ = [
    "PublicPricing",
    "ModelArchitecture",
    "TopProviderInfo",
    "PerRequestLimits",
    "DefaultParameters",
    "ModelInfo",
    "ModelsListResponse",
]
