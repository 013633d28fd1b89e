"""
API key management DTOs for the ``/keys`` and ``/key`` endpoints.

Timestamps are ISO-8601 strings with or without fractional seconds. Decoding
is lenient where the server is known to be loose: an unrecognised
``limit_reset`` becomes ``None`` and an unparseable optional timestamp
becomes ``None``. ``created_at`` stays strict.

Serialization mirrors the server contract: the optional date fields of
``APIKey``, ``CurrentAPIKey`` and ``CreateAPIKeyRequest`` are always present,
as ``null`` when unset. ``UpdateAPIKeyRequest`` omits unset fields so that a
partial update never clears a value by accident.
"""
from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Annotated, Any, ClassVar, List, Optional, Tuple

from pydantic import BeforeValidator, TypeAdapter, ValidationError

from .wire_model import WireModel

_DATETIME = TypeAdapter(datetime)


class APIKeyLimitReset(str, Enum):
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"


def _lenient_limit_reset(value: Any) -> Any:
    if value is None or isinstance(value, APIKeyLimitReset):
        return value
    try:
        return APIKeyLimitReset(value)
    except ValueError:
        return None


def _lenient_datetime(value: Any) -> Any:
    if value is None or isinstance(value, datetime):
        return value
    try:
        return _DATETIME.validate_python(value)
    except ValidationError:
        return None


LenientLimitReset = Annotated[Optional[APIKeyLimitReset], BeforeValidator(_lenient_limit_reset)]
LenientDatetime = Annotated[Optional[datetime], BeforeValidator(_lenient_datetime)]


class _UsageFields(WireModel):
    """Credit usage counters (USD) shared by key representations."""

    usage: float
    usage_daily: float
    usage_weekly: float
    usage_monthly: float
    byok_usage: float
    byok_usage_daily: float
    byok_usage_weekly: float
    byok_usage_monthly: float


class APIKey(_UsageFields):
    """An API key as returned by the key management endpoints."""

    always_emit: ClassVar[Tuple[str, ...]] = ("updated_at", "expires_at")

    hash: str
    name: str
    label: str
    disabled: bool
    limit: Optional[float] = None
    limit_remaining: Optional[float] = None
    limit_reset: LenientLimitReset = None
    include_byok_in_limit: bool
    created_at: datetime
    updated_at: LenientDatetime = None
    expires_at: LenientDatetime = None


class RateLimit(WireModel):
    """Legacy rate limit information (the server reports ``-1`` requests)."""

    requests: float
    interval: str
    note: str


class CurrentAPIKey(_UsageFields):
    """Information about the key used to authenticate the current request."""

    always_emit: ClassVar[Tuple[str, ...]] = ("expires_at",)

    label: str
    limit: Optional[float] = None
    is_free_tier: bool
    is_provisioning_key: bool
    limit_remaining: Optional[float] = None
    limit_reset: LenientLimitReset = None
    include_byok_in_limit: bool
    expires_at: LenientDatetime = None
    rate_limit: RateLimit


class CreateAPIKeyRequest(WireModel):
    """Body for creating an API key."""

    always_emit: ClassVar[Tuple[str, ...]] = ("expires_at",)

    name: str
    limit: Optional[float] = None
    limit_reset: Optional[APIKeyLimitReset] = None
    include_byok_in_limit: Optional[bool] = None
    expires_at: Optional[datetime] = None


class UpdateAPIKeyRequest(WireModel):
    """Body for updating an API key; unset fields are left unchanged."""

    name: Optional[str] = None
    disabled: Optional[bool] = None
    limit: Optional[float] = None
    limit_reset: Optional[APIKeyLimitReset] = None
    include_byok_in_limit: Optional[bool] = None


class APIKeyListResponse(WireModel):
    data: List[APIKey]


class APIKeyResponse(WireModel):
    data: APIKey


class CreateAPIKeyResponse(WireModel):
    """Created key; ``key`` holds the secret and is only returned once."""

    data: APIKey
    key: str


class CurrentAPIKeyResponse(WireModel):
    data: CurrentAPIKey


class DeleteAPIKeyResponse(WireModel):
    deleted: bool


__all__ = [
    "APIKeyLimitReset",
    "APIKey",
    "RateLimit",
    "CurrentAPIKey",
    "CreateAPIKeyRequest",
    "UpdateAPIKeyRequest",
    "APIKeyListResponse",
    "APIKeyResponse",
    "CreateAPIKeyResponse",
    "CurrentAPIKeyResponse",
    "DeleteAPIKeyResponse",
]
