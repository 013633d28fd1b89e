"""API key DTO decoding leniency and explicit-null serialization."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from openrouter_client.base.models import (
    APIKey,
    APIKeyLimitReset,
    CreateAPIKeyRequest,
    UpdateAPIKeyRequest,
)

from .helpers import api_key_payload


def test_timestamps_with_and_without_fractional_seconds():
    key = APIKey.model_validate(api_key_payload())
    assert key.created_at == datetime(2025, 8, 24, 10, 30, tzinfo=timezone.utc)
    assert key.updated_at == datetime(2025, 8, 24, 15, 45, 0, 123000, tzinfo=timezone.utc)
    assert key.expires_at is None


def test_unknown_limit_reset_decodes_to_none():
    key = APIKey.model_validate(api_key_payload(limit_reset="fortnightly"))
    assert key.limit_reset is None
    assert APIKey.model_validate(api_key_payload(limit_reset="daily")).limit_reset is APIKeyLimitReset.DAILY


def test_unparseable_optional_timestamp_decodes_to_none():
    key = APIKey.model_validate(api_key_payload(updated_at="yesterday", expires_at="soon"))
    assert key.updated_at is None
    assert key.expires_at is None


def test_unparseable_created_at_fails():
    with pytest.raises(ValidationError):
        APIKey.model_validate(api_key_payload(created_at="not-a-date"))


def test_api_key_always_emits_optional_dates():
    key = APIKey.model_validate(api_key_payload(updated_at=None, expires_at=None, limit=None))
    wire = key.to_wire()
    assert wire["updated_at"] is None
    assert wire["expires_at"] is None
    assert "limit" not in wire
    assert wire["limit_reset"] == "monthly"


def test_create_request_always_emits_expires_at():
    assert CreateAPIKeyRequest(name="ci").to_wire() == {"name": "ci", "expires_at": None}
    expiring = CreateAPIKeyRequest(
        name="ci",
        limit_reset=APIKeyLimitReset.WEEKLY,
        expires_at=datetime(2026, 1, 1, tzinfo=timezone.utc),
    ).to_wire()
    assert expiring["limit_reset"] == "weekly"
    assert expiring["expires_at"].startswith("2026-01-01T00:00:00")


def test_update_request_omits_absent_fields():
    assert UpdateAPIKeyRequest().to_wire() == {}
    assert UpdateAPIKeyRequest(name="renamed", include_byok_in_limit=True).to_wire() == {
        "name": "renamed",
        "include_byok_in_limit": True,
    }
