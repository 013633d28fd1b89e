"""openrouter_client.config.env
============================

Environment variable mapping for the client configuration.

Purpose
-------
- Single source of truth for which environment variable feeds which
  :class:`~openrouter_client.config.ClientConfig` field.
- Placeholder detection so that template ``.env`` files never leak a fake
  credential into real requests.

Failure Modes
-------------
- Helpers never raise on unset or malformed variables; unusable values are
  simply left out of the returned mapping.
"""

from __future__ import annotations

import os
from typing import Any, Dict, Optional

# ClientConfig field → environment variable
ENV_MAP: Dict[str, str] = {
    "api_key": "OPENROUTER_API_KEY",  # pragma: allowlist secret - env var name, not a secret
    "base_url": "OPENROUTER_BASE_URL",
    "site_url": "OPENROUTER_SITE_URL",
    "site_name": "OPENROUTER_SITE_NAME",
    "timeout_seconds": "OPENROUTER_TIMEOUT_SECONDS",
}


def is_placeholder(val: Optional[str]) -> bool:
    """Return True if the provided string looks like a placeholder/test value.

    Heuristics: contains 'placeholder', 'changeme', 'example', or starts with
    'test_'. The check is case-insensitive and resilient to surrounding spaces.
    """
    if val is None:
        return False
    v = str(val).strip().lower()
    return (
        "placeholder" in v
        or "changeme" in v
        or "example" in v
        or v.startswith("test_")
    )


def parse_timeout(value: Any) -> Optional[float]:
    """Coerce ``value`` into a positive float, or ``None`` when it is not one."""
    if value is None or isinstance(value, bool):
        return None
    try:
        seconds = float(value)
    except (TypeError, ValueError):
        return None
    return seconds if seconds > 0 else None


def env_overrides() -> Dict[str, Any]:
    """Return the configuration fields set through the environment.

    Empty variables are skipped, placeholder API keys are ignored and an
    unparseable timeout is dropped.
    """
    out: Dict[str, Any] = {}
    for field, name in ENV_MAP.items():
        raw = os.getenv(name)
        if raw is None or not raw.strip():
            continue
        raw = raw.strip()
        if field == "api_key" and is_placeholder(raw):
            continue
        if field == "timeout_seconds":
            seconds = parse_timeout(raw)
            if seconds is not None:
                out[field] = seconds
            continue
        out[field] = raw
    return out


__all__ = [
    "ENV_MAP",
    "is_placeholder",
    "parse_timeout",
    "env_overrides",
]
