"""Unified configuration layer for the client.

Goals
-----
* Hold everything a client needs to address the API in one immutable value,
  :class:`ClientConfig`, that is never mutated after construction.
* Merge sources in a predictable order (later wins):
    1. Built-in defaults
    2. Optional external config file (JSON or YAML) pointed to by
       ``OPENROUTER_CLIENT_CONFIG_FILE``
    3. Environment variables (``OPENROUTER_API_KEY``, ``OPENROUTER_BASE_URL``,
       ``OPENROUTER_SITE_URL``, ``OPENROUTER_SITE_NAME``,
       ``OPENROUTER_TIMEOUT_SECONDS``)
    4. In-code overrides passed to ``load_client_config`` (``None`` ignored)

External Config File (Optional)
-------------------------------
JSON is attempted first, then YAML. Only the ``openrouter`` section is read:

```
openrouter:
  base_url: https://openrouter.ai/api/v1
  site_url: https://example.org
  site_name: My App
  timeout_seconds: 30
```

Public API
----------
* ClientConfig
* load_client_config(overrides: Mapping | None = None) -> ClientConfig
"""
from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import httpx
import yaml

from ..base.constants import DEFAULT_BASE_URL, MISSING_API_KEY_ERROR
from ..base.errors import ErrorKind, OpenRouterError
from ..base.logging import get_logger, log_event
from ..base.timeouts import get_timeout_config
from .defaults import CONFIG_FILE_ENV, CONFIG_FILE_SECTION, DEFAULTS
from .env import env_overrides, is_placeholder, parse_timeout

_logger = get_logger(__name__)

_FIELDS = ("api_key", "base_url", "site_url", "site_name", "timeout_seconds")


@dataclass(frozen=True)
class ClientConfig:
    """Immutable client settings.

    Attributes:
        api_key: Bearer credential; excluded from ``repr``.
        base_url: API root that endpoint paths are appended to.
        site_url: Optional referring site sent as ``HTTP-Referer``.
        site_name: Optional application name sent as ``X-Title``.
        timeout_seconds: Per-phase transport timeout. ``None`` defers to
            :func:`~openrouter_client.base.timeouts.get_timeout_config`.
    """

    api_key: str = field(repr=False)
    base_url: str = DEFAULT_BASE_URL
    site_url: Optional[str] = None
    site_name: Optional[str] = None
    timeout_seconds: Optional[float] = None

    def timeout(self) -> httpx.Timeout:
        if self.timeout_seconds is not None:
            return httpx.Timeout(self.timeout_seconds)
        return get_timeout_config().as_httpx()


def _load_external_config() -> Dict[str, Any]:
    """Return the ``openrouter`` section of the external config file, if any."""
    path = os.getenv(CONFIG_FILE_ENV)
    if not path:
        return {}
    p = Path(path).expanduser()
    if not p.is_file():
        log_event(_logger, "config.file_missing", path=str(p))
        return {}
    text = p.read_text(encoding="utf-8")
    try:
        data = json.loads(text)
    except ValueError:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            log_event(_logger, "config.file_invalid", path=str(p), error=str(exc))
            return {}
    section = data.get(CONFIG_FILE_SECTION) if isinstance(data, dict) else None
    if not isinstance(section, dict):
        return {}
    return {k: v for k, v in section.items() if k in _FIELDS and v is not None}


def load_client_config(overrides: Optional[Mapping[str, Any]] = None) -> ClientConfig:
    """Return the merged :class:`ClientConfig`.

    Merge order (later wins): defaults -> external config -> env vars -> overrides.

    Raises:
        OpenRouterError: kind ``INVALID_CREDENTIALS`` when no usable API key
            is found in any source.
    """
    cfg: Dict[str, Any] = dict(DEFAULTS)
    cfg |= _load_external_config()
    cfg |= env_overrides()
    if overrides:
        cfg |= {k: v for k, v in overrides.items() if k in _FIELDS and v is not None}

    api_key = cfg.get("api_key")
    if not api_key or not str(api_key).strip():
        raise OpenRouterError(kind=ErrorKind.INVALID_CREDENTIALS, message=MISSING_API_KEY_ERROR)
    if is_placeholder(api_key):
        log_event(_logger, "config.placeholder_api_key")

    return ClientConfig(
        api_key=str(api_key).strip(),
        base_url=str(cfg.get("base_url") or DEFAULT_BASE_URL),
        site_url=cfg.get("site_url"),
        site_name=cfg.get("site_name"),
        timeout_seconds=parse_timeout(cfg.get("timeout_seconds")),
    )


__all__ = [
    "ClientConfig",
    "load_client_config",
    "is_placeholder",
]
