"""Pytest configuration for the client test suite.

- Clears every ``OPENROUTER_*`` variable so host settings never leak into a
  test.
- Provides a client factory wired to ``httpx.MockTransport`` and a fixture
  capturing structured log events from the shared logger.
"""

from __future__ import annotations

import io
import json
import logging
from typing import Any, Callable, Dict, Iterator, List

import httpx
import pytest

from openrouter_client import OpenRouterClient
from openrouter_client.base.log_support import JsonFormatter
from openrouter_client.base.logging import get_logger
from openrouter_client.config.defaults import CONFIG_FILE_ENV
from openrouter_client.config.env import ENV_MAP

from .helpers import API_KEY

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove client settings inherited from the host environment."""

    for name in (*ENV_MAP.values(), CONFIG_FILE_ENV, "OPENROUTER_HTTP_TIMEOUT_SECONDS"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture()
def make_client() -> Callable[..., OpenRouterClient]:
    """Return a factory building clients whose requests go to ``handler``."""

    def _make(handler: Handler, **kwargs: Any) -> OpenRouterClient:
        kwargs.setdefault("api_key", API_KEY)
        return OpenRouterClient(transport=httpx.MockTransport(handler), **kwargs)

    return _make


@pytest.fixture()
def log_events() -> Iterator[Callable[[], List[Dict[str, Any]]]]:
    """Capture events from the shared logger at DEBUG; yields a reader."""

    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(JsonFormatter())
    logger = get_logger()
    previous = logger.level
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)

    def _read() -> List[Dict[str, Any]]:
        return [json.loads(line) for line in stream.getvalue().splitlines() if line.strip()]

    yield _read
    logger.removeHandler(handler)
    logger.setLevel(previous)
