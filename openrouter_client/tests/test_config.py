"""Configuration merge precedence and timeout parsing."""

from __future__ import annotations

import json

import httpx
import pytest

from openrouter_client.base.constants import DEFAULT_BASE_URL, DEFAULT_HTTP_TIMEOUT
from openrouter_client.base.errors import ErrorKind, OpenRouterError
from openrouter_client.base.timeouts import get_timeout_config
from openrouter_client.config import ClientConfig, load_client_config
from openrouter_client.config.env import env_overrides, is_placeholder, parse_timeout


def test_is_placeholder_heuristics():
    assert is_placeholder("placeholder-value")
    assert is_placeholder("ChangeMe123")
    assert is_placeholder("example-key")
    assert is_placeholder("test_token")
    assert not is_placeholder("sk-or-v1-real")
    assert not is_placeholder(None)


def test_defaults_with_explicit_key():
    cfg = load_client_config({"api_key": "sk-or-v1-a"})
    assert cfg == ClientConfig(api_key="sk-or-v1-a")
    assert cfg.base_url == DEFAULT_BASE_URL


def test_missing_key_raises_invalid_credentials():
    with pytest.raises(OpenRouterError) as info:
        load_client_config()
    assert info.value.kind is ErrorKind.INVALID_CREDENTIALS


def test_placeholder_env_key_is_ignored(monkeypatch):
    monkeypatch.setenv("OPENROUTER_API_KEY", "your-key-placeholder")
    with pytest.raises(OpenRouterError):
        load_client_config()


def test_env_overrides_collects_fields(monkeypatch):
    monkeypatch.setenv("OPENROUTER_API_KEY", "sk-or-v1-env")
    monkeypatch.setenv("OPENROUTER_SITE_NAME", "  Env App ")
    monkeypatch.setenv("OPENROUTER_TIMEOUT_SECONDS", "abc")
    monkeypatch.setenv("OPENROUTER_BASE_URL", "")
    assert env_overrides() == {"api_key": "sk-or-v1-env", "site_name": "Env App"}


def test_precedence_file_then_env_then_overrides(monkeypatch, tmp_path):
    path = tmp_path / "client.json"
    path.write_text(
        json.dumps(
            {
                "openrouter": {
                    "api_key": "sk-or-v1-file",
                    "base_url": "https://file.example/api/v1",
                    "site_name": "File App",
                    "timeout_seconds": 12,
                },
                "other": {"api_key": "ignored"},
            }
        ),
        encoding="utf-8",
    )
    monkeypatch.setenv("OPENROUTER_CLIENT_CONFIG_FILE", str(path))
    cfg = load_client_config()
    assert cfg.api_key == "sk-or-v1-file"
    assert cfg.base_url == "https://file.example/api/v1"
    assert cfg.timeout_seconds == 12.0

    monkeypatch.setenv("OPENROUTER_API_KEY", "sk-or-v1-env")
    monkeypatch.setenv("OPENROUTER_SITE_NAME", "Env App")
    cfg = load_client_config()
    assert (cfg.api_key, cfg.site_name, cfg.base_url) == ("sk-or-v1-env", "Env App", "https://file.example/api/v1")

    cfg = load_client_config({"api_key": "sk-or-v1-arg", "site_name": None, "site_url": "https://arg.example"})
    assert (cfg.api_key, cfg.site_name, cfg.site_url) == ("sk-or-v1-arg", "Env App", "https://arg.example")


def test_yaml_config_file(monkeypatch, tmp_path):
    path = tmp_path / "client.yaml"
    path.write_text(
        "openrouter:\n  api_key: sk-or-v1-yaml\n  site_url: https://yaml.example\n  unknown_field: 1\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("OPENROUTER_CLIENT_CONFIG_FILE", str(path))
    cfg = load_client_config()
    assert cfg.api_key == "sk-or-v1-yaml"
    assert cfg.site_url == "https://yaml.example"


def test_missing_or_invalid_config_file_is_ignored(monkeypatch, tmp_path):
    monkeypatch.setenv("OPENROUTER_CLIENT_CONFIG_FILE", str(tmp_path / "absent.json"))
    assert load_client_config({"api_key": "sk-or-v1-a"}).base_url == DEFAULT_BASE_URL

    bad = tmp_path / "bad.yaml"
    bad.write_text("openrouter: [unclosed\n", encoding="utf-8")
    monkeypatch.setenv("OPENROUTER_CLIENT_CONFIG_FILE", str(bad))
    assert load_client_config({"api_key": "sk-or-v1-a"}).base_url == DEFAULT_BASE_URL


def test_config_is_frozen():
    cfg = ClientConfig(api_key="sk-or-v1-a")
    with pytest.raises(AttributeError):
        cfg.base_url = "https://other.example"


@pytest.mark.parametrize("value, expected", [("30", 30.0), (5, 5.0), ("0", None), ("-1", None), ("x", None), (None, None), (True, None)])
def test_parse_timeout(value, expected):
    assert parse_timeout(value) == expected


def test_timeout_config_env_and_cache_refresh(monkeypatch):
    assert get_timeout_config().http_timeout_seconds == DEFAULT_HTTP_TIMEOUT
    assert get_timeout_config() is get_timeout_config()
    monkeypatch.setenv("OPENROUTER_HTTP_TIMEOUT_SECONDS", "15")
    assert get_timeout_config().http_timeout_seconds == 15.0
    assert ClientConfig(api_key="k").timeout() == httpx.Timeout(15.0)
    assert ClientConfig(api_key="k", timeout_seconds=3).timeout() == httpx.Timeout(3)
