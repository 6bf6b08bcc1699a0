from __future__ import annotations

import pytest

from nowplaying.config import (
    DEFAULT_TIMEOUT_SECONDS,
    LASTFM_BASE_URL,
    ConfigurationError,
    LastFmConfig,
    MissingConfigurationError,
    get_lastfm_config,
)
from tests.helpers.transport import SpyTransport, json_response


def test_get_lastfm_config_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LASTFM_API_KEY", "env-key")

    config = get_lastfm_config()

    assert config.api_key == "env-key"
    assert config.base_url == LASTFM_BASE_URL == "http://ws.audioscrobbler.com/2.0"
    assert config.endpoint == "http://ws.audioscrobbler.com/2.0/"
    assert config.http.timeout_seconds == DEFAULT_TIMEOUT_SECONDS
    assert config.http.transport is None
    assert config.http.default_headers is not None
    assert "User-Agent" in config.http.default_headers


def test_get_lastfm_config_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LASTFM_API_KEY", "env-key")
    monkeypatch.setenv("LASTFM_BASE_URL", "https://proxy.test/lastfm/")
    monkeypatch.setenv("LASTFM_TIMEOUT_SECONDS", "3")
    transport = SpyTransport(json_response({}))

    config = get_lastfm_config(transport=transport)

    assert config.endpoint == "https://proxy.test/lastfm/"
    assert config.http.timeout_seconds == 3.0
    assert config.http.transport is transport


def test_get_lastfm_config_requires_api_key() -> None:
    with pytest.raises(MissingConfigurationError, match="LASTFM_API_KEY"):
        get_lastfm_config()


def test_get_lastfm_config_rejects_invalid_timeout(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LASTFM_API_KEY", "env-key")
    monkeypatch.setenv("LASTFM_TIMEOUT_SECONDS", "never")

    with pytest.raises(ConfigurationError):
        get_lastfm_config()


def test_lastfm_config_is_immutable() -> None:
    config = LastFmConfig(api_key="demo")

    with pytest.raises(AttributeError):
        config.api_key = "other"  # type: ignore[misc]
