"""Last.fm configuration values."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .env import optional_env_var, optional_float_env_var, require_env_vars
from .http import DEFAULT_TIMEOUT_SECONDS, HttpClientConfig

if TYPE_CHECKING:
    import httpx

LASTFM_BASE_URL = "http://ws.audioscrobbler.com/2.0"
LASTFM_USER_AGENT = "lastfm-nowplaying"


def _default_http_config() -> HttpClientConfig:
    return HttpClientConfig(name="lastfm", default_headers={"User-Agent": LASTFM_USER_AGENT})


@dataclass(frozen=True)
class LastFmConfig:
    """Holds Last.fm API configuration values."""

    api_key: str
    base_url: str = LASTFM_BASE_URL
    http: HttpClientConfig = field(default_factory=_default_http_config)

    @property
    def endpoint(self) -> str:
        return self.base_url.rstrip("/") + "/"


def get_lastfm_config(
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> LastFmConfig:
    values = require_env_vars(("LASTFM_API_KEY",))
    base_url = optional_env_var("LASTFM_BASE_URL") or LASTFM_BASE_URL
    timeout = optional_float_env_var("LASTFM_TIMEOUT_SECONDS") or DEFAULT_TIMEOUT_SECONDS
    return LastFmConfig(
        api_key=values["LASTFM_API_KEY"],
        base_url=base_url,
        http=HttpClientConfig(
            name="lastfm",
            timeout_seconds=timeout,
            default_headers={"User-Agent": LASTFM_USER_AGENT},
            transport=transport,
        ),
    )
