"""Application configuration helpers."""

from __future__ import annotations

from .env import optional_env_var, optional_float_env_var, require_env_var, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .http import DEFAULT_TIMEOUT_SECONDS, HttpClientConfig
from .lastfm import LASTFM_BASE_URL, LastFmConfig, get_lastfm_config
from .logging import configure_logging

__all__ = [
    "DEFAULT_TIMEOUT_SECONDS",
    "LASTFM_BASE_URL",
    "ConfigurationError",
    "HttpClientConfig",
    "LastFmConfig",
    "MissingConfigurationError",
    "configure_logging",
    "get_lastfm_config",
    "optional_env_var",
    "optional_float_env_var",
    "require_env_var",
    "require_env_vars",
]
