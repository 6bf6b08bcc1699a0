"""Errors raised while loading settings from the environment."""

from __future__ import annotations


class ConfigurationError(RuntimeError):
    """A setting such as ``LASTFM_TIMEOUT_SECONDS`` holds an unusable value."""


class MissingConfigurationError(ConfigurationError):
    """A required setting such as ``LASTFM_API_KEY`` is unset or blank."""
