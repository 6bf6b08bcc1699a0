"""Errors raised by the Last.fm client."""

from __future__ import annotations


class LastFmError(RuntimeError):
    """Base class for every failure surfaced by the Last.fm client."""


class InvalidParameterError(LastFmError, ValueError):
    """Raised before any network call when request parameters are unusable."""


class TransportError(LastFmError):
    """Raised when the HTTP exchange fails or returns a non-success status."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.code = code


class ParseError(LastFmError):
    """Raised when the response body is not valid JSON."""


class MalformedResponseError(LastFmError):
    """Raised when valid JSON lacks the fields needed for a projection."""


class LastFmAPIError(LastFmError):
    """Raised when the Last.fm API returns an application-level error."""

    def __init__(self, message: str, *, code: int | None = None) -> None:
        super().__init__(message)
        self.code = code
