"""Public interface for the Last.fm adapter."""

from __future__ import annotations

from .callbacks import Callback, deliver, run_blocking
from .client import AsyncLastFmClient, LastFmClient, RawResponse
from .errors import (
    InvalidParameterError,
    LastFmAPIError,
    LastFmError,
    MalformedResponseError,
    ParseError,
    TransportError,
)
from .params import RequestParams
from .schema import TrackPayload
from .translator import parse_now_playing, project_now_playing, select_image

__all__ = [
    "AsyncLastFmClient",
    "Callback",
    "InvalidParameterError",
    "LastFmAPIError",
    "LastFmClient",
    "LastFmError",
    "MalformedResponseError",
    "ParseError",
    "RawResponse",
    "RequestParams",
    "TrackPayload",
    "TransportError",
    "deliver",
    "parse_now_playing",
    "project_now_playing",
    "run_blocking",
    "select_image",
]
