"""HTTP client for the Last.fm ``user.*`` methods."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from contextlib import asynccontextmanager
from logging import getLogger
from typing import TYPE_CHECKING, Any

import httpx
from pydantic import ValidationError

from nowplaying.adapters.http_client import HttpClient
from nowplaying.config.lastfm import LastFmConfig, get_lastfm_config

from .callbacks import Callback, run_blocking
from .errors import LastFmAPIError, ParseError, TransportError
from .params import RequestParams
from .schema import ErrorResponse
from .translator import project_now_playing

if TYPE_CHECKING:
    from collections.abc import AsyncIterator
    from types import TracebackType

    from nowplaying.config.http import HttpClientConfig
    from nowplaying.domain.model import NowPlaying
    from nowplaying.domain.ports import NowPlayingSource

log = getLogger(__name__)

RECENT_TRACKS_METHOD = "user.getrecenttracks"
USER_INFO_METHOD = "user.getinfo"

RawResponse = Any
ParamsInput = RequestParams | Mapping[str, object] | str
ClientFactory = Callable[["HttpClientConfig"], HttpClient]


def _error_document(payload: object) -> ErrorResponse | None:
    if not isinstance(payload, dict) or "error" not in payload:
        return None
    try:
        return ErrorResponse.model_validate(payload)
    except ValidationError:
        return None


def _status_error(response: httpx.Response) -> TransportError:
    try:
        document = _error_document(response.json())
    except ValueError:
        document = None

    detail = document.message if document is not None else response.reason_phrase
    return TransportError(
        f"Last.fm returned HTTP {response.status_code}: {detail}",
        status_code=response.status_code,
        code=document.error if document is not None else None,
    )


class AsyncLastFmClient:
    """Coroutine interface to ``user.getRecentTracks`` and ``user.getInfo``.

    Every call issues exactly one GET. Used as an async context manager, all calls
    inside the block share one HTTP client; otherwise each call opens its own. An
    instance can be entered once at a time; :meth:`session` hands out independent
    clients for concurrent blocks.
    """

    def __init__(
        self,
        config: LastFmConfig | None = None,
        *,
        client_factory: ClientFactory | None = None,
    ) -> None:
        self.config = config or get_lastfm_config()
        self._client_factory = client_factory or HttpClient
        self._shared: HttpClient | None = None

    async def __aenter__(self) -> AsyncLastFmClient:
        if self._shared is not None:
            raise RuntimeError(
                "AsyncLastFmClient is already open; use session() for concurrent blocks"
            )
        self._shared = self._client_factory(self.config.http)
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        shared, self._shared = self._shared, None
        if shared is not None:
            await shared.aclose()

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncLastFmClient]:
        """Yield a separate client whose calls share one HTTP client until exit."""

        async with AsyncLastFmClient(self.config, client_factory=self._client_factory) as bound:
            yield bound

    async def recent_tracks(self, params: ParamsInput) -> RawResponse:
        request = RequestParams.coerce(params)
        return await self._call(self._build_query(RECENT_TRACKS_METHOD, request))

    async def now_playing(self, username_or_params: ParamsInput) -> NowPlaying:
        request = RequestParams.coerce(username_or_params).with_limit(1)
        payload = await self._call(self._build_query(RECENT_TRACKS_METHOD, request))
        return project_now_playing(payload)

    async def info(self, username: str) -> RawResponse:
        request = RequestParams.coerce(username)
        return await self._call(
            self._build_query(USER_INFO_METHOD, request, include_optional=False)
        )

    def _build_query(
        self,
        method: str,
        request: RequestParams,
        *,
        include_optional: bool = True,
    ) -> httpx.QueryParams:
        params: dict[str, str] = {
            "method": method,
            "user": request.username,
            "api_key": self.config.api_key,
            "format": "json",
        }
        if include_optional:
            params.update(request.optional_query())
        return httpx.QueryParams(params)

    async def _call(self, params: httpx.QueryParams) -> RawResponse:
        if self._shared is not None:
            return await self._perform_request(client=self._shared, params=params)
        async with self._client_factory(self.config.http) as client:
            return await self._perform_request(client=client, params=params)

    async def _perform_request(
        self,
        *,
        client: HttpClient,
        params: httpx.QueryParams,
    ) -> RawResponse:
        log.debug("%s: %s for user %s", self.config.http.name, params["method"], params["user"])
        try:
            response = await client.get(self.config.endpoint, params=params)
        except httpx.HTTPError as exc:
            raise TransportError(f"Last.fm request failed: {exc}") from exc

        if not response.is_success:
            raise _status_error(response)

        try:
            payload = response.json()
        except ValueError as exc:
            raise ParseError(f"Last.fm response is not valid JSON: {exc}") from exc

        document = _error_document(payload)
        if document is not None:
            log.error("Last.fm API error %s: %s", document.error, document.message)
            raise LastFmAPIError(document.message, code=document.error)

        return payload


class LastFmClient:
    """Blocking facade over :class:`AsyncLastFmClient`.

    Each method blocks until the HTTP exchange completes. Pass ``callback`` to
    receive ``(error, result)`` instead of a return value or raised exception.
    """

    def __init__(
        self,
        config: LastFmConfig | None = None,
        *,
        client_factory: ClientFactory | None = None,
    ) -> None:
        self._async_client = AsyncLastFmClient(config, client_factory=client_factory)

    @property
    def config(self) -> LastFmConfig:
        return self._async_client.config

    def recent_tracks(
        self,
        params: ParamsInput,
        callback: Callback[RawResponse] | None = None,
    ) -> RawResponse | None:
        return run_blocking(self._async_client.recent_tracks(params), callback)

    def now_playing(
        self,
        username_or_params: ParamsInput,
        callback: Callback[NowPlaying] | None = None,
    ) -> NowPlaying | None:
        return run_blocking(self._async_client.now_playing(username_or_params), callback)

    def info(
        self,
        username: str,
        callback: Callback[RawResponse] | None = None,
    ) -> RawResponse | None:
        return run_blocking(self._async_client.info(username), callback)

    def __call__(self, username: str) -> NowPlaying:
        return run_blocking(self._async_client.now_playing(username))


if TYPE_CHECKING:
    _source_check: NowPlayingSource = LastFmClient()
