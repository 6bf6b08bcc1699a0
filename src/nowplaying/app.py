"""Application orchestration entry points."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from nowplaying.adapters.lastfm import LastFmClient, RequestParams

if TYPE_CHECKING:
    from nowplaying.adapters.lastfm import RawResponse
    from nowplaying.domain.model import NowPlaying
    from nowplaying.domain.ports import NowPlayingSource


log = getLogger(__name__)


def fetch_now_playing(
    username: str,
    *,
    source: NowPlayingSource | None = None,
) -> NowPlaying:
    """Return the current or last played track of ``username``."""

    effective_source = source or LastFmClient()
    log.info("Fetching now playing for %s", username)
    now_playing = effective_source(username)
    log.info(
        "%s: %s - %s%s",
        username,
        now_playing.artist,
        now_playing.title,
        "" if now_playing.is_now_playing else f" (last played {now_playing.date})",
    )
    return now_playing


def fetch_recent_tracks(
    username: str,
    *,
    limit: int | None = None,
    client: LastFmClient | None = None,
) -> RawResponse:
    effective_client = client or LastFmClient()
    log.info("Fetching recent tracks for %s: limit=%s", username, limit)
    return effective_client.recent_tracks(RequestParams(username=username, limit=limit))


def fetch_user_info(username: str, *, client: LastFmClient | None = None) -> RawResponse:
    effective_client = client or LastFmClient()
    log.info("Fetching user info for %s", username)
    return effective_client.info(username)


def format_now_playing(now_playing: NowPlaying) -> str:
    line = f"{now_playing.artist} - {now_playing.title}"
    if now_playing.album:
        line += f" [{now_playing.album}]"
    if now_playing.is_now_playing:
        return f"{line} (now playing)"
    return f"{line} (last played {now_playing.date})"
