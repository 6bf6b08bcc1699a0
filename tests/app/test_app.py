from __future__ import annotations

from nowplaying.adapters.lastfm import LastFmClient
from nowplaying.app import (
    fetch_now_playing,
    fetch_recent_tracks,
    fetch_user_info,
    format_now_playing,
)
from nowplaying.domain.model import NowPlaying
from tests.helpers.transport import SpyTransport, json_response, make_config


class FakeNowPlayingSource:
    def __init__(self, now_playing: NowPlaying) -> None:
        self.now_playing = now_playing
        self.calls: list[str] = []

    def __call__(self, username: str) -> NowPlaying:
        self.calls.append(username)
        return self.now_playing


def test_fetch_now_playing_uses_given_source() -> None:
    expected = NowPlaying(artist="Gorillaz", album="Plastic Beach", title="Stylo", image="")
    source = FakeNowPlayingSource(expected)

    result = fetch_now_playing("alice", source=source)

    assert result is expected
    assert source.calls == ["alice"]


def test_fetch_now_playing_accepts_lastfm_client(
    recent_tracks_transport: SpyTransport,
) -> None:
    client = LastFmClient(make_config(recent_tracks_transport))

    result = fetch_now_playing("alice", source=client)

    assert result.title == "Stylo"
    assert recent_tracks_transport.requests[0].url.params["limit"] == "1"


def test_fetch_recent_tracks_passes_limit() -> None:
    transport = SpyTransport(json_response({"recenttracks": {"track": []}}))

    result = fetch_recent_tracks("alice", limit=5, client=LastFmClient(make_config(transport)))

    assert result == {"recenttracks": {"track": []}}
    assert transport.requests[0].url.params["limit"] == "5"


def test_fetch_user_info_returns_raw_payload() -> None:
    transport = SpyTransport(json_response({"user": {"name": "alice"}}))

    result = fetch_user_info("alice", client=LastFmClient(make_config(transport)))

    assert result == {"user": {"name": "alice"}}
    assert transport.requests[0].url.params["method"] == "user.getinfo"


def test_format_now_playing() -> None:
    current = NowPlaying(artist="Gorillaz", album="Plastic Beach", title="Stylo", image="")
    previous = NowPlaying(
        artist="Gorillaz", album="", title="Stylo", image="", date="01 Jan 2020, 00:00"
    )

    assert format_now_playing(current) == "Gorillaz - Stylo [Plastic Beach] (now playing)"
    assert format_now_playing(previous) == "Gorillaz - Stylo (last played 01 Jan 2020, 00:00)"
