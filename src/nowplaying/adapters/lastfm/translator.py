"""Translate Last.fm payloads into the now-playing projection."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from logging import getLogger
from typing import Any

from pydantic import ValidationError

from nowplaying.domain.model import NowPlaying

from .errors import MalformedResponseError
from .schema import IMAGE_SIZE_ORDER, ImageModel, TrackPayload

log = getLogger(__name__)

TrackPayloadInput = TrackPayload | Mapping[str, object]


def _ensure_track_payload(track: TrackPayloadInput) -> TrackPayload:
    if isinstance(track, TrackPayload):
        return track
    try:
        return TrackPayload.model_validate(track)
    except ValidationError as exc:
        raise MalformedResponseError(f"Unexpected Last.fm track entry: {exc}") from exc


def select_image(images: Sequence[ImageModel]) -> str:
    """Return the URL of the largest image, or ``""`` when none has a URL.

    Known sizes are ranked by ``IMAGE_SIZE_ORDER``; entries with an unknown size
    lose against any known size, and among equals the later entry wins.
    """

    best_url = ""
    best_rank = -2
    for image in images:
        if not image.url:
            continue
        rank = IMAGE_SIZE_ORDER.index(image.size) if image.size in IMAGE_SIZE_ORDER else -1
        if rank >= best_rank:
            best_url = image.url
            best_rank = rank
    return best_url


def first_recent_track(payload: object) -> Mapping[str, object]:
    """Return ``recenttracks.track[0]`` from a raw ``user.getrecenttracks`` payload."""

    if not isinstance(payload, Mapping):
        raise MalformedResponseError("Last.fm response is not a JSON object")
    recent = payload.get("recenttracks")
    if not isinstance(recent, Mapping):
        raise MalformedResponseError("Last.fm response has no 'recenttracks' object")

    tracks: Any = recent.get("track")
    # A lone track may be sent as an object instead of a one-element list.
    if isinstance(tracks, Mapping):
        tracks = [tracks]
    if not isinstance(tracks, list) or not tracks:
        raise MalformedResponseError("Last.fm response has no entries in 'recenttracks.track'")

    first = tracks[0]
    if not isinstance(first, Mapping):
        raise MalformedResponseError("Last.fm track entry is not a JSON object")
    return first


def parse_now_playing(track: TrackPayloadInput) -> NowPlaying:
    payload = _ensure_track_payload(track)
    return NowPlaying(
        artist=payload.artist.name,
        album=payload.album.title,
        title=payload.name,
        image=select_image(payload.image),
        date=payload.date.text if payload.date is not None else None,
    )


def project_now_playing(payload: object) -> NowPlaying:
    """Project a raw recent-tracks payload onto its first track."""

    now_playing = parse_now_playing(first_recent_track(payload))
    log.debug(
        "Projected %s - %s (%s)",
        now_playing.artist,
        now_playing.title,
        "now playing" if now_playing.is_now_playing else f"played {now_playing.date}",
    )
    return now_playing
