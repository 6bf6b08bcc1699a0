"""Domain records derived from Last.fm payloads."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class NowPlaying:
    """The currently playing or most recently played track of a user.

    ``date`` is only set for a finished scrobble; Last.fm omits it for the track
    that is playing right now.
    """

    artist: str
    album: str
    title: str
    image: str
    date: str | None = None

    @property
    def is_now_playing(self) -> bool:
        return self.date is None

    def to_dict(self) -> dict[str, str]:
        data = {
            "artist": self.artist,
            "album": self.album,
            "title": self.title,
            "image": self.image,
        }
        if self.date is not None:
            data["date"] = self.date
        return data
