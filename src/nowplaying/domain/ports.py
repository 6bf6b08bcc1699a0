"""Ports for fetching listening data from an external provider."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .model import NowPlaying


@runtime_checkable
class NowPlayingSource(Protocol):
    """Callable port returning the latest track of a user."""

    def __call__(self, username: str) -> NowPlaying: ...


__all__ = ["NowPlayingSource"]
