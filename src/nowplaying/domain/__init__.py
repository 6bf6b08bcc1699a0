from __future__ import annotations

from .model import NowPlaying
from .ports import NowPlayingSource

__all__ = ["NowPlaying", "NowPlayingSource"]
