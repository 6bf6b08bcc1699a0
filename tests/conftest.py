from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from tests.helpers.transport import SpyTransport, json_response, make_config

if TYPE_CHECKING:
    from nowplaying.config.lastfm import LastFmConfig


@pytest.fixture(autouse=True)
def _isolated_lastfm_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("LASTFM_API_KEY", "LASTFM_BASE_URL", "LASTFM_TIMEOUT_SECONDS"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(scope="session")
def recent_tracks_document() -> dict[str, object]:
    path = Path(__file__).resolve().parent / "data" / "lastfm_recent_tracks.json"
    with path.open() as handle:
        return json.load(handle)


@pytest.fixture
def recent_tracks_transport(recent_tracks_document: dict[str, object]) -> SpyTransport:
    return SpyTransport(json_response(recent_tracks_document))


@pytest.fixture
def recent_tracks_config(recent_tracks_transport: SpyTransport) -> LastFmConfig:
    return make_config(recent_tracks_transport)
