from __future__ import annotations

import logging

import pytest

from nowplaying.config import configure_logging
from nowplaying.config.logging import LOG_FORMAT


@pytest.fixture
def basic_config_calls(monkeypatch: pytest.MonkeyPatch) -> list[dict[str, object]]:
    calls: list[dict[str, object]] = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    return calls


def test_configure_logging_defaults_to_warning(
    basic_config_calls: list[dict[str, object]],
) -> None:
    configure_logging()

    assert basic_config_calls == [
        {"level": logging.WARNING, "format": LOG_FORMAT, "datefmt": "%H:%M:%S", "force": False}
    ]


def test_configure_logging_passes_level_and_force(
    basic_config_calls: list[dict[str, object]],
) -> None:
    configure_logging(level=logging.DEBUG, force=True)

    assert basic_config_calls[0]["level"] == logging.DEBUG
    assert basic_config_calls[0]["force"] is True
