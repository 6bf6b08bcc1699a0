"""Root logger setup for the command line entry point."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(*, level: int = logging.WARNING, force: bool = False) -> None:
    """Configure the root logger through ``logging.basicConfig``.

    The CLI stays quiet at WARNING unless ``--verbose`` asks for DEBUG, which
    shows each Last.fm request. ``force=True`` replaces handlers installed earlier.
    """

    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt="%H:%M:%S", force=force)
