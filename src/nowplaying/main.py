#!/usr/bin/env python3

# ruff: noqa: T201

from __future__ import annotations

import argparse
import json
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from nowplaying.adapters.lastfm import InvalidParameterError, LastFmError
from nowplaying.app import (
    fetch_now_playing,
    fetch_recent_tracks,
    fetch_user_info,
    format_now_playing,
)
from nowplaying.config import ConfigurationError, configure_logging

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"not an integer: {value}") from exc
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1: {value}")
    return number


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Show what a Last.fm user is listening to")
    parser.add_argument("username", help="Last.fm user name")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--info",
        action="store_true",
        help="Print the raw user.getInfo response instead",
    )
    mode.add_argument(
        "--recent",
        type=_positive_int,
        metavar="N",
        help="Print the raw user.getRecentTracks response for the last N tracks",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args(list(argv))


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    parsed_args = _parse_args(sys.argv[1:] if argv is None else argv)
    configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.WARNING)

    try:
        if parsed_args.info:
            print(json.dumps(fetch_user_info(parsed_args.username), indent=2))
        elif parsed_args.recent is not None:
            payload = fetch_recent_tracks(parsed_args.username, limit=parsed_args.recent)
            print(json.dumps(payload, indent=2))
        else:
            print(format_now_playing(fetch_now_playing(parsed_args.username)))
    except InvalidParameterError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(2)
    except (LastFmError, ConfigurationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    print("\nClosed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
