"""Callback-style delivery on top of the coroutine API."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable, Coroutine
from logging import getLogger
from typing import Any, TypeAlias, TypeVar, overload

log = getLogger(__name__)

T = TypeVar("T")

Callback: TypeAlias = Callable[[Exception | None, T | None], None]


@overload
def run_blocking(operation: Coroutine[Any, Any, T], callback: None = None) -> T: ...


@overload
def run_blocking(operation: Coroutine[Any, Any, T], callback: Callback[T]) -> None: ...


@overload
def run_blocking(
    operation: Coroutine[Any, Any, T], callback: Callback[T] | None
) -> T | None: ...


def run_blocking(
    operation: Coroutine[Any, Any, T],
    callback: Callback[T] | None = None,
) -> T | None:
    """Run ``operation`` to completion on a fresh event loop.

    Without a callback the result is returned and errors are raised. With one, the
    outcome is passed to ``callback(error, result)`` and ``None`` is returned.
    """

    if callback is None:
        return asyncio.run(operation)
    try:
        result = asyncio.run(operation)
    except Exception as exc:  # noqa: BLE001
        callback(exc, None)
        return None
    callback(None, result)
    return None


def deliver(operation: Awaitable[T], callback: Callback[T]) -> asyncio.Future[T]:
    """Schedule ``operation`` on the running loop and report its outcome to ``callback``."""

    future = asyncio.ensure_future(operation)

    def _on_done(done: asyncio.Future[T]) -> None:
        if done.cancelled():
            log.debug("Operation cancelled before completion, callback skipped")
            return
        error = done.exception()
        if error is None:
            callback(None, done.result())
        elif isinstance(error, Exception):
            callback(error, None)

    future.add_done_callback(_on_done)
    return future
