"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Module: memo/memoizer.py.
"""

from __future__ import annotations

import asyncio
import functools
import inspect
import logging
from collections.abc import Awaitable, Callable, Hashable
from typing import Any, Generic, TypeVar

from .types import MemoEntry, MissingCacheKeyError, Pending, Resolved

V = TypeVar("V")

logger = logging.getLogger("typesync.memo")


class AsyncMemoizer(Generic[V]):
    """
    Share one call of `fn` between every caller with the same first argument.

    Successful results are kept for the lifetime of the memoizer. A failed
    attempt is evicted before its error reaches the callers, so the next call
    for that key starts fresh.
    """

    def __init__(self, fn: Callable[..., Awaitable[V]]) -> None:
        functools.update_wrapper(self, fn)
        # inspect.markcoroutinefunction is 3.12+; older interpreters report False.
        if hasattr(inspect, "markcoroutinefunction"):
            inspect.markcoroutinefunction(self)
        self._fn = fn
        self._entries: dict[Hashable, MemoEntry[V]] = {}

    async def __call__(self, *args: Any, **kwargs: Any) -> V:
        if not args:
            raise MissingCacheKeyError(
                f"{_name_of(self._fn)}() needs a positional argument to key the cache"
            )
        key = args[0]

        # No await between lookup and registration.
        entry = self._entries.get(key)
        if isinstance(entry, Resolved):
            return entry.value
        if entry is None:
            logger.debug("Memo miss for %s(%r)", _name_of(self._fn), key)
            entry = Pending(asyncio.ensure_future(self._run(key, args, kwargs)))
            self._entries[key] = entry

        # Waiter cancellation must not cancel the shared task.
        return await asyncio.shield(entry.task)

    async def _run(
        self, key: Hashable, args: tuple[Any, ...], kwargs: dict[str, Any]
    ) -> V:
        try:
            value = await self._fn(*args, **kwargs)
        except (Exception, asyncio.CancelledError):
            self._entries.pop(key, None)
            logger.debug(
                "Evicted memo entry for %s(%r) after failure", _name_of(self._fn), key
            )
            raise
        self._entries[key] = Resolved(value)
        return value


def memoize_async(fn: Callable[..., Awaitable[V]]) -> AsyncMemoizer[V]:
    """Wrap an async callable with `AsyncMemoizer`; usable as a decorator."""
    return AsyncMemoizer(fn)


def _name_of(fn: Callable[..., Any]) -> str:
    return getattr(fn, "__qualname__", None) or type(fn).__name__
