"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Cache entry variants and errors for async memoization.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Generic, TypeVar

V = TypeVar("V")


class MissingCacheKeyError(TypeError):
    """Raised when a memoized function is called without a positional key."""


@dataclass(frozen=True, slots=True)
class Pending(Generic[V]):
    """In-flight call shared by every caller of the same key."""

    task: asyncio.Task[V]


@dataclass(frozen=True, slots=True)
class Resolved(Generic[V]):
    """Settled successful result, kept for the memoizer's lifetime."""

    value: V


MemoEntry = Pending[V] | Resolved[V]
