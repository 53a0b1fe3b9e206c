"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Async memoization with in-flight call sharing and failure eviction.
"""

from .memoizer import AsyncMemoizer, memoize_async
from .types import MemoEntry, MissingCacheKeyError, Pending, Resolved

__all__ = [
    "AsyncMemoizer",
    "memoize_async",
    "MemoEntry",
    "MissingCacheKeyError",
    "Pending",
    "Resolved",
]
