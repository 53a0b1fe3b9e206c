"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Shared helpers for keeping code packages and their types packages in sync.
"""

from .memo import AsyncMemoizer, MissingCacheKeyError, memoize_async
from .packages import (
    NamingSettings,
    WorkspacesConfig,
    ensure_workspaces_array,
    typed,
    untyped,
)
from .utils import (
    SKIP,
    filter_map,
    merge_objects,
    order_object,
    shrink_object,
    uniq,
)

__all__ = [
    "AsyncMemoizer",
    "MissingCacheKeyError",
    "memoize_async",
    "NamingSettings",
    "WorkspacesConfig",
    "ensure_workspaces_array",
    "typed",
    "untyped",
    "SKIP",
    "uniq",
    "filter_map",
    "shrink_object",
    "merge_objects",
    "order_object",
]
