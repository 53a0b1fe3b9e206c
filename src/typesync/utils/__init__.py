"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Module: utils/__init__.py.
"""

from .collections import (
    SKIP,
    filter_map,
    merge_objects,
    order_object,
    shrink_object,
    uniq,
)

__all__ = [
    "SKIP",
    "uniq",
    "filter_map",
    "shrink_object",
    "merge_objects",
    "order_object",
]
