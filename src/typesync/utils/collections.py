"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Stateless helpers for sequences and mappings.
"""

from __future__ import annotations

import functools
from collections.abc import Callable, Hashable, Iterable, Mapping
from typing import Any, Final, TypeVar

T = TypeVar("T")
H = TypeVar("H", bound=Hashable)
R = TypeVar("R")


class _Skip:
    __slots__ = ()

    def __repr__(self) -> str:
        return "SKIP"


SKIP: Final = _Skip()
"""Alternative to `False` for dropping an item in `filter_map`."""


def uniq(source: Iterable[H]) -> list[H]:
    """Return distinct items in first-seen order."""
    return list(dict.fromkeys(source))


def filter_map(
    source: Iterable[T],
    iteratee: Callable[[T, int], R | bool | _Skip],
) -> list[R]:
    """
    Map and filter in one pass.

    Args:
        source: Items to visit.
        iteratee: Called with `(item, index)`; returning `False` or `SKIP`
            drops the item. Other falsy results such as `0` and `None` are kept.
    """
    result: list[R] = []
    for index, item in enumerate(source):
        mapped = iteratee(item, index)
        if mapped is False or mapped is SKIP:
            continue
        result.append(mapped)  # type: ignore[arg-type]
    return result


def shrink_object(source: Mapping[str, Any]) -> dict[str, Any]:
    """Drop keys whose value is `None`."""
    return {key: value for key, value in source.items() if value is not None}


def merge_objects(sources: Iterable[Mapping[str, Any]]) -> dict[str, Any]:
    """Shallow-merge mappings left to right; later keys win."""
    merged: dict[str, Any] = {}
    for row in sources:
        merged.update(row)
    return merged


def order_object(
    source: Mapping[str, T],
    comparer: Callable[[str, str], int] | None = None,
) -> dict[str, T]:
    """
    Return a copy of `source` with keys sorted.

    `comparer` follows the usual negative/zero/positive contract. Keys sort
    lexicographically when it is omitted.
    """
    if comparer is None:
        keys = sorted(source)
    else:
        keys = sorted(source, key=functools.cmp_to_key(comparer))
    return {key: source[key] for key in keys}
