from __future__ import annotations

from typesync.utils import (
    SKIP,
    filter_map,
    merge_objects,
    order_object,
    shrink_object,
    uniq,
)


def test_uniq_keeps_first_seen_order():
    assert uniq([1, 2, 2, 3, 1]) == [1, 2, 3]
    assert uniq(["b", "a", "b"]) == ["b", "a"]
    assert uniq([]) == []


def test_filter_map_skips_and_passes_index():
    result = filter_map(
        ["a", "bb", "ccc", "dd"],
        lambda item, index: SKIP if len(item) == 2 else f"{index}:{item}",
    )
    assert result == ["0:a", "2:ccc"]


def test_filter_map_drops_false_results():
    result = filter_map([0, 1, 2], lambda item, _index: item if item != 1 else False)
    assert result == [0, 2]
    assert filter_map([1, 2, 3], lambda item, _index: item == 2) == [True]


def test_filter_map_keeps_other_falsy_results():
    assert filter_map([None, "x", 0, ""], lambda item, _index: item) == [
        None,
        "x",
        0,
        "",
    ]


def test_shrink_object_drops_none_values():
    source = {"name": "lodash", "version": None, "dev": False, "count": 0}
    assert shrink_object(source) == {"name": "lodash", "dev": False, "count": 0}
    assert source["version"] is None


def test_merge_objects_later_keys_win():
    merged = merge_objects([{"a": 1, "b": 1}, {"b": 2}, {"c": 3, "a": 4}])
    assert merged == {"a": 4, "b": 2, "c": 3}
    assert merge_objects([]) == {}


def test_merge_objects_is_shallow():
    nested = {"x": 1}
    merged = merge_objects([{"deps": {"y": 2}}, {"deps": nested}])
    assert merged["deps"] is nested


def test_order_object_defaults_to_lexicographic():
    ordered = order_object({"zod": "1", "@types/node": "2", "axios": "3"})
    assert list(ordered) == ["@types/node", "axios", "zod"]
    assert ordered["zod"] == "1"


def test_order_object_accepts_comparer():
    def by_length_desc(a: str, b: str) -> int:
        return len(b) - len(a)

    ordered = order_object({"a": 1, "ccc": 3, "bb": 2}, by_length_desc)
    assert list(ordered.items()) == [("ccc", 3), ("bb", 2), ("a", 1)]
