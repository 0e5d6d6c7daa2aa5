from __future__ import annotations

import random

import pytest

from graph_search.shortest_paths import IndexedMinHeap


def _drain(heap: IndexedMinHeap[str]) -> list[tuple[float, str]]:
    drained = []
    while heap:
        drained.append(heap.pop())
    return drained


def test_pop_returns_items_in_key_order() -> None:
    heap: IndexedMinHeap[str] = IndexedMinHeap()
    for item, key in [("c", 3.0), ("a", 1.0), ("d", 4.0), ("b", 2.0)]:
        heap.push(item, key)

    assert len(heap) == 4
    assert _drain(heap) == [(1.0, "a"), (2.0, "b"), (3.0, "c"), (4.0, "d")]


def test_push_existing_item_replaces_its_key() -> None:
    heap: IndexedMinHeap[str] = IndexedMinHeap()
    heap.push("x", 10.0)
    heap.push("y", 5.0)
    heap.push("x", 1.0)

    assert len(heap) == 2
    assert "x" in heap
    assert _drain(heap) == [(1.0, "x"), (5.0, "y")]


def test_remove_arbitrary_item() -> None:
    heap: IndexedMinHeap[str] = IndexedMinHeap()
    for index, item in enumerate("abcdefg"):
        heap.push(item, float(index))

    assert heap.remove("c") == 2.0
    assert "c" not in heap
    assert [item for _, item in _drain(heap)] == list("abdefg")

    with pytest.raises(KeyError):
        heap.remove("c")


def test_empty_heap_raises_index_error() -> None:
    heap: IndexedMinHeap[str] = IndexedMinHeap()
    with pytest.raises(IndexError):
        heap.pop()


def test_tuple_keys_break_ties_by_second_component() -> None:
    heap: IndexedMinHeap[str] = IndexedMinHeap()
    heap.push("late", (1.0, 2))
    heap.push("early", (1.0, 0))
    heap.push("middle", (1.0, 1))

    assert [item for _, item in _drain(heap)] == ["early", "middle", "late"]


def test_random_updates_match_sorted_order() -> None:
    rng = random.Random(7)
    heap: IndexedMinHeap[int] = IndexedMinHeap()
    expected: dict[int, float] = {}
    for _ in range(300):
        item = rng.randrange(40)
        if item in expected and rng.random() < 0.2:
            heap.remove(item)
            del expected[item]
            continue
        key = rng.random()
        heap.push(item, key)
        expected[item] = key

    assert _drain(heap) == sorted((key, item) for item, key in expected.items())
