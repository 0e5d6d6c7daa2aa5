"""Indexed binary min-heap with decrease-key by remove and reinsert.

``heapq`` cannot locate an arbitrary entry, so relaxation with it has to push
duplicates and skip stale ones on pop. ``IndexedMinHeap`` instead records the
heap position of every item, which makes ``remove`` O(log n) and lets
:meth:`IndexedMinHeap.push` replace an item's key in place of a duplicate.
Items must be hashable; they are never compared with each other, only their
keys are.
"""

from __future__ import annotations

from typing import Any, Dict, Generic, Hashable, List, Tuple, TypeVar

__all__ = ["IndexedMinHeap"]

T = TypeVar("T", bound=Hashable)


class IndexedMinHeap(Generic[T]):
    """Binary min-heap holding each item at most once."""

    __slots__ = ("_heap", "_positions")

    def __init__(self) -> None:
        self._heap: List[Tuple[Any, T]] = []
        self._positions: Dict[T, int] = {}

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __contains__(self, item: object) -> bool:
        return item in self._positions

    def push(self, item: T, key: Any) -> None:
        """Insert *item* with *key*, replacing any entry it already has."""

        if item in self._positions:
            self.remove(item)
        self._heap.append((key, item))
        self._positions[item] = len(self._heap) - 1
        self._sift_up(len(self._heap) - 1)

    def pop(self) -> Tuple[Any, T]:
        """Remove and return the ``(key, item)`` pair with the smallest key."""

        if not self._heap:
            raise IndexError("pop from an empty heap")
        return self._remove_at(0)

    def remove(self, item: T) -> Any:
        """Remove *item* and return its key; ``KeyError`` when absent."""

        key, _ = self._remove_at(self._positions[item])
        return key

    def _remove_at(self, position: int) -> Tuple[Any, T]:
        last = len(self._heap) - 1
        if position != last:
            self._swap(position, last)
        entry = self._heap.pop()
        del self._positions[entry[1]]
        if position < len(self._heap):
            # The moved entry may belong above or below its new slot.
            self._sift_up(position)
            self._sift_down(self._positions[self._heap[position][1]])
        return entry

    def _sift_up(self, position: int) -> None:
        heap = self._heap
        while position > 0:
            parent = (position - 1) // 2
            if not heap[position][0] < heap[parent][0]:
                break
            self._swap(position, parent)
            position = parent

    def _sift_down(self, position: int) -> None:
        heap = self._heap
        size = len(heap)
        while True:
            left = 2 * position + 1
            if left >= size:
                return
            smallest = left
            right = left + 1
            if right < size and heap[right][0] < heap[left][0]:
                smallest = right
            if not heap[smallest][0] < heap[position][0]:
                return
            self._swap(position, smallest)
            position = smallest

    def _swap(self, first: int, second: int) -> None:
        heap = self._heap
        heap[first], heap[second] = heap[second], heap[first]
        self._positions[heap[first][1]] = first
        self._positions[heap[second][1]] = second
