"""A bounded binary min-heap of integers and a heap sort built on it."""

from __future__ import annotations

import heapq
from collections.abc import Iterable


class MinHeap:
    """A min-heap that holds at most *capacity* values."""

    def __init__(self, capacity):
        if capacity < 0:
            raise ValueError(f"Invalid heap capacity: {capacity}")
        self._capacity = capacity
        self._data: list[int] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"MinHeap(capacity={self._capacity}, size={len(self._data)})"

    def push(self, value) -> None:
        """Insert *value*; raise OverflowError when the heap is full."""
        if len(self._data) >= self._capacity:
            raise OverflowError("Push operation attempted on a completely full heap")
        heapq.heappush(self._data, value)

    def pop(self):
        """Remove and return the smallest value."""
        if not self._data:
            raise IndexError("Pop operation attempted on an empty heap")
        return heapq.heappop(self._data)

    def top(self):
        """Return the smallest value without removing it."""
        if not self._data:
            raise IndexError("Top operation attempted on an empty heap")
        return self._data[0]


def heap_sort(values: Iterable[int]) -> list[int]:
    """Return the values in ascending order, sorted through a MinHeap."""
    items = list(values)
    heap = MinHeap(len(items))
    for value in items:
        heap.push(value)
    return [heap.pop() for _ in items]