"""Linear and binary search over sequences, and a bounded sorted array."""

from __future__ import annotations

import bisect
from collections.abc import Iterable, Iterator, Sequence
from typing import Any, Optional

DEFAULT_CAPACITY = 100


def binary_search(items: Sequence[Any], key: Any) -> Optional[int]:
    """Return an index of ``key`` in the sorted ``items``, or None if absent."""
    low, high = 0, len(items) - 1
    while low <= high:
        mid = low + (high - low) // 2
        value = items[mid]
        if value == key:
            return mid
        if key < value:
            high = mid - 1
        else:
            low = mid + 1
    return None


def binary_search_recursive(items: Sequence[Any], key: Any) -> Optional[int]:
    """Recursive binary search; return an index of ``key`` or None."""

    def search(low: int, high: int) -> Optional[int]:
        if low > high:
            return None
        mid = (low + high) // 2
        value = items[mid]
        if value == key:
            return mid
        if key < value:
            return search(low, mid - 1)
        return search(mid + 1, high)

    return search(0, len(items) - 1)


def linear_search(items: Iterable[Any], key: Any) -> Optional[int]:
    """Return the index of the first occurrence of ``key``, or None."""
    for index, value in enumerate(items):
        if value == key:
            return index
    return None


def linear_search_recursive(items: Sequence[Any], key: Any) -> Optional[int]:
    """Recursive linear search; return the first index of ``key`` or None."""

    def search(index: int) -> Optional[int]:
        if index == len(items):
            return None
        if items[index] == key:
            return index
        return search(index + 1)

    return search(0)


class SortedArray:
    """A sorted array with a fixed capacity supporting search, insert and delete."""

    def __init__(self, items: Iterable[Any] = (), capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        values = list(items)
        if len(values) > capacity:
            raise OverflowError(f"{len(values)} items exceed capacity {capacity}")
        self.capacity = capacity
        self._items = values

    def search(self, key: Any) -> Optional[int]:
        """Return an index of ``key``, or None if it is not present."""
        return binary_search_recursive(self._items, key)

    def insert(self, key: Any) -> int:
        """Insert ``key`` after any equal elements and return its index."""
        if len(self._items) >= self.capacity:
            raise OverflowError("array is full")
        index = bisect.bisect_right(self._items, key)
        self._items.insert(index, key)
        return index

    def delete(self, key: Any) -> int:
        """Remove one occurrence of ``key`` and return the index it held."""
        index = self.search(key)
        if index is None:
            raise ValueError(f"{key!r} not found")
        del self._items[index]
        return index

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"SortedArray({self._items!r}, capacity={self.capacity})"