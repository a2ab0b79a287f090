"""Classic comparison sorts; each returns a new sorted list."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def selection_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by repeatedly moving the smallest remaining element forward."""
    values = list(items)
    for start in range(len(values) - 1):
        smallest = min(range(start, len(values)), key=values.__getitem__)
        if smallest != start:
            values[start], values[smallest] = values[smallest], values[start]
    return values


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(items: Iterable[Any]) -> list[Any]:
    """Divide-and-conquer merge sort."""
    values = list(items)
    if len(values) < 2:
        return values
    mid = (len(values) - 1) // 2 + 1
    return _merge(merge_sort(values[:mid]), merge_sort(values[mid:]))


def _partition(values: list[Any], low: int, high: int) -> int:
    """Partition around the last element and return its final position."""
    pivot = values[high]
    boundary = low - 1
    for j in range(low, high):
        if values[j] < pivot:
            boundary += 1
            values[boundary], values[j] = values[j], values[boundary]
    values[boundary + 1], values[high] = values[high], values[boundary + 1]
    return boundary + 1


def quick_sort(items: Iterable[Any]) -> list[Any]:
    """Recursive quicksort with a last-element pivot."""
    values = list(items)

    def sort(low: int, high: int) -> None:
        # Recurse into the smaller side and loop on the larger to bound depth.
        while low < high:
            pivot = _partition(values, low, high)
            if pivot - low < high - pivot:
                sort(low, pivot - 1)
                low = pivot + 1
            else:
                sort(pivot + 1, high)
                high = pivot - 1

    sort(0, len(values) - 1)
    return values


def quick_sort_iterative(items: Iterable[Any]) -> list[Any]:
    """Quicksort driven by an explicit stack of ranges."""
    values = list(items)
    if len(values) < 2:
        return values
    pending = [(0, len(values) - 1)]
    while pending:
        low, high = pending.pop()
        pivot = _partition(values, low, high)
        if pivot - 1 > low:
            pending.append((low, pivot - 1))
        if pivot + 1 < high:
            pending.append((pivot + 1, high))
    return values


def bubble_sort_recursive(items: Iterable[Any]) -> list[Any]:
    """Bubble sort: each pass floats the largest element of the prefix to its end."""
    values = list(items)
    for end in range(len(values) - 1, 0, -1):
        for i in range(end):
            if values[i] > values[i + 1]:
                values[i], values[i + 1] = values[i + 1], values[i]
    return values