"""Order statistics: k-th smallest and largest, median, and max/min."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable
from typing import Any


def _partition(values: list[Any], low: int, high: int, before: Callable[[Any, Any], bool]) -> int:
    """Partition around the middle element; items where ``before`` holds go left."""
    mid = (low + high) // 2
    values[mid], values[low] = values[low], values[mid]
    pivot = values[low]
    location = low
    for i in range(low + 1, high + 1):
        if before(values[i], pivot):
            location += 1
            values[location], values[i] = values[i], values[location]
    values[location], values[low] = values[low], values[location]
    return location


def _select(items: Iterable[Any], k: int, before: Callable[[Any, Any], bool], word: str) -> Any:
    values = list(items)
    if not 1 <= k <= len(values):
        raise ValueError(f"{k}-th {word} element doesn't exist")
    target = k - 1
    low, high = 0, len(values) - 1
    while True:
        pivot = _partition(values, low, high, before)
        if pivot == target:
            return values[pivot]
        if target < pivot:
            high = pivot - 1
        else:
            low = pivot + 1


def kth_smallest(items: Iterable[Any], k: int) -> Any:
    """Return the k-th smallest element (1-based) by quickselect."""
    return _select(items, k, operator.lt, "smallest")


def kth_largest(items: Iterable[Any], k: int) -> Any:
    """Return the k-th largest element (1-based) by quickselect."""
    return _select(items, k, operator.gt, "largest")


def median(items: Iterable[Any]) -> float:
    """Return the median; the mean of the two middle values for even counts."""
    values = sorted(items)
    if not values:
        raise ValueError("median of an empty sequence")
    half = len(values) // 2
    if len(values) % 2:
        return float(values[half])
    return (values[half - 1] + values[half]) / 2.0


def max_min(items: Iterable[Any]) -> tuple[Any, Any]:
    """Return ``(maximum, minimum)`` found by divide and conquer."""
    values = list(items)
    if not values:
        raise ValueError("max_min of an empty sequence")

    def solve(low: int, high: int) -> tuple[Any, Any]:
        if low == high:
            return values[low], values[low]
        if high == low + 1:
            if values[low] > values[high]:
                return values[low], values[high]
            return values[high], values[low]
        mid = (low + high) // 2
        max1, min1 = solve(low, mid)
        max2, min2 = solve(mid + 1, high)
        return (max1 if max1 > max2 else max2), (min1 if min1 < min2 else min2)

    return solve(0, len(values) - 1)