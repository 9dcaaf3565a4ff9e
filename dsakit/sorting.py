"""Classic comparison sorts. Each returns a new ascending list."""

from __future__ import annotations

import bisect
import heapq
from typing import Any, Iterable


def insertion_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by inserting each element after any equal ones already placed."""
    result: list[Any] = []
    for item in items:
        bisect.insort_right(result, item)
    return result


def merge_sort(items: Iterable[Any]) -> list[Any]:
    """Stable top-down merge sort."""
    values = list(items)
    if len(values) <= 1:
        return values
    mid = (len(values) - 1) // 2 + 1
    return list(heapq.merge(merge_sort(values[:mid]), merge_sort(values[mid:])))


def _partition(values: list[Any], low: int, high: int) -> int:
    """Partition around ``values[high]``; return the pivot's final index."""
    pivot = values[high]
    boundary = low
    for j in range(low, high):
        if values[j] <= pivot:
            values[boundary], values[j] = values[j], values[boundary]
            boundary += 1
    values[boundary], values[high] = values[high], values[boundary]
    return boundary


def quick_sort(items: Iterable[Any]) -> list[Any]:
    """Quicksort with the last element of each range as pivot."""
    values = list(items)
    pending = [(0, len(values) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            split = _partition(values, low, high)
            pending.append((split + 1, high))
            pending.append((low, split - 1))
    return values


def selection_sort(items: Iterable[Any]) -> list[Any]:
    """Repeatedly swap the smallest remaining element into place."""
    values = list(items)
    for i in range(len(values) - 1):
        smallest = min(range(i, len(values)), key=values.__getitem__)
        values[i], values[smallest] = values[smallest], values[i]
    return values


def shell_sort(items: Iterable[Any]) -> list[Any]:
    """Gapped insertion sort with gaps n/2, n/4, ..., 1."""
    values = list(items)
    gap = len(values) // 2
    while gap > 0:
        for i in range(gap, len(values)):
            current = values[i]
            j = i
            while j >= gap and values[j - gap] > current:
                values[j] = values[j - gap]
                j -= gap
            values[j] = current
        gap //= 2
    return values