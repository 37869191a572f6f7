"""Comparison and distribution sorts.

Every function takes any iterable of values and returns a new sorted list.
The input is never modified.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from itertools import chain
from typing import Any

__all__ = [
    "bubble_sort",
    "count_sort",
    "cycle_sort",
    "insertion_sort",
    "merge_sort",
    "quick_sort",
    "radix_sort",
    "selection_sort",
    "tim_sort",
]

DEFAULT_RUN = 32


def cycle_sort(values: Iterable[Any]) -> list:
    """Sort by rotating each cycle of misplaced items into position."""
    items = list(values)
    for start in range(len(items) - 1):
        item = items[start]
        pos = start + sum(1 for other in items[start + 1:] if other < item)
        if pos == start:
            continue
        while item == items[pos]:
            pos += 1
        items[pos], item = item, items[pos]
        while pos != start:
            pos = start + sum(1 for other in items[start + 1:] if other < item)
            while item == items[pos]:
                pos += 1
            items[pos], item = item, items[pos]
    return items


def _insertion_sort_range(items: list, left: int, right: int) -> None:
    for i in range(left + 1, right + 1):
        key = items[i]
        j = i - 1
        while j >= left and items[j] > key:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = key


def insertion_sort(values: Iterable[Any]) -> list:
    """Sort by inserting each element into the sorted prefix before it."""
    items = list(values)
    _insertion_sort_range(items, 0, len(items) - 1)
    return items


def _partition(items: list, low: int, high: int) -> int:
    pivot = items[high]
    boundary = low - 1
    for j in range(low, high):
        if items[j] < pivot:
            boundary += 1
            items[boundary], items[j] = items[j], items[boundary]
    items[boundary + 1], items[high] = items[high], items[boundary + 1]
    return boundary + 1


def quick_sort(values: Iterable[Any]) -> list:
    """Quicksort with the last element of each range as the pivot."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot_index = _partition(items, low, high)
            pending.append((low, pivot_index - 1))
            pending.append((pivot_index + 1, high))
    return items


def _digit_at(value: int, place: int) -> int:
    return (value // 10 ** (place - 1)) % 10


def radix_sort(values: Iterable[int]) -> list[int]:
    """Least-significant-digit radix sort of non-negative integers.

    Raises ValueError if any value is negative.
    """
    items = list(values)
    if any(value < 0 for value in items):
        raise ValueError("radix sort requires non-negative integers")
    if not items:
        return items
    rounds = len(str(max(items))) if max(items) > 0 else 0
    for place in range(1, rounds + 1):
        buckets: list[list[int]] = [[] for _ in range(10)]
        for value in items:
            buckets[_digit_at(value, place)].append(value)
        items = list(chain.from_iterable(buckets))
    return items


def _merge_adjacent(items: list, left: int, mid: int, right: int) -> None:
    """Merge the sorted ranges [left, mid] and [mid + 1, right] in place."""
    first = items[left:mid + 1]
    second = items[mid + 1:right + 1]
    i = j = 0
    k = left
    while i < len(first) and j < len(second):
        if first[i] <= second[j]:
            items[k] = first[i]
            i += 1
        else:
            items[k] = second[j]
            j += 1
        k += 1
    rest = first[i:] + second[j:]
    items[k:k + len(rest)] = rest


def tim_sort(values: Iterable[Any], run: int = DEFAULT_RUN) -> list:
    """Insertion-sort fixed-size runs, then merge them bottom-up.

    Raises ValueError if run is not positive.
    """
    if run < 1:
        raise ValueError("run length must be positive")
    items = list(values)
    n = len(items)
    for start in range(0, n, run):
        _insertion_sort_range(items, start, min(start + run - 1, n - 1))
    size = run
    while size < n:
        for left in range(0, n, 2 * size):
            mid = left + size - 1
            right = min(left + 2 * size - 1, n - 1)
            if mid < right:
                _merge_adjacent(items, left, mid, right)
        size *= 2
    return items


def bubble_sort(values: Iterable[Any]) -> list:
    """Sort by repeatedly swapping adjacent out-of-order pairs."""
    items = list(values)
    n = len(items)
    for i in range(n - 1):
        for j in range(n - i - 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def count_sort(values: Iterable[Any]) -> list:
    """Sort by counting occurrences of each distinct value."""
    counts = Counter(values)
    return list(chain.from_iterable([value] * counts[value] for value in sorted(counts)))


def merge_sort(values: Iterable[Any]) -> list:
    """Top-down merge sort."""
    items = list(values)

    def _sort(begin: int, end: int) -> None:
        if begin >= end:
            return
        mid = begin + (end - begin) // 2
        _sort(begin, mid)
        _sort(mid + 1, end)
        _merge_adjacent(items, begin, mid, end)

    _sort(0, len(items) - 1)
    return items


def selection_sort(values: Iterable[Any]) -> list:
    """Sort by selecting the minimum of the unsorted suffix each pass."""
    items = list(values)
    n = len(items)
    for i in range(n - 1):
        min_index = min(range(i, n), key=items.__getitem__)
        if min_index != i:
            items[i], items[min_index] = items[min_index], items[i]
    return items