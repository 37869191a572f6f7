"""Binary search over sorted sequences and Horspool substring search."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

__all__ = [
    "NotSortedError",
    "binary_search",
    "checked_binary_search",
    "horspool_search",
]


class NotSortedError(ValueError):
    """Raised when a search that needs sorted input is given unsorted data."""


def binary_search(values: Sequence[Any], target: Any) -> int | None:
    """Return an index of target in the ascending sequence, or None."""
    lo, hi = 0, len(values) - 1
    while lo <= hi:
        mid = lo + (hi - lo) // 2
        if values[mid] == target:
            return mid
        if values[mid] < target:
            lo = mid + 1
        else:
            hi = mid - 1
    return None


def _is_sorted(values: Sequence[Any]) -> bool:
    return all(a <= b for a, b in zip(values, values[1:]))


def checked_binary_search(values: Sequence[Any], target: Any) -> int | None:
    """Like binary_search, but raise NotSortedError for unsorted input."""
    if not _is_sorted(values):
        raise NotSortedError("given sequence is not sorted")
    return binary_search(values, target)


def _shift_key(ch: str) -> str:
    return ch.lower() if "A" <= ch <= "Z" else ch


def horspool_search(text: str, pattern: str) -> tuple[int, int] | None:
    """Find the first occurrence of pattern in text.

    Returns (start, end) with both indices inclusive, or None if the
    pattern does not occur. The match itself is case-sensitive; the shift
    table treats ASCII letters without regard to case.
    Raises ValueError for an empty pattern.
    """
    if not pattern:
        raise ValueError("pattern must not be empty")
    length = len(pattern)
    last = length - 1
    shifts = {_shift_key(ch): last - j for j, ch in enumerate(pattern[:last])}
    i = last
    while i < len(text):
        matched = 0
        while matched <= last and text[i - matched] == pattern[last - matched]:
            matched += 1
        if matched == length:
            return i - last, i
        i += shifts.get(_shift_key(text[i]), length)
    return None