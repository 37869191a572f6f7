"""Recursive puzzles: Tower of Hanoi and subset sums by backtracking."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

__all__ = ["Move", "subset_sums", "tower_of_hanoi"]


@dataclass(frozen=True)
class Move:
    """Moving one disk from one rod to another."""

    disk: int
    source: str
    target: str

    def __str__(self) -> str:
        return f"Move disk {self.disk} from rod {self.source} to rod {self.target}"


def tower_of_hanoi(
    n: int, source: str = "A", target: str = "C", auxiliary: str = "B"
) -> list[Move]:
    """Return the moves that carry n disks from source to target.

    Raises ValueError for a negative number of disks.
    """
    if n < 0:
        raise ValueError("number of disks must not be negative")

    def _solve(count: int, start: str, end: str, spare: str) -> Iterator[Move]:
        if count == 0:
            return
        yield from _solve(count - 1, start, spare, end)
        yield Move(count, start, end)
        yield from _solve(count - 1, spare, end, start)

    return list(_solve(n, source, target, auxiliary))


def subset_sums(values: Iterable[int], target: int) -> list[list[int]]:
    """Return every subset of values, in ascending order, that sums to target.

    The values are sorted first and the search stops extending a subset
    once it reaches the target or the next value would overshoot it.
    Equal values are treated as distinct items, so repeated subsets appear.
    """
    items = sorted(values)
    chosen: list[int] = []
    found: list[list[int]] = []

    def _search(total: int, index: int) -> None:
        if total == target:
            found.append(list(chosen))
            return
        for value in items[index:]:
            new_total = total + value
            if new_total > target:
                return
            chosen.append(value)
            _search(new_total, index + 1)
            chosen.pop()
            index += 1

    _search(0, 0)
    return found