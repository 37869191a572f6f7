"""Dynamic programming: subarrays, knapsack, jumps, matrix chains and more."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from itertools import accumulate

__all__ = [
    "KnapsackResult",
    "knapsack_bottom_up",
    "knapsack_brute_force",
    "knapsack_top_down",
    "knapsack_value",
    "longest_common_substring",
    "matrix_chain_order",
    "max_loot",
    "max_subarray_product",
    "max_subarray_sum",
    "min_jumps",
    "trapped_water",
]


def max_subarray_sum(values: Iterable[int]) -> int:
    """Largest sum of a non-empty contiguous run (Kadane's method).

    Raises ValueError for empty input.
    """
    items = list(values)
    if not items:
        raise ValueError("values must not be empty")
    best = items[0]
    running = 0
    for value in items:
        running += value
        best = max(best, running)
        if running < 0:
            running = 0
    return best


@dataclass(frozen=True)
class KnapsackResult:
    """Outcome of a 0/1 knapsack solve.

    value: the best total value; items: 0-based indices of the chosen items,
    ascending; count: the work counter of the method used; table: the
    (items + 1) x (capacity + 1) table of best values, None where a cell
    was never computed, or None for methods that keep no table.
    """

    value: int
    items: tuple[int, ...]
    count: int
    table: tuple[tuple[int | None, ...], ...] | None = None


def _prepare(
    weights: Iterable[int], values: Iterable[int], capacity: int
) -> tuple[list[int], list[int]]:
    w = list(weights)
    v = list(values)
    if len(w) != len(v):
        raise ValueError("weights and values must have the same length")
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    if any(weight < 0 for weight in w):
        raise ValueError("weights must not be negative")
    return w, v


def _trace_items(table: list[list[int | None]], weights: list[int], capacity: int) -> tuple[int, ...]:
    chosen: list[int] = []
    j = capacity
    for i in range(len(weights), 0, -1):
        if table[i][j] != table[i - 1][j]:
            chosen.append(i - 1)
            j -= weights[i - 1]
    return tuple(reversed(chosen))


def _freeze(table: list[list[int | None]]) -> tuple[tuple[int | None, ...], ...]:
    return tuple(tuple(row) for row in table)


def knapsack_brute_force(
    weights: Iterable[int], values: Iterable[int], capacity: int
) -> KnapsackResult:
    """Solve 0/1 knapsack by plain recursion.

    count is the number of times both taking and skipping an item were
    explored. On a tie the item is taken.
    """
    w, v = _prepare(weights, values, capacity)
    count = 0

    def _best(n: int, room: int) -> tuple[int, tuple[int, ...]]:
        nonlocal count
        if n == 0 or room == 0:
            return 0, ()
        index = n - 1
        if room < w[index]:
            return _best(n - 1, room)
        skip = _best(n - 1, room)
        taken_value, taken_items = _best(n - 1, room - w[index])
        take = (v[index] + taken_value, taken_items + (index,))
        count += 1
        return skip if skip[0] > take[0] else take

    value, items = _best(len(w), capacity)
    return KnapsackResult(value, items, count)


def knapsack_top_down(
    weights: Iterable[int], values: Iterable[int], capacity: int
) -> KnapsackResult:
    """Solve 0/1 knapsack by memoised recursion.

    count is the number of recursive calls made; cells never reached stay
    None in the table.
    """
    w, v = _prepare(weights, values, capacity)
    n = len(w)
    table: list[list[int | None]] = [[0] * (capacity + 1)]
    table += [[0] + [None] * capacity for _ in range(n)]
    count = 0

    def _solve(i: int, j: int) -> int:
        nonlocal count
        count += 1
        cell = table[i][j]
        if cell is None:
            if j < w[i - 1]:
                cell = _solve(i - 1, j)
            else:
                skip = _solve(i - 1, j)
                take = v[i - 1] + _solve(i - 1, j - w[i - 1])
                cell = max(skip, take)
            table[i][j] = cell
        return cell

    value = _solve(n, capacity)
    return KnapsackResult(value, _trace_items(table, w, capacity), count, _freeze(table))


def knapsack_bottom_up(
    weights: Iterable[int], values: Iterable[int], capacity: int
) -> KnapsackResult:
    """Solve 0/1 knapsack by filling the whole table iteratively.

    count is the number of table cells computed.
    """
    w, v = _prepare(weights, values, capacity)
    n = len(w)
    table: list[list[int | None]] = [[0] * (capacity + 1) for _ in range(n + 1)]
    count = 0
    for i in range(1, n + 1):
        above = table[i - 1]
        for j in range(1, capacity + 1):
            if j < w[i - 1]:
                table[i][j] = above[j]
            else:
                table[i][j] = max(above[j], v[i - 1] + above[j - w[i - 1]])
            count += 1
    value = table[n][capacity]
    assert value is not None
    return KnapsackResult(value, _trace_items(table, w, capacity), count, _freeze(table))


def knapsack_value(capacity: int, weights: Iterable[int], values: Iterable[int]) -> int:
    """Best total value of a 0/1 knapsack of the given capacity."""
    w, v = _prepare(weights, values, capacity)
    best = [0] * (capacity + 1)
    for weight, value in zip(w, v):
        for j in range(capacity, weight - 1, -1):
            best[j] = max(best[j], value + best[j - weight])
    return best[capacity]


def min_jumps(steps: Iterable[int]) -> int | None:
    """Fewest jumps from the first index to the last, or None if unreachable.

    steps[i] is the longest jump allowed from index i. Each index takes its
    count from the first earlier index that can reach it.
    """
    items = list(steps)
    if not items or items[0] == 0:
        return None
    jumps: list[int | None] = [0] + [None] * (len(items) - 1)
    for i in range(1, len(items)):
        jumps[i] = next(
            (
                count + 1
                for j, count in enumerate(jumps[:i])
                if count is not None and i <= j + items[j]
            ),
            None,
        )
    return jumps[-1]


def matrix_chain_order(dimensions: Sequence[int]) -> int:
    """Fewest scalar multiplications to multiply a chain of matrices.

    Matrix i has shape dimensions[i - 1] x dimensions[i]. Raises ValueError
    if fewer than two dimensions are given.
    """
    p = list(dimensions)
    n = len(p)
    if n < 2:
        raise ValueError("at least two dimensions are needed")
    cost = [[0] * n for _ in range(n)]
    for length in range(2, n):
        for i in range(1, n - length + 1):
            j = i + length - 1
            cost[i][j] = min(
                cost[i][k] + cost[k + 1][j] + p[i - 1] * p[k] * p[j] for k in range(i, j)
            )
    return cost[1][n - 1]


def max_subarray_product(values: Iterable[int]) -> int:
    """Largest product of a non-empty contiguous run.

    Raises ValueError for empty input.
    """
    items = list(values)
    if not items:
        raise ValueError("values must not be empty")
    high = low = best = items[0]
    for value in items[1:]:
        candidates = (value, value * high, value * low)
        high, low = max(candidates), min(candidates)
        best = max(best, high)
    return best


def max_loot(house_values: Iterable[int]) -> int:
    """Most value that can be taken without taking two neighbouring houses."""
    houses = list(house_values)
    if not houses:
        return 0
    previous, current = houses[0], max(houses[:2])
    for value in houses[2:]:
        previous, current = current, max(value + previous, current)
    return current


def longest_common_substring(first: Sequence, second: Sequence) -> int:
    """Length of the longest run that occurs contiguously in both sequences."""
    best = 0
    previous = [0] * (len(second) + 1)
    for a in first:
        current = [0]
        for j, b in enumerate(second, start=1):
            current.append(previous[j - 1] + 1 if a == b else 0)
        best = max(best, max(current))
        previous = current
    return best


def trapped_water(heights: Iterable[int]) -> int:
    """Units of water held between bars of an elevation map of unit width."""
    bars = list(heights)
    if len(bars) < 3:
        return 0
    left = list(accumulate(bars, max))
    right = list(accumulate(reversed(bars), max))[::-1]
    return sum(min(l, r) - h for l, r, h in zip(left[1:-1], right[1:-1], bars[1:-1]))