"""Small techniques: RPN evaluation, matrix prefix tables, ASCII case bits."""

from __future__ import annotations

import operator
import string
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass

__all__ = [
    "PrefixTables",
    "eval_rpn",
    "prefix_sums",
    "to_lower_ascii",
    "to_upper_ascii",
    "toggle_case_ascii",
]


def _truncating_div(left: int, right: int) -> int:
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


_OPERATORS: dict[str, Callable[[int, int], int]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _truncating_div,
}


def eval_rpn(tokens: Iterable[str]) -> int:
    """Evaluate integer reverse Polish notation; division truncates toward zero.

    Raises ValueError for a malformed expression and ZeroDivisionError for
    division by zero.
    """
    stack: list[int] = []
    for token in tokens:
        apply = _OPERATORS.get(token)
        if apply is None:
            stack.append(int(token))
            continue
        if len(stack) < 2:
            raise ValueError(f"not enough operands for {token!r}")
        right = stack.pop()
        left = stack.pop()
        stack.append(apply(left, right))
    if not stack:
        raise ValueError("empty expression")
    return stack[-1]


@dataclass(frozen=True)
class PrefixTables:
    """Running sums over a matrix, each indexed like the matrix.

    row[i][j]: matrix[i][0..j]; column[i][j]: matrix[0..i][j];
    diagonal[i][j]: along the down-right diagonal ending at (i, j);
    anti_diagonal[i][j]: along the down-left diagonal ending at (i, j);
    total[i][j]: the rectangle from (0, 0) to (i, j).
    """

    row: list[list[int]]
    column: list[list[int]]
    diagonal: list[list[int]]
    anti_diagonal: list[list[int]]
    total: list[list[int]]


def prefix_sums(matrix: Sequence[Sequence[int]]) -> PrefixTables:
    """Build the row, column, diagonal and rectangle prefix tables.

    Raises ValueError if the rows differ in length.
    """
    rows = [list(line) for line in matrix]
    height = len(rows)
    width = len(rows[0]) if rows else 0
    if any(len(line) != width for line in rows):
        raise ValueError("all matrix rows must have the same length")

    def _blank() -> list[list[int]]:
        return [[0] * (width + 2) for _ in range(height + 1)]

    row, col, d1, d2, total = _blank(), _blank(), _blank(), _blank(), _blank()
    for i, line in enumerate(rows, start=1):
        for j, value in enumerate(line, start=1):
            row[i][j] = value + row[i][j - 1]
            col[i][j] = value + col[i - 1][j]
            d1[i][j] = value + d1[i - 1][j - 1]
            d2[i][j] = value + d2[i - 1][j + 1]
            total[i][j] = value + total[i - 1][j] + total[i][j - 1] - total[i - 1][j - 1]

    def _strip(table: list[list[int]]) -> list[list[int]]:
        return [line[1:width + 1] for line in table[1:]]

    return PrefixTables(_strip(row), _strip(col), _strip(d1), _strip(d2), _strip(total))


_CASE_BIT = ord(" ")
_UPPER = {ord(ch): ord(ch) & ~_CASE_BIT for ch in string.ascii_letters}
_LOWER = {ord(ch): ord(ch) | _CASE_BIT for ch in string.ascii_letters}
_TOGGLE = {ord(ch): ord(ch) ^ _CASE_BIT for ch in string.ascii_letters}


def to_upper_ascii(text: str) -> str:
    """Upper-case ASCII letters by clearing the case bit; others are kept."""
    return text.translate(_UPPER)


def to_lower_ascii(text: str) -> str:
    """Lower-case ASCII letters by setting the case bit; others are kept."""
    return text.translate(_LOWER)


def toggle_case_ascii(text: str) -> str:
    """Swap the case of ASCII letters by flipping the case bit."""
    return text.translate(_TOGGLE)