import pytest

from algokit.techniques import (
    eval_rpn,
    prefix_sums,
    to_lower_ascii,
    to_upper_ascii,
    toggle_case_ascii,
)

MATRIX = [[1, 2, 3, 4, 5] for _ in range(5)]


def test_eval_rpn_basic():
    assert eval_rpn(["2", "1", "+", "3", "*"]) == 9


def test_eval_rpn_division_and_order():
    assert eval_rpn(["4", "13", "5", "/", "+"]) == 6


def test_eval_rpn_truncates_toward_zero():
    assert eval_rpn(["-7", "2", "/"]) == -3


def test_eval_rpn_single_number():
    assert eval_rpn(["42"]) == 42


def test_eval_rpn_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        eval_rpn(["1", "0", "/"])


@pytest.mark.parametrize("tokens", [[], ["+"], ["1", "-"], ["x"]])
def test_eval_rpn_malformed(tokens):
    with pytest.raises(ValueError):
        eval_rpn(tokens)


def test_prefix_row_and_column_totals():
    tables = prefix_sums(MATRIX)
    for i, line in enumerate(MATRIX):
        assert tables.row[i][-1] == sum(line)
        assert tables.row[i][0] == line[0]
    for j in range(5):
        assert tables.column[-1][j] == sum(line[j] for line in MATRIX)
        assert tables.column[0][j] == MATRIX[0][j]


def test_prefix_total_corner_and_shape():
    tables = prefix_sums(MATRIX)
    assert tables.total[-1][-1] == sum(map(sum, MATRIX))
    for table in (tables.row, tables.column, tables.diagonal, tables.anti_diagonal, tables.total):
        assert len(table) == 5
        assert all(len(line) == 5 for line in table)


def test_prefix_diagonals():
    matrix = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
    tables = prefix_sums(matrix)
    assert tables.diagonal[2][2] == matrix[0][0] + matrix[1][1] + matrix[2][2]
    assert tables.anti_diagonal[2][0] == matrix[0][2] + matrix[1][1] + matrix[2][0]
    assert tables.diagonal[0] == matrix[0]
    assert tables.anti_diagonal[0] == matrix[0]
    assert tables.anti_diagonal[1][2] == matrix[1][2]


def test_prefix_total_matches_rectangles():
    matrix = [[3, -1, 4], [1, 5, -9], [2, 6, 5]]
    tables = prefix_sums(matrix)
    for i in range(3):
        for j in range(3):
            assert tables.total[i][j] == sum(sum(line[: j + 1]) for line in matrix[: i + 1])


def test_prefix_ragged_rejected():
    with pytest.raises(ValueError):
        prefix_sums([[1, 2], [3]])


def test_prefix_empty():
    tables = prefix_sums([])
    assert tables.total == []
    assert tables.row == []


SAMPLE = "aBcDEfGhUyG"


def test_case_conversions_on_letters():
    assert to_upper_ascii(SAMPLE) == SAMPLE.upper()
    assert to_lower_ascii(SAMPLE) == SAMPLE.lower()
    assert toggle_case_ascii(SAMPLE) == SAMPLE.swapcase()


def test_toggle_twice_restores():
    assert toggle_case_ascii(toggle_case_ascii(SAMPLE)) == SAMPLE


def test_non_letters_unchanged():
    other = "1 _@é[`"
    assert to_upper_ascii(other) == other
    assert to_lower_ascii(other) == other
    assert toggle_case_ascii(other) == other