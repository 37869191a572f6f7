import pytest

from algokit.recursion import Move, subset_sums, tower_of_hanoi


def _replay(n, moves):
    rods = {"A": list(range(n, 0, -1)), "B": [], "C": []}
    for move in moves:
        disk = rods[move.source].pop()
        assert disk == move.disk
        assert not rods[move.target] or rods[move.target][-1] > disk
        rods[move.target].append(disk)
    return rods


@pytest.mark.parametrize("n", [1, 2, 3, 6])
def test_hanoi_solves_puzzle(n):
    moves = tower_of_hanoi(n, "A", "C", "B")
    assert len(moves) == 2**n - 1
    rods = _replay(n, moves)
    assert rods["C"] == list(range(n, 0, -1))
    assert rods["A"] == [] and rods["B"] == []


def test_hanoi_first_move_and_text():
    moves = tower_of_hanoi(3)
    assert moves[0] == Move(1, "A", "C")
    assert str(moves[0]) == "Move disk 1 from rod A to rod C"


def test_hanoi_zero_disks():
    assert tower_of_hanoi(0) == []


def test_hanoi_negative():
    with pytest.raises(ValueError):
        tower_of_hanoi(-1)


def test_subset_sums_small():
    assert subset_sums([5, 4, 3, 2, 1], 5) == [[1, 4], [2, 3], [5]]


def test_subset_sums_duplicates_counted_separately():
    assert subset_sums([2, 1, 1], 3) == [[1, 2], [1, 2]]


def test_subset_sums_invariants():
    values = [7, 3, 12, 5, 8, 1, 4]
    target = 15
    results = subset_sums(values, target)
    assert results
    for subset in results:
        assert sum(subset) == target
        assert subset == sorted(subset)
        for value in subset:
            assert subset.count(value) <= values.count(value)
    assert len({tuple(s) for s in results}) == len(results)


def test_subset_sums_none_possible():
    assert subset_sums([4, 6, 8], 3) == []