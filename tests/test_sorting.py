import random

import pytest

from algokit.sorting import (
    bubble_sort,
    count_sort,
    cycle_sort,
    insertion_sort,
    merge_sort,
    quick_sort,
    radix_sort,
    selection_sort,
    tim_sort,
)

NON_NEGATIVE_CASES = [
    [],
    [5],
    [7, 4, 3, 5, 2, 1, 6],
    [20, 9, 16, 5, 43, 12, 11, 7],
    [10, 7, 8, 9, 1, 5],
    [5, 1, 4, 2, 8],
    [12, 11, 13, 5, 6, 7],
    [64, 25, 12, 22, 11],
    [3, 3, 3, 1, 1, 2],
    [0, 0, 0],
    [100, 10, 1, 1000, 0],
]

SIGNED_CASES = [
    [-2, 7, 15, -14, 0, 15, 0, 7, -7, -4, -13, 5, 8, -14, 12],
    [-1, -5, -3],
]


def _random_list(seed, size, low=0, high=999):
    rng = random.Random(seed)
    return [rng.randint(low, high) for _ in range(size)]


@pytest.mark.parametrize("values", NON_NEGATIVE_CASES)
def test_sorts_non_negative(values):
    expected = sorted(values)
    assert cycle_sort(values) == expected
    assert insertion_sort(values) == expected
    assert quick_sort(values) == expected
    assert tim_sort(values) == expected
    assert bubble_sort(values) == expected
    assert count_sort(values) == expected
    assert merge_sort(values) == expected
    assert selection_sort(values) == expected
    assert radix_sort(values) == expected


@pytest.mark.parametrize("values", SIGNED_CASES)
def test_sorts_signed(values):
    expected = sorted(values)
    assert cycle_sort(values) == expected
    assert insertion_sort(values) == expected
    assert quick_sort(values) == expected
    assert tim_sort(values) == expected
    assert bubble_sort(values) == expected
    assert count_sort(values) == expected
    assert merge_sort(values) == expected
    assert selection_sort(values) == expected


@pytest.mark.parametrize("seed", range(5))
def test_sorts_random(seed):
    values = _random_list(seed, 120)
    expected = sorted(values)
    assert cycle_sort(values) == expected
    assert insertion_sort(values) == expected
    assert quick_sort(values) == expected
    assert tim_sort(values) == expected
    assert bubble_sort(values) == expected
    assert count_sort(values) == expected
    assert merge_sort(values) == expected
    assert selection_sort(values) == expected
    assert radix_sort(values) == expected


def test_input_not_modified():
    values = [9, 2, 7, 2, 0]
    snapshot = list(values)
    cycle_sort(values)
    insertion_sort(values)
    quick_sort(values)
    tim_sort(values)
    bubble_sort(values)
    count_sort(values)
    merge_sort(values)
    selection_sort(values)
    radix_sort(values)
    assert values == snapshot


def test_accepts_iterables():
    expected = [1, 2, 3]
    assert cycle_sort(iter((3, 1, 2))) == expected
    assert insertion_sort(iter((3, 1, 2))) == expected
    assert quick_sort(iter((3, 1, 2))) == expected
    assert tim_sort(iter((3, 1, 2))) == expected
    assert bubble_sort(iter((3, 1, 2))) == expected
    assert count_sort(iter((3, 1, 2))) == expected
    assert merge_sort(iter((3, 1, 2))) == expected
    assert selection_sort(iter((3, 1, 2))) == expected
    assert radix_sort(iter((3, 1, 2))) == expected


def test_sorts_strings():
    words = ["pear", "apple", "fig", "banana", "apple"]
    expected = sorted(words)
    assert cycle_sort(words) == expected
    assert insertion_sort(words) == expected
    assert quick_sort(words) == expected
    assert tim_sort(words) == expected
    assert bubble_sort(words) == expected
    assert count_sort(words) == expected
    assert merge_sort(words) == expected
    assert selection_sort(words) == expected


def test_quick_sort_large_presorted_input():
    values = list(range(3000))
    assert quick_sort(values) == values


def test_quick_sort_large_reversed_input():
    values = list(range(2000, 0, -1))
    assert quick_sort(values) == sorted(values)


@pytest.mark.parametrize("run", [1, 2, 3, 7, 32, 500])
def test_tim_sort_run_lengths(run):
    values = _random_list(42, 200, -500, 500)
    assert tim_sort(values, run) == sorted(values)


@pytest.mark.parametrize("run", [0, -3])
def test_tim_sort_rejects_bad_run(run):
    with pytest.raises(ValueError):
        tim_sort([3, 2, 1], run)


def test_radix_sort_rejects_negative():
    with pytest.raises(ValueError):
        radix_sort([3, -1, 2])


def test_radix_sort_more_than_ten_per_bucket():
    values = [5] * 15 + [15] * 12 + [0] * 11
    assert radix_sort(values) == sorted(values)


def test_count_sort_preserves_multiplicity():
    values = _random_list(7, 300, 0, 9)
    result = count_sort(values)
    assert len(result) == len(values)
    assert all(result.count(v) == values.count(v) for v in set(values))