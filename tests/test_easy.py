import pytest

from algoset.easy import (
    find_lhs,
    find_lucky,
    kth_character,
    possible_string_count,
    two_sum,
)


@pytest.mark.parametrize(
    "arr, expected",
    [([2, 2, 3, 4], 2), ([1, 2, 2, 3, 3, 3], 3), ([2, 2, 2, 3, 3], -1)],
)
def test_find_lucky(arr, expected):
    assert find_lucky(arr) == expected


@pytest.mark.parametrize("k, expected", [(5, "b"), (10, "c")])
def test_kth_character(k, expected):
    assert kth_character(k) == expected


def test_kth_character_first_is_a():
    assert kth_character(1) == "a"


@pytest.mark.parametrize(
    "word, expected", [("abbcccc", 5), ("abcd", 1), ("aaaa", 4)]
)
def test_possible_string_count(word, expected):
    assert possible_string_count(word) == expected


@pytest.mark.parametrize(
    "nums, expected",
    [([1, 3, 2, 2, 5, 2, 3, 7], 5), ([1, 2, 3, 4], 2), ([1, 1, 1, 1], 0)],
)
def test_find_lhs(nums, expected):
    assert find_lhs(nums) == expected


@pytest.mark.parametrize(
    "nums, target, expected",
    [([2, 7, 11, 15], 9, [0, 1]), ([3, 2, 4], 6, [1, 2]), ([3, 3], 6, [0, 1])],
)
def test_two_sum(nums, target, expected):
    assert two_sum(nums, target) == expected


def test_two_sum_without_solution_raises():
    with pytest.raises(ValueError, match="No solution found"):
        two_sum([1, 2, 3], 100)