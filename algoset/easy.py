"""Easy array and string problems."""

from __future__ import annotations

from collections import Counter
from itertools import pairwise


def find_lucky(arr: list[int]) -> int:
    """Return the largest value whose frequency equals itself, or -1."""
    freq = Counter(arr)
    return max((item for item, count in freq.items() if item == count), default=-1)


def kth_character(k: int) -> str:
    """Return the k-th character (1-based) of the string game sequence."""
    ones = bin((k - 1) & 0xFFFFFFFF).count("1")
    return chr(ord("a") + ones)


def possible_string_count(word: str) -> int:
    """Count the original strings that could have been typed as *word*."""
    return 1 + sum(1 for prev, cur in pairwise(word) if prev == cur)


def find_lhs(nums: list[int]) -> int:
    """Return the length of the longest harmonious subsequence."""
    freq = Counter(nums)
    return max(
        (count + freq[num + 1] for num, count in freq.items() if num + 1 in freq),
        default=0,
    )


def two_sum(nums: list[int], target: int) -> list[int]:
    """Return the indices of two numbers adding up to *target*."""
    seen: dict[int, int] = {}
    for i, num in enumerate(nums):
        index = seen.get(target - num)
        if index is not None:
            return [index, i]
        seen[num] = i
    raise ValueError("No solution found")