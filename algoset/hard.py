"""Hard string, array and linked-list problems."""

from __future__ import annotations

from functools import lru_cache
from itertools import accumulate, groupby
from typing import Iterable, Optional

from .heap import MaxHeap
from .linked_list import ListNode

_MOD = 1_000_000_007
_ANY_SYMBOL = "."
_REPEATS = "*"


def kth_character(k: int, operations: list[int]) -> str:
    """Return the k-th character (1-based) after applying *operations*."""
    k -= 1
    shift = 0
    current_length = 1 << len(operations)
    for op in reversed(operations):
        current_length //= 2
        if k >= current_length:
            if op == 1:
                shift += 1
            k -= current_length
    return chr(ord("a") + shift % 26)


def possible_string_count(word: str, k: int) -> int:
    """Count original strings of length at least *k* that could produce *word*."""
    groups = [sum(1 for _ in run) for _, run in groupby(word)]

    total = 1
    for freq in groups:
        total = total * freq % _MOD

    if len(groups) >= k:
        return total

    dp = [0] * k
    dp[0] = 1
    for freq in groups:
        prefix = [value % _MOD for value in accumulate(dp)]
        new_dp = [0] * k
        for j in range(1, k):
            right = prefix[j - 1]
            left = prefix[j - 1 - freq] if j - 1 - freq >= 0 else 0
            new_dp[j] = (right - left) % _MOD
        dp = new_dp

    invalid = sum(dp) % _MOD
    return (total - invalid) % _MOD


def find_median_sorted_arrays(nums1: list[int], nums2: list[int]) -> float:
    """Return the median of two sorted arrays."""
    first, second = (nums1, nums2) if len(nums1) <= len(nums2) else (nums2, nums1)
    n, m = len(first), len(second)
    total = n + m
    if total == 0:
        raise ValueError("No value")
    half = (total + 1) // 2
    left, right = 0, n

    while left <= right:
        i = (left + right) // 2
        j = half - i
        if i > 0 and j < m and first[i - 1] > second[j]:
            right = i - 1
        elif j > 0 and i < n and second[j - 1] > first[i]:
            left = i + 1
        else:
            if i == 0:
                max_left = second[j - 1]
            elif j == 0:
                max_left = first[i - 1]
            else:
                max_left = max(first[i - 1], second[j - 1])

            if total % 2 == 1:
                return float(max_left)

            if i == n:
                min_right = second[j]
            elif j == m:
                min_right = first[i]
            else:
                min_right = min(first[i], second[j])
            return (max_left + min_right) / 2.0

    raise ValueError("No value")


def merge_k_lists(lists: Iterable[Optional[ListNode]]) -> Optional[ListNode]:
    """Merge sorted linked lists into one ascending linked list."""
    heap: MaxHeap[int] = MaxHeap()
    for head in lists:
        for value in head or ():
            heap.push(value)

    result: Optional[ListNode] = None
    while (value := heap.pop()) is not None:
        result = ListNode(value, result)
    return result


def is_match(s: str, p: str) -> bool:
    """Match *s* entirely against pattern *p* supporting '.' and '*'."""

    @lru_cache(maxsize=None)
    def dp(i: int, j: int) -> bool:
        if j == len(p):
            return i == len(s)
        first_match = i < len(s) and p[j] in (_ANY_SYMBOL, s[i])
        if j + 1 < len(p) and p[j + 1] == _REPEATS:
            return dp(i, j + 2) or (first_match and dp(i + 1, j))
        return first_match and dp(i + 1, j + 1)

    return dp(0, 0)


def reverse_k_group(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Reverse the list's nodes in groups of *k*, leaving a short tail as is."""
    if k <= 1:
        return head

    dummy = ListNode(0, head)
    prev_tail = dummy
    while True:
        probe = prev_tail.next
        count = 0
        while probe is not None and count < k:
            probe = probe.next
            count += 1
        if count < k:
            break

        group_head = prev_tail.next
        reversed_head: Optional[ListNode] = probe
        current = group_head
        for _ in range(k):
            assert current is not None
            following = current.next
            current.next = reversed_head
            reversed_head = current
            current = following

        prev_tail.next = reversed_head
        assert group_head is not None
        prev_tail = group_head

    return dummy.next