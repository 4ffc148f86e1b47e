"""Medium linked-list, string and integer problems."""

from __future__ import annotations

from itertools import zip_longest
from typing import Optional

from .linked_list import ListNode

_INT32_MAX = 2**31 - 1


def add_two_numbers(
    l1: Optional[ListNode], l2: Optional[ListNode]
) -> Optional[ListNode]:
    """Add two numbers stored as reversed digit lists."""
    digits: list[int] = []
    carry = 0
    for a, b in zip_longest(l1 or (), l2 or (), fillvalue=0):
        carry, digit = divmod(carry + a + b, 10)
        digits.append(digit)
    if carry:
        digits.append(carry)
    return ListNode.from_iterable(digits)


def _expand_around_center(s: str, left: int, right: int) -> int:
    while left >= 0 and right < len(s) and s[left] == s[right]:
        left -= 1
        right += 1
    return right - left - 1


def longest_palindrome(s: str) -> str:
    """Return the first longest palindromic substring of *s*."""
    if not s:
        return ""
    start = end = 0
    for i in range(len(s)):
        length = max(_expand_around_center(s, i, i), _expand_around_center(s, i, i + 1))
        if length > end - start:
            start = i - (length - 1) // 2
            end = i + length // 2
    return s[start : end + 1]


def length_of_longest_substring(s: str) -> int:
    """Return the length of the longest substring without repeated characters."""
    best = 0
    start = 0
    last_seen: dict[str, int] = {}
    for i, c in enumerate(s):
        pos = last_seen.get(c)
        if pos is not None and pos >= start:
            start = pos + 1
        last_seen[c] = i
        best = max(best, i - start + 1)
    return best


def reverse_integer(x: int) -> int:
    """Reverse the decimal digits of *x*; return 0 if it overflows 32 bits."""
    sign = -1 if x < 0 else 1
    result = int(str(abs(x))[::-1])
    if result > _INT32_MAX:
        return 0
    return sign * result


def convert(s: str, num_rows: int) -> str:
    """Read *s* written in a zigzag over *num_rows* rows, row by row."""
    if num_rows == 1:
        return s
    length = len(s)
    period = 2 * (num_rows - 1)
    parts: list[str] = []
    for row in range(num_rows):
        for base in range(0, length, period):
            hor = base + row
            if hor < length:
                parts.append(s[hor])
            if row not in (0, num_rows - 1):
                diag = base + period - row
                if diag < length:
                    parts.append(s[diag])
    return "".join(parts)