"""Singly linked list node used by the list-based algorithms."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass
class ListNode:
    """A node of a singly linked list of integers."""

    val: int
    next: Optional["ListNode"] = None

    @classmethod
    def from_iterable(cls, values: Iterable[int]) -> Optional["ListNode"]:
        """Build a linked list from *values*; return None when it is empty."""
        head: Optional[ListNode] = None
        tail: Optional[ListNode] = None
        for value in values:
            node = cls(value)
            if tail is None:
                head = node
            else:
                tail.next = node
            tail = node
        return head

    def __iter__(self) -> Iterator[int]:
        node: Optional[ListNode] = self
        while node is not None:
            yield node.val
            node = node.next

    def to_list(self) -> list[int]:
        """Return the values from this node to the end of the list."""
        return list(self)