"""A binary max-heap over any ordered values."""

from __future__ import annotations

from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class MaxHeap(Generic[T]):
    """Binary heap that always pops its largest value first."""

    def __init__(self) -> None:
        self._data: list[T] = []

    def __len__(self) -> int:
        return len(self._data)

    def __bool__(self) -> bool:
        return bool(self._data)

    def __repr__(self) -> str:
        return f"MaxHeap({self._data!r})"

    def push(self, value: T) -> None:
        """Add *value* to the heap."""
        self._data.append(value)
        self._sift_up(len(self._data) - 1)

    def pop(self) -> Optional[T]:
        """Remove and return the largest value, or None if the heap is empty."""
        data = self._data
        if not data:
            return None
        data[0], data[-1] = data[-1], data[0]
        top = data.pop()
        self._sift_down(0)
        return top

    def _sift_up(self, index: int) -> None:
        data = self._data
        while index > 0:
            parent = (index - 1) // 2
            if not data[index] > data[parent]:
                break
            data[index], data[parent] = data[parent], data[index]
            index = parent

    def _sift_down(self, index: int) -> None:
        data = self._data
        size = len(data)
        while True:
            largest = index
            for child in (2 * index + 1, 2 * index + 2):
                if child < size and data[child] > data[largest]:
                    largest = child
            if largest == index:
                return
            data[index], data[largest] = data[largest], data[index]
            index = largest