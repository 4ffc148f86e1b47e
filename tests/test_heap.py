import pytest

from algoset.heap import MaxHeap


def test_pop_on_empty_heap_returns_none():
    heap = MaxHeap()
    assert heap.pop() is None
    assert len(heap) == 0


@pytest.mark.parametrize(
    "values",
    [
        [1, 4, 5, 1, 3, 4, 2, 6],
        [5, 4, 3, 2, 1],
        [1, 2, 3, 4, 5],
        [7, 7, 7],
        [-3, 0, -1, 10, 2],
        [42],
    ],
)
def test_pops_in_descending_order(values):
    heap = MaxHeap()
    for value in values:
        heap.push(value)
    assert len(heap) == len(values)
    popped = []
    while (value := heap.pop()) is not None:
        popped.append(value)
    assert popped == sorted(values, reverse=True)
    assert len(heap) == 0


def test_interleaved_push_and_pop():
    heap = MaxHeap()
    heap.push(3)
    heap.push(8)
    assert heap.pop() == 8
    heap.push(5)
    heap.push(1)
    assert heap.pop() == 5
    assert heap.pop() == 3
    assert heap.pop() == 1
    assert heap.pop() is None


def test_len_tracks_pushes_and_pops():
    heap = MaxHeap()
    for count, value in enumerate([9, 2, 6], start=1):
        heap.push(value)
        assert len(heap) == count
    heap.pop()
    assert len(heap) == 2


def test_works_with_strings():
    heap = MaxHeap()
    for word in ["pear", "apple", "zebra", "mango"]:
        heap.push(word)
    assert heap.pop() == "zebra"
    assert heap.pop() == "pear"