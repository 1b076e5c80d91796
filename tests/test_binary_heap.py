import random

import pytest

from algoshelf.binary_heap import MaxHeap, MinHeap


def test_max_heap_demo_sequence():
    heap = MaxHeap()
    for value in (10, 3, 2, 8):
        heap.push(value)
    assert heap.top() == 10
    heap.push(1)
    heap.push(7)
    assert heap.top() == 10
    assert heap.pop() == 10
    assert heap.top() == 8
    heap.pop()
    assert heap.top() == 7
    assert len(heap) == 4


def test_min_heap_demo_sequence():
    heap = MinHeap()
    for value in (10, 3, 2, 8):
        heap.push(value)
    assert heap.top() == 2
    heap.push(1)
    heap.push(7)
    assert heap.top() == 1
    assert heap.pop() == 1
    assert heap.top() == 2
    heap.pop()
    assert heap.top() == 3
    assert len(heap) == 4


@pytest.mark.parametrize("seed", range(5))
def test_max_heap_drains_in_descending_order(seed):
    rng = random.Random(seed)
    values = [rng.randint(-50, 50) for _ in range(40)]
    heap = MaxHeap(values)
    drained = [heap.pop() for _ in range(len(values))]
    assert drained == sorted(values, reverse=True)
    assert len(heap) == 0


@pytest.mark.parametrize("seed", range(5))
def test_min_heap_drains_in_ascending_order(seed):
    rng = random.Random(seed)
    values = [rng.randint(-50, 50) for _ in range(40)]
    heap = MinHeap(values)
    drained = [heap.pop() for _ in range(len(values))]
    assert drained == sorted(values)


def test_len_tracks_pushes_and_pops():
    heap = MinHeap()
    heap.push(5)
    heap.push(5)
    assert len(heap) == 2
    heap.pop()
    assert len(heap) == 1


@pytest.mark.parametrize("cls", [MaxHeap, MinHeap])
def test_empty_heap_raises(cls):
    heap = cls()
    with pytest.raises(IndexError):
        heap.top()
    with pytest.raises(IndexError):
        heap.pop()


@pytest.mark.parametrize("cls", [MaxHeap, MinHeap])
def test_single_value_round_trip(cls):
    heap = cls([42])
    assert heap.top() == 42
    assert heap.pop() == 42
    assert len(heap) == 0