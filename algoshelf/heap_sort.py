"""Heap sort, built either bottom-up or by pushing elements one at a time."""

from collections.abc import Iterable
from typing import Any


def _sift_down(heap: list[Any], start: int, end: int) -> None:
    """Move ``heap[start]`` down until the max-heap property holds in ``heap[:end]``."""
    item = heap[start]
    pos = start
    while (child := 2 * pos + 1) < end:
        if child + 1 < end and heap[child + 1] > heap[child]:
            child += 1
        if item > heap[child]:
            break
        heap[pos] = heap[child]
        pos = child
    heap[pos] = item


def _sift_up(heap: list[Any], index: int) -> None:
    """Move ``heap[index]`` up while it is larger than its parent."""
    while index > 0:
        parent = (index - 1) // 2
        if not heap[parent] < heap[index]:
            break
        heap[parent], heap[index] = heap[index], heap[parent]
        index = parent


def _drain(heap: list[Any]) -> list[Any]:
    """Repeatedly move the root of a max-heap to the end of the unsorted region."""
    for end in range(len(heap) - 1, 0, -1):
        heap[0], heap[end] = heap[end], heap[0]
        _sift_down(heap, 0, end)
    return heap


def heap_sort(values: Iterable[Any]) -> list[Any]:
    """Return the values in ascending order, building the heap bottom-up."""
    heap = list(values)
    for start in range(len(heap) // 2 - 1, -1, -1):
        _sift_down(heap, start, len(heap))
    return _drain(heap)


def heap_sort_incremental(values: Iterable[Any]) -> list[Any]:
    """Return the values in ascending order, building the heap by successive pushes."""
    heap = list(values)
    if len(heap) <= 1:
        return heap
    for index in range(len(heap)):
        _sift_up(heap, index)
    return _drain(heap)