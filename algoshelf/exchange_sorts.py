"""Odd-even, pancake, partition (Hoare) and pigeonhole sorts."""

from collections.abc import Iterable
from typing import Any


def odd_even_sort(values: Iterable[Any]) -> list[Any]:
    """Return the values in ascending order using odd-even transposition sort."""
    items = list(values)
    is_sorted = False
    while not is_sorted:
        is_sorted = True
        for first in (0, 1):
            for i in range(first, len(items) - 1, 2):
                if items[i] > items[i + 1]:
                    items[i], items[i + 1] = items[i + 1], items[i]
                    is_sorted = False
    return items


def _flip(items: list[Any], last: int) -> None:
    """Reverse ``items[0..last]`` in place."""
    items[: last + 1] = items[last::-1]


def pancake_sort(values: Iterable[Any]) -> list[Any]:
    """Return the values in ascending order using prefix reversals only."""
    items = list(values)
    for size in range(len(items), 1, -1):
        largest = max(range(size), key=items.__getitem__)
        if largest != size - 1:
            _flip(items, largest)
            _flip(items, size - 1)
    return items


def _hoare_partition(items: list[Any], low: int, high: int) -> int:
    pivot = items[low]
    i, j = low - 1, high + 1
    while True:
        i += 1
        while items[i] < pivot:
            i += 1
        j -= 1
        while items[j] > pivot:
            j -= 1
        if i >= j:
            return j
        items[i], items[j] = items[j], items[i]


def partition_sort(values: Iterable[Any]) -> list[Any]:
    """Return the values in ascending order using quicksort with Hoare partitioning."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            split = _hoare_partition(items, low, high)
            pending.append((low, split))
            pending.append((split + 1, high))
    return items


def pigeonhole_sort(values: Iterable[int]) -> list[int]:
    """Return integer values in ascending order by counting them into holes.

    Raises TypeError for values that are not integers.
    """
    items = list(values)
    if not items:
        return []
    low, high = min(items), max(items)
    holes = [0] * (high - low + 1)
    for value in items:
        holes[value - low] += 1
    return [low + offset for offset, count in enumerate(holes) for _ in range(count)]