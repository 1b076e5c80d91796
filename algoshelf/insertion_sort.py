"""Insertion sort, iterative and recursive."""

from collections.abc import Iterable
from typing import Any


def _insert_last(items: list[Any], size: int) -> None:
    """Insert ``items[size - 1]`` into the already sorted prefix ``items[:size - 1]``."""
    key = items[size - 1]
    j = size - 2
    while j >= 0 and key < items[j]:
        items[j + 1] = items[j]
        j -= 1
    items[j + 1] = key


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Return the values in ascending order."""
    items = list(values)
    for size in range(2, len(items) + 1):
        _insert_last(items, size)
    return items


def insertion_sort_recursive(values: Iterable[Any]) -> list[Any]:
    """Return the values in ascending order, sorting each prefix recursively.

    Recursion depth grows with the input length.
    """
    items = list(values)

    def sort_prefix(size: int) -> None:
        if size <= 1:
            return
        sort_prefix(size - 1)
        _insert_last(items, size)

    sort_prefix(len(items))
    return items