"""Merge sort, top-down and bottom-up."""

from collections.abc import Iterable, Iterator
from typing import Any


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    """Merge two sorted lists into one sorted list, preferring the left on ties."""
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def _sorted_copy(items: list[Any]) -> list[Any]:
    if len(items) <= 1:
        return list(items)
    if len(items) == 2:
        first, second = items
        return [second, first] if first > second else [first, second]
    middle = (len(items) + 1) // 2
    return _merge(_sorted_copy(items[:middle]), _sorted_copy(items[middle:]))


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Return the values in ascending order using recursive merge sort."""
    return _sorted_copy(list(values))


def merge_passes(values: Iterable[Any]) -> Iterator[list[Any]]:
    """Yield the list after each pass of bottom-up merge sort.

    Runs of width 1, 2, 4, ... are merged pairwise; the last list yielded is sorted.
    Nothing is yielded for fewer than two values.
    """
    items = list(values)
    width = 1
    while width < len(items):
        merged: list[Any] = []
        for start in range(0, len(items), 2 * width):
            merged.extend(
                _merge(items[start:start + width], items[start + width:start + 2 * width])
            )
        items = merged
        yield list(items)
        width *= 2


def merge_sort_bottom_up(values: Iterable[Any]) -> list[Any]:
    """Return the values in ascending order using non-recursive merge sort."""
    items = list(values)
    for snapshot in merge_passes(items):
        items = snapshot
    return items