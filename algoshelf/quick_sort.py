"""Quicksort with a last-element pivot, and a randomised-pivot variant."""

import random
from collections.abc import Iterable
from typing import Any


def _lomuto_partition(items: list[Any], lower: int, upper: int) -> int:
    """Partition ``items[lower..upper]`` around its last element; return the pivot's index."""
    pivot = items[upper]
    i = lower - 1
    for j in range(lower, upper):
        if items[j] <= pivot:
            i += 1
            items[i], items[j] = items[j], items[i]
    items[i + 1], items[upper] = items[upper], items[i + 1]
    return i + 1


def quick_sort(values: Iterable[Any]) -> list[Any]:
    """Return the values in ascending order using quicksort (last element as pivot)."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        lower, upper = pending.pop()
        if upper > lower:
            split = _lomuto_partition(items, lower, upper)
            pending.append((lower, split - 1))
            pending.append((split + 1, upper))
    return items


def _first_bigger(items: list[Any], start: int, right: int, pivot: Any) -> int:
    for k in range(start, right + 1):
        if items[k] > pivot:
            return k
    return right + 1


def _last_smaller(items: list[Any], start: int, left: int, pivot: Any) -> int:
    for k in range(start, left - 1, -1):
        if items[k] < pivot:
            return k
    return -1


def _random_partition(items: list[Any], left: int, right: int, rng: random.Random) -> int:
    """Partition ``items[left..right]`` around a random pivot; return the pivot's final index."""
    pivot_index = left + rng.randrange(right - left)
    pivot = items[pivot_index]
    i = _first_bigger(items, left, right, pivot)
    j = _last_smaller(items, right, left, pivot)
    while i <= j:
        items[i], items[j] = items[j], items[i]
        i = _first_bigger(items, i, right, pivot)
        j = _last_smaller(items, j, left, pivot)
    if pivot_index > j and pivot_index > i:
        items[i], items[pivot_index] = items[pivot_index], items[i]
        return i
    if pivot_index < j and pivot_index < i:
        items[j], items[pivot_index] = items[pivot_index], items[j]
        return j
    return pivot_index


def random_quick_sort(values: Iterable[Any], rng: random.Random | None = None) -> list[Any]:
    """Return the values in ascending order using quicksort with random pivots.

    ``rng`` supplies the pivot choices; a fresh ``random.Random`` is used when omitted.
    """
    rng = rng if rng is not None else random.Random()
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        left, right = pending.pop()
        if left >= right:
            continue
        split = _random_partition(items, left, right, rng)
        pending.append((left, split - 1))
        pending.append((split + 1, right))
    return items