"""Patience sort: deal values onto decreasing piles, then merge the piles."""

import heapq
from collections.abc import Iterable
from typing import Any


def _deal(items: list[Any]) -> list[list[Any]]:
    """Deal the items onto piles whose tops decrease from bottom to top.

    Each item goes onto the first pile whose top is larger than it,
    or onto a new pile when there is none.
    """
    piles: list[list[Any]] = []
    for item in items:
        for pile in piles:
            if pile[-1] > item:
                pile.append(item)
                break
        else:
            piles.append([item])
    return piles


def patience_sort(values: Iterable[Any]) -> list[Any]:
    """Return the values in ascending order using patience sorting."""
    items = list(values)
    if not items:
        return []
    piles = _deal(items)
    # Each pile read from its top down is ascending, so a k-way merge sorts them.
    return list(heapq.merge(*(reversed(pile) for pile in piles)))