"""Small array utilities: majority vote, odd-occurrence XOR, positional insert."""

from collections.abc import Sequence
from functools import reduce
from operator import xor
from typing import Any


def find_candidate(values: Sequence[Any]) -> Any:
    """Return the candidate chosen by Moore's voting algorithm.

    The candidate is the majority element whenever one exists. Raises
    ValueError for an empty sequence.
    """
    if not values:
        raise ValueError("no candidate in an empty sequence")
    candidate, count = values[0], 1
    for value in values[1:]:
        count += 1 if value == candidate else -1
        if count == 0:
            candidate, count = value, 1
    return candidate


def majority_element(values: Sequence[Any]) -> Any | None:
    """Return the element occurring more than half the time, or None if there is none."""
    if not values:
        return None
    candidate = find_candidate(values)
    occurrences = sum(1 for value in values if value == candidate)
    return candidate if occurrences > len(values) // 2 else None


def odd_occurrence(values: Sequence[int]) -> int:
    """Return the value occurring an odd number of times when all others occur evenly."""
    return reduce(xor, values, 0)


def insert_at(values: Sequence[Any], value: Any, position: int) -> list[Any]:
    """Return a copy of ``values`` with ``value`` placed at 1-based ``position``.

    Raises IndexError unless 1 <= position <= len(values) + 1.
    """
    if not 1 <= position <= len(values) + 1:
        raise IndexError(f"position {position} is outside 1..{len(values) + 1}")
    items = list(values)
    items.insert(position - 1, value)
    return items