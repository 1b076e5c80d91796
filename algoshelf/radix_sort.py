"""LSD radix sort of non-negative integers, by buckets and by counting."""

from collections.abc import Iterable, Iterator
from itertools import accumulate

_BASE = 10


def _validated(values: Iterable[int]) -> list[int]:
    items = list(values)
    for value in items:
        if not isinstance(value, int):
            raise TypeError(f"radix sort needs integers, got {value!r}")
        if value < 0:
            raise ValueError(f"radix sort needs non-negative integers, got {value}")
    return items


def _digit_count(number: int) -> int:
    count = 0
    while number > 0:
        count += 1
        number //= _BASE
    return count


def _bucket_passes(items: list[int]) -> Iterator[list[int]]:
    if not items:
        return
    divisor = 1
    for _ in range(_digit_count(max(items))):
        buckets: list[list[int]] = [[] for _ in range(_BASE)]
        for value in items:
            buckets[(value // divisor) % _BASE].append(value)
        items = [value for bucket in buckets for value in bucket]
        yield list(items)
        divisor *= _BASE


def radix_passes(values: Iterable[int]) -> Iterator[list[int]]:
    """Yield the list after each decimal digit pass, least significant digit first.

    There is one pass per digit of the largest value. Raises ValueError for
    negative values and TypeError for non-integers.
    """
    return _bucket_passes(_validated(values))


def radix_sort(values: Iterable[int]) -> list[int]:
    """Return non-negative integers in ascending order using bucket radix sort."""
    items = _validated(values)
    for snapshot in _bucket_passes(items):
        items = snapshot
    return items


def _counting_pass(items: list[int], place: int) -> list[int]:
    """Stable counting sort of the items by the decimal digit at ``place``."""
    freq = [0] * _BASE
    for value in items:
        freq[(value // place) % _BASE] += 1
    ends = list(accumulate(freq))
    output = [0] * len(items)
    for value in reversed(items):
        digit = (value // place) % _BASE
        ends[digit] -= 1
        output[ends[digit]] = value
    return output


def counting_radix_sort(values: Iterable[int]) -> list[int]:
    """Return non-negative integers in ascending order using counting-sort passes."""
    items = _validated(values)
    if not items:
        return items
    largest = max(items)
    place = 1
    while largest:
        items = _counting_pass(items, place)
        place *= _BASE
        largest //= _BASE
    return items