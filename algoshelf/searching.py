"""Searching sorted and unsorted sequences, and row/column sorted matrices."""

from collections.abc import Sequence
from math import isqrt
from typing import Any


def interpolation_search(values: Sequence[int], key: int) -> int | None:
    """Return an index of ``key`` in ascending ``values``, or None when absent.

    The probe position is interpolated from the values at both ends of the range.
    """
    low, high = 0, len(values) - 1
    while low <= high and values[low] <= key <= values[high]:
        span = values[high] - values[low]
        if span == 0:
            return low
        pos = low + ((key - values[low]) * (high - low)) // span
        if key > values[pos]:
            low = pos + 1
        elif key < values[pos]:
            high = pos - 1
        else:
            return pos
    return None


def jump_search(values: Sequence[Any], key: Any) -> int | None:
    """Return an index of ``key`` in ascending ``values``, or None when absent.

    Blocks of about the square root of the length are skipped, then the
    block that may hold the key is scanned.
    """
    n = len(values)
    if n == 0:
        return None
    jump = isqrt(n)
    step = jump
    prev = 0
    while values[min(step, n) - 1] < key:
        prev = step
        step += jump
        if prev >= n:
            return None
    while values[prev] < key:
        prev += 1
        if prev == min(step, n):
            return None
    return prev if values[prev] == key else None


def linear_search(values: Sequence[Any], key: Any) -> bool:
    """Return whether ``key`` occurs in ``values``."""
    return any(value == key for value in values)


def find_all(values: Sequence[Any], key: Any) -> list[int]:
    """Return every index at which ``key`` occurs, in ascending order."""
    return [index for index, value in enumerate(values) if value == key]


def binary_search(values: Sequence[Any], key: Any) -> int | None:
    """Return an index of ``key`` in ascending ``values``, or None when absent."""
    left, right = 0, len(values) - 1
    while left <= right:
        pos = left + (right - left) // 2
        if values[pos] == key:
            return pos
        if values[pos] > key:
            right = pos - 1
        else:
            left = pos + 1
    return None


def _search_row(row: Sequence[Any], low: int, high: int, key: Any) -> int | None:
    while low <= high:
        mid = (low + high) // 2
        if row[mid] == key:
            return mid
        if row[mid] > key:
            high = mid - 1
        else:
            low = mid + 1
    return None


def matrix_search(matrix: Sequence[Sequence[Any]], key: Any) -> tuple[int, int] | None:
    """Return ``(row, column)`` of ``key`` in a matrix sorted along rows and columns.

    The middle column is binary searched to pick two neighbouring rows, whose
    halves are then binary searched. Returns None when the key is absent and
    raises ValueError for a matrix whose rows differ in length.
    """
    n = len(matrix)
    if n == 0:
        return None
    m = len(matrix[0])
    if any(len(row) != m for row in matrix):
        raise ValueError("all matrix rows must have the same length")
    if m == 0:
        return None

    def in_row(i: int, low: int, high: int) -> tuple[int, int] | None:
        column = _search_row(matrix[i], low, high, key)
        return None if column is None else (i, column)

    if n == 1:
        return in_row(0, 0, m - 1)

    i_low, i_high, j_mid = 0, n - 1, m // 2
    while i_low + 1 < i_high:
        i_mid = (i_low + i_high) // 2
        if matrix[i_mid][j_mid] == key:
            return (i_mid, j_mid)
        if matrix[i_mid][j_mid] > key:
            i_high = i_mid
        else:
            i_low = i_mid

    first, second = matrix[i_low], matrix[i_low + 1]
    if first[j_mid] == key:
        return (i_low, j_mid)
    if second[j_mid] == key:
        return (i_low + 1, j_mid)
    if j_mid > 0 and key <= first[j_mid - 1]:
        return in_row(i_low, 0, j_mid - 1)
    if j_mid + 1 < m and first[j_mid + 1] <= key <= first[m - 1]:
        return in_row(i_low, j_mid + 1, m - 1)
    if j_mid > 0 and key <= second[j_mid - 1]:
        return in_row(i_low + 1, 0, j_mid - 1)
    return in_row(i_low + 1, j_mid + 1, m - 1)