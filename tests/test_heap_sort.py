import random

import pytest

from algoshelf.heap_sort import heap_sort, heap_sort_incremental


@pytest.mark.parametrize("seed", range(5))
def test_random_input_matches_sorted(seed):
    rng = random.Random(seed)
    data = [rng.randrange(100) for _ in range(rng.randrange(1, 60))]
    assert heap_sort(data) == sorted(data)
    assert heap_sort_incremental(data) == sorted(data)


def test_negative_and_duplicate_values():
    data = [5, -3, 5, 0, -3, 7, 7, 1]
    assert heap_sort(data) == sorted(data)
    assert heap_sort_incremental(data) == sorted(data)


def test_input_is_not_modified():
    data = [3, 1, 2]
    first = heap_sort(data)
    second = heap_sort_incremental(data)
    assert data == [3, 1, 2]
    assert first == [1, 2, 3]
    assert second == [1, 2, 3]


def test_empty_and_single():
    assert heap_sort([]) == []
    assert heap_sort([42]) == [42]
    assert heap_sort_incremental([]) == []
    assert heap_sort_incremental([42]) == [42]


def test_accepts_any_iterable():
    assert heap_sort(iter((9, 4, 6))) == [4, 6, 9]
    assert heap_sort_incremental(iter((9, 4, 6))) == [4, 6, 9]


def test_already_sorted_and_reversed():
    ascending = list(range(30))
    assert heap_sort(ascending) == ascending
    assert heap_sort(list(reversed(ascending))) == ascending
    assert heap_sort_incremental(ascending) == ascending
    assert heap_sort_incremental(list(reversed(ascending))) == ascending