import random

import pytest

from algoshelf.insertion_sort import insertion_sort, insertion_sort_recursive


def _is_sorted(values):
    return all(a <= b for a, b in zip(values, values[1:]))


@pytest.mark.parametrize("seed", range(5))
def test_random_signed_values(seed):
    rng = random.Random(seed)
    size = rng.randrange(500)
    data = [rng.randrange(100) - 50 for _ in range(size)]
    first = insertion_sort(data)
    second = insertion_sort_recursive(data)
    assert _is_sorted(first)
    assert _is_sorted(second)
    assert sorted(first) == sorted(data)
    assert sorted(second) == sorted(data)


def test_empty_and_single():
    assert insertion_sort([]) == []
    assert insertion_sort([-7]) == [-7]
    assert insertion_sort_recursive([]) == []
    assert insertion_sort_recursive([-7]) == [-7]


def test_input_is_not_modified():
    data = [4, -1, 4, 0]
    first = insertion_sort(data)
    second = insertion_sort_recursive(data)
    assert data == [4, -1, 4, 0]
    assert first == [-1, 0, 4, 4]
    assert second == [-1, 0, 4, 4]


def test_strings_are_sorted():
    words = ["pear", "apple", "fig", "apple"]
    assert insertion_sort(words) == ["apple", "apple", "fig", "pear"]
    assert insertion_sort_recursive(words) == ["apple", "apple", "fig", "pear"]


def test_reversed_input():
    data = list(range(50, 0, -1))
    assert insertion_sort(data) == list(range(1, 51))
    assert insertion_sort_recursive(data) == list(range(1, 51))