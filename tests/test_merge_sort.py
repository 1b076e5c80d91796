import random

import pytest

from algoshelf.merge_sort import merge_passes, merge_sort, merge_sort_bottom_up


@pytest.mark.parametrize("sort", [merge_sort, merge_sort_bottom_up])
@pytest.mark.parametrize("seed", range(6))
def test_random_input_matches_sorted(sort, seed):
    rng = random.Random(seed)
    data = [rng.randrange(-100, 100) for _ in range(rng.randrange(1, 80))]
    assert sort(data) == sorted(data)


@pytest.mark.parametrize("sort", [merge_sort, merge_sort_bottom_up])
def test_small_inputs(sort):
    assert sort([]) == []
    assert sort([3]) == [3]
    assert sort([2, 1]) == [1, 2]


@pytest.mark.parametrize("sort", [merge_sort, merge_sort_bottom_up])
def test_input_is_not_modified(sort):
    data = [9, 3, 7, 3]
    result = sort(data)
    assert data == [9, 3, 7, 3]
    assert result == sorted(data)


def test_passes_for_documented_example():
    passes = list(merge_passes([15, 14, 13, 12, 11]))
    assert passes == [
        [14, 15, 12, 13, 11],
        [12, 13, 14, 15, 11],
        [11, 12, 13, 14, 15],
    ]


def test_no_passes_for_short_input():
    assert list(merge_passes([])) == []
    assert list(merge_passes([5])) == []


def test_every_pass_is_a_permutation_and_last_is_sorted():
    rng = random.Random(11)
    data = [rng.randrange(50) for _ in range(37)]
    passes = list(merge_passes(data))
    assert all(sorted(p) == sorted(data) for p in passes)
    assert passes[-1] == sorted(data)


def test_pass_snapshots_are_independent():
    passes = list(merge_passes([4, 3, 2, 1]))
    passes[0].clear()
    assert passes[-1] == [1, 2, 3, 4]