import pytest

from algoshelf.array_utils import find_candidate, insert_at, majority_element, odd_occurrence


def test_majority_source_examples():
    assert majority_element([2, 2, 3, 5, 2, 2, 6]) == 2
    assert majority_element([3, 3, 4, 2, 4, 4, 2, 4, 4]) == 4
    assert majority_element([1, 3, 3, 1, 2]) is None


def test_majority_with_last_element_deciding():
    assert majority_element([1, 2, 1]) == 1


def test_majority_empty():
    assert majority_element([]) is None


def test_candidate_is_majority_when_one_exists():
    values = [2, 2, 3, 5, 2, 2, 6]
    assert find_candidate(values) == majority_element(values)


def test_candidate_of_empty_raises():
    with pytest.raises(ValueError):
        find_candidate([])


def test_odd_occurrence_source_example():
    assert odd_occurrence([1, 2, 3, 2, 3, 1, 3]) == 3


def test_odd_occurrence_single_and_empty():
    assert odd_occurrence([42]) == 42
    assert odd_occurrence([]) == 0


def test_insert_at_middle():
    original = [1, 2, 3]
    assert insert_at(original, 9, 2) == [1, 9, 2, 3]
    assert original == [1, 2, 3]


def test_insert_at_ends():
    original = [4, 5, 6]
    front = insert_at(original, 7, 1)
    back = insert_at(original, 7, len(original) + 1)
    assert front[0] == 7 and front[1:] == original
    assert back[-1] == 7 and back[:-1] == original


@pytest.mark.parametrize("position", [0, -1, 5])
def test_insert_at_bad_position(position):
    with pytest.raises(IndexError):
        insert_at([1, 2, 3], 9, position)