import pytest

from algoshelf.patterns import naive_search, rabin_karp_search

TEXT = "AABCAB12AFAABCABFFEGABCAB"
PATTERNS = ["ABCAB", "FFF", "CAB", "A", "AB12", TEXT]


def test_naive_search_source_example():
    assert naive_search(TEXT, "ABCAB") == [1, 11, 20]


def test_rabin_karp_source_example():
    assert rabin_karp_search(TEXT, "CAB", 256, 29) == [3, 13, 22]


def test_absent_pattern():
    assert naive_search(TEXT, "FFF") == []
    assert rabin_karp_search(TEXT, "FFF") == []


@pytest.mark.parametrize("pattern", PATTERNS)
def test_both_searches_agree(pattern):
    assert rabin_karp_search(TEXT, pattern) == naive_search(TEXT, pattern)


@pytest.mark.parametrize("pattern", PATTERNS)
def test_reported_positions_match_pattern(pattern):
    for index in rabin_karp_search(TEXT, pattern, 10, 13):
        assert TEXT[index:index + len(pattern)] == pattern


def test_overlapping_matches():
    assert naive_search("aaaa", "aa") == rabin_karp_search("aaaa", "aa")
    assert len(naive_search("aaaa", "aa")) == 3


def test_pattern_longer_than_text():
    assert naive_search("ab", "abc") == []
    assert rabin_karp_search("ab", "abc") == []


def test_empty_pattern_matches_everywhere():
    assert rabin_karp_search("abc", "") == naive_search("abc", "")
    assert len(naive_search("abc", "")) == 4


def test_bad_modulus_raises():
    with pytest.raises(ValueError):
        rabin_karp_search(TEXT, "AB", 256, 0)