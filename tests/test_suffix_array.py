import os

import pytest
from hypothesis import given
from hypothesis import strategies as st

from cpkit.suffix_array import SuffixArray, adjacent_lcp, suffix_array

texts = st.text(alphabet="abc", min_size=1, max_size=30)


def _common(a: str, b: str) -> int:
    return len(os.path.commonprefix([a, b]))


def test_banana_suffix_array():
    assert suffix_array("banana") == [5, 3, 1, 0, 4, 2]


def test_banana_adjacent_lcp():
    assert adjacent_lcp("banana") == [0, 1, 3, 0, 0, 2]


def test_empty_string():
    assert suffix_array("") == []
    assert adjacent_lcp("") == []


def test_single_character():
    sa = SuffixArray("z")
    assert sa.sa == [0]
    assert sa.get_lcp(0, 0) == 1


@given(texts)
def test_suffix_array_is_sorted_permutation(s):
    sa = suffix_array(s)
    assert sorted(sa) == list(range(len(s)))
    suffixes = [s[i:] for i in sa]
    assert suffixes == sorted(suffixes)


@given(texts)
def test_adjacent_lcp_matches_neighbours(s):
    sa = suffix_array(s)
    lcp = adjacent_lcp(s)
    assert lcp[0] == 0
    for r in range(1, len(s)):
        assert lcp[r] == _common(s[sa[r - 1] :], s[sa[r] :])


@given(texts)
def test_rank_inverts_array(s):
    sa = SuffixArray(s)
    for position, start in enumerate(sa.sa):
        assert sa.rank[start] == position


@given(texts, st.data())
def test_get_lcp_matches_direct_comparison(s, data):
    sa = SuffixArray(s)
    i = data.draw(st.integers(0, len(s) - 1))
    j = data.draw(st.integers(0, len(s) - 1))
    assert sa.get_lcp(i, j) == _common(s[i:], s[j:])


@given(texts, st.text(alphabet="abc", max_size=4))
def test_bounds_count_occurrences(s, t):
    sa = SuffixArray(s)
    low, high = sa.lower_bound(t), sa.upper_bound(t)
    assert 0 <= low <= high <= len(s)
    expected = sorted(i for i in range(len(s)) if s.startswith(t, i)) if t else list(range(len(s)))
    assert sorted(sa.sa[low:high]) == expected


@given(texts, st.data())
def test_find_occurrence_covers_all_matches(s, data):
    sa = SuffixArray(s)
    position = data.draw(st.integers(0, len(s) - 1))
    length = data.draw(st.integers(0, len(s) - position))
    first, last = sa.find_occurrence(position, length)
    piece = s[position : position + length]
    starts = sorted(sa.sa[first : last + 1])
    assert starts == [i for i in range(len(s)) if s.startswith(piece, i)]


def test_lcp_query_is_range_minimum():
    sa = SuffixArray("mississippi")
    for left in range(len(sa.lcp)):
        for right in range(left, len(sa.lcp)):
            assert sa.lcp_query(left, right) == min(sa.lcp[left : right + 1])


def test_get_lcp_rejects_bad_position():
    sa = SuffixArray("abc")
    with pytest.raises(IndexError):
        sa.get_lcp(0, 3)


def test_lcp_query_rejects_bad_range():
    sa = SuffixArray("abc")
    with pytest.raises(IndexError):
        sa.lcp_query(1, 5)


def test_find_occurrence_rejects_negative_length():
    sa = SuffixArray("abc")
    with pytest.raises(ValueError):
        sa.find_occurrence(0, -1)