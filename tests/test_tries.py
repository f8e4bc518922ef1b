import pytest
from hypothesis import given
from hypothesis import strategies as st

from cpkit.tries import BinaryTrie, Trie

words = st.lists(st.text(alphabet="abc", min_size=1, max_size=5), max_size=20)
word = st.text(alphabet="abc", min_size=1, max_size=5)
values = st.lists(st.integers(0, 2**32 - 1), min_size=1, max_size=20)
value = st.integers(0, 2**32 - 1)


@given(words, word)
def test_trie_counts_words_and_prefixes(inserted, query):
    trie = Trie()
    for w in inserted:
        trie.insert(w)
    assert trie.count_word(query) == inserted.count(query)
    assert trie.count_prefix(query) == sum(w.startswith(query) for w in inserted)


@given(words)
def test_trie_every_inserted_word_is_counted(inserted):
    trie = Trie()
    for w in inserted:
        trie.insert(w)
    for w in inserted:
        assert trie.count_word(w) == inserted.count(w)
        assert trie.count_prefix(w[:1]) == sum(x.startswith(w[:1]) for x in inserted)


@given(values, value)
def test_max_xor_matches_best_pair(stored, query):
    trie = BinaryTrie()
    for v in stored:
        trie.insert(v)
    assert trie.max_xor(query) == max(query ^ v for v in stored)


@given(values)
def test_binary_counts_copies(stored):
    trie = BinaryTrie()
    for v in stored:
        trie.insert(v)
    assert len(trie) == len(stored)
    for v in stored:
        assert trie.count_word(v) == stored.count(v)
        assert trie.count_prefix(v) == stored.count(v)


def test_erase_removes_value_from_max_xor():
    trie = BinaryTrie()
    trie.insert(0)
    trie.insert(2**32 - 1)
    trie.erase(2**32 - 1)
    assert trie.max_xor(5) == 5 ^ 0
    assert trie.count_word(2**32 - 1) == 0


@given(values, value)
def test_erase_then_max_xor_over_rest(stored, query):
    trie = BinaryTrie()
    for v in stored:
        trie.insert(v)
    trie.erase(stored[0])
    rest = stored[1:]
    if rest:
        assert trie.max_xor(query) == max(query ^ v for v in rest)
    else:
        with pytest.raises(ValueError):
            trie.max_xor(query)


def test_erase_missing_raises_keyerror():
    trie = BinaryTrie()
    trie.insert(3)
    with pytest.raises(KeyError):
        trie.erase(4)


def test_max_xor_on_empty_trie_raises():
    with pytest.raises(ValueError):
        BinaryTrie().max_xor(1)


def test_negative_numbers_use_low_32_bits():
    trie = BinaryTrie()
    trie.insert(-1)
    assert trie.count_word(2**32 - 1) == 1