"""Prefix trees over strings and over 32-bit integers."""

from __future__ import annotations

BITS = 32
_MASK = (1 << BITS) - 1


class _CharNode:
    __slots__ = ("children", "ends", "prefix")

    def __init__(self) -> None:
        self.children: dict[str, _CharNode] = {}
        self.ends = 0
        self.prefix = 0


class Trie:
    """Counts words and the words passing through each prefix."""

    def __init__(self) -> None:
        self._root = _CharNode()

    def insert(self, word: str) -> None:
        node = self._root
        for ch in word:
            node = node.children.setdefault(ch, _CharNode())
            node.prefix += 1
        node.ends += 1

    def _walk(self, word: str) -> _CharNode | None:
        node = self._root
        for ch in word:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def count_word(self, word: str) -> int:
        """How many times ``word`` was inserted."""
        node = self._walk(word)
        return node.ends if node else 0

    def count_prefix(self, word: str) -> int:
        """How many inserted words start with the non-empty prefix ``word``."""
        node = self._walk(word)
        return node.prefix if node else 0


class _BitNode:
    __slots__ = ("children", "ends", "prefix")

    def __init__(self) -> None:
        self.children: list[_BitNode | None] = [None, None]
        self.ends = 0
        self.prefix = 0


def _bits(num: int) -> list[int]:
    value = num & _MASK
    return [(value >> shift) & 1 for shift in range(BITS - 1, -1, -1)]


class BinaryTrie:
    """A multiset of 32-bit integers stored bit by bit, most significant first."""

    def __init__(self) -> None:
        self._root = _BitNode()
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def insert(self, num: int) -> None:
        node = self._root
        for bit in _bits(num):
            child = node.children[bit]
            if child is None:
                child = node.children[bit] = _BitNode()
            node = child
            node.prefix += 1
        node.ends += 1
        self._size += 1

    def _walk(self, num: int) -> _BitNode | None:
        node = self._root
        for bit in _bits(num):
            node = node.children[bit]
            if node is None:
                return None
        return node

    def erase(self, num: int) -> None:
        """Remove one copy of ``num``; raises KeyError when it is absent."""
        if not self.count_word(num):
            raise KeyError(num)
        node = self._root
        for bit in _bits(num):
            node = node.children[bit]
            node.prefix -= 1
        node.ends -= 1
        self._size -= 1

    def count_word(self, num: int) -> int:
        """How many copies of ``num`` are stored."""
        node = self._walk(num)
        return node.ends if node else 0

    def count_prefix(self, num: int) -> int:
        """How many stored values share all 32 bits with ``num``."""
        node = self._walk(num)
        return node.prefix if node else 0

    def max_xor(self, num: int) -> int:
        """Largest ``num ^ value`` over stored values, on the low 32 bits."""
        if not self._size:
            raise ValueError("the trie is empty")
        node = self._root
        result = 0
        for shift, bit in zip(range(BITS - 1, -1, -1), _bits(num)):
            wanted = node.children[1 - bit]
            if wanted is not None and wanted.prefix > 0:
                node = wanted
                result |= 1 << shift
            else:
                node = node.children[bit]
        return result