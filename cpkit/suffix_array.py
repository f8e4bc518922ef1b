"""Suffix arrays with LCP information, pattern bounds and occurrence ranges."""

from __future__ import annotations

from bisect import bisect_left, bisect_right

from .sparse_table import SparseTable


def suffix_array(s: str) -> list[int]:
    """Start positions of the suffixes of ``s`` in lexicographic order.

    Built by prefix doubling: suffixes are ranked by their first ``2k``
    characters from the ranks of their first ``k``, with a suffix that runs
    out of characters ordered before any that continues.
    """
    n = len(s)
    if n == 0:
        return []
    order = sorted(range(n), key=lambda i: s[i])
    rank = [0] * n
    for pos in range(1, n):
        rank[order[pos]] = rank[order[pos - 1]] + (s[order[pos]] != s[order[pos - 1]])
    width = 1
    while rank[order[-1]] < n - 1:
        def key(i: int, rank: list[int] = rank, width: int = width) -> tuple[int, int]:
            return rank[i], rank[i + width] if i + width < n else -1

        order.sort(key=key)
        new_rank = [0] * n
        for pos in range(1, n):
            new_rank[order[pos]] = new_rank[order[pos - 1]] + (
                key(order[pos]) != key(order[pos - 1])
            )
        rank = new_rank
        width *= 2
    return order


def _kasai(s: str, sa: list[int], rank: list[int]) -> list[int]:
    """``lcp[r]`` is the common prefix length of suffixes ranked ``r`` and ``r + 1``."""
    n = len(s)
    lcp = [0] * max(n - 1, 0)
    k = 0
    for i in range(n):
        if rank[i] == n - 1:
            k = 0
            continue
        j = sa[rank[i] + 1]
        while i + k < n and j + k < n and s[i + k] == s[j + k]:
            k += 1
        lcp[rank[i]] = k
        if k:
            k -= 1
    return lcp


def _ranks(sa: list[int]) -> list[int]:
    rank = [0] * len(sa)
    for position, start in enumerate(sa):
        rank[start] = position
    return rank


def adjacent_lcp(s: str) -> list[int]:
    """Common prefix length of each suffix in sorted order with the one before it.

    The first entry is 0, so the result has one entry per suffix.
    """
    if not s:
        return []
    sa = suffix_array(s)
    return [0] + _kasai(s, sa, _ranks(sa))


class SuffixArray:
    """Sorted suffixes of a string with constant-time LCP queries."""

    def __init__(self, s: str) -> None:
        self.s = s
        self.n = len(s)
        self.sa = suffix_array(s)
        self.rank = _ranks(self.sa)
        self.lcp = _kasai(s, self.sa, self.rank)
        self._table = SparseTable(self.lcp, min)

    def __len__(self) -> int:
        return self.n

    def lcp_query(self, left: int, right: int) -> int:
        """Minimum of ``lcp[left]`` through ``lcp[right]`` inclusive."""
        return self._table.query_idempotent(left, right)

    def _check_position(self, i: int) -> None:
        if not 0 <= i < self.n:
            raise IndexError(f"position {i} outside [0, {self.n})")

    def get_lcp(self, i: int, j: int) -> int:
        """Length of the common prefix of the suffixes starting at ``i`` and ``j``."""
        self._check_position(i)
        self._check_position(j)
        if i == j:
            return self.n - i
        low, high = sorted((self.rank[i], self.rank[j]))
        return self.lcp_query(low, high - 1)

    def _prefixes(self, length: int):
        s, sa = self.s, self.sa
        return lambda r: s[sa[r] : sa[r] + length]

    def lower_bound(self, t: str) -> int:
        """First rank whose suffix, cut to ``len(t)``, is not less than ``t``."""
        return bisect_left(range(self.n), t, key=self._prefixes(len(t)))

    def upper_bound(self, t: str) -> int:
        """First rank whose suffix, cut to ``len(t)``, is greater than ``t``."""
        return bisect_right(range(self.n), t, key=self._prefixes(len(t)))

    def find_occurrence(self, position: int, length: int) -> tuple[int, int]:
        """Inclusive rank range of suffixes starting with ``s[position:position + length]``."""
        self._check_position(position)
        if length < 0:
            raise ValueError(f"length must be non-negative, got {length}")
        p = self.rank[position]
        first = bisect_left(
            range(p), True, key=lambda m: self.lcp_query(m, p - 1) >= length
        )
        past = bisect_left(
            range(p + 1, self.n), True, key=lambda m: self.lcp_query(p, m - 1) < length
        )
        return first, p + past