"""Prefix function, Knuth-Morris-Pratt search and the prefix automaton."""

from __future__ import annotations

import string
from collections.abc import Iterator

ALPHABET = string.ascii_lowercase
_SENTINEL = "#"


def prefix_function(s: str) -> list[int]:
    """``pi[i]`` is the length of the longest proper border of ``s[:i + 1]``."""
    pi = [0] * len(s)
    for i in range(1, len(s)):
        k = pi[i - 1]
        while k and s[k] != s[i]:
            k = pi[k - 1]
        if s[k] == s[i]:
            k += 1
        pi[i] = k
    return pi


def kmp_search(text: str, pattern: str) -> list[int]:
    """Start indices of every (possibly overlapping) occurrence of ``pattern``."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    pi = prefix_function(pattern)
    found: list[int] = []
    j = 0
    for i, ch in enumerate(text):
        while j and ch != pattern[j]:
            j = pi[j - 1]
        if ch == pattern[j]:
            j += 1
        if j == len(pattern):
            found.append(i + 1 - j)
            j = pi[j - 1]
    return found


class PrefixAutomaton:
    """Automaton whose state is the longest prefix of the pattern seen as a suffix.

    States run from 0 to ``len(pattern)``; reaching ``len(pattern)`` means the
    whole pattern has just been matched.  Input is lower-case letters.
    """

    def __init__(self, pattern: str) -> None:
        self.pattern = pattern
        extended = pattern + _SENTINEL
        pi = prefix_function(extended)
        table: list[list[int]] = []
        for i, ch in enumerate(extended):
            row = []
            for c, letter in enumerate(ALPHABET):
                if i > 0 and letter != ch:
                    row.append(table[pi[i - 1]][c])
                else:
                    row.append(i + (letter == ch))
            table.append(row)
        self._table = table

    def step(self, state: int, char: str) -> int:
        """State reached from ``state`` after reading ``char``."""
        if not 0 <= state <= len(self.pattern):
            raise ValueError(f"state {state} outside [0, {len(self.pattern)}]")
        if len(char) != 1 or char not in ALPHABET:
            raise ValueError(f"expected a lower-case letter, got {char!r}")
        return self._table[state][ord(char) - ord("a")]

    def feed(self, text: str) -> Iterator[int]:
        """Yield the state after each character of ``text``, starting from 0."""
        state = 0
        for ch in text:
            state = self.step(state, ch)
            yield state