"""Aho-Corasick automaton over lower-case letters and a minimum-partition solver."""

from __future__ import annotations

import argparse
import math
import sys
from collections import deque
from collections.abc import Iterable, Iterator, Sequence

ALPHABET_SIZE = 26


def _index(ch: str) -> int:
    idx = ord(ch) - ord("a") if len(ch) == 1 else -1
    if not 0 <= idx < ALPHABET_SIZE:
        raise ValueError(f"expected a lower-case letter, got {ch!r}")
    return idx


class AhoCorasick:
    """Multi-pattern matcher; add patterns, call ``compute``, then ``advance``."""

    def __init__(self) -> None:
        self._next: list[list[int]] = []
        self._link: list[int] = []
        self._out_link: list[int] = []
        self._out: list[list[int]] = []
        self._patterns = 0
        self._computed = False
        self._new_node()

    def _new_node(self) -> int:
        self._next.append([0] * ALPHABET_SIZE)
        self._link.append(0)
        self._out_link.append(0)
        self._out.append([])
        return len(self._next) - 1

    def add_pattern(self, pattern: str) -> int:
        """Insert ``pattern`` and return its id, counting from 0."""
        if self._computed:
            raise RuntimeError("patterns cannot be added after compute()")
        if not pattern:
            raise ValueError("pattern must not be empty")
        state = 0
        for ch in pattern:
            c = _index(ch)
            if not self._next[state][c]:
                self._next[state][c] = self._new_node()
            state = self._next[state][c]
        self._out[state].append(self._patterns)
        self._patterns += 1
        return self._patterns - 1

    def compute(self) -> None:
        """Build suffix links, output links and the full transition table."""
        if self._computed:
            return
        nxt, link, out, out_link = self._next, self._link, self._out, self._out_link
        queue = deque([0])
        while queue:
            u = queue.popleft()
            for c in range(ALPHABET_SIZE):
                v = nxt[u][c]
                if not v:
                    nxt[u][c] = nxt[link[u]][c]
                    continue
                link[v] = nxt[link[u]][c] if u else 0
                out_link[v] = link[v] if out[link[v]] else out_link[link[v]]
                queue.append(v)
        self._computed = True

    def advance(self, state: int, char: str) -> int:
        """State reached from ``state`` after reading ``char``."""
        if not 0 <= state < len(self._next):
            raise ValueError(f"unknown state {state}")
        c = _index(char)
        while state and not self._next[state][c]:
            state = self._link[state]
        return self._next[state][c]

    def matches(self, state: int) -> Iterator[int]:
        """Ids of the patterns that end at ``state``, longest first."""
        if not 0 <= state < len(self._next):
            raise ValueError(f"unknown state {state}")
        while state:
            yield from self._out[state]
            state = self._out_link[state]


def min_partition(patterns: Iterable[str], text: str) -> int | None:
    """Fewest pieces that split ``text`` into patterns, or None if impossible."""
    automaton = AhoCorasick()
    lengths = {automaton.add_pattern(p): len(p) for p in sorted(set(patterns))}
    automaton.compute()
    best: list[float] = []
    state = 0
    for i, ch in enumerate(text):
        state = automaton.advance(state, ch)
        candidate = math.inf
        for pattern_id in automaton.matches(state):
            start = i - lengths[pattern_id]
            candidate = min(candidate, (best[start] if start >= 0 else 0) + 1)
        best.append(candidate)
    if not best:
        return 0
    return None if best[-1] == math.inf else int(best[-1])


def _solve_cases(tokens: Iterator[str]) -> Iterator[str]:
    cases = int(next(tokens))
    for case in range(1, cases + 1):
        count = int(next(tokens))
        patterns: Sequence[str] = [next(tokens) for _ in range(count)]
        text = next(tokens)
        result = min_partition(patterns, text)
        yield f"Case {case}: {'impossible' if result is None else result}"


def main(argv: list[str] | None = None) -> int:
    """Read test cases from standard input and print one answer per case."""
    parser = argparse.ArgumentParser(
        description="Split texts into the fewest pieces drawn from given patterns. "
        "Input: a case count, then per case a pattern count, the patterns and the text."
    )
    parser.parse_args(argv)
    for line in _solve_cases(iter(sys.stdin.read().split())):
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())