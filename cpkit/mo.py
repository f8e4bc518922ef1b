"""Offline range queries answered in Mo's order."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

DEFAULT_BLOCK_SIZE = 320


@dataclass(frozen=True)
class RangeQuery:
    """An inclusive range ``left..right`` with the position of its answer."""

    left: int
    right: int
    index: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.left <= self.right:
            raise ValueError(f"invalid range [{self.left}, {self.right}]")


def mo_order(
    queries: Iterable[RangeQuery], block_size: int = DEFAULT_BLOCK_SIZE
) -> list[RangeQuery]:
    """Queries sorted by block of ``left``, then ``right`` alternating direction."""
    if block_size < 1:
        raise ValueError(f"block size must be positive, got {block_size}")

    def key(query: RangeQuery) -> tuple[int, int]:
        block = query.left // block_size
        return block, -query.right if block & 1 else query.right

    return sorted(queries, key=key)


def solve_offline(
    queries: Iterable[tuple[int, int]],
    add: Callable[[int], None],
    remove: Callable[[int], None],
    answer: Callable[[], Any],
    block_size: int = DEFAULT_BLOCK_SIZE,
) -> list:
    """Answer inclusive ``(left, right)`` queries by moving a window.

    ``add`` and ``remove`` are called with positions entering and leaving the
    window; ``answer`` reports the result for the current window.  Results
    come back in the order the queries were given.
    """
    ranged = [RangeQuery(left, right, i) for i, (left, right) in enumerate(queries)]
    results: list = [None] * len(ranged)
    left, right = 0, -1
    for query in mo_order(ranged, block_size):
        while query.left < left:
            left -= 1
            add(left)
        while right < query.right:
            right += 1
            add(right)
        while left < query.left:
            remove(left)
            left += 1
        while right > query.right:
            remove(right)
            right -= 1
        results[query.index] = answer()
    return results