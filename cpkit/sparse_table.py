"""Sparse table for static range queries."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Generic, TypeVar

T = TypeVar("T")


class SparseTable(Generic[T]):
    """Precomputed combinations of power-of-two blocks of a fixed sequence."""

    def __init__(self, values: Iterable[T], combine: Callable[[T, T], T]) -> None:
        base = list(values)
        self._combine = combine
        self._size = len(base)
        self._levels: list[list[T]] = [base]
        width = 1
        while 2 * width <= self._size:
            previous = self._levels[-1]
            self._levels.append([combine(a, b) for a, b in zip(previous, previous[width:])])
            width *= 2

    def __len__(self) -> int:
        return self._size

    def _check(self, left: int, right: int) -> None:
        if not 0 <= left <= right < self._size:
            raise IndexError(f"range [{left}, {right}] outside [0, {self._size})")

    def query(self, left: int, right: int) -> T:
        """Combination of positions ``left`` through ``right`` inclusive.

        Uses disjoint blocks, so any associative ``combine`` works.
        """
        self._check(left, right)
        remaining = right - left + 1
        result = None
        while remaining:
            level = remaining.bit_length() - 1
            part = self._levels[level][left]
            result = part if result is None else self._combine(result, part)
            left += 1 << level
            remaining -= 1 << level
        return result

    def query_idempotent(self, left: int, right: int) -> T:
        """Combination of ``left`` through ``right`` in O(1) from two overlapping blocks.

        Only correct when ``combine`` is idempotent, such as min, max or gcd.
        """
        self._check(left, right)
        level = (right - left + 1).bit_length() - 1
        row = self._levels[level]
        return self._combine(row[left], row[right - (1 << level) + 1])