"""Square-root decomposition for point updates and range sums."""

from __future__ import annotations

import math
from collections.abc import Iterable


class BlockSums:
    """Values split into blocks of about sqrt(n), each with a cached sum."""

    def __init__(self, values: Iterable[int]) -> None:
        self._values = list(values)
        self._block = math.isqrt(len(self._values)) + 1
        block = self._block
        self._sums = [
            sum(self._values[start : start + block])
            for start in range(0, len(self._values), block)
        ]

    def __len__(self) -> int:
        return len(self._values)

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self._values):
            raise IndexError(f"index {index} outside [0, {len(self._values)})")

    def update(self, index: int, value: int) -> None:
        """Set position ``index`` (0-based) to ``value``."""
        self._check(index)
        self._sums[index // self._block] += value - self._values[index]
        self._values[index] = value

    def range_sum(self, left: int, right: int) -> int:
        """Sum of positions ``left`` through ``right``, 0-based and inclusive."""
        self._check(left)
        self._check(right)
        if left > right:
            raise IndexError(f"empty range [{left}, {right}]")
        block = self._block
        first, last = left // block, right // block
        if first == last:
            return sum(self._values[left : right + 1])
        return (
            sum(self._values[left : (first + 1) * block])
            + sum(self._sums[first + 1 : last])
            + sum(self._values[last * block : right + 1])
        )