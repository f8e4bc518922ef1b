"""A segment tree over any associative combining function."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Generic, TypeVar

from .bits import msb

T = TypeVar("T")


class SegmentTree(Generic[T]):
    """Point updates and half-open range queries in O(log n).

    ``combine`` must be associative and ``identity`` its neutral element;
    the order of operands is kept, so ``combine`` need not be commutative.
    """

    def __init__(self, size: int, combine: Callable[[T, T], T], identity: T) -> None:
        if size < 1:
            raise ValueError(f"size must be positive, got {size}")
        self.size = size
        self._capacity = 1 << (msb(size) + 1)
        self._combine = combine
        self._identity = identity
        self._nodes: list[T] = [identity] * (2 * self._capacity)

    def __len__(self) -> int:
        return self.size

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self.size:
            raise IndexError(f"index {index} outside [0, {self.size})")

    def build(self, values: Iterable[T]) -> None:
        """Replace the contents with ``values``; missing positions hold the identity."""
        items = list(values)
        if len(items) > self.size:
            raise ValueError(f"{len(items)} values do not fit in a tree of size {self.size}")
        cap = self._capacity
        nodes = self._nodes
        nodes[cap:] = items + [self._identity] * (cap - len(items))
        for i in range(cap - 1, 0, -1):
            nodes[i] = self._combine(nodes[2 * i], nodes[2 * i + 1])

    def update(self, index: int, value: T) -> None:
        """Set position ``index`` to ``value``."""
        self._check_index(index)
        nodes = self._nodes
        i = index + self._capacity
        nodes[i] = value
        i //= 2
        while i:
            nodes[i] = self._combine(nodes[2 * i], nodes[2 * i + 1])
            i //= 2

    def query(self, left: int, right: int) -> T:
        """Combination of positions ``left`` up to but excluding ``right``."""
        if not 0 <= left <= right <= self.size:
            raise IndexError(f"range [{left}, {right}) outside [0, {self.size}]")
        nodes = self._nodes
        result_left = self._identity
        result_right = self._identity
        lo = left + self._capacity
        hi = right + self._capacity
        while lo < hi:
            if lo & 1:
                result_left = self._combine(result_left, nodes[lo])
                lo += 1
            if hi & 1:
                hi -= 1
                result_right = self._combine(nodes[hi], result_right)
            lo //= 2
            hi //= 2
        return self._combine(result_left, result_right)