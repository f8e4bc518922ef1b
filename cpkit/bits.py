"""Bit tricks, bit-wise prefix queries, subset enumeration and base conversion."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from enum import IntEnum
from itertools import accumulate

_WORD_MASK = (1 << 64) - 1


def _word(x: int) -> int:
    value = x & _WORD_MASK
    if value == 0:
        raise ValueError("undefined for zero")
    return value


def msb(x: int) -> int:
    """Index of the highest set bit of ``x`` as a 64-bit word."""
    return _word(x).bit_length() - 1


def lsb(x: int) -> int:
    """Index of the lowest set bit of ``x`` as a 64-bit word."""
    value = _word(x)
    return (value & -value).bit_length() - 1


def bit_count(x: int) -> int:
    """Number of set bits of ``x`` as a 64-bit word."""
    return bin(x & _WORD_MASK).count("1")


def is_power_of_two(n: int) -> bool:
    return n != 0 and n & (n - 1) == 0


class BitOperation(IntEnum):
    SET_LOWEST_ZERO = 1
    CLEAR_LOWEST_ONE = 2
    FILL_TRAILING_ZEROS = 3
    CLEAR_TRAILING_ONES = 4


def apply_bit_operation(n: int, operation: int) -> int:
    """Apply one of the ``BitOperation`` transforms to ``n``."""
    op = BitOperation(operation)
    if op is BitOperation.SET_LOWEST_ZERO:
        return n | (n + 1)
    if op is BitOperation.CLEAR_LOWEST_ONE:
        return n & (n - 1)
    if op is BitOperation.FILL_TRAILING_ZEROS:
        return n | (n - 1)
    return n & (n + 1)


def to_base(n: int, base: int) -> list[int]:
    """Digits of ``n`` in ``base``, most significant first; empty for zero."""
    if base < 2:
        raise ValueError(f"base must be at least 2, got {base}")
    if n < 0:
        raise ValueError(f"expected a non-negative integer, got {n}")
    digits = []
    while n:
        n, digit = divmod(n, base)
        digits.append(digit)
    return digits[::-1]


def from_base(digits: Iterable[int], base: int) -> int:
    """Value of the digit sequence (most significant first) in ``base``."""
    value = 0
    for digit in digits:
        value = value * base + digit
    return value


def to_binary_digits(n: int) -> list[int]:
    """Binary digits of ``n``, most significant first; empty for zero."""
    return to_base(n, 2)


def subsets(values: Sequence) -> Iterator[list]:
    """Every subset of ``values`` in bitmask order, elements in input order."""
    items = list(values)
    for mask in range(1 << len(items)):
        yield [item for j, item in enumerate(items) if mask >> j & 1]


class PrefixAnd:
    """Bit-wise AND of any range of 32-bit values in O(32) per query."""

    WIDTH = 32

    def __init__(self, values: Iterable[int]) -> None:
        items = list(values)
        self._size = len(items)
        self._counts = [
            list(accumulate(((v >> bit) & 1 for v in items), initial=0))
            for bit in range(self.WIDTH)
        ]

    def __len__(self) -> int:
        return self._size

    def query(self, left: int, right: int) -> int:
        """AND of positions ``left`` through ``right``, 1-based and inclusive."""
        if not 1 <= left <= right <= self._size:
            raise IndexError(f"range [{left}, {right}] outside [1, {self._size}]")
        length = right - left + 1
        return sum(
            1 << bit
            for bit, counts in enumerate(self._counts)
            if counts[right] - counts[left - 1] == length
        )