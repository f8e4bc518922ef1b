"""Randomised hashes: polynomial string hashing, multiset and digit-vector hashing."""

from __future__ import annotations

import random
from collections.abc import Iterable
from functools import total_ordering
from itertools import accumulate

MOD1 = 1_000_000_007
MOD2 = 991_831_889
_WORD = 1 << 64
_LLONG_MAX = (1 << 63) - 1


def _char_value(ch: str) -> int:
    return ord(ch) - ord("a") + 1


def _random_base(rng: random.Random, mod: int) -> int:
    return rng.randint(int(0.1 * mod), int(0.9 * mod))


class RollingHash:
    """Double polynomial hash that can grow at both ends and shrink at the front.

    ``substring`` answers range queries over the string given to ``build``.
    """

    def __init__(self, capacity: int = 0, rng: random.Random | None = None) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        rng = rng or random.Random()
        self.base1 = _random_base(rng, MOD1)
        self.base2 = _random_base(rng, MOD2)
        self._pw1 = [1]
        self._pw2 = [1]
        self._power(capacity + 1)
        self.clear()

    def _power(self, k: int) -> tuple[int, int]:
        while len(self._pw1) <= k:
            self._pw1.append(self._pw1[-1] * self.base1 % MOD1)
            self._pw2.append(self._pw2[-1] * self.base2 % MOD2)
        return self._pw1[k], self._pw2[k]

    def __len__(self) -> int:
        return self._size

    def clear(self) -> None:
        self._h1 = 0
        self._h2 = 0
        self._size = 0
        self._prefix: list[tuple[int, int]] = []

    def build(self, s: str) -> None:
        """Hash ``s`` from scratch, keeping prefix hashes for ``substring``."""
        self.clear()
        for ch in s:
            c = _char_value(ch)
            self._h1 = (self._h1 * self.base1 + c) % MOD1
            self._h2 = (self._h2 * self.base2 + c) % MOD2
            self._prefix.append((self._h1, self._h2))
        self._size = len(s)
        self._power(len(s) + 1)

    def push_back(self, char: str) -> None:
        c = _char_value(char)
        self._h1 = (self._h1 * self.base1 + c) % MOD1
        self._h2 = (self._h2 * self.base2 + c) % MOD2
        self._size += 1

    def push_front(self, char: str) -> None:
        c = _char_value(char)
        p1, p2 = self._power(self._size)
        self._h1 = (self._h1 + p1 * c) % MOD1
        self._h2 = (self._h2 + p2 * c) % MOD2
        self._size += 1

    def pop_front(self, char: str) -> None:
        """Remove ``char``, which must be the current first character."""
        if not self._size:
            raise IndexError("pop from an empty hash")
        c = _char_value(char)
        self._size -= 1
        p1, p2 = self._power(self._size)
        self._h1 = (self._h1 - c * p1) % MOD1
        self._h2 = (self._h2 - c * p2) % MOD2

    def digest(self) -> int:
        """Combined hash of the current contents."""
        return self._h1 * self._h2

    def substring(self, left: int, right: int) -> int:
        """Hash of the built string's positions ``left`` through ``right``."""
        if not 0 <= left <= right < len(self._prefix):
            raise IndexError(f"range [{left}, {right}] outside [0, {len(self._prefix)})")
        end1, end2 = self._prefix[right]
        start1, start2 = self._prefix[left - 1] if left else (0, 0)
        p1, p2 = self._power(right - left + 1)
        return ((end1 - start1 * p1) % MOD1) * ((end2 - start2 * p2) % MOD2)


class MultisetHash:
    """Order-independent hash of ranges: sums of random 64-bit keys per value."""

    def __init__(
        self,
        values: Iterable[int],
        max_value: int = 100_000,
        rng: random.Random | None = None,
    ) -> None:
        if max_value < 1:
            raise ValueError(f"max_value must be positive, got {max_value}")
        rng = rng or random.Random()
        keys = [0] + [rng.getrandbits(64) for _ in range(max_value)]
        items = list(values)
        for v in items:
            if not 1 <= v <= max_value:
                raise ValueError(f"value {v} outside [1, {max_value}]")
        self._prefix = list(
            accumulate((keys[v] for v in items), lambda a, b: (a + b) % _WORD, initial=0)
        )

    def __len__(self) -> int:
        return len(self._prefix) - 1

    def get(self, left: int, right: int) -> int:
        """Hash of positions ``left`` through ``right`` inclusive."""
        if not 0 <= left <= right < len(self):
            raise IndexError(f"range [{left}, {right}] outside [0, {len(self)})")
        return (self._prefix[right + 1] - self._prefix[left]) % _WORD

    def digest(self) -> int:
        """Hash of all values."""
        return self._prefix[-1]


def random_values(count: int, rng: random.Random | None = None) -> list[int]:
    """``count`` random integers in ``[1, 2**63 - 1]``."""
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    rng = rng or random.Random()
    return [rng.randint(1, _LLONG_MAX) for _ in range(count)]


@total_ordering
class DigitVector:
    """64 digits in a given base, combined by digit-wise addition without carry.

    In base 2 ``^`` is ordinary exclusive or; in base ``k`` a value added
    ``k`` times cancels out.
    """

    DIGITS = 64
    __slots__ = ("digits", "base")

    def __init__(self, value: int = 0, base: int = 2) -> None:
        if base < 2:
            raise ValueError(f"base must be at least 2, got {base}")
        value %= base**self.DIGITS
        digits = []
        for _ in range(self.DIGITS):
            value, digit = divmod(value, base)
            digits.append(digit)
        self.digits = tuple(digits)
        self.base = base

    @classmethod
    def _from_digits(cls, digits: Iterable[int], base: int) -> DigitVector:
        vector = cls.__new__(cls)
        vector.digits = tuple(digits)
        vector.base = base
        return vector

    @property
    def value(self) -> int:
        result = 0
        for digit in reversed(self.digits):
            result = result * self.base + digit
        return result

    def _check_base(self, other: DigitVector) -> None:
        if self.base != other.base:
            raise ValueError(f"bases differ: {self.base} and {other.base}")

    def inverse(self) -> DigitVector:
        """The vector that cancels this one under ``^``."""
        return self._from_digits(((-d) % self.base for d in self.digits), self.base)

    def __xor__(self, other: DigitVector) -> DigitVector:
        if not isinstance(other, DigitVector):
            return NotImplemented
        self._check_base(other)
        return self._from_digits(
            ((a + b) % self.base for a, b in zip(self.digits, other.digits)), self.base
        )

    def __lt__(self, other: DigitVector) -> bool:
        if not isinstance(other, DigitVector):
            return NotImplemented
        self._check_base(other)
        return self.digits[::-1] < other.digits[::-1]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DigitVector):
            return NotImplemented
        return self.base == other.base and self.digits == other.digits

    def __hash__(self) -> int:
        return hash((self.digits, self.base))

    def __repr__(self) -> str:
        return f"DigitVector({self.value}, base={self.base})"