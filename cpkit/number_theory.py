"""Number-theory helpers: sieves, factorisation, divisors and modular arithmetic."""

from __future__ import annotations

import math

DEFAULT_MOD = 1_000_000_007


def _require_positive(n: int) -> None:
    if n < 1:
        raise ValueError(f"expected a positive integer, got {n}")


class SmallestPrimeFactorSieve:
    """Smallest prime factor of every number up to ``limit``."""

    def __init__(self, limit: int) -> None:
        if limit < 1:
            raise ValueError(f"sieve limit must be positive, got {limit}")
        self.limit = limit
        spf = [0] * (limit + 1)
        for i in range(2, limit + 1):
            if spf[i]:
                continue
            spf[i] = i
            for j in range(i * i, limit + 1, i):
                if not spf[j]:
                    spf[j] = i
        self._spf = spf

    def _check(self, n: int, low: int) -> None:
        if not low <= n <= self.limit:
            raise ValueError(f"{n} is outside the sieved range [{low}, {self.limit}]")

    def smallest_factor(self, n: int) -> int:
        """Smallest prime dividing ``n`` (``n`` itself when prime)."""
        self._check(n, 2)
        return self._spf[n]

    def is_prime(self, n: int) -> bool:
        self._check(n, 0)
        return n >= 2 and self._spf[n] == n

    def factorize(self, n: int) -> list[tuple[int, int]]:
        """Return ``(prime, exponent)`` pairs in increasing prime order."""
        self._check(n, 1)
        factors: list[tuple[int, int]] = []
        while n != 1:
            prime = self._spf[n]
            count = 0
            while n % prime == 0:
                n //= prime
                count += 1
            factors.append((prime, count))
        return factors


def sieve(n: int) -> list[int]:
    """All primes up to and including ``n``."""
    if n < 2:
        return []
    composite = bytearray(n + 1)
    primes = []
    for i in range(2, n + 1):
        if composite[i]:
            continue
        primes.append(i)
        start = i * i
        if start <= n:
            composite[start::i] = b"\x01" * len(range(start, n + 1, i))
    return primes


def divisors(n: int) -> list[int]:
    """Divisors of ``n`` in increasing order; empty for ``n < 1``."""
    if n < 1:
        return []
    small: list[int] = []
    large: list[int] = []
    for i in range(1, math.isqrt(n) + 1):
        if n % i == 0:
            small.append(i)
            if i * i != n:
                large.append(n // i)
    return small + large[::-1]


def divisors_table(n: int) -> list[list[int]]:
    """``table[k]`` lists the divisors of ``k`` for every ``0 <= k <= n``."""
    if n < 0:
        raise ValueError(f"expected a non-negative integer, got {n}")
    table: list[list[int]] = [[] for _ in range(n + 1)]
    for i in range(1, n + 1):
        for j in range(i, n + 1, i):
            table[j].append(i)
    return table


def prime_factors(n: int) -> dict[int, int]:
    """Map each prime factor of ``n`` to its exponent, in increasing order."""
    _require_positive(n)
    factors: dict[int, int] = {}
    while n % 2 == 0:
        factors[2] = factors.get(2, 0) + 1
        n //= 2
    i = 3
    while i * i <= n:
        while n % i == 0:
            factors[i] = factors.get(i, 0) + 1
            n //= i
        i += 2
    if n > 1:
        factors[n] = factors.get(n, 0) + 1
    return factors


def is_prime(n: int) -> bool:
    """Trial-division primality test."""
    if n < 2:
        return False
    return all(n % i for i in range(2, math.isqrt(n) + 1))


def num_of_factors(n: int) -> int:
    """Number of positive divisors of ``n``."""
    return math.prod(exp + 1 for exp in prime_factors(n).values())


def has_unique_prime_factors(n: int) -> bool:
    """True when no prime divides ``n`` more than once."""
    return all(exp == 1 for exp in prime_factors(n).values())


def prefix_prime_factor_counts(limit: int) -> list[int]:
    """Running totals of prime factors counted with multiplicity.

    ``counts[0]`` is 0 and ``counts[1]`` is 1; from 2 on, each entry adds the
    number of prime factors of its index to the previous one.
    """
    if limit < 0:
        raise ValueError(f"expected a non-negative limit, got {limit}")
    counts = [0] * (limit + 1)
    if limit < 1:
        return counts
    counts[1] = 1
    if limit < 2:
        return counts
    spf_sieve = SmallestPrimeFactorSieve(limit)
    omega = [0] * (limit + 1)
    for i in range(2, limit + 1):
        omega[i] = omega[i // spf_sieve.smallest_factor(i)] + 1
        counts[i] = counts[i - 1] + omega[i]
    return counts


def lcm(a: int, b: int) -> int:
    """Least common multiple, computed as ``a / gcd(a, b) * b``."""
    return a // math.gcd(a, b) * b


def extended_gcd(a: int, b: int) -> tuple[int, int, int]:
    """Return ``(g, x, y)`` with ``a*x + b*y == g`` and ``g == gcd(|a|, |b|)``."""
    if a < 0:
        g, x, y = extended_gcd(-a, b)
        return g, -x, y
    if b < 0:
        g, x, y = extended_gcd(a, -b)
        return g, x, -y
    old_r, r = a, b
    old_x, x = 1, 0
    old_y, y = 0, 1
    while r:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_x, x = x, old_x - q * x
        old_y, y = y, old_y - q * y
    return old_r, old_x, old_y


def mod_inverse(a: int, m: int) -> int:
    """Inverse of ``a`` modulo ``m``; raises ValueError when none exists."""
    if m < 1:
        raise ValueError(f"modulus must be positive, got {m}")
    g, x, _ = extended_gcd(a, m)
    if g != 1:
        raise ValueError(f"{a} has no inverse modulo {m}")
    return x % m


def fast_pow(base: int, power: int, mod: int = DEFAULT_MOD) -> int:
    """``base ** power % mod`` by repeated squaring."""
    if power < 0:
        raise ValueError(f"power must be non-negative, got {power}")
    if mod < 1:
        raise ValueError(f"modulus must be positive, got {mod}")
    result = 1
    base %= mod
    while power:
        if power & 1:
            result = result * base % mod
        base = base * base % mod
        power >>= 1
    return result


def fermat_inverse(n: int, mod: int) -> int:
    """Inverse of ``n`` modulo the prime ``mod`` via Fermat's little theorem."""
    if mod < 2:
        raise ValueError(f"modulus must be a prime, got {mod}")
    if n % mod == 0:
        raise ValueError(f"{n} has no inverse modulo {mod}")
    return fast_pow(n, mod - 2, mod) % mod