"""Binomial coefficients, exact and modulo a prime."""

from __future__ import annotations

DEFAULT_MOD = 1_000_000_007


def n_choose_k(n: int, k: int) -> int:
    """Exact binomial coefficient; 0 for negative ``k`` or ``k > n >= 0``."""
    if k < 0:
        return 0
    result = 1
    for step, factor in enumerate(range(n, n - k, -1), start=1):
        result = result * factor // step
    return result


class BinomialTable:
    """Precomputed factorials and inverse factorials modulo a prime."""

    def __init__(self, limit: int = 10**6, mod: int = DEFAULT_MOD) -> None:
        if limit < 0:
            raise ValueError(f"limit must be non-negative, got {limit}")
        if mod < 2:
            raise ValueError(f"modulus must be a prime, got {mod}")
        self.limit = limit
        self.mod = mod
        fac = [1] * (limit + 1)
        for i in range(1, limit + 1):
            fac[i] = fac[i - 1] * i % mod
        inv = [1] * (limit + 1)
        inv[limit] = pow(fac[limit], mod - 2, mod)
        for i in range(limit, 0, -1):
            inv[i - 1] = inv[i] * i % mod
        self._fac = fac
        self._inv = inv

    def _check(self, n: int, r: int) -> None:
        if not 0 <= r <= n:
            raise ValueError(f"need 0 <= r <= n, got n={n}, r={r}")
        if n > self.limit:
            raise ValueError(f"n={n} exceeds the table limit {self.limit}")

    def ncr(self, n: int, r: int) -> int:
        """Number of ways to choose ``r`` of ``n``, modulo the table's prime."""
        self._check(n, r)
        return self._fac[n] * self._inv[r] % self.mod * self._inv[n - r] % self.mod

    def npr(self, n: int, r: int) -> int:
        """Number of ordered selections of ``r`` of ``n``, modulo the prime."""
        self._check(n, r)
        return self._fac[n] * self._inv[n - r] % self.mod