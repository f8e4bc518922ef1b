import math

import pytest
from hypothesis import given, strategies as st

from cpkit.number_theory import (
    DEFAULT_MOD,
    SmallestPrimeFactorSieve,
    divisors,
    divisors_table,
    extended_gcd,
    fast_pow,
    fermat_inverse,
    has_unique_prime_factors,
    is_prime,
    lcm,
    mod_inverse,
    num_of_factors,
    prefix_prime_factor_counts,
    prime_factors,
    sieve,
)


def test_sieve_small():
    assert sieve(30) == [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]


def test_sieve_below_two_is_empty():
    assert sieve(1) == []
    assert sieve(0) == []


def test_sieve_agrees_with_is_prime():
    primes = set(sieve(500))
    assert primes == {k for k in range(500 + 1) if is_prime(k)}


def test_sieve_agrees_with_spf_sieve():
    spf = SmallestPrimeFactorSieve(1000)
    assert sieve(1000) == [k for k in range(1001) if spf.is_prime(k)]


@given(st.integers(min_value=1, max_value=20000))
def test_divisors_invariants(n):
    ds = divisors(n)
    assert all(n % d == 0 for d in ds)
    assert ds == sorted(set(ds))
    assert ds[0] == 1 and ds[-1] == n
    assert len(ds) == num_of_factors(n)


def test_divisors_of_non_positive_is_empty():
    assert divisors(0) == []


def test_divisors_table_matches_divisors():
    table = divisors_table(200)
    assert len(table) == 201
    assert table[0] == []
    for k in range(1, 201):
        assert table[k] == divisors(k)


@given(st.integers(min_value=1, max_value=10**9))
def test_prime_factors_product(n):
    factors = prime_factors(n)
    assert math.prod(p**e for p, e in factors.items()) == n
    assert all(is_prime(p) for p in factors)
    assert list(factors) == sorted(factors)


def test_prime_factors_rejects_zero():
    with pytest.raises(ValueError):
        prime_factors(0)


@given(st.integers(min_value=1, max_value=10**6))
def test_unique_prime_factors_matches_exponents(n):
    expected = all(e == 1 for e in prime_factors(n).values())
    assert has_unique_prime_factors(n) is expected


def test_unique_prime_factors_on_square():
    assert has_unique_prime_factors(2 * 3 * 5 * 7)
    assert not has_unique_prime_factors(3 * 3 * 5)


def test_prefix_prime_factor_counts():
    counts = prefix_prime_factor_counts(300)
    assert counts[0] == 0
    assert counts[1] == 1
    for i in range(2, 301):
        assert counts[i] - counts[i - 1] == sum(prime_factors(i).values())


@given(st.integers(1, 10**6), st.integers(1, 10**6))
def test_lcm_gcd_product(a, b):
    assert lcm(a, b) * math.gcd(a, b) == a * b


@given(st.integers(-10**9, 10**9), st.integers(-10**9, 10**9))
def test_extended_gcd_bezout(a, b):
    g, x, y = extended_gcd(a, b)
    assert g == math.gcd(a, b)
    assert a * x + b * y == g


@given(st.integers(1, 10**6), st.integers(2, 10**6))
def test_mod_inverse(a, m):
    if math.gcd(a, m) == 1:
        inv = mod_inverse(a, m)
        assert 0 <= inv < m
        assert a * inv % m == 1
        assert inv == pow(a, -1, m)
    else:
        with pytest.raises(ValueError):
            mod_inverse(a, m)


def test_mod_inverse_not_coprime():
    with pytest.raises(ValueError):
        mod_inverse(6, 9)


@given(st.integers(0, 10**12), st.integers(0, 10**6), st.integers(2, 10**9))
def test_fast_pow_matches_builtin(base, power, mod):
    assert fast_pow(base, power, mod) == pow(base, power, mod)


def test_fast_pow_default_mod():
    assert fast_pow(3, 10**6) == pow(3, 10**6, DEFAULT_MOD)
    assert DEFAULT_MOD == 1_000_000_007


def test_fast_pow_negative_power():
    with pytest.raises(ValueError):
        fast_pow(2, -1)


@given(st.integers(1, 10**9 + 6))
def test_fermat_inverse(n):
    inv = fermat_inverse(n, DEFAULT_MOD)
    assert n * inv % DEFAULT_MOD == 1


def test_fermat_inverse_of_multiple():
    with pytest.raises(ValueError):
        fermat_inverse(14, 7)


@given(st.integers(1, 5000))
def test_spf_factorize_matches_trial_division(n):
    spf = SmallestPrimeFactorSieve(5000)
    assert spf.factorize(n) == list(prime_factors(n).items())


def test_spf_factorize_one_is_empty():
    assert SmallestPrimeFactorSieve(10).factorize(1) == []


def test_spf_out_of_range():
    spf = SmallestPrimeFactorSieve(50)
    with pytest.raises(ValueError):
        spf.factorize(51)
    with pytest.raises(ValueError):
        spf.is_prime(-1)