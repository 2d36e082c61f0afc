import math

import pytest

from algokit.modmath import (
    add_mod,
    factmod,
    factorial_mod,
    fast_power,
    gcd,
    inv_mod,
    largest_power,
    lcm,
    mul_mod,
    ncr_mod,
    pow_mod,
    sub_mod,
)

MOD = 1_000_000_007


@pytest.mark.parametrize("x,y,mod", [(5, 4, 7), (0, 0, 7), (6, 6, 7), (3, 2, 11)])
def test_add_and_sub_match_remainder(x, y, mod):
    assert add_mod(x, y, mod) == (x + y) % mod
    assert sub_mod(x, y, mod) == (x - y) % mod


def test_add_then_sub_round_trip():
    for x in range(13):
        for y in range(13):
            assert sub_mod(add_mod(x, y, 13), y, 13) == x


def test_mul_mod_matches_remainder():
    assert mul_mod(123456789, 987654321, MOD) == (123456789 * 987654321) % MOD


@pytest.mark.parametrize("x,y", [(2, 10), (3, 1000), (MOD - 1, 2), (7, 1)])
def test_pow_mod_matches_builtin(x, y):
    assert pow_mod(x, y, MOD) == pow(x, y, MOD)
    assert fast_power(x, y, MOD) == pow(x, y, MOD)


def test_zero_exponent_yields_one_even_for_modulus_one():
    assert pow_mod(5, 0, 1) == 1
    assert fast_power(5, 0, 1) == pow_mod(5, 0, 1)


def test_negative_exponent_rejected():
    with pytest.raises(ValueError):
        pow_mod(2, -1, 7)
    with pytest.raises(ValueError):
        fast_power(2, -1, 7)


@pytest.mark.parametrize("x", [1, 2, 3, 12345, MOD - 1])
def test_inverse_property(x):
    assert (x * inv_mod(x, MOD)) % MOD == 1


@pytest.mark.parametrize("a,b", [(12, 18), (17, 5), (0, 9), (100, 75)])
def test_gcd_and_lcm_match_math(a, b):
    assert gcd(a, b) == math.gcd(a, b)
    if a and b:
        assert lcm(a, b) == math.lcm(a, b)


def test_lcm_of_zeros_raises():
    with pytest.raises(ZeroDivisionError):
        lcm(0, 0)


@pytest.mark.parametrize("n,p", [(10, 2), (25, 5), (100, 3), (7, 11)])
def test_largest_power_is_exact_exponent(n, p):
    k = largest_power(n, p)
    assert math.factorial(n) % p**k == 0
    assert math.factorial(n) % p ** (k + 1) != 0


@pytest.mark.parametrize("n,p", [(10, 3), (25, 5), (30, 7), (4, 5), (1, 2)])
def test_factmod_strips_prime_factors(n, p):
    expected = (math.factorial(n) // p ** largest_power(n, p)) % p
    assert factmod(n, p) == expected


@pytest.mark.parametrize("n,p", [(0, 7), (5, 7), (10, 11), (20, 23)])
def test_factorial_mod_below_prime(n, p):
    assert factorial_mod(n, p) == math.factorial(n) % p


def test_factorial_mod_at_or_above_prime_is_zero():
    assert factorial_mod(7, 7) == math.factorial(7) % 7
    assert factorial_mod(30, 7) == math.factorial(30) % 7


@pytest.mark.parametrize("n,r", [(10, 3), (5, 0), (3, 5), (20, 10), (6, 6)])
def test_ncr_mod_matches_comb(n, r):
    assert ncr_mod(n, r, MOD) == math.comb(n, r) % MOD


def test_invalid_prime_for_legendre():
    with pytest.raises(ValueError):
        largest_power(10, 1)