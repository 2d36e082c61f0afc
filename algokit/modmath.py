"""Modular arithmetic and number-theory helpers."""

from __future__ import annotations


def add_mod(x: int, y: int, mod: int) -> int:
    """Add two residues already reduced modulo ``mod``."""
    total = x + y
    return total - mod if total >= mod else total


def sub_mod(x: int, y: int, mod: int) -> int:
    """Subtract two residues already reduced modulo ``mod``."""
    diff = x - y
    return diff + mod if diff < 0 else diff


def mul_mod(x: int, y: int, mod: int) -> int:
    """Multiply two numbers modulo ``mod``."""
    return (x * y) % mod


def pow_mod(x: int, y: int, mod: int) -> int:
    """Raise ``x`` to the non-negative power ``y`` modulo ``mod``.

    A zero exponent yields 1 whatever the modulus.
    """
    if y < 0:
        raise ValueError("exponent must be non-negative")
    if y == 0:
        return 1
    return pow(x, y, mod)


def inv_mod(x: int, mod: int) -> int:
    """Modular inverse of ``x`` for a prime modulus, by Fermat's little theorem."""
    return pow_mod(x, mod - 2, mod)


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm."""
    while b:
        a, b = b, a % b
    return a


def lcm(a: int, b: int) -> int:
    """Least common multiple; raises ZeroDivisionError when both are zero."""
    return (a * b) // gcd(a, b)


def fast_power(n: int, p: int, m: int) -> int:
    """Compute ``n ** p % m`` by repeated squaring; ``p == 0`` gives 1."""
    if p < 0:
        raise ValueError("exponent must be non-negative")
    if p == 0:
        return 1
    return pow(n, p, m)


def factmod(n: int, p: int) -> int:
    """``n!`` modulo the prime ``p`` with every factor of ``p`` removed."""
    if p < 2:
        raise ValueError("modulus must be a prime")
    res = 1
    while n > 1:
        res = (res * (p - 1 if (n // p) % 2 else 1)) % p
        for i in range(2, n % p + 1):
            res = (res * i) % p
        n //= p
    return res % p


def largest_power(n: int, p: int) -> int:
    """Exponent of the prime ``p`` in ``n!`` (Legendre's formula)."""
    if p < 2:
        raise ValueError("p must be at least 2")
    exponent = 0
    while n:
        n //= p
        exponent += n
    return exponent


def factorial_mod(n: int, p: int) -> int:
    """``n!`` modulo the prime ``p``, built from its prime factorisation."""
    if n >= p:
        return 0
    is_prime = [True] * (n + 1)
    i = 2
    while i * i <= n:
        if is_prime[i]:
            for j in range(2 * i, n + 1, i):
                is_prime[j] = False
        i += 1
    res = 1
    for prime in range(2, n + 1):
        if is_prime[prime]:
            res = (res * pow_mod(prime, largest_power(n, prime), p)) % p
    return res


def ncr_mod(n: int, r: int, p: int) -> int:
    """Binomial coefficient ``C(n, r)`` modulo the prime ``p``."""
    if r > n:
        return 0
    if r == 0:
        return 1
    factorials = [1] * (n + 1)
    for i in range(1, n + 1):
        factorials[i] = (factorials[i - 1] * i) % p

    def inverse(value: int) -> int:
        return pow_mod(value % p, p - 2, p)

    return factorials[n] * inverse(factorials[r]) % p * inverse(factorials[n - r]) % p