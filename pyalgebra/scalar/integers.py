"""
Integer helpers: factorial, divisibility and primes.
"""

from __future__ import annotations

import math

import numpy as np

from pyalgebra.core.exceptions import ValidationError
from pyalgebra.core.validation import check_integer


def factorial(n: int) -> int:
    """
    n! for a non-negative integer n.

    Raises:
        ValidationError: If n is negative or not an integer
    """
    n = check_integer(n, "n")
    if n < 0:
        raise ValidationError(f"n: factorial requires a non-negative integer, got {n}")
    return math.factorial(n)


def gcd(a: int, b: int) -> int:
    """Greatest common divisor (non-negative; gcd(0, 0) == 0)."""
    return math.gcd(check_integer(a, "a"), check_integer(b, "b"))


def lcm(a: int, b: int) -> int:
    """Least common multiple (non-negative; 0 if either argument is 0)."""
    a = check_integer(a, "a")
    b = check_integer(b, "b")
    if a == 0 or b == 0:
        return 0
    return abs(a * b) // math.gcd(a, b)


def divisors(n: int) -> list[int]:
    """
    Positive divisors of n in ascending order.

    Negative n uses |n|; 0 has no divisors listed.
    """
    n = abs(check_integer(n, "n"))
    small = []
    large = []
    i = 1
    while i * i <= n:
        if n % i == 0:
            small.append(i)
            if i != n // i:
                large.append(n // i)
        i += 1
    return small + large[::-1]


def coprime_with(a: int, b: int) -> bool:
    """Whether a and b share no divisor other than 1."""
    return gcd(a, b) == 1


def primes(n: int) -> list[int]:
    """
    All primes in [2, n), by the sieve of Eratosthenes.

    Returns an empty list for n <= 2.
    """
    n = check_integer(n, "n")
    if n <= 2:
        return []
    is_prime = np.ones(n, dtype=bool)
    is_prime[:2] = False
    for i in range(2, math.isqrt(n - 1) + 1):
        if is_prime[i]:
            is_prime[i * i::i] = False
    return [int(p) for p in np.flatnonzero(is_prime)]
