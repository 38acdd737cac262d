"""
Tests for integer helpers.
"""

import pytest

from pyalgebra.core.exceptions import ValidationError
from pyalgebra.scalar.integers import (
    coprime_with,
    divisors,
    factorial,
    gcd,
    lcm,
    primes,
)


class TestFactorial:

    @pytest.mark.parametrize("n, expected", [(0, 1), (1, 1), (5, 120), (20, 2432902008176640000)])
    def test_values(self, n, expected):
        assert factorial(n) == expected

    def test_negative(self):
        with pytest.raises(ValidationError, match="non-negative"):
            factorial(-1)

    def test_non_integer(self):
        with pytest.raises(ValidationError):
            factorial(3.0)


class TestDivisibility:

    def test_gcd(self):
        assert gcd(12, 18) == 6
        assert gcd(17, 5) == 1

    def test_lcm(self):
        assert lcm(4, 6) == 12
        assert lcm(-4, 6) == 12

    def test_lcm_with_zero(self):
        assert lcm(0, 5) == 0

    def test_divisors_ascending(self):
        assert divisors(12) == [1, 2, 3, 4, 6, 12]

    def test_divisors_perfect_square(self):
        assert divisors(16) == [1, 2, 4, 8, 16]

    def test_divisors_edges(self):
        assert divisors(1) == [1]
        assert divisors(0) == []
        assert divisors(-6) == [1, 2, 3, 6]

    def test_coprime(self):
        assert coprime_with(8, 15)
        assert not coprime_with(8, 12)


class TestPrimes:

    def test_below_twenty(self):
        assert primes(20) == [2, 3, 5, 7, 11, 13, 17, 19]

    def test_upper_bound_exclusive(self):
        assert primes(3) == [2]
        assert 23 not in primes(23)

    def test_square_of_prime_excluded(self):
        assert 25 not in primes(26)
        assert primes(26)[-1] == 23

    @pytest.mark.parametrize("n", [-5, 0, 1, 2])
    def test_empty(self, n):
        assert primes(n) == []

    def test_count_below_thousand(self):
        assert len(primes(1000)) == 168

    def test_returns_python_ints(self):
        assert all(type(p) is int for p in primes(30))
