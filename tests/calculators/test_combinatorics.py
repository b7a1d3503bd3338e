"""Tests for binomial coefficients."""

import math

import pytest

from flightcalc.calculators.combinatorics import binomial_coefficient


class TestBinomialCoefficient:
    """Test C(n, k)."""

    @pytest.mark.parametrize(
        "n,k,expected",
        [(5, 2, 10), (10, 3, 120), (0, 0, 1), (7, 0, 1), (7, 7, 1), (7, 1, 7), (20, 10, 184756)],
    )
    def test_known_values(self, n: int, k: int, expected: int) -> None:
        """Test known coefficients."""
        assert binomial_coefficient(n, k) == expected

    @pytest.mark.parametrize("n,k", [(3, 4), (0, 1), (5, -1)])
    def test_out_of_range_is_zero(self, n: int, k: int) -> None:
        """Test k outside [0, n] gives zero."""
        assert binomial_coefficient(n, k) == 0

    @pytest.mark.parametrize("n", [4, 9, 16, 31])
    def test_symmetry(self, n: int) -> None:
        """Test C(n, k) == C(n, n - k)."""
        for k in range(n + 1):
            assert binomial_coefficient(n, k) == binomial_coefficient(n, n - k)

    def test_matches_math_comb(self) -> None:
        """Test agreement with the standard library for a larger range."""
        for n in range(40):
            for k in range(n + 1):
                assert binomial_coefficient(n, k) == math.comb(n, k)

    def test_large_values_are_exact(self) -> None:
        """Test results stay exact beyond 64-bit range."""
        assert binomial_coefficient(100, 50) == math.comb(100, 50)
