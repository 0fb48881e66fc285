"""Tests for the Calculator utility."""

import math

import pytest

from reporting_examples.core.errors import (
    DivisionByZero,
    NegativeArgument,
    NegativeRadicand,
    NotAnInteger,
    NotANumber,
)


class TestBasicArithmetic:
    """Test add, subtract, multiply and divide."""

    def test_add(self, calculator):
        assert calculator.add(2, 3) == 5
        assert calculator.add(-1, 1) == 0
        assert calculator.add(0.1, 0.2) == pytest.approx(0.3)

    def test_subtract(self, calculator):
        assert calculator.subtract(5, 3) == 2
        assert calculator.subtract(3, 5) == -2

    def test_multiply(self, calculator):
        assert calculator.multiply(3, 4) == 12
        assert calculator.multiply(-2, 3) == -6
        assert calculator.multiply(7, 0) == 0

    def test_divide(self, calculator):
        assert calculator.divide(10, 2) == 5
        assert calculator.divide(7, 2) == 3.5

    @pytest.mark.parametrize("dividend", [0, 1, -5, 2.5])
    def test_divide_by_zero(self, calculator, dividend):
        with pytest.raises(DivisionByZero, match="Division by zero is not allowed"):
            calculator.divide(dividend, 0)

    def test_huge_integer_division_is_infinite(self, calculator):
        assert calculator.divide(10 ** 400, 3) == math.inf
        assert calculator.divide(-10 ** 400, 3) == -math.inf
        assert calculator.divide(3, 10 ** 400) == 0

    def test_huge_integer_mixed_with_float(self, calculator):
        assert calculator.add(10 ** 400, 0.5) == math.inf
        assert calculator.multiply(-10 ** 400, 1.5) == -math.inf

    def test_huge_integers_stay_exact(self, calculator):
        assert calculator.add(10 ** 400, 1) == 10 ** 400 + 1

    @pytest.mark.parametrize("a,b", [("1", 2), (1, None), (None, None), (True, 1), ([1], 2)])
    def test_type_errors(self, calculator, a, b):
        for operation in (calculator.add, calculator.subtract, calculator.multiply, calculator.divide):
            with pytest.raises(NotANumber, match="Both arguments must be numbers"):
                operation(a, b)


class TestPower:
    """Test power."""

    def test_integer_exponent(self, calculator):
        assert calculator.power(2, 3) == 8
        assert calculator.power(5, 0) == 1

    def test_negative_exponent(self, calculator):
        assert calculator.power(2, -2) == 0.25

    def test_fractional_exponent(self, calculator):
        assert calculator.power(9, 0.5) == 3

    def test_negative_base_fractional_exponent_is_nan(self, calculator):
        assert math.isnan(calculator.power(-8, 1 / 3))

    def test_zero_to_negative_power_is_infinite(self, calculator):
        assert calculator.power(0, -1) == math.inf

    def test_overflow_is_infinite(self, calculator):
        assert calculator.power(10, 1000) == math.inf
        assert calculator.power(-10, 1001) == -math.inf

    def test_huge_integer_base(self, calculator):
        assert calculator.power(10 ** 400, 2) == math.inf
        assert calculator.power(10 ** 400, -1) == 0

    def test_type_error(self, calculator):
        with pytest.raises(NotANumber):
            calculator.power("2", 3)


class TestSqrt:
    """Test sqrt."""

    def test_sqrt(self, calculator):
        assert calculator.sqrt(16) == 4
        assert calculator.sqrt(0) == 0
        assert calculator.sqrt(2) == pytest.approx(1.41421356)

    def test_negative(self, calculator):
        with pytest.raises(NegativeRadicand, match="square root of negative number"):
            calculator.sqrt(-1)

    def test_type_error(self, calculator):
        with pytest.raises(NotANumber, match="Argument must be a number"):
            calculator.sqrt("16")

    def test_huge_integer_is_infinite(self, calculator):
        assert calculator.sqrt(10 ** 400) == math.inf


class TestFactorial:
    """Test factorial."""

    @pytest.mark.parametrize("n,expected", [(0, 1), (1, 1), (5, 120), (10, 3628800), (5.0, 120)])
    def test_factorial(self, calculator, n, expected):
        assert calculator.factorial(n) == expected

    def test_largest_exact_factorial(self, calculator):
        assert calculator.factorial(170) == math.factorial(170)

    @pytest.mark.parametrize("n", [171, 2000, 10 ** 7])
    def test_beyond_double_range_is_infinite(self, calculator, n):
        assert calculator.factorial(n) == math.inf

    def test_negative(self, calculator):
        with pytest.raises(NegativeArgument):
            calculator.factorial(-1)

    @pytest.mark.parametrize("n", [5.5, "5", None])
    def test_non_integer(self, calculator, n):
        with pytest.raises(NotAnInteger, match="Argument must be an integer"):
            calculator.factorial(n)


class TestIsPrime:
    """Test is_prime."""

    @pytest.mark.parametrize("n", [2, 3, 5, 7, 11, 97, 7919])
    def test_primes(self, calculator, n):
        assert calculator.is_prime(n) is True

    @pytest.mark.parametrize("n", [1, 4, 6, 8, 9, 25, 7917])
    def test_composites(self, calculator, n):
        assert calculator.is_prime(n) is False

    @pytest.mark.parametrize("n", [0, -1, -7])
    def test_below_two(self, calculator, n):
        assert calculator.is_prime(n) is False

    def test_non_integer(self, calculator):
        with pytest.raises(NotAnInteger):
            calculator.is_prime(7.5)
