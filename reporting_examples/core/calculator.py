"""Stateless arithmetic operations with argument validation."""

import math
from typing import Any, Callable, Union

from reporting_examples.core.errors import (
    DivisionByZero,
    NegativeArgument,
    NegativeRadicand,
    NotAnInteger,
    NotANumber,
)

Number = Union[int, float]

# Largest n whose factorial fits in a double
MAX_FACTORIAL_ARGUMENT = 170


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_integer(value: Any) -> bool:
    if not _is_number(value):
        return False
    return isinstance(value, int) or value.is_integer()


def as_float(value: Number) -> float:
    """Convert to float, saturating integers beyond the double range to infinity."""
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def float_fallback(operation: Callable[..., Number], *operands: Number) -> Number:
    """
    Run ``operation`` with exact arithmetic, falling back to IEEE doubles.

    Integers too large for a float overflow in true division and ``math``
    functions. The fallback repeats the operation on saturated floats, so the
    result is a signed infinity, zero or NaN instead of an exception.
    """
    try:
        return operation(*operands)
    except OverflowError:
        return operation(*(as_float(operand) for operand in operands))


def _require_numbers(*values: Any) -> None:
    if not all(_is_number(value) for value in values):
        raise NotANumber("Both arguments must be numbers")


class Calculator:
    """Calculator whose every operation validates its argument types first."""

    def add(self, a: Number, b: Number) -> Number:
        _require_numbers(a, b)
        return float_fallback(lambda x, y: x + y, a, b)

    def subtract(self, a: Number, b: Number) -> Number:
        _require_numbers(a, b)
        return float_fallback(lambda x, y: x - y, a, b)

    def multiply(self, a: Number, b: Number) -> Number:
        _require_numbers(a, b)
        return float_fallback(lambda x, y: x * y, a, b)

    def divide(self, a: Number, b: Number) -> float:
        _require_numbers(a, b)
        if b == 0:
            raise DivisionByZero()
        return float_fallback(lambda x, y: x / y, a, b)

    def power(self, base: Number, exponent: Number) -> float:
        """
        IEEE-754 ``pow``: no domain errors besides argument types.

        A negative base with a fractional exponent gives NaN, zero raised to
        a negative power gives infinity and overflow gives signed infinity.
        """
        _require_numbers(base, exponent)
        try:
            return math.pow(as_float(base), as_float(exponent))
        except OverflowError:
            negative_result = base < 0 and _is_integer(exponent) and int(exponent) % 2 == 1
            return -math.inf if negative_result else math.inf
        except ValueError:
            if base == 0:
                return math.inf
            return math.nan

    def sqrt(self, number: Number) -> float:
        if not _is_number(number):
            raise NotANumber("Argument must be a number")
        if number < 0:
            raise NegativeRadicand()
        return float_fallback(math.sqrt, number)

    def factorial(self, n: Number) -> Number:
        """
        0! = 1! = 1 and n! = n * (n - 1)!

        Exact up to 170!; larger arguments overflow a double and give infinity.
        """
        if not _is_integer(n):
            raise NotAnInteger("Argument must be an integer")
        if n < 0:
            raise NegativeArgument()
        if n > MAX_FACTORIAL_ARGUMENT:
            return math.inf
        result = 1
        for factor in range(2, int(n) + 1):
            result *= factor
        return result

    def is_prime(self, number: Number) -> bool:
        """Trial division up to floor(sqrt(number))."""
        if not _is_integer(number):
            raise NotAnInteger("Argument must be an integer")
        number = int(number)
        if number < 2:
            return False
        for divisor in range(2, math.isqrt(number) + 1):
            if number % divisor == 0:
                return False
        return True
