"""Small number-theory and arithmetic helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


def is_armstrong(number: int) -> bool:
    """Return True if ``number`` equals the sum of the cubes of its digits.

    Negative numbers are never Armstrong numbers.
    """
    if number < 0:
        return False
    return sum(int(digit) ** 3 for digit in str(number)) == number


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number, with fibonacci(1) == fibonacci(2) == 1."""
    if n < 1:
        raise ValueError("n must be at least 1")
    previous, current = 0, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def fibonacci_sequence(count: int) -> list[int]:
    """Return the first ``count`` Fibonacci numbers, starting 1, 1, 2, ..."""
    sequence: list[int] = []
    previous, current = 1, 0
    for _ in range(count):
        previous, current = current, previous + current
        sequence.append(current)
    return sequence


def factorial(n: int) -> int:
    """Return n!; raise ValueError for a negative ``n``."""
    if n < 0:
        raise ValueError("Factorial of a negative number doesn't exist.")
    result = 1
    for factor in range(2, n + 1):
        result *= factor
    return result


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor of two positive integers."""
    if a <= 0 or b <= 0:
        raise ValueError("gcd is only defined here for positive integers")
    while b:
        a, b = b, a % b
    return a


def is_prime(n: int) -> bool:
    """Return True if ``n`` is a prime number, by trial division up to n // 2."""
    if n < 2:
        return False
    return all(n % divisor for divisor in range(2, n // 2 + 1))


def is_leap_year(year: int) -> bool:
    """Return True for a Gregorian leap year."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def is_even(number: int) -> bool:
    """Return True if ``number`` is divisible by two."""
    return number % 2 == 0


def binpow(base: int, exponent: int) -> int:
    """Raise ``base`` to a non-negative ``exponent`` by repeated squaring."""
    if exponent < 0:
        raise ValueError("exponent must not be negative")
    result = 1
    while exponent > 0:
        if exponent & 1:
            result *= base
        base *= base
        exponent >>= 1
    return result


def nth_term(n: int, a: int, b: int, c: int) -> int:
    """Return the n-th term of the series whose terms are the sum of the three before.

    The first three terms are ``a``, ``b`` and ``c``.
    """
    if n < 1:
        raise ValueError("n must be at least 1")
    terms = (a, b, c)
    if n <= 3:
        return terms[n - 1]
    first, second, third = terms
    for _ in range(n - 3):
        first, second, third = second, third, first + second + third
    return third


def max_subarray_sum(values: Iterable[int]) -> int:
    """Return the largest sum of a contiguous, non-empty run of ``values`` (Kadane)."""
    best: int | None = None
    running = 0
    for value in values:
        running += value
        if best is None or running > best:
            best = running
        if running < 0:
            running = 0
    if best is None:
        raise ValueError("values must not be empty")
    return best


@dataclass(frozen=True)
class Matrix2x2:
    """A 2x2 matrix laid out as | a1 b1 | / | a2 b2 |."""

    a1: int
    b1: int
    a2: int
    b2: int

    def determinant(self) -> int:
        return self.a1 * self.b2 - self.a2 * self.b1


@dataclass(frozen=True)
class ArithmeticResult:
    """Sum, difference, product and quotient of two integers."""

    sum: int
    difference: int
    product: int
    quotient: float


def arithmetic(first: int, second: int) -> ArithmeticResult:
    """Combine two integers with the four basic operations."""
    if second == 0:
        raise ZeroDivisionError("division by zero")
    return ArithmeticResult(
        sum=first + second,
        difference=first - second,
        product=first * second,
        quotient=first / second,
    )


def _truncating_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def calculate(a: int, operator: str, b: int) -> int:
    """Apply one of ``+ - * /`` to two integers; division truncates toward zero."""
    if operator == "+":
        return a + b
    if operator == "-":
        return a - b
    if operator == "*":
        return a * b
    if operator == "/":
        if b == 0:
            raise ZeroDivisionError("division by zero")
        return _truncating_div(a, b)
    raise ValueError(f"The entered operation cannot be performed: {operator!r}")


def simple_interest(principal: float, time: float, rate: float) -> float:
    """Return simple interest for a rate given in percent."""
    return principal * time * rate / 100


def fahrenheit_to_celsius(fahrenheit: float) -> float:
    """Convert Fahrenheit to Celsius using the factor 0.55."""
    return 0.55 * (fahrenheit - 32)