"""Classic recursion drills on integers, sequences and strings."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from math import prod

__all__ = [
    "factorial",
    "fibonacci",
    "digit_sum",
    "power",
    "power_linear",
    "render_elements",
    "max_element",
    "array_sum",
    "mth_summation",
    "is_palindrome_number",
    "remove_occurrences",
    "increasing_sequence",
    "k_multiples",
    "alternating_sum",
    "gcd",
]


def factorial(n: int) -> int:
    """Return n! for n >= 1."""
    if n < 1:
        raise ValueError(f"factorial is defined here for n >= 1, got {n}")
    return prod(range(1, n + 1))


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number, with fib(0) = 0 and fib(1) = 1."""
    if n < 0:
        raise ValueError(f"fibonacci index must be non-negative, got {n}")
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def digit_sum(n: int) -> int:
    """Return the sum of the decimal digits of n, negated for negative n."""
    if n < 0:
        return -digit_sum(-n)
    return sum(int(digit) for digit in str(n))


def _check_exponent(exponent: int) -> None:
    if exponent < 0:
        raise ValueError(f"exponent must be non-negative, got {exponent}")


def power(base: int, exponent: int) -> int:
    """Return base ** exponent by repeated squaring."""
    _check_exponent(exponent)
    if exponent == 0:
        return 1
    half = power(base, exponent // 2)
    squared = half * half
    return squared if exponent % 2 == 0 else base * squared


def power_linear(base: int, exponent: int) -> int:
    """Return base ** exponent by multiplying the base exponent times."""
    _check_exponent(exponent)
    result = 1
    for _ in range(exponent):
        result *= base
    return result


def render_elements(values: Iterable[object]) -> str:
    """Return the elements written one after another with no separator."""
    return "".join(str(value) for value in values)


def max_element(values: Sequence[int]) -> int:
    """Return the largest element of a non-empty sequence."""
    if not values:
        raise ValueError("max_element() needs at least one element")
    return max(values)


def array_sum(values: Sequence[int]) -> int:
    """Return the sum of a non-empty sequence."""
    if not values:
        raise ValueError("array_sum() needs at least one element")
    return sum(values)


def mth_summation(n: int, m: int) -> int:
    """Return the m-th repeated summation of the first n natural numbers."""
    if m < 1:
        raise ValueError(f"m must be at least 1, got {m}")
    total = n
    for _ in range(m):
        total = total * (total + 1) // 2
    return total


def is_palindrome_number(num: int) -> bool:
    """Tell whether a non-negative number reads the same in both directions."""
    if num < 0:
        return False
    digits = str(num)
    return digits == digits[::-1]


def remove_occurrences(text: str, char: str) -> str:
    """Return text with every occurrence of a single character removed."""
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    return "".join(c for c in text if c != char)


def increasing_sequence(n: int) -> list[int]:
    """Return 1, 2, ..., n (empty when n < 1)."""
    return list(range(1, n + 1))


def k_multiples(num: int, k: int) -> list[int]:
    """Return the first k multiples of num; empty if num < 1 or k <= 0."""
    if num < 1 or k <= 0:
        return []
    return [num * factor for factor in range(1, k + 1)]


def alternating_sum(n: int) -> int:
    """Return 1 - 2 + 3 - 4 + ... up to n."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    return sum(i if i % 2 else -i for i in range(1, n + 1))


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor of two non-negative integers."""
    if a < 0 or b < 0:
        raise ValueError(f"gcd() takes non-negative integers, got {a} and {b}")
    smaller, larger = sorted((a, b))
    while smaller:
        smaller, larger = larger % smaller, smaller
    return larger