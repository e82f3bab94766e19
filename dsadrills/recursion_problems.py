"""Recursion problems: digits, paths, subsets and number patterns."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import compress, product
from math import comb

__all__ = [
    "armstrong_sum",
    "is_armstrong",
    "frog_min_cost",
    "contains",
    "count_grid_paths",
    "subsequences",
    "subset_sums",
    "pattern",
    "is_prime",
]


def armstrong_sum(number: int, count: int) -> int:
    """Return the sum of each decimal digit of number raised to count."""
    if number < 0:
        raise ValueError(f"number must be non-negative, got {number}")
    if number == 0:
        return 0
    return sum(int(digit) ** count for digit in str(number))


def is_armstrong(number: int) -> bool:
    """Tell whether number equals the sum of its digits to the power of its length."""
    if number < 0:
        return False
    count = len(str(number)) if number > 0 else 0
    return armstrong_sum(number, count) == number


def frog_min_cost(heights: Sequence[int]) -> int:
    """Return the least total cost for a frog jumping one or two stones at a time."""
    if not heights:
        raise ValueError("frog_min_cost() needs at least one stone")
    # best[i] is the cost from stone i to the last stone; keep only the next two.
    next_cost, after_next = 0, 0
    for i in range(len(heights) - 2, -1, -1):
        one = next_cost + abs(heights[i] - heights[i + 1])
        if i + 2 < len(heights):
            cost = min(one, after_next + abs(heights[i] - heights[i + 2]))
        else:
            cost = one
        next_cost, after_next = cost, next_cost
    return next_cost


def contains(values: Sequence[int], x: int) -> bool:
    """Tell whether x occurs in values."""
    return x in values


def count_grid_paths(m: int, n: int) -> int:
    """Count right/down paths across an m by n grid from corner to corner."""
    if m <= 0 or n <= 0:
        return 0
    return comb(m + n - 2, m - 1)


def subsequences(text: str) -> list[str]:
    """Return every subsequence of text, taking each character before leaving it."""
    return ["".join(compress(text, mask)) for mask in product((True, False), repeat=len(text))]


def subset_sums(values: Sequence[int]) -> list[int]:
    """Return the sum of every subset, in the same order as subsequences()."""
    return [sum(compress(values, mask)) for mask in product((True, False), repeat=len(values))]


def pattern(n: int) -> list[int]:
    """Return n, n-5, ... down to the first value <= 0, then back up to n."""
    values = [n]
    current = n
    while current - 5 > 0:
        current -= 5
        values.append(current)
    current -= 5
    values.append(current)
    while current != n:
        current += 5
        values.append(current)
    return values


def is_prime(n: int) -> bool:
    """Tell whether n is a prime number."""
    if n <= 2:
        return n == 2
    divisor = 2
    while True:
        if n % divisor == 0:
            return False
        if divisor * divisor > n:
            return True
        divisor += 1