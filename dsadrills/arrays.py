"""Everyday array drills: extremes, rotation, search and merging sorted data."""

from __future__ import annotations

from collections.abc import Sequence
from heapq import merge
from itertools import groupby, pairwise

__all__ = [
    "min_max",
    "reversed_array",
    "second_largest",
    "second_smallest",
    "is_sorted",
    "remove_duplicates",
    "left_rotate",
    "linear_search",
    "move_zeros_to_end",
    "left_rotate_by",
    "sorted_union",
    "sorted_intersection",
]


def _require_items(values: Sequence[int], name: str) -> None:
    if not values:
        raise ValueError(f"{name}() needs at least one element")


def min_max(values: Sequence[int]) -> tuple[int, int]:
    """Return the smallest and the largest element of a non-empty sequence."""
    _require_items(values, "min_max")
    ordered = sorted(values)
    return ordered[0], ordered[-1]


def reversed_array(values: Sequence[int]) -> list[int]:
    """Return the elements in reverse order."""
    return list(reversed(values))


def second_largest(values: Sequence[int]) -> int | None:
    """Return the largest value strictly below the maximum, or None if there is none."""
    _require_items(values, "second_largest")
    largest = values[0]
    runner_up: int | None = None
    for value in values[1:]:
        if value > largest:
            runner_up, largest = largest, value
        elif value < largest and (runner_up is None or value > runner_up):
            runner_up = value
    return runner_up


def second_smallest(values: Sequence[int]) -> int | None:
    """Return the smallest value strictly above the minimum, or None if there is none."""
    _require_items(values, "second_smallest")
    smallest = values[0]
    runner_up: int | None = None
    for value in values[1:]:
        if value < smallest:
            runner_up, smallest = smallest, value
        elif value != smallest and (runner_up is None or value < runner_up):
            runner_up = value
    return runner_up


def is_sorted(values: Sequence[int]) -> bool:
    """Tell whether the values are in non-decreasing order."""
    return all(earlier <= later for earlier, later in pairwise(values))


def remove_duplicates(values: Sequence[int]) -> list[int]:
    """Return a sorted sequence with each run of equal values kept once."""
    return [value for value, _ in groupby(values)]


def left_rotate(values: Sequence[int]) -> list[int]:
    """Return the values rotated one place to the left."""
    items = list(values)
    return items[1:] + items[:1]


def linear_search(values: Sequence[int], target: int) -> int | None:
    """Return the index of the first element equal to target, or None."""
    return next((index for index, value in enumerate(values) if value == target), None)


def move_zeros_to_end(values: Sequence[int]) -> list[int]:
    """Return the values with every zero moved to the end, other order kept."""
    non_zero = [value for value in values if value != 0]
    return non_zero + [0] * (len(values) - len(non_zero))


def left_rotate_by(values: Sequence[int], d: int) -> list[int]:
    """Return the values rotated d places to the left, for 0 <= d <= len(values)."""
    if not 0 <= d <= len(values):
        raise ValueError(f"rotation must lie between 0 and {len(values)}, got {d}")
    items = list(values)
    return items[d:] + items[:d]


def sorted_union(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Return the distinct values of two sorted sequences, in sorted order."""
    return [value for value, _ in groupby(merge(first, second))]


def sorted_intersection(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Return the values common to two sorted sequences, matching duplicates pairwise."""
    common: list[int] = []
    i = j = 0
    while i < len(first) and j < len(second):
        if first[i] < second[j]:
            i += 1
        elif first[i] > second[j]:
            j += 1
        else:
            common.append(first[i])
            i += 1
            j += 1
    return common