"""Array algorithms: xor tricks, two pointers, Kadane, Moore voting and rearranging."""

from __future__ import annotations

from collections.abc import Sequence
from functools import reduce
from itertools import groupby
from operator import xor

__all__ = [
    "missing_number",
    "max_consecutive_ones",
    "single_number",
    "longest_subarray_with_sum",
    "has_pair_with_sum",
    "pair_indices_with_sum",
    "sort_zeros_ones_twos",
    "majority_element",
    "max_subarray_sum",
    "max_subarray_bounds",
    "rearrange_by_sign",
    "rearrange_alternating",
]


def missing_number(values: Sequence[int], n: int) -> int:
    """Return the number from 1..n absent from the first n - 1 values."""
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")
    if len(values) < n - 1:
        raise ValueError(f"expected at least {n - 1} values, got {len(values)}")
    expected = reduce(xor, range(1, n + 1), 0)
    present = reduce(xor, values[: n - 1], 0)
    return expected ^ present


def max_consecutive_ones(values: Sequence[int]) -> int:
    """Return the length of the longest run of ones."""
    return max((sum(1 for _ in run) for key, run in groupby(values) if key == 1), default=0)


def single_number(values: Sequence[int]) -> int:
    """Return the value that appears once when every other value appears twice."""
    return reduce(xor, values, 0)


def longest_subarray_with_sum(values: Sequence[int], k: int) -> int:
    """Return the length of the longest window summing to k, by a sliding window."""
    if not values:
        return 0
    total = values[0]
    longest = 0
    left = right = 0
    while right < len(values):
        while left <= right and total > k:
            total -= values[left]
            left += 1
        if total == k:
            longest = max(longest, right - left + 1)
        right += 1
        if right < len(values):
            total += values[right]
    return longest


def has_pair_with_sum(values: Sequence[int], target: int) -> bool:
    """Tell whether two different elements add up to target."""
    ordered = sorted(values)
    left, right = 0, len(ordered) - 1
    while left < right:
        pair = ordered[left] + ordered[right]
        if pair == target:
            return True
        if pair < target:
            left += 1
        else:
            right -= 1
    return False


def pair_indices_with_sum(values: Sequence[int], target: int) -> tuple[int, int] | None:
    """Return the indices of the first pair found adding up to target, or None."""
    seen: dict[int, int] = {}
    for index, value in enumerate(values):
        partner = seen.get(target - value)
        if partner is not None:
            return partner, index
        seen[value] = index
    return None


def sort_zeros_ones_twos(values: Sequence[int]) -> list[int]:
    """Return a sequence of 0s, 1s and 2s sorted with the Dutch national flag method."""
    items = list(values)
    strays = {value for value in items if value not in (0, 1, 2)}
    if strays:
        raise ValueError(f"only 0, 1 and 2 may be sorted, got {sorted(strays)}")
    low = mid = 0
    high = len(items) - 1
    while mid <= high:
        if items[mid] == 0:
            items[low], items[mid] = items[mid], items[low]
            low += 1
            mid += 1
        elif items[mid] == 1:
            mid += 1
        else:
            items[mid], items[high] = items[high], items[mid]
            high -= 1
    return items


def majority_element(values: Sequence[int]) -> int | None:
    """Return the element occurring more than len/2 times, or None."""
    candidate: int | None = None
    votes = 0
    for value in values:
        if votes == 0:
            candidate, votes = value, 1
        elif value == candidate:
            votes += 1
        else:
            votes -= 1
    if candidate is not None and values.count(candidate) > len(values) // 2:
        return candidate
    return None


def max_subarray_sum(values: Sequence[int]) -> int | None:
    """Return the best non-negative running sum by Kadane's method, or None if none occurs."""
    best: int | None = None
    running = 0
    for value in values:
        running += value
        if running < 0:
            running = 0
        elif best is None or running > best:
            best = running
    return best


def max_subarray_bounds(values: Sequence[int]) -> tuple[int, int]:
    """Return the start and end index tracked by Kadane's scan; -1 marks an index never set.

    The start is where the last running sum began; the end is the last index at
    which the running sum was positive.
    """
    start = end = -1
    running = 0
    for index, value in enumerate(values):
        if running == 0:
            start = index
        running += value
        if running > 0:
            end = index
        else:
            running = 0
    return start, end


def _split_by_sign(values: Sequence[int]) -> tuple[list[int], list[int]]:
    positives = [value for value in values if value > 0]
    others = [value for value in values if value <= 0]
    return positives, others


def rearrange_by_sign(values: Sequence[int]) -> list[int]:
    """Place positives at even and the rest at odd indices; counts must be equal."""
    positives, others = _split_by_sign(values)
    if len(positives) != len(others):
        raise ValueError(
            f"need as many positive as non-positive values, got {len(positives)} and {len(others)}"
        )
    return [value for pair in zip(positives, others) for value in pair]


def rearrange_alternating(values: Sequence[int]) -> list[int]:
    """Alternate positive and non-positive values, leftovers appended in their order."""
    positives, others = _split_by_sign(values)
    paired = min(len(positives), len(others))
    result = [value for pair in zip(positives, others) for value in pair]
    result.extend(positives[paired:])
    result.extend(others[paired:])
    return result