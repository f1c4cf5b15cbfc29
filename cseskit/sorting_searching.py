"""Sorting and searching: merged order statistics, range sums, subarrays, sticks, towers."""

from __future__ import annotations

import heapq
from bisect import bisect_right
from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import accumulate, islice


def kth_element(a: Iterable[int], b: Iterable[int], k: int) -> int:
    """Return the k-th (1-based) element of the merge of two sorted sequences."""
    if k < 1:
        raise IndexError("k must be at least 1")
    for value in islice(heapq.merge(a, b), k - 1, k):
        return value
    raise IndexError("k exceeds the combined length")


def static_range_sums(
    values: Iterable[int], queries: Iterable[Sequence[int]]
) -> list[int]:
    """Answer 1-based inclusive (a, b) range-sum queries over values."""
    prefix = [0, *accumulate(values)]
    size = len(prefix) - 1
    answers: list[int] = []
    for a, b in queries:
        if not 1 <= a <= b <= size:
            raise IndexError(f"range ({a}, {b}) is outside 1..{size}")
        answers.append(prefix[b] - prefix[a - 1])
    return answers


def max_subarray_sum(nums: Iterable[int]) -> int:
    """Return the largest sum of a non-empty contiguous subarray."""
    best: int | None = None
    running = 0
    for value in nums:
        running += value
        best = running if best is None else max(best, running)
        running = max(running, 0)
    if best is None:
        raise ValueError("the array must not be empty")
    return best


def stick_lengths(lengths: Iterable[int]) -> int:
    """Return the least total change making every stick the same length."""
    ordered = sorted(lengths)
    if not ordered:
        raise ValueError("there must be at least one stick")
    median = ordered[len(ordered) // 2]
    return sum(abs(length - median) for length in ordered)


def subarray_divisibility(values: Sequence[int]) -> int:
    """Return how many contiguous subarrays have a sum divisible by len(values)."""
    n = len(values)
    if n == 0:
        return 0
    residues = Counter(total % n for total in accumulate(values, initial=0))
    return sum(count * (count - 1) // 2 for count in residues.values())


def towers(cubes: Iterable[int]) -> int:
    """Return the fewest towers when each cube must sit on a strictly larger cube.

    Cubes are placed in the given order.
    """
    tails: list[int] = []
    for cube in cubes:
        position = bisect_right(tails, cube)
        if position == len(tails):
            tails.append(cube)
        else:
            tails[position] = cube
    return len(tails)