"""Introductory problems: missing numbers, permutations, palindromes, Hanoi and more."""

from __future__ import annotations

import string
from collections import Counter
from collections.abc import Iterable, Iterator
from itertools import groupby


class NoSolutionError(ValueError):
    """Raised when a problem instance has no valid answer."""


def missing_number(n: int, numbers: Iterable[int]) -> int:
    """Return the number from 1..n that is absent from numbers."""
    return n * (n + 1) // 2 - sum(numbers)


def _distinct_permutations(counts: Counter[str], remaining: int) -> Iterator[str]:
    if remaining == 0:
        yield ""
        return
    for char in sorted(counts):
        if counts[char]:
            counts[char] -= 1
            for rest in _distinct_permutations(counts, remaining - 1):
                yield char + rest
            counts[char] += 1


def creating_strings(s: str) -> list[str]:
    """Return every distinct rearrangement of s in lexicographic order."""
    return list(_distinct_permutations(Counter(s), len(s)))


def palindrome_reorder(s: str) -> str:
    """Rearrange the uppercase letters of s into a palindrome.

    Raises NoSolutionError when more than one letter occurs an odd number of times.
    """
    if any(char not in string.ascii_uppercase for char in s):
        raise ValueError("only uppercase letters A-Z are allowed")
    counts = Counter(s)
    odd = [char for char in string.ascii_uppercase if counts[char] % 2]
    if len(odd) > 1:
        raise NoSolutionError("NO SOLUTION")
    half = "".join(char * (counts[char] // 2) for char in string.ascii_uppercase)
    return half + "".join(odd) + half[::-1]


def beautiful_permutation(n: int) -> list[int]:
    """Return a permutation of 1..n with no adjacent values differing by one."""
    if n in (2, 3):
        raise NoSolutionError("NO SOLUTION")
    return list(range(2, n + 1, 2)) + list(range(1, n + 1, 2))


def longest_repetition(s: str) -> int:
    """Return the length of the longest run of one repeated character (at least 1)."""
    return max((sum(1 for _ in run) for _, run in groupby(s)), default=1)


def _hanoi(n: int, source: int, spare: int, target: int) -> Iterator[tuple[int, int]]:
    if n > 0:
        yield from _hanoi(n - 1, source, target, spare)
        yield (source, target)
        yield from _hanoi(n - 1, spare, source, target)


def tower_of_hanoi(n: int) -> list[tuple[int, int]]:
    """Return the moves (from_peg, to_peg) carrying n disks from peg 1 to peg 3."""
    return list(_hanoi(n, 1, 2, 3))


def two_knights(k: int) -> list[int]:
    """For each board size 1..k, count placements of two non-attacking knights."""
    return [
        (n * n * (n * n - 1)) // 2 - 4 * (n - 1) * (n - 2)
        for n in range(1, k + 1)
    ]


def weird_algorithm(n: int) -> list[int]:
    """Return the sequence from n down to 1 halving evens and mapping odds to 3n+1."""
    if n < 1:
        raise ValueError("starting value must be positive")
    sequence = [n]
    while n != 1:
        n = n // 2 if n % 2 == 0 else 3 * n + 1
        sequence.append(n)
    return sequence