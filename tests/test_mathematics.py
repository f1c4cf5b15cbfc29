from collections import deque
from itertools import product

import math

import pytest

from cseskit.mathematics import (
    count_divisors,
    counting_grids,
    divisor_counts,
    exponentiation,
    exponentiation_tower,
    extended_euclid,
    josephus_query,
    max_difference,
    modular_inverse,
)

MOD = 1_000_000_007


@pytest.mark.parametrize("a,b,c", [(3, 4, 5), (2, 10, 7), (123456, 789, 1011)])
def test_exponentiation_adds_exponents(a, b, c):
    assert exponentiation(a, b + c) == exponentiation(a, b) * exponentiation(a, c) % MOD


def test_exponentiation_zero_exponent_is_one():
    assert exponentiation(MOD, 0) == 1


def test_exponentiation_negative_exponent_rejected():
    with pytest.raises(ValueError):
        exponentiation(2, -1)


@pytest.mark.parametrize("a,b,c", [(3, 2, 3), (5, 3, 4), (7, 2, 10)])
def test_exponentiation_tower_small_exponents(a, b, c):
    assert exponentiation_tower(a, b, c) == exponentiation(a, b**c)


def _orbit_count(n):
    def rotate(grid):
        return tuple(
            tuple(grid[n - 1 - col][row] for col in range(n)) for row in range(n)
        )

    canon = set()
    for cells in product((0, 1), repeat=n * n):
        grid = tuple(tuple(cells[r * n:(r + 1) * n]) for r in range(n))
        forms = [grid]
        for _ in range(3):
            forms.append(rotate(forms[-1]))
        canon.add(min(forms))
    return len(canon)


@pytest.mark.parametrize("n", [1, 2, 3, 4])
def test_counting_grids_matches_orbit_enumeration(n):
    assert counting_grids(n) == _orbit_count(n)


def test_divisor_counts_agree_with_count_divisors():
    counts = divisor_counts(300)
    assert counts[0] == 0
    assert counts[1:] == [count_divisors(i) for i in range(1, 301)]


@pytest.mark.parametrize("p", [2, 3, 97, 1_000_003])
def test_count_divisors_of_prime(p):
    assert count_divisors(p) == 2


def test_count_divisors_multiplicative():
    assert count_divisors(12 * 35) == count_divisors(12) * count_divisors(35)


def test_count_divisors_rejects_zero():
    with pytest.raises(ValueError):
        count_divisors(0)


def _removal_order(n):
    circle = deque(range(1, n + 1))
    order = []
    while circle:
        circle.rotate(-1)
        order.append(circle.popleft())
    return order


@pytest.mark.parametrize("n", range(1, 40))
def test_josephus_matches_simulation(n):
    assert [josephus_query(n, k) for k in range(1, n + 1)] == _removal_order(n)


def test_josephus_rejects_k_out_of_range():
    with pytest.raises(ValueError):
        josephus_query(5, 6)


def test_max_difference_pinned():
    assert max_difference(5, 5) == 5


@pytest.mark.parametrize("n,s", [(4, 6), (10, 3), (7, 14), (3, 0)])
def test_max_difference_invariants(n, s):
    result = max_difference(n, s)
    assert result <= s
    assert result % 2 == s % 2


def test_max_difference_sum_too_large():
    with pytest.raises(ValueError):
        max_difference(3, 7)


@pytest.mark.parametrize("a,b", [(240, 46), (17, 5), (0, 9), (1071, 462)])
def test_extended_euclid_bezout(a, b):
    g, x, y = extended_euclid(a, b)
    assert g == math.gcd(a, b)
    assert a * x + b * y == g


@pytest.mark.parametrize("a,m", [(3, 11), (10, 17), (123456, MOD)])
def test_modular_inverse(a, m):
    inv = modular_inverse(a, m)
    assert 0 <= inv < m
    assert a * inv % m == 1


def test_modular_inverse_not_coprime():
    with pytest.raises(ValueError):
        modular_inverse(6, 9)