"""Number-theory solutions: modular powers, grid colourings, divisors, Josephus order."""

from __future__ import annotations

from typing import NamedTuple

MOD = 1_000_000_007


class EuclidResult(NamedTuple):
    """Result of the extended Euclidean algorithm: a * x + b * y == gcd."""

    gcd: int
    x: int
    y: int


def exponentiation(a: int, b: int) -> int:
    """Return a to the power b modulo 1e9+7."""
    if b < 0:
        raise ValueError("exponent must not be negative")
    return pow(a, b, MOD)


def exponentiation_tower(a: int, b: int, c: int) -> int:
    """Return a ** (b ** c) modulo 1e9+7, reducing the exponent modulo 1e9+6."""
    if b < 0 or c < 0:
        raise ValueError("exponents must not be negative")
    return pow(a, pow(b, c, MOD - 1), MOD)


def counting_grids(n: int) -> int:
    """Return the number of black-and-white n by n grids up to rotation, modulo 1e9+7."""
    if n < 0:
        raise ValueError("grid size must not be negative")
    identity = pow(2, n * n, MOD)
    half_turn = pow(2, (n * n + 1) // 2, MOD)
    r = n // 2
    quarter_cells = r * (r + 1) + 1 if n % 2 else r * r
    quarter_turn = pow(2, quarter_cells, MOD)
    total = (identity + half_turn + 2 * quarter_turn) % MOD
    return total * pow(4, MOD - 2, MOD) % MOD


def divisor_counts(limit: int) -> list[int]:
    """Return a list whose entry i is the number of divisors of i, for 0..limit."""
    if limit < 0:
        raise ValueError("limit must not be negative")
    counts = [0] * (limit + 1)
    for step in range(1, limit + 1):
        for multiple in range(step, limit + 1, step):
            counts[multiple] += 1
    return counts


def count_divisors(n: int) -> int:
    """Return the number of positive divisors of n."""
    if n < 1:
        raise ValueError("n must be positive")
    total = 1
    factor = 2
    while factor * factor <= n:
        exponent = 0
        while n % factor == 0:
            n //= factor
            exponent += 1
        total *= exponent + 1
        factor += 1
    if n > 1:
        total *= 2
    return total


def _wrap(value: int, n: int) -> int:
    if value <= 0:
        value += ((-value) // n + 1) * n
    return value if value == n else value % n


def josephus_query(n: int, k: int) -> int:
    """Return the k-th child removed when every second child of 1..n leaves the circle."""
    if n < 1:
        raise ValueError("there must be at least one child")
    if not 1 <= k <= n:
        raise ValueError(f"k must lie in 1..{n}")
    diff, start, length, first = 1, 2, n, False
    while length:
        odd = length % 2 == 1
        removed = length // 2 + (1 if first and odd else 0)
        if k <= removed:
            return _wrap(start + 2 * (k - 1) * diff, n)
        if odd:
            start = _wrap(start + (3 if first else -1) * diff, n)
        else:
            start = _wrap(start + diff, n)
        diff *= 2
        if odd:
            first = not first
        k -= removed
        length -= removed
    return start


def max_difference(n: int, s: int) -> int:
    """Return the largest |x - y| over 0 <= x, y <= n with x + y == s."""
    diffs = [abs((s - i) - i) for i in range(0, min(n, s) + 1) if s - i <= n]
    if not diffs:
        raise ValueError("no pair of values in 0..n has that sum")
    return max(diffs)


def extended_euclid(a: int, b: int) -> EuclidResult:
    """Return gcd(a, b) together with coefficients x, y such that a*x + b*y == gcd."""
    old_r, r = a, b
    old_x, x = 1, 0
    old_y, y = 0, 1
    while r:
        quotient = old_r // r
        old_r, r = r, old_r - quotient * r
        old_x, x = x, old_x - quotient * x
        old_y, y = y, old_y - quotient * y
    return EuclidResult(old_r, old_x, old_y)


def modular_inverse(a: int, m: int) -> int:
    """Return the inverse of a modulo m, in 0..m-1."""
    if m < 1:
        raise ValueError("modulus must be positive")
    result = extended_euclid(a % m, m)
    if result.gcd != 1:
        raise ValueError(f"{a} has no inverse modulo {m}")
    return result.x % m