"""Dynamic-programming solutions: edit distance, towers, dice, coins, paths, projects."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Sequence

MOD = 1_000_000_007


def edit_distance(s: str, t: str) -> int:
    """Return the minimum number of inserts, deletes and replacements turning s into t."""
    previous = list(range(len(t) + 1))
    for i, sc in enumerate(s, start=1):
        current = [i]
        for j, tc in enumerate(t, start=1):
            if sc == tc:
                current.append(previous[j - 1])
            else:
                current.append(1 + min(current[j - 1], previous[j], previous[j - 1]))
        previous = current
    return previous[-1]


def counting_towers(n: int) -> int:
    """Return the number of ways to build a tower of width 2 and height n, modulo 1e9+7."""
    if n < 1:
        raise ValueError("tower height must be at least 1")
    # joined: top row is one 2-wide block; split: top row is two 1-wide blocks.
    joined, split = 1, 1
    for _ in range(n - 1):
        joined, split = (
            (2 * joined + split) % MOD,
            (joined + 4 * split) % MOD,
        )
    return (joined + split) % MOD


def dice_combinations(n: int) -> int:
    """Return the number of ordered dice-roll sequences summing to n, modulo 1e9+7."""
    if n < 0:
        return 0
    ways = [1] + [0] * n
    for total in range(1, n + 1):
        ways[total] = sum(ways[max(0, total - 6):total]) % MOD
    return ways[n]


def minimizing_coins(coins: Iterable[int], target: int) -> int:
    """Return the fewest coins summing to target, or -1 if it cannot be reached."""
    values = sorted(set(coins))
    if any(value < 1 for value in values):
        raise ValueError("coin values must be positive")
    if target < 0:
        return -1
    best: list[int | None] = [0] + [None] * target
    for amount in range(1, target + 1):
        candidates = [
            best[amount - value] + 1
            for value in values
            if value <= amount and best[amount - value] is not None
        ]
        best[amount] = min(candidates, default=None)
    result = best[target]
    return -1 if result is None else result


def unique_paths(m: int, n: int) -> int:
    """Return the number of right/down paths across an m by n grid."""
    if m < 1 or n < 1:
        raise ValueError("grid dimensions must be at least 1")
    row = [1] * n
    for _ in range(m - 1):
        running = 0
        for j, above in enumerate(row):
            running = above if j == 0 else running + above
            row[j] = running
    return row[-1]


def max_project_reward(projects: Iterable[Sequence[int]]) -> int:
    """Return the largest total reward from non-overlapping (start, end, reward) projects.

    Days are inclusive, so a project ending on a day overlaps one starting that day.
    """
    items = [(start, end, reward) for start, end, reward in projects]
    days = sorted({day for start, end, _ in items for day in (start, end)})
    index = {day: position for position, day in enumerate(days, start=1)}

    ending: defaultdict[int, list[tuple[int, int]]] = defaultdict(list)
    for start, end, reward in items:
        ending[index[end]].append((index[start], reward))

    best = [0] * (len(days) + 1)
    for day in range(1, len(days) + 1):
        best[day] = best[day - 1]
        for start, reward in ending[day]:
            best[day] = max(best[day], reward + best[start - 1])
    return best[-1]