# cseskit

This is a small, pure-Python library of algorithms for well-known programming-contest
problems. It has no runtime dependencies. Each problem is one function. The function
takes ordinary Python values and returns its answer. When an instance has no answer,
the function raises an exception.

## Installation

```
pip install .
```

## Modules

### `cseskit.dynamic_programming`

- `edit_distance(s, t)`: the fewest inserts, deletes and replacements that turn `s` into `t`.
- `counting_towers(n)`: the number of towers of width 2 and height `n`, modulo 10^9 + 7.
- `dice_combinations(n)`: the number of ordered dice-roll sequences that sum to `n`, modulo 10^9 + 7.
- `minimizing_coins(coins, target)`: the fewest coins that sum to `target`, or `-1` if no set of coins reaches it.
- `unique_paths(m, n)`: the number of right/down paths across an `m` by `n` grid.
- `max_project_reward(projects)`: the best total reward from non-overlapping `(start, end, reward)` projects. Days are inclusive.

### `cseskit.introductory`

- `missing_number(n, numbers)`: the value from 1..n that is absent from `numbers`.
- `creating_strings(s)`: every distinct rearrangement of `s`, in lexicographic order.
- `palindrome_reorder(s)`: a palindrome made from the uppercase letters of `s`.
- `beautiful_permutation(n)`: a permutation of 1..n in which no two adjacent values differ by one.
- `longest_repetition(s)`: the length of the longest run of one repeated character.
- `tower_of_hanoi(n)`: the list of `(from_peg, to_peg)` moves that carry `n` disks from peg 1 to peg 3.
- `two_knights(k)`: for each board size from 1 to `k`, the number of ways to place two knights that do not attack each other.
- `weird_algorithm(n)`: the sequence from `n` down to 1. Even values are halved and odd values become `3n + 1`.

`palindrome_reorder` and `beautiful_permutation` raise `NoSolutionError`, a subclass of `ValueError`, when the instance has no answer.

### `cseskit.graphs`

Nodes are numbered from 1 unless stated otherwise.

- `UnionFind(n)`: a disjoint-set forest over the elements 0..n-1. It has the methods `find(x)` and `union(x, y)`.
- `can_finish(num_courses, prerequisites)`: `True` if the 0-based dependency pairs contain no cycle.
- `course_schedule(n, edges)`: an order of the courses that respects every edge `(a, b)`.
- `flight_routes_check(n, edges)`: `None` if every city can reach every other city. Otherwise a pair `(u, v)` such that there is no route from `u` to `v`.
- `building_roads(n, edges)`: the fewest new roads that connect all the cities.
- `game_routes(n, edges)`: the number of routes from 1 to `n`, modulo 10^9 + 7.
- `planets_queries(successors, queries)`: for each query `(x, k)`, the planet reached from `x` after `k` teleports.
- `round_trip(n, edges)`: a directed cycle whose first and last entries are the same city.
- `shortest_paths_all_pairs(n, edges, queries)`: distances on an undirected weighted graph. An unreachable pair gives `-1`.
- `shortest_routes(n, edges)`: the directed distances from city 1. An unreachable city gets `UNREACHABLE` (10^18).

`course_schedule` and `round_trip` raise `ImpossibleError`, a subclass of `ValueError`, when there is no answer. A node number outside 1..n raises `ValueError`.

### `cseskit.trees`

- `TreeDistance(n, edges)`: builds the tree once and answers queries with `distance(u, v)`.
- `distance_queries(n, edges, queries)`: answers all the queries in one call.

### `cseskit.mathematics`

- `exponentiation(a, b)`: `a ** b` modulo 10^9 + 7.
- `exponentiation_tower(a, b, c)`: `a ** (b ** c)` modulo 10^9 + 7.
- `counting_grids(n)`: the number of black-and-white `n` by `n` grids, counting grids that are rotations of each other once, modulo 10^9 + 7.
- `divisor_counts(limit)`: the number of divisors of every value from 0 to `limit`.
- `count_divisors(n)`: the number of divisors of a single value.
- `josephus_query(n, k)`: the `k`-th child removed when every second child leaves the circle.
- `max_difference(n, s)`: the largest `|x - y|` with `0 <= x, y <= n` and `x + y == s`.
- `extended_euclid(a, b)`: an `EuclidResult(gcd, x, y)` with `a*x + b*y == gcd`.
- `modular_inverse(a, m)`: the inverse of `a` modulo `m`.

### `cseskit.sorting_searching`

- `kth_element(a, b, k)`: the `k`-th element (1-based) of the merge of two sorted sequences.
- `static_range_sums(values, queries)`: the sums over 1-based inclusive ranges.
- `max_subarray_sum(nums)`: the largest sum of a non-empty contiguous subarray.
- `stick_lengths(lengths)`: the least total change that makes every stick the same length.
- `subarray_divisibility(values)`: the number of subarrays whose sum is divisible by `len(values)`.
- `towers(cubes)`: the fewest towers when each cube must sit on a strictly larger cube.

## Example

```python
from cseskit.dynamic_programming import edit_distance, dice_combinations
from cseskit.graphs import UnionFind
from cseskit.mathematics import exponentiation

edit_distance("LOVE", "MOVIE")   # 2
dice_combinations(3)             # 4
exponentiation(3, 4)             # 81

uf = UnionFind(5)
uf.union(0, 1)
uf.find(0) == uf.find(1)         # True
```

## What it does not do

The package has no command-line program. It does not read problem input from standard
input and does not print answers in a judge's output format. To use it from a script,
parse the input yourself and call the functions.

## Running the tests

```
pip install ".[test]"
pytest
```