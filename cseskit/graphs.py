"""Graph algorithms: topological orders, connectivity, cycles, path counts, shortest paths."""

from __future__ import annotations

import heapq
import math
from collections import deque
from collections.abc import Iterable, Sequence

MOD = 1_000_000_007
UNREACHABLE = 10**18


class ImpossibleError(ValueError):
    """Raised when a graph problem has no valid answer."""


class UnionFind:
    """Disjoint-set forest over the elements 0..n-1 with path compression."""

    def __init__(self, n: int) -> None:
        self._parent = list(range(n))

    def find(self, x: int) -> int:
        """Return the representative of the set holding x."""
        root = x
        while root != self._parent[root]:
            root = self._parent[root]
        while x != root:
            following = self._parent[x]
            self._parent[x] = root
            x = following
        return root

    def union(self, x: int, y: int) -> None:
        """Merge the sets holding x and y."""
        root_x = self.find(x)
        root_y = self.find(y)
        if root_x != root_y:
            self._parent[root_x] = root_y


def _check_node(node: int, n: int) -> None:
    if not 1 <= node <= n:
        raise ValueError(f"node {node} is outside 1..{n}")


def _adjacency(n: int, edges: Iterable[Sequence[int]]) -> list[list[int]]:
    """Return a 1-based directed adjacency list."""
    adj: list[list[int]] = [[] for _ in range(n + 1)]
    for a, b in edges:
        _check_node(a, n)
        _check_node(b, n)
        adj[a].append(b)
    return adj


def can_finish(num_courses: int, prerequisites: Iterable[Sequence[int]]) -> bool:
    """Return True if the 0-based dependency pairs (a, b) contain no cycle."""
    adj: list[list[int]] = [[] for _ in range(num_courses)]
    indegree = [0] * num_courses
    for a, b in prerequisites:
        adj[a].append(b)
        indegree[b] += 1
    queue = deque(node for node in range(num_courses) if indegree[node] == 0)
    taken = 0
    while queue:
        node = queue.popleft()
        taken += 1
        for nxt in adj[node]:
            indegree[nxt] -= 1
            if indegree[nxt] == 0:
                queue.append(nxt)
    return taken == num_courses


def course_schedule(n: int, edges: Iterable[Sequence[int]]) -> list[int]:
    """Return an order of courses 1..n in which each edge (a, b) puts a before b.

    Raises ImpossibleError when the requirements form a cycle.
    """
    adj = _adjacency(n, edges)
    indegree = [0] * (n + 1)
    for targets in adj:
        for b in targets:
            indegree[b] += 1
    queue = deque(node for node in range(1, n + 1) if indegree[node] == 0)
    order: list[int] = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for nxt in adj[node]:
            indegree[nxt] -= 1
            if indegree[nxt] == 0:
                queue.append(nxt)
    if len(order) != n:
        raise ImpossibleError("IMPOSSIBLE")
    return order


def _postorder(adj: list[list[int]], start: int, visited: list[bool], out: list[int]) -> None:
    visited[start] = True
    stack = [(start, iter(adj[start]))]
    while stack:
        node, neighbours = stack[-1]
        for nxt in neighbours:
            if not visited[nxt]:
                visited[nxt] = True
                stack.append((nxt, iter(adj[nxt])))
                break
        else:
            stack.pop()
            out.append(node)


def _mark_reachable(adj: list[list[int]], start: int, visited: list[bool]) -> None:
    visited[start] = True
    stack = [start]
    while stack:
        node = stack.pop()
        for nxt in adj[node]:
            if not visited[nxt]:
                visited[nxt] = True
                stack.append(nxt)


def flight_routes_check(n: int, edges: Iterable[Sequence[int]]) -> tuple[int, int] | None:
    """Check that every city 1..n can reach every other along directed flights.

    Returns None if so, otherwise a pair (u, v) such that there is no route from u to v.
    """
    edge_list = [(a, b) for a, b in edges]
    adj = _adjacency(n, edge_list)
    reverse = _adjacency(n, ((b, a) for a, b in edge_list))

    visited = [False] * (n + 1)
    order: list[int] = []
    for node in range(1, n + 1):
        if not visited[node]:
            _postorder(adj, node, visited, order)

    visited = [False] * (n + 1)
    first: int | None = None
    for node in reversed(order):
        if not visited[node]:
            _mark_reachable(reverse, node, visited)
            if first is None:
                first = node
            else:
                return (node, first)
    return None


def building_roads(n: int, edges: Iterable[Sequence[int]]) -> list[tuple[int, int]]:
    """Return the fewest new roads that connect cities 1..n, joining components in order."""
    sets = UnionFind(n + 1)
    for a, b in edges:
        _check_node(a, n)
        _check_node(b, n)
        sets.union(a, b)
    seen_roots: set[int] = set()
    representatives: list[int] = []
    for node in range(1, n + 1):
        root = sets.find(node)
        if root not in seen_roots:
            seen_roots.add(root)
            representatives.append(node)
    return list(zip(representatives, representatives[1:]))


def game_routes(n: int, edges: Iterable[Sequence[int]]) -> int:
    """Return the number of directed routes from level 1 to level n, modulo 1e9+7."""
    adj = _adjacency(n, edges)
    indegree = [0] * (n + 1)
    for targets in adj:
        for b in targets:
            indegree[b] += 1
    ways = [0] * (n + 1)
    ways[1] = 1
    queue = deque(node for node in range(1, n + 1) if indegree[node] == 0)
    while queue:
        node = queue.popleft()
        for nxt in adj[node]:
            indegree[nxt] -= 1
            ways[nxt] = (ways[nxt] + ways[node]) % MOD
            if indegree[nxt] == 0:
                queue.append(nxt)
    return ways[n]


def planets_queries(
    successors: Sequence[int], queries: Iterable[Sequence[int]]
) -> list[int]:
    """Answer (x, k) queries: the planet reached from x after k teleports.

    successors[i] is the destination of planet i + 1.
    """
    n = len(successors)
    for target in successors:
        _check_node(target, n)
    query_list = [(x, k) for x, k in queries]
    for x, k in query_list:
        _check_node(x, n)
        if k < 0:
            raise ValueError("number of teleports must not be negative")

    levels = max((k.bit_length() for _, k in query_list), default=0)
    jumps = [[0, *successors]]
    for _ in range(1, levels):
        previous = jumps[-1]
        jumps.append([previous[previous[node]] for node in range(n + 1)])

    answers: list[int] = []
    for x, k in query_list:
        for bit, table in enumerate(jumps):
            if k >> bit & 1:
                x = table[x]
        answers.append(x)
    return answers


def round_trip(n: int, edges: Iterable[Sequence[int]]) -> list[int]:
    """Return a directed cycle as a list of cities whose first and last entries match.

    Raises ImpossibleError if the flights contain no cycle.
    """
    adj = _adjacency(n, edges)
    state = [0] * (n + 1)  # 0 unvisited, 1 on the stack, 2 finished
    parent = [0] * (n + 1)
    for root in range(1, n + 1):
        if state[root]:
            continue
        state[root] = 1
        stack = [(root, iter(adj[root]))]
        while stack:
            current, neighbours = stack[-1]
            for nxt in neighbours:
                if state[nxt] == 1:
                    path: list[int] = []
                    node = current
                    while node != nxt:
                        path.append(node)
                        node = parent[node]
                    path += [nxt, current]
                    path.reverse()
                    return path
                if state[nxt] == 0:
                    parent[nxt] = current
                    state[nxt] = 1
                    stack.append((nxt, iter(adj[nxt])))
                    break
            else:
                state[current] = 2
                stack.pop()
    raise ImpossibleError("IMPOSSIBLE")


def shortest_paths_all_pairs(
    n: int, edges: Iterable[Sequence[int]], queries: Iterable[Sequence[int]]
) -> list[int]:
    """Answer (a, b) distance queries on an undirected weighted graph; -1 if unreachable."""
    dist = [[math.inf] * (n + 1) for _ in range(n + 1)]
    for node in range(1, n + 1):
        dist[node][node] = 0
    for a, b, weight in edges:
        _check_node(a, n)
        _check_node(b, n)
        dist[a][b] = min(dist[a][b], weight)
        dist[b][a] = min(dist[b][a], weight)

    for via in range(1, n + 1):
        via_row = dist[via]
        for row in dist[1:]:
            to_via = row[via]
            if to_via == math.inf:
                continue
            for target in range(1, n + 1):
                candidate = to_via + via_row[target]
                if candidate < row[target]:
                    row[target] = candidate

    answers: list[int] = []
    for a, b in queries:
        _check_node(a, n)
        _check_node(b, n)
        value = dist[a][b]
        answers.append(-1 if value == math.inf else value)
    return answers


def shortest_routes(n: int, edges: Iterable[Sequence[int]]) -> list[int]:
    """Return the shortest directed distance from city 1 to each city 1..n.

    Unreachable cities get UNREACHABLE.
    """
    adj: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
    for a, b, weight in edges:
        _check_node(a, n)
        _check_node(b, n)
        adj[a].append((b, weight))

    dist = [UNREACHABLE] * (n + 1)
    dist[1] = 0
    heap = [(0, 1)]
    while heap:
        distance, node = heapq.heappop(heap)
        if distance != dist[node]:
            continue
        for nxt, weight in adj[node]:
            candidate = distance + weight
            if candidate < dist[nxt]:
                dist[nxt] = candidate
                heapq.heappush(heap, (candidate, nxt))
    return dist[1:]