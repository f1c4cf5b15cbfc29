"""Distances between nodes of a tree using binary lifting."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence


class TreeDistance:
    """Answers distance queries on a tree with nodes 1..n rooted at node 1."""

    def __init__(self, n: int, edges: Iterable[Sequence[int]]) -> None:
        edge_list = [(a, b) for a, b in edges]
        if n < 1:
            raise ValueError("a tree needs at least one node")
        if len(edge_list) != n - 1:
            raise ValueError("a tree with n nodes has exactly n - 1 edges")
        self._n = n
        adj: list[list[int]] = [[] for _ in range(n)]
        for a, b in edge_list:
            self._check(a)
            self._check(b)
            adj[a - 1].append(b - 1)
            adj[b - 1].append(a - 1)

        self._levels = max(1, n.bit_length())
        parent = [0] * n
        self._depth = [0] * n
        seen = [False] * n
        seen[0] = True
        queue = deque([0])
        while queue:
            node = queue.popleft()
            for nxt in adj[node]:
                if not seen[nxt]:
                    seen[nxt] = True
                    parent[nxt] = node
                    self._depth[nxt] = self._depth[node] + 1
                    queue.append(nxt)
        if not all(seen):
            raise ValueError("the edges do not form a connected tree")

        self._up = [parent]
        for _ in range(1, self._levels):
            previous = self._up[-1]
            self._up.append([previous[previous[node]] for node in range(n)])

    def _check(self, node: int) -> None:
        if not 1 <= node <= self._n:
            raise ValueError(f"node {node} is outside 1..{self._n}")

    def _ancestor(self, node: int, k: int) -> int:
        bit = 0
        while k:
            if k & 1:
                node = self._up[bit][node]
            k >>= 1
            bit += 1
        return node

    def distance(self, u: int, v: int) -> int:
        """Return the number of edges on the path between nodes u and v."""
        self._check(u)
        self._check(v)
        u -= 1
        v -= 1
        if self._depth[u] > self._depth[v]:
            u, v = v, u
        result = self._depth[v] - self._depth[u]
        v = self._ancestor(v, result)
        if u == v:
            return result
        for bit in reversed(range(self._levels)):
            table = self._up[bit]
            if table[u] != table[v]:
                u = table[u]
                v = table[v]
                result += 2 << bit
        return result + 2


def distance_queries(
    n: int, edges: Iterable[Sequence[int]], queries: Iterable[Sequence[int]]
) -> list[int]:
    """Answer (u, v) distance queries on the tree with nodes 1..n."""
    tree = TreeDistance(n, edges)
    return [tree.distance(u, v) for u, v in queries]