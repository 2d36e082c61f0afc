"""Minimum spanning trees by Kruskal's and Prim's algorithms."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence


class RankedDisjointSets:
    """Disjoint sets over ``0..n`` with path compression and union by rank."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("n must be non-negative")
        self._parent = list(range(n + 1))
        self._rank = [0] * (n + 1)

    def find(self, u: int) -> int:
        """Representative of the set holding ``u``."""
        if not 0 <= u < len(self._parent):
            raise IndexError(f"element {u} out of range")
        parent = self._parent
        root = u
        while parent[root] != root:
            root = parent[root]
        while parent[u] != root:
            parent[u], u = root, parent[u]
        return root

    def merge(self, x: int, y: int) -> None:
        """Join the sets of ``x`` and ``y``, hanging the lower-ranked under the other."""
        x, y = self.find(x), self.find(y)
        if self._rank[x] > self._rank[y]:
            self._parent[y] = x
        else:
            self._parent[x] = y
        if self._rank[x] == self._rank[y]:
            self._rank[y] += 1


def kruskal_mst(
    vertex_count: int, edges: Iterable[tuple[int, int, int]]
) -> tuple[int, list[tuple[int, int]]]:
    """Minimum spanning forest of ``(u, v, weight)`` edges on ``0..vertex_count-1``.

    Returns the total weight and the chosen edges in the order taken.
    Edges are considered by weight, then by endpoints.
    """
    ordered = []
    for u, v, w in edges:
        if not (0 <= u < vertex_count and 0 <= v < vertex_count):
            raise ValueError(f"edge ({u}, {v}) names an unknown vertex")
        ordered.append((w, u, v))
    ordered.sort()
    sets = RankedDisjointSets(vertex_count)
    total = 0
    chosen = []
    for w, u, v in ordered:
        set_u, set_v = sets.find(u), sets.find(v)
        if set_u != set_v:
            chosen.append((u, v))
            total += w
            sets.merge(set_u, set_v)
    return total, chosen


def prim_mst(matrix: Sequence[Sequence[int]]) -> list[tuple[int, int, int]]:
    """Minimum spanning tree of a weighted adjacency matrix, grown from vertex 0.

    Zero entries mean no edge. Returns ``(parent, vertex, weight)`` for
    every vertex but 0. Raises ValueError when the graph is disconnected.
    """
    n = len(matrix)
    if any(len(row) != n for row in matrix):
        raise ValueError("the adjacency matrix must be square")
    if n == 0:
        return []
    key = [math.inf] * n
    parent = [-1] * n
    in_tree = [False] * n
    key[0] = 0
    for _ in range(n - 1):
        candidates = [v for v in range(n) if not in_tree[v] and key[v] < math.inf]
        if not candidates:
            raise ValueError("the graph is not connected")
        u = min(candidates, key=key.__getitem__)
        in_tree[u] = True
        for v, weight in enumerate(matrix[u]):
            if weight and not in_tree[v] and weight < key[v]:
                parent[v] = u
                key[v] = weight
    if any(k == math.inf for k in key):
        raise ValueError("the graph is not connected")
    return [(parent[v], v, matrix[v][parent[v]]) for v in range(1, n)]