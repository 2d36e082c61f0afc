"""Disjoint-set union with path compression and union by size."""

from __future__ import annotations


class DisjointSetUnion:
    """Disjoint sets over the nodes ``1..max_nodes``."""

    def __init__(self, max_nodes: int) -> None:
        if max_nodes < 0:
            raise ValueError("max_nodes must be non-negative")
        self._parent = list(range(max_nodes + 1))
        self._size = [1] * (max_nodes + 1)

    def _check(self, node: int) -> None:
        if not 1 <= node < len(self._parent):
            raise IndexError(f"node {node} out of range")

    def find_leader(self, node: int) -> int:
        """Representative of the set holding ``node``."""
        self._check(node)
        parent = self._parent
        root = node
        while parent[root] != root:
            root = parent[root]
        while parent[node] != root:
            parent[node], node = root, parent[node]
        return root

    def same_set(self, u: int, v: int) -> bool:
        """Whether ``u`` and ``v`` belong to the same set."""
        return self.find_leader(u) == self.find_leader(v)

    def union(self, u: int, v: int) -> None:
        """Merge the sets of ``u`` and ``v``; the larger set's leader stays."""
        leader_u, leader_v = self.find_leader(u), self.find_leader(v)
        if leader_u == leader_v:
            return
        if self._size[leader_u] < self._size[leader_v]:
            leader_u, leader_v = leader_v, leader_u
        self._size[leader_u] += self._size[leader_v]
        self._parent[leader_v] = leader_u

    def size(self, node: int) -> int:
        """Number of nodes in the set holding ``node``."""
        return self._size[self.find_leader(node)]