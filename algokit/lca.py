"""Lowest common ancestors in a rooted tree by binary lifting."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

ROOT = 1


class LowestCommonAncestor:
    """Answers ancestor and lowest-common-ancestor queries on a tree.

    Nodes are numbered from 1; ``children[i]`` lists the children of
    node ``i + 1``. Node 1 is the root.
    """

    def __init__(self, children: Sequence[Iterable[int]]) -> None:
        n = len(children)
        if n == 0:
            raise ValueError("the tree must have at least one node")
        graph: list[list[int]] = [[]] + [list(kids) for kids in children]
        for kids in graph:
            for child in kids:
                if not 1 <= child <= n:
                    raise ValueError(f"child {child} is not a node of the tree")
        self._n = n
        self._levels = (n - 1).bit_length()
        self._up = [[0] * (self._levels + 1) for _ in range(n + 1)]
        self._tin = [0] * (n + 1)
        self._tout = [0] * (n + 1)
        self._timer = 0

        self._enter(ROOT, 0)
        stack = [(ROOT, 0, iter(graph[ROOT]))]
        while stack:
            node, parent, pending = stack[-1]
            for child in pending:
                if child == parent:
                    continue
                if self._tin[child]:
                    raise ValueError("the children lists do not form a tree")
                self._enter(child, node)
                stack.append((child, node, iter(graph[child])))
                break
            else:
                stack.pop()
                self._timer += 1
                self._tout[node] = self._timer

        if not all(self._tin[1:]):
            raise ValueError("some nodes are not reachable from the root")

    def _enter(self, node: int, parent: int) -> None:
        self._timer += 1
        self._tin[node] = self._timer
        row = self._up[node]
        row[0] = parent
        for i in range(1, self._levels + 1):
            row[i] = self._up[row[i - 1]][i - 1]

    def _check(self, node: int) -> None:
        if not 1 <= node <= self._n:
            raise ValueError(f"node {node} is not in the tree")

    def _is_ancestor(self, u: int, v: int) -> bool:
        return self._tin[u] <= self._tin[v] and self._tout[u] >= self._tout[v]

    def is_ancestor(self, u: int, v: int) -> bool:
        """Whether ``u`` is ``v`` or lies on the path from ``v`` to the root."""
        self._check(u)
        self._check(v)
        return self._is_ancestor(u, v)

    def lca(self, u: int, v: int) -> int:
        """The deepest node that is an ancestor of both ``u`` and ``v``."""
        self._check(u)
        self._check(v)
        if self._is_ancestor(u, v):
            return u
        if self._is_ancestor(v, u):
            return v
        for i in range(self._levels, -1, -1):
            jump = self._up[u][i]
            if jump and not self._is_ancestor(jump, v):
                u = jump
        return self._up[u][0]