"""Topological sorting, breadth-first levels and depth-first order."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable


def _check_node(node: int, count: int, first: int) -> None:
    if not first <= node < count + first:
        raise ValueError(f"node {node} out of range")


def topological_sort(node_count: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Order nodes ``1..node_count`` so every edge ``(x, y)`` has ``x`` before ``y``.

    Among valid orders the lexicographically smallest reachable by the
    depth-first construction is produced.
    """
    adjacency: list[list[int]] = [[] for _ in range(node_count)]
    for x, y in edges:
        _check_node(x, node_count, 1)
        _check_node(y, node_count, 1)
        adjacency[x - 1].append(y - 1)
    for targets in adjacency:
        targets.sort(reverse=True)

    visited = [False] * node_count
    finished: list[int] = []
    for start in reversed(range(node_count)):
        if visited[start]:
            continue
        visited[start] = True
        stack = [(start, iter(adjacency[start]))]
        while stack:
            node, pending = stack[-1]
            for nxt in pending:
                if not visited[nxt]:
                    visited[nxt] = True
                    stack.append((nxt, iter(adjacency[nxt])))
                    break
            else:
                stack.pop()
                finished.append(node)
    return [node + 1 for node in reversed(finished)]


def bfs_levels(
    node_count: int, edges: Iterable[tuple[int, int]], start: int
) -> list[int]:
    """Breadth-first levels over undirected edges between nodes ``1..node_count``.

    Element ``i`` is the level of node ``i + 1``: the start has level 1,
    nodes that cannot be reached keep level 0.
    """
    adjacency: list[list[int]] = [[] for _ in range(node_count)]
    for u, v in edges:
        _check_node(u, node_count, 1)
        _check_node(v, node_count, 1)
        adjacency[u - 1].append(v - 1)
        adjacency[v - 1].append(u - 1)
    _check_node(start, node_count, 1)

    levels = [0] * node_count
    origin = start - 1
    levels[origin] = 1
    queue = deque([origin])
    while queue:
        node = queue.popleft()
        for nxt in adjacency[node]:
            if not levels[nxt]:
                levels[nxt] = levels[node] + 1
                queue.append(nxt)
    return levels


def count_nodes_at_level(
    node_count: int, edges: Iterable[tuple[int, int]], level: int
) -> int:
    """Number of nodes on ``level`` when searching from node 1 (the root is level 1)."""
    return bfs_levels(node_count, edges, 1).count(level)


def dfs_order(vertex_count: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Depth-first visiting order of vertices ``0..vertex_count-1``.

    Edges are undirected; neighbours are tried in ascending order and
    every unvisited vertex starts a new search.
    """
    matrix = [[False] * vertex_count for _ in range(vertex_count)]
    for a, b in edges:
        _check_node(a, vertex_count, 0)
        _check_node(b, vertex_count, 0)
        matrix[a][b] = matrix[b][a] = True

    visited = [False] * vertex_count
    order: list[int] = []
    for start in range(vertex_count):
        if visited[start]:
            continue
        visited[start] = True
        order.append(start)
        stack = [(start, iter(range(vertex_count)))]
        while stack:
            vertex, pending = stack[-1]
            for nxt in pending:
                if matrix[vertex][nxt] and not visited[nxt]:
                    visited[nxt] = True
                    order.append(nxt)
                    stack.append((nxt, iter(range(vertex_count))))
                    break
            else:
                stack.pop()
    return order