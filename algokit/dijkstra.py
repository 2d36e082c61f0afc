"""Single-source shortest paths by Dijkstra's algorithm."""

from __future__ import annotations

import heapq
import math


class Graph:
    """Weighted graph with integer node labels."""

    def __init__(self) -> None:
        self._adjacency: dict[int, list[tuple[int, int]]] = {}

    def add_edge(self, x: int, y: int, directed: bool, weight: int) -> None:
        """Add an edge from ``x`` to ``y``; undirected edges go both ways."""
        self._adjacency.setdefault(x, []).append((y, weight))
        targets = self._adjacency.setdefault(y, [])
        if not directed:
            targets.append((x, weight))

    def dijkstra(self, source: int) -> dict[int, float]:
        """Shortest distance from ``source`` to every node, by ascending label.

        Unreachable nodes get ``math.inf``. Raises KeyError for an
        unknown source.
        """
        if source not in self._adjacency:
            raise KeyError(source)
        distance: dict[int, float] = {node: math.inf for node in sorted(self._adjacency)}
        distance[source] = 0
        heap: list[tuple[float, int]] = [(0, source)]
        done: set[int] = set()
        while heap:
            dist, node = heapq.heappop(heap)
            if node in done:
                continue
            done.add(node)
            for neighbour, weight in self._adjacency[node]:
                candidate = dist + weight
                if neighbour not in done and candidate < distance[neighbour]:
                    distance[neighbour] = candidate
                    heapq.heappush(heap, (candidate, neighbour))
        return distance