import random

import pytest

from algokit.graph_search import (
    bfs_levels,
    count_nodes_at_level,
    dfs_order,
    topological_sort,
)


def test_topological_no_edges_is_identity():
    assert topological_sort(5, []) == list(range(1, 6))


def test_topological_respects_edges():
    rng = random.Random(7)
    n = 30
    edges = []
    for _ in range(80):
        a, b = rng.sample(range(1, n + 1), 2)
        edges.append((min(a, b), max(a, b)))
    order = topological_sort(n, edges)
    assert sorted(order) == list(range(1, n + 1))
    position = {node: i for i, node in enumerate(order)}
    violations = [(x, y) for x, y in edges if position[x] >= position[y]]
    assert len(edges) == 80
    assert violations == []


def test_topological_puts_forced_node_first():
    order = topological_sort(3, [(3, 1)])
    assert order.index(3) < order.index(1)


def test_topological_rejects_bad_node():
    with pytest.raises(ValueError):
        topological_sort(2, [(1, 3)])


def test_bfs_levels_on_path():
    assert bfs_levels(3, [(1, 2), (2, 3)], 1) == [1, 2, 3]


def test_bfs_levels_unreachable_stay_zero():
    levels = bfs_levels(4, [(1, 2)], 2)
    assert levels[1] == 1
    assert levels[0] == 2
    assert levels[2:] == [0, 0]


def test_bfs_levels_differ_by_one_along_edges():
    rng = random.Random(3)
    n = 40
    edges = [(rng.randint(1, i - 1), i) for i in range(2, n + 1)]
    levels = bfs_levels(n, edges, 1)
    assert all(levels)
    gaps = {abs(levels[u - 1] - levels[v - 1]) for u, v in edges}
    assert gaps == {1}


def test_count_nodes_at_level_star():
    edges = [(1, leaf) for leaf in range(2, 6)]
    assert count_nodes_at_level(5, edges, 1) == 1
    assert count_nodes_at_level(5, edges, 2) == len(edges)
    assert count_nodes_at_level(5, edges, 3) == 0


def test_dfs_no_edges_visits_in_index_order():
    assert dfs_order(4, []) == list(range(4))


def test_dfs_goes_deep_before_wide():
    order = dfs_order(4, [(0, 2), (0, 1), (2, 3)])
    assert order[:3] == [0, 1, 2]
    assert order[-1] == 3


def test_dfs_visits_each_vertex_once():
    rng = random.Random(11)
    n = 25
    edges = [tuple(rng.sample(range(n), 2)) for _ in range(30)]
    order = dfs_order(n, edges)
    assert sorted(order) == list(range(n))


def test_dfs_rejects_bad_vertex():
    with pytest.raises(ValueError):
        dfs_order(2, [(0, 2)])