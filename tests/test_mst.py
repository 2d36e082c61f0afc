import pytest

from algokit.mst import RankedDisjointSets, kruskal_mst, prim_mst

EDGES = [
    (0, 1, 4), (0, 7, 8), (1, 2, 8), (1, 7, 11), (2, 3, 7), (2, 8, 2),
    (2, 5, 4), (3, 4, 9), (3, 5, 14), (4, 5, 10), (5, 6, 2), (6, 7, 1),
    (6, 8, 6), (7, 8, 7),
]

PRIM_GRAPH = [
    [0, 2, 0, 6, 0],
    [2, 0, 3, 8, 5],
    [0, 3, 0, 0, 7],
    [6, 8, 0, 0, 9],
    [0, 5, 7, 9, 0],
]


def _matrix(n, edges):
    matrix = [[0] * n for _ in range(n)]
    for u, v, w in edges:
        matrix[u][v] = matrix[v][u] = w
    return matrix


def test_kruskal_known_weight():
    total, _ = kruskal_mst(9, EDGES)
    assert total == 37


def test_kruskal_builds_spanning_tree():
    total, chosen = kruskal_mst(9, EDGES)
    assert len(chosen) == 8
    weights = {(u, v): w for u, v, w in EDGES}
    assert sum(weights[edge] for edge in chosen) == total
    sets = RankedDisjointSets(9)
    for u, v in chosen:
        assert sets.find(u) != sets.find(v)
        sets.merge(u, v)
    assert len({sets.find(v) for v in range(9)}) == 1


def test_kruskal_takes_lightest_edge_first():
    _, chosen = kruskal_mst(9, EDGES)
    assert chosen[0] == (6, 7)


def test_prim_known_tree():
    assert prim_mst(PRIM_GRAPH) == [(0, 1, 2), (1, 2, 3), (0, 3, 6), (1, 4, 5)]


def test_prim_and_kruskal_agree():
    tree = prim_mst(_matrix(9, EDGES))
    total, _ = kruskal_mst(9, EDGES)
    assert sum(w for _, _, w in tree) == total
    assert sorted(v for _, v, _ in tree) == list(range(1, 9))


def test_prim_small_inputs():
    assert prim_mst([]) == []
    assert prim_mst([[0]]) == []


def test_prim_disconnected():
    with pytest.raises(ValueError):
        prim_mst([[0, 1, 0], [1, 0, 0], [0, 0, 0]])


def test_prim_rejects_non_square():
    with pytest.raises(ValueError):
        prim_mst([[0, 1], [1]])


def test_kruskal_rejects_unknown_vertex():
    with pytest.raises(ValueError):
        kruskal_mst(2, [(0, 2, 1)])