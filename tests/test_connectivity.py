import random
from collections import Counter

import pytest

from algokit.connectivity import (
    block_cut_tree,
    bridges,
    cut_vertices,
    euler_circuit,
    strongly_connected_components,
)


def _undirected(n, edges):
    adj = [[] for _ in range(n)]
    for u, v in edges:
        adj[u].append(v)
        adj[v].append(u)
    return adj


def _random_connected(seed, n, extra):
    rng = random.Random(seed)
    edges = [(rng.randrange(i), i) for i in range(1, n)]
    for _ in range(extra):
        u, v = rng.sample(range(n), 2)
        edges.append((u, v))
    return edges


def test_scc_cycle_with_tail():
    adj = [[1], [2], [0, 3], []]
    comp = strongly_connected_components(4, adj)
    assert comp[0] == comp[1] == comp[2]
    assert comp[3] != comp[0]
    assert len(set(comp)) == 2


def test_scc_dag_has_singleton_components():
    adj = [[1, 2], [3], [3], [4], []]
    comp = strongly_connected_components(5, adj)
    assert len(set(comp)) == 5


def test_scc_reverse_topological_ids():
    adj = [[1], [2], []]
    comp = strongly_connected_components(3, adj)
    assert comp[2] < comp[1] < comp[0]


def test_cut_vertices_path_and_cycle():
    assert cut_vertices(3, _undirected(3, [(0, 1), (1, 2)])) == [1]
    assert cut_vertices(4, _undirected(4, [(0, 1), (1, 2), (2, 3), (3, 0)])) == []


def test_cut_vertices_star_center():
    edges = [(2, v) for v in (0, 1, 3, 4)]
    assert cut_vertices(5, _undirected(5, edges)) == [2]


def test_bridges_between_triangles():
    edges = [(0, 1), (1, 2), (2, 0), (2, 3), (3, 4), (4, 5), (5, 3)]
    assert bridges(6, _undirected(6, edges)) == [(2, 3)]


def test_cycle_has_no_bridges():
    edges = [(0, 1), (1, 2), (2, 0)]
    assert bridges(3, _undirected(3, edges)) == []


def test_tree_edges_are_all_bridges():
    edges = _random_connected(4, 9, 0)
    assert bridges(9, _undirected(9, edges)) == sorted((min(e), max(e)) for e in edges)


@pytest.mark.parametrize("seed", range(5))
def test_block_cut_tree_structure(seed):
    n = 12
    adj = _undirected(n, _random_connected(seed, n, 4))
    tree = block_cut_tree(n, adj)
    edge_count = sum(len(row) for row in tree) // 2
    assert edge_count == len(tree) - 1
    for block in range(n, len(tree)):
        assert all(v < n for v in tree[block])
    for v in range(n):
        assert all(b >= n for b in tree[v])
    assert [v for v in range(n) if len(tree[v]) >= 2] == cut_vertices(n, adj)


def _assert_trail(edges, path, start):
    assert path[0] == start
    walked = Counter(frozenset(p) for p in zip(path, path[1:]))
    assert walked == Counter(frozenset(e) for e in edges)


def test_euler_circuit_square():
    edges = [(0, 1), (1, 2), (2, 3), (3, 0)]
    path = euler_circuit(4, edges, 2)
    assert path[-1] == path[0]
    _assert_trail(edges, path, 2)


def test_euler_trail_from_odd_vertex():
    edges = [(0, 1), (1, 2), (2, 0), (2, 3)]
    path = euler_circuit(4, edges, 3)
    _assert_trail(edges, path, 3)
    assert path[-1] == 2


def test_euler_invalid_start_raises():
    with pytest.raises(ValueError):
        euler_circuit(4, [(0, 1), (1, 2), (2, 0), (2, 3)], 0)


def test_euler_disconnected_raises():
    with pytest.raises(ValueError):
        euler_circuit(6, [(0, 1), (1, 2), (2, 0), (3, 4), (4, 5), (5, 3)], 0)