import math

import pytest

from algodrills.traversal import (
    arrival_departure_times,
    astronaut_pairs,
    bfs_order,
    dfs_order,
)

GRAPHS = [
    (1, []),
    (4, [(0, 1), (1, 2), (2, 3)]),
    (4, [(0, 1), (0, 2), (1, 3)]),
    (6, [(0, 1), (2, 3), (3, 4), (4, 2)]),
    (5, [(4, 0), (3, 1), (1, 0), (2, 2)]),
]


def _neighbours(n, edges):
    adj = {v: set() for v in range(n)}
    for u, v in edges:
        adj[u].add(v)
        adj[v].add(u)
    return adj


@pytest.mark.parametrize("order_of", [bfs_order, dfs_order])
@pytest.mark.parametrize("n, edges", GRAPHS)
def test_order_is_permutation(order_of, n, edges):
    assert sorted(order_of(n, edges)) == list(range(n))


@pytest.mark.parametrize("order_of", [bfs_order, dfs_order])
@pytest.mark.parametrize("n, edges", GRAPHS)
def test_each_non_root_follows_a_neighbour(order_of, n, edges):
    adj = _neighbours(n, edges)
    order = order_of(n, edges)
    for index, vertex in enumerate(order):
        earlier = set(order[:index])
        if adj[vertex] & earlier:
            continue
        # a new component starts at its smallest vertex
        assert vertex == min(v for v in range(n) if v not in earlier)


def test_path_graph_orders_agree():
    edges = [(0, 1), (1, 2), (2, 3)]
    assert bfs_order(4, edges) == list(range(4))
    assert dfs_order(4, edges) == list(range(4))


def test_bfs_and_dfs_differ_on_branching_graph():
    edges = [(0, 1), (0, 2), (1, 3)]
    assert bfs_order(4, edges) == list(range(4))
    assert dfs_order(4, edges) == [0, 1, 3, 2]


def test_bad_vertex_rejected():
    with pytest.raises(ValueError):
        bfs_order(2, [(0, 2)])
    with pytest.raises(ValueError):
        dfs_order(2, [(-1, 0)])


def test_negative_vertex_count_rejected():
    with pytest.raises(ValueError):
        arrival_departure_times(-1, [])


def test_arrival_departure_chain():
    assert arrival_departure_times(2, [(0, 1)]) == [(0, 3), (1, 2)]


@pytest.mark.parametrize(
    "n, edges",
    [
        (5, [(0, 1), (1, 2), (0, 3), (3, 4)]),
        (6, [(0, 1), (2, 3), (3, 2), (4, 5), (5, 0)]),
        (4, [(1, 0), (2, 1), (3, 2)]),
    ],
)
def test_arrival_departure_intervals_nest(n, edges):
    times = arrival_departure_times(n, edges)
    assert len(times) == n
    stamps = [t for pair in times for t in pair]
    assert len(set(stamps)) == len(stamps)
    for arrival, departure in times:
        assert arrival < departure
    for a1, d1 in times:
        for a2, d2 in times:
            nested = a1 <= a2 and d2 <= d1 or a2 <= a1 and d1 <= d2
            disjoint = d1 < a2 or d2 < a1
            assert nested or disjoint


def test_arrival_departure_tree_edges_nest():
    edges = [(0, 1), (1, 2), (0, 3)]
    times = arrival_departure_times(4, edges)
    for parent, child in edges:
        assert times[parent][0] < times[child][0]
        assert times[child][1] < times[parent][1]


def test_astronaut_pairs_two_components():
    assert astronaut_pairs(4, [(0, 1), (2, 3)]) == 4


def test_astronaut_pairs_connected_graph_has_none():
    assert astronaut_pairs(5, [(0, 1), (1, 2), (2, 3), (3, 4)]) == 0


@pytest.mark.parametrize("n", [0, 1, 2, 7])
def test_astronaut_pairs_isolated_vertices(n):
    assert astronaut_pairs(n, []) == math.comb(n, 2)


def test_astronaut_pairs_is_reduced_modulo():
    n = 100_000
    assert astronaut_pairs(n, []) == math.comb(n, 2) % 1_000_000_007