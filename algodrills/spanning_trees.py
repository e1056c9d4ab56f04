"""Minimum spanning trees by Prim's and Kruskal's methods."""

from __future__ import annotations

import heapq
from math import inf
from typing import Iterable

from algodrills.dsu import DisjointSet
from algodrills.shortest_paths import WeightedEdge, _weighted_adjacency


def prim_parents(n: int, edges: Iterable[WeightedEdge]) -> list[int | None]:
    """Return each vertex's parent in a minimum spanning tree rooted at 0 (quadratic Prim).

    The root's parent is None. Raises ValueError when the graph is disconnected.
    """
    adjacency = _weighted_adjacency(n, edges, directed=False)
    key: list[float] = [inf] * n
    in_tree = [False] * n
    parent: list[int | None] = [None] * n
    if n:
        key[0] = 0
    for _ in range(n):
        chosen = None
        lowest = inf
        for vertex in range(n):
            if not in_tree[vertex] and key[vertex] < lowest:
                lowest = key[vertex]
                chosen = vertex
        if chosen is None:
            raise ValueError("graph is not connected")
        in_tree[chosen] = True
        for neighbour, weight in adjacency[chosen]:
            if not in_tree[neighbour] and weight < key[neighbour]:
                parent[neighbour] = chosen
                key[neighbour] = weight
    return parent


def prim_parents_heap(n: int, edges: Iterable[WeightedEdge]) -> list[int | None]:
    """Return each vertex's parent in a minimum spanning tree rooted at 0 (heap-based Prim).

    The root's parent is None. Raises ValueError when the graph is disconnected.
    """
    adjacency = _weighted_adjacency(n, edges, directed=False)
    in_tree = [False] * n
    parent: list[int | None] = [None] * n
    heap = [(0, 0, -1)] if n else []
    while heap:
        _, vertex, via = heapq.heappop(heap)
        if in_tree[vertex]:
            continue
        in_tree[vertex] = True
        parent[vertex] = None if via < 0 else via
        for neighbour, weight in adjacency[vertex]:
            if not in_tree[neighbour]:
                heapq.heappush(heap, (weight, neighbour, vertex))
    if not all(in_tree):
        raise ValueError("graph is not connected")
    return parent


def kruskal_mst(n: int, edges: Iterable[WeightedEdge]) -> list[WeightedEdge]:
    """Return the edges of a minimum spanning forest, in the order Kruskal's method takes them."""
    edge_list = list(edges)
    _weighted_adjacency(n, edge_list, directed=False)
    groups = DisjointSet(n)
    return [
        (u, v, weight)
        for u, v, weight in sorted(edge_list, key=lambda edge: edge[2])
        if groups.union(u, v)
    ]