"""Orderings of directed graphs: topological sorts and strongly connected components."""

from __future__ import annotations

from collections import deque
from typing import Iterable

from algodrills.traversal import Edge, _adjacency


def topological_sort_kahn(n: int, edges: Iterable[Edge]) -> list[int]:
    """Return a topological order by repeatedly removing vertices of in-degree zero.

    Raises ValueError when the graph has a cycle.
    """
    adjacency = _adjacency(n, edges, directed=True)
    indegree = [0] * n
    for targets in adjacency:
        for target in targets:
            indegree[target] += 1
    queue = deque(v for v in range(n) if indegree[v] == 0)
    order: list[int] = []
    while queue:
        vertex = queue.popleft()
        order.append(vertex)
        for target in adjacency[vertex]:
            indegree[target] -= 1
            if indegree[target] == 0:
                queue.append(target)
    if len(order) != n:
        raise ValueError("graph has a cycle")
    return order


def _finish_order(adjacency: list[list[int]], *, reject_cycles: bool) -> list[int]:
    """Return vertices in the order depth-first search finishes them."""
    n = len(adjacency)
    visited = [False] * n
    on_path = [False] * n
    finished: list[int] = []
    for root in range(n):
        if visited[root]:
            continue
        visited[root] = on_path[root] = True
        stack = [(root, iter(adjacency[root]))]
        while stack:
            vertex, neighbours = stack[-1]
            for neighbour in neighbours:
                if reject_cycles and on_path[neighbour]:
                    raise ValueError("graph has a cycle")
                if not visited[neighbour]:
                    visited[neighbour] = on_path[neighbour] = True
                    stack.append((neighbour, iter(adjacency[neighbour])))
                    break
            else:
                on_path[vertex] = False
                finished.append(vertex)
                stack.pop()
    return finished


def topological_sort_dfs(n: int, edges: Iterable[Edge]) -> list[int]:
    """Return a topological order as the reverse of depth-first finishing order.

    Raises ValueError when the graph has a cycle.
    """
    adjacency = _adjacency(n, edges, directed=True)
    return _finish_order(adjacency, reject_cycles=True)[::-1]


def count_strongly_connected(n: int, edges: Iterable[Edge]) -> int:
    """Return the number of strongly connected components (Kosaraju's method)."""
    edge_list = list(edges)
    adjacency = _adjacency(n, edge_list, directed=True)
    finished = _finish_order(adjacency, reject_cycles=False)
    transposed = _adjacency(n, ((v, u) for u, v in edge_list), directed=True)
    visited = [False] * n
    components = 0
    for root in reversed(finished):
        if visited[root]:
            continue
        components += 1
        visited[root] = True
        pending = [root]
        while pending:
            vertex = pending.pop()
            for neighbour in transposed[vertex]:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    pending.append(neighbour)
    return components