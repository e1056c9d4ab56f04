"""Breadth-first and depth-first traversals of graphs given as edge lists."""

from __future__ import annotations

from collections import deque
from typing import Iterable

MOD = 1_000_000_007

Edge = tuple[int, int]


def _adjacency(n: int, edges: Iterable[Edge], *, directed: bool) -> list[list[int]]:
    """Build adjacency lists for vertices 0..n-1, keeping edges in input order."""
    if n < 0:
        raise ValueError("number of vertices must be non-negative")
    adjacency: list[list[int]] = [[] for _ in range(n)]
    for u, v in edges:
        if not (0 <= u < n and 0 <= v < n):
            raise ValueError(f"edge ({u}, {v}) names a vertex outside 0..{n - 1}")
        adjacency[u].append(v)
        if not directed:
            adjacency[v].append(u)
    return adjacency


def bfs_order(n: int, edges: Iterable[Edge]) -> list[int]:
    """Return the vertices of an undirected graph in breadth-first order.

    Every component is visited in turn, starting from its lowest vertex.
    """
    adjacency = _adjacency(n, edges, directed=False)
    visited = [False] * n
    order: list[int] = []
    for root in range(n):
        if visited[root]:
            continue
        visited[root] = True
        queue = deque([root])
        while queue:
            vertex = queue.popleft()
            order.append(vertex)
            for neighbour in adjacency[vertex]:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    queue.append(neighbour)
    return order


def dfs_order(n: int, edges: Iterable[Edge]) -> list[int]:
    """Return the vertices of an undirected graph in depth-first (preorder) order."""
    adjacency = _adjacency(n, edges, directed=False)
    visited = [False] * n
    order: list[int] = []
    for root in range(n):
        if visited[root]:
            continue
        visited[root] = True
        order.append(root)
        stack = [iter(adjacency[root])]
        while stack:
            for neighbour in stack[-1]:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    order.append(neighbour)
                    stack.append(iter(adjacency[neighbour]))
                    break
            else:
                stack.pop()
    return order


def arrival_departure_times(n: int, edges: Iterable[Edge]) -> list[tuple[int, int]]:
    """Return (arrival, departure) clock values of each vertex in a directed depth-first walk.

    The clock advances before each descent, on each departure and after each tree.
    """
    adjacency = _adjacency(n, edges, directed=True)
    visited = [False] * n
    times: list[tuple[int, int]] = [(0, 0)] * n
    clock = 0
    for root in range(n):
        if visited[root]:
            continue
        visited[root] = True
        stack = [(root, iter(adjacency[root]), clock)]
        while stack:
            vertex, neighbours, arrival = stack[-1]
            for neighbour in neighbours:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    clock += 1
                    stack.append((neighbour, iter(adjacency[neighbour]), clock))
                    break
            else:
                stack.pop()
                clock += 1
                times[vertex] = (arrival, clock)
        clock += 1
    return times


def _component_sizes(n: int, edges: Iterable[Edge]) -> list[int]:
    adjacency = _adjacency(n, edges, directed=False)
    visited = [False] * n
    sizes: list[int] = []
    for root in range(n):
        if visited[root]:
            continue
        visited[root] = True
        pending = [root]
        size = 0
        while pending:
            vertex = pending.pop()
            size += 1
            for neighbour in adjacency[vertex]:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    pending.append(neighbour)
        sizes.append(size)
    return sizes


def astronaut_pairs(n: int, edges: Iterable[Edge]) -> int:
    """Count pairs of vertices lying in different components, modulo 1e9+7."""
    total = 0
    seen = 0
    for size in _component_sizes(n, edges):
        total = (total + size * seen) % MOD
        seen += size
    return total