"""Shortest and cheapest paths in weighted graphs and on a chess board."""

from __future__ import annotations

import heapq
from collections import deque
from typing import Iterable

WeightedEdge = tuple[int, int, int]

_KNIGHT_MOVES = ((-2, 1), (-2, -1), (-1, -2), (1, -2), (2, -1), (2, 1), (1, 2), (-1, 2))


def _weighted_adjacency(
    n: int, edges: Iterable[WeightedEdge], *, directed: bool
) -> list[list[tuple[int, int]]]:
    """Build (neighbour, weight) lists for vertices 0..n-1 in input order."""
    if n < 0:
        raise ValueError("number of vertices must be non-negative")
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(n)]
    for u, v, weight in edges:
        if not (0 <= u < n and 0 <= v < n):
            raise ValueError(f"edge ({u}, {v}) names a vertex outside 0..{n - 1}")
        adjacency[u].append((v, weight))
        if not directed:
            adjacency[v].append((u, weight))
    return adjacency


def _check_vertex(n: int, vertex: int, name: str) -> None:
    if not 0 <= vertex < n:
        raise ValueError(f"{name} {vertex} is outside 0..{n - 1}")


def dijkstra(n: int, edges: Iterable[WeightedEdge], source: int) -> list[int | None]:
    """Return the shortest distance from source to each vertex of an undirected graph.

    Unreachable vertices get None. Weights must be non-negative.
    """
    adjacency = _weighted_adjacency(n, edges, directed=False)
    _check_vertex(n, source, "source")
    if any(weight < 0 for targets in adjacency for _, weight in targets):
        raise ValueError("weights must be non-negative")
    distances: list[int | None] = [None] * n
    heap = [(0, source)]
    while heap:
        distance, vertex = heapq.heappop(heap)
        if distances[vertex] is not None:
            continue
        distances[vertex] = distance
        for neighbour, weight in adjacency[vertex]:
            if distances[neighbour] is None:
                heapq.heappush(heap, (distance + weight, neighbour))
    return distances


def has_negative_cycle(n: int, edges: Iterable[WeightedEdge], source: int) -> bool:
    """Tell whether a negative cycle is reachable from source in a directed graph (Bellman-Ford)."""
    edge_list = list(edges)
    _weighted_adjacency(n, edge_list, directed=True)
    _check_vertex(n, source, "source")
    distances: list[int | None] = [None] * n
    distances[source] = 0

    def relaxable(u: int, v: int, weight: int) -> bool:
        start = distances[u]
        if start is None:
            return False
        end = distances[v]
        return end is None or start + weight < end

    for _ in range(n - 1):
        changed = False
        for u, v, weight in edge_list:
            if relaxable(u, v, weight):
                distances[v] = distances[u] + weight  # type: ignore[operator]
                changed = True
        if not changed:
            break
    return any(relaxable(u, v, weight) for u, v, weight in edge_list)


def cheapest_flight(
    n: int, edges: Iterable[WeightedEdge], source: int, target: int, stops: int
) -> int | None:
    """Return the cheapest cost from source to target over directed flights with at most
    `stops` intermediate stops, or None when no such route exists."""
    adjacency = _weighted_adjacency(n, edges, directed=True)
    _check_vertex(n, source, "source")
    _check_vertex(n, target, "target")
    if stops < 0:
        raise ValueError("stops must be non-negative")
    if any(weight < 0 for targets in adjacency for _, weight in targets):
        raise ValueError("prices must be non-negative")
    # most flights still allowed when each vertex was last expanded
    expanded_with = [-1] * n
    heap = [(0, source, stops + 1)]
    while heap:
        cost, vertex, flights_left = heapq.heappop(heap)
        if vertex == target:
            return cost
        if flights_left <= 0 or flights_left <= expanded_with[vertex]:
            continue
        expanded_with[vertex] = flights_left
        for neighbour, price in adjacency[vertex]:
            heapq.heappush(heap, (cost + price, neighbour, flights_left - 1))
    return None


def knight_min_steps(n: int, start: tuple[int, int], target: tuple[int, int]) -> int | None:
    """Return the fewest knight moves between two squares of an n-by-n board (1-based),
    or None when the target cannot be reached."""
    for name, (x, y) in (("start", start), ("target", target)):
        if not (1 <= x <= n and 1 <= y <= n):
            raise ValueError(f"{name} {(x, y)} is off the board")
    origin = (start[0] - 1, start[1] - 1)
    goal = (target[0] - 1, target[1] - 1)
    steps = {origin: 0}
    queue = deque([origin])
    while queue:
        square = queue.popleft()
        if square == goal:
            return steps[square]
        x, y = square
        for dx, dy in _KNIGHT_MOVES:
            nxt = (x + dx, y + dy)
            if 0 <= nxt[0] < n and 0 <= nxt[1] < n and nxt not in steps:
                steps[nxt] = steps[square] + 1
                queue.append(nxt)
    return None