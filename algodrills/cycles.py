"""Cycle, bipartiteness and tree checks on graphs given as edge lists."""

from __future__ import annotations

from collections import deque
from typing import Iterable

from algodrills.traversal import Edge, _adjacency


def is_bipartite(n: int, edges: Iterable[Edge]) -> bool:
    """Tell whether an undirected graph's vertices can be split into two colour classes."""
    adjacency = _adjacency(n, edges, directed=False)
    colour: list[int | None] = [None] * n
    for root in range(n):
        if colour[root] is not None:
            continue
        colour[root] = 0
        queue = deque([root])
        while queue:
            vertex = queue.popleft()
            for neighbour in adjacency[vertex]:
                if colour[neighbour] is None:
                    colour[neighbour] = 1 - colour[vertex]
                    queue.append(neighbour)
                elif colour[neighbour] == colour[vertex]:
                    return False
    return True


def has_cycle_bfs(n: int, edges: Iterable[Edge]) -> bool:
    """Tell whether an undirected graph has a cycle, searching breadth first.

    An edge straight back to a vertex's parent is not a cycle, so parallel edges
    are not counted; a self-loop is.
    """
    adjacency = _adjacency(n, edges, directed=False)
    visited = [False] * n
    for root in range(n):
        if visited[root]:
            continue
        visited[root] = True
        queue: deque[tuple[int, int | None]] = deque([(root, None)])
        while queue:
            vertex, parent = queue.popleft()
            for neighbour in adjacency[vertex]:
                if visited[neighbour]:
                    if neighbour != parent:
                        return True
                else:
                    visited[neighbour] = True
                    queue.append((neighbour, vertex))
    return False


def _undirected_cycle_from(adjacency: list[list[int]], root: int, visited: list[bool]) -> bool:
    """Walk depth first from root, marking visited; report a non-parent back edge."""
    visited[root] = True
    stack = [(root, None, iter(adjacency[root]))]
    while stack:
        vertex, parent, neighbours = stack[-1]
        for neighbour in neighbours:
            if visited[neighbour]:
                if neighbour != parent:
                    return True
            else:
                visited[neighbour] = True
                stack.append((neighbour, vertex, iter(adjacency[neighbour])))
                break
        else:
            stack.pop()
    return False


def has_cycle_dfs(n: int, edges: Iterable[Edge]) -> bool:
    """Tell whether an undirected graph has a cycle, searching depth first."""
    adjacency = _adjacency(n, edges, directed=False)
    visited = [False] * n
    return any(
        not visited[root] and _undirected_cycle_from(adjacency, root, visited)
        for root in range(n)
    )


def has_directed_cycle(n: int, edges: Iterable[Edge]) -> bool:
    """Tell whether a directed graph has a cycle."""
    adjacency = _adjacency(n, edges, directed=True)
    visited = [False] * n
    on_path = [False] * n
    for root in range(n):
        if visited[root]:
            continue
        visited[root] = on_path[root] = True
        stack = [(root, iter(adjacency[root]))]
        while stack:
            vertex, neighbours = stack[-1]
            for neighbour in neighbours:
                if on_path[neighbour]:
                    return True
                if not visited[neighbour]:
                    visited[neighbour] = on_path[neighbour] = True
                    stack.append((neighbour, iter(adjacency[neighbour])))
                    break
            else:
                on_path[vertex] = False
                stack.pop()
    return False


def is_tree(n: int, edges: Iterable[Edge]) -> bool:
    """Tell whether an undirected graph is connected and has no cycle."""
    if n < 1:
        raise ValueError("a tree needs at least one vertex")
    adjacency = _adjacency(n, edges, directed=False)
    visited = [False] * n
    if _undirected_cycle_from(adjacency, 0, visited):
        return False
    return all(visited)