"""Graph colouring by backtracking."""

from __future__ import annotations

from typing import Iterable

from algodrills.traversal import Edge, _adjacency


def can_color(n: int, edges: Iterable[Edge], colors: int) -> bool:
    """Tell whether the undirected graph's vertices can take `colors` colours with no
    edge joining two vertices of the same colour."""
    if colors < 0:
        raise ValueError("colors must be non-negative")
    neighbours = [set(targets) for targets in _adjacency(n, edges, directed=False)]
    colour: list[int | None] = [None] * n

    def place(vertex: int) -> bool:
        if vertex == n:
            return True
        for candidate in range(1, colors + 1):
            if all(colour[other] != candidate for other in neighbours[vertex]):
                colour[vertex] = candidate
                if place(vertex + 1):
                    return True
                colour[vertex] = None
        return False

    return place(0)