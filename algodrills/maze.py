"""Enumerate the paths of a rat through a square maze."""

from __future__ import annotations

from typing import Iterator, Sequence

_MOVES = (("R", 0, 1), ("D", 1, 0), ("L", 0, -1), ("U", -1, 0))


def maze_paths(grid: Sequence[Sequence[int]]) -> list[str]:
    """Return every path of R/D/L/U moves from the top-left to the bottom-right over open (1) cells.

    Paths never revisit a cell and are listed in the order found, trying R, D, L, U at each step.
    """
    n = len(grid)
    if any(len(row) != n for row in grid):
        raise ValueError("maze must be square")
    if n == 0:
        return []
    visited: set[tuple[int, int]] = set()

    def walk(row: int, col: int, path: list[str]) -> Iterator[str]:
        if (row, col) == (n - 1, n - 1):
            yield "".join(path)
            return
        visited.add((row, col))
        for letter, dr, dc in _MOVES:
            r, c = row + dr, col + dc
            if 0 <= r < n and 0 <= c < n and grid[r][c] == 1 and (r, c) not in visited:
                path.append(letter)
                yield from walk(r, c, path)
                path.pop()
        visited.discard((row, col))

    if grid[0][0] != 1:
        return []
    return list(walk(0, 0, []))