"""Cells from which water can drain to both of two oceans."""

from __future__ import annotations

from typing import Iterable, Sequence

_NEIGHBOURS = ((0, 1), (1, 0), (0, -1), (-1, 0))


def count_two_ocean_cells(heights: Sequence[Sequence[int]]) -> int:
    """Count cells whose water can flow (to equal or lower neighbours) both to the
    top/left edge and to the bottom/right edge."""
    grid = [list(row) for row in heights]
    if not grid or not grid[0]:
        return 0
    height, width = len(grid), len(grid[0])
    if any(len(row) != width for row in grid):
        raise ValueError("height map must be rectangular")

    def reach(starts: Iterable[tuple[int, int]]) -> set[tuple[int, int]]:
        seen = set(starts)
        pending = list(seen)
        while pending:
            r, c = pending.pop()
            for dr, dc in _NEIGHBOURS:
                nr, nc = r + dr, c + dc
                if (
                    0 <= nr < height
                    and 0 <= nc < width
                    and (nr, nc) not in seen
                    and grid[nr][nc] >= grid[r][c]
                ):
                    seen.add((nr, nc))
                    pending.append((nr, nc))
        return seen

    top_left = reach(
        [(0, c) for c in range(width)] + [(r, 0) for r in range(height)]
    )
    bottom_right = reach(
        [(height - 1, c) for c in range(width)] + [(r, width - 1) for r in range(height)]
    )
    return len(top_left & bottom_right)