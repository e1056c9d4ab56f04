"""Problems over two-dimensional grids."""

from __future__ import annotations

from typing import Sequence

_NEIGHBOURS = ((0, 1), (1, 0), (0, -1), (-1, 0))


def count_negatives(matrix: Sequence[Sequence[int]]) -> int:
    """Count negative entries of a matrix whose rows and columns are sorted ascending."""
    if not matrix:
        return 0
    row, col = 0, len(matrix[0]) - 1
    total = 0
    while row < len(matrix) and col >= 0:
        if matrix[row][col] < 0:
            total += col + 1
            row += 1
        else:
            col -= 1
    return total


def spiral_order(grid: Sequence[Sequence[int]]) -> list[int]:
    """Return the values of a rectangular grid read clockwise from the top-left corner."""
    rows = [list(row) for row in grid]
    if rows and any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("grid must be rectangular")
    result: list[int] = []
    while rows and rows[0]:
        result.extend(rows.pop(0))
        rows = [list(column) for column in zip(*rows)][::-1]
    return result


def _validate_sudoku(grid: Sequence[Sequence[int]]) -> list[list[int]]:
    board = [list(row) for row in grid]
    if len(board) != 9 or any(len(row) != 9 for row in board):
        raise ValueError("sudoku grid must be 9 by 9")
    if any(not 0 <= value <= 9 for row in board for value in row):
        raise ValueError("sudoku values must be 0 (empty) to 9")
    return board


def solve_sudoku(grid: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return a solved copy of a 9x9 sudoku where 0 marks an empty cell.

    Raises ValueError when the puzzle has no solution.
    """
    board = _validate_sudoku(grid)
    empties = [(r, c) for r in range(9) for c in range(9) if board[r][c] == 0]

    def allowed(r: int, c: int, value: int) -> bool:
        if value in board[r]:
            return False
        if any(line[c] == value for line in board):
            return False
        top, left = 3 * (r // 3), 3 * (c // 3)
        return all(
            board[i][j] != value for i in range(top, top + 3) for j in range(left, left + 3)
        )

    def fill(index: int) -> bool:
        if index == len(empties):
            return True
        r, c = empties[index]
        for value in range(1, 10):
            if allowed(r, c, value):
                board[r][c] = value
                if fill(index + 1):
                    return True
        board[r][c] = 0
        return False

    if not fill(0):
        raise ValueError("sudoku has no solution")
    return board


def flood_fill(
    image: Sequence[Sequence[int]], row: int, col: int, color: int
) -> list[list[int]]:
    """Return a copy of image with the region of like colour around (row, col) recoloured."""
    result = [list(line) for line in image]
    if not result:
        return result
    height, width = len(result), len(result[0])
    if not (0 <= row < height and 0 <= col < width):
        return result
    original = result[row][col]
    seen = {(row, col)}
    pending = [(row, col)]
    while pending:
        r, c = pending.pop()
        result[r][c] = color
        for dr, dc in _NEIGHBOURS:
            nr, nc = r + dr, c + dc
            if (
                0 <= nr < height
                and 0 <= nc < width
                and (nr, nc) not in seen
                and result[nr][nc] == original
            ):
                seen.add((nr, nc))
                pending.append((nr, nc))
    return result


def count_islands(grid: Sequence[Sequence[int]]) -> int:
    """Count groups of land cells (1) joined horizontally or vertically."""
    height = len(grid)
    seen: set[tuple[int, int]] = set()
    islands = 0
    for r, line in enumerate(grid):
        for c, cell in enumerate(line):
            if cell != 1 or (r, c) in seen:
                continue
            islands += 1
            seen.add((r, c))
            pending = [(r, c)]
            while pending:
                cr, cc = pending.pop()
                for dr, dc in _NEIGHBOURS:
                    nr, nc = cr + dr, cc + dc
                    if (
                        0 <= nr < height
                        and 0 <= nc < len(grid[nr])
                        and grid[nr][nc] == 1
                        and (nr, nc) not in seen
                    ):
                        seen.add((nr, nc))
                        pending.append((nr, nc))
    return islands


def word_exists(board: Sequence[Sequence[str]], word: str) -> bool:
    """Tell whether word can be traced through adjacent cells, using each cell at most once."""
    if not word:
        return True
    height = len(board)
    used: set[tuple[int, int]] = set()

    def trace(r: int, c: int, index: int) -> bool:
        if index == len(word):
            return True
        if not (0 <= r < height and 0 <= c < len(board[r])):
            return False
        if (r, c) in used or board[r][c] != word[index]:
            return False
        used.add((r, c))
        found = any(trace(r + dr, c + dc, index + 1) for dr, dc in _NEIGHBOURS)
        used.discard((r, c))
        return found

    return any(
        trace(r, c, 0) for r, line in enumerate(board) for c in range(len(line))
    )