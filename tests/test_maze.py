import pytest

from algodrills.maze import maze_paths

CLASSIC = [
    [1, 0, 0, 0],
    [1, 1, 0, 1],
    [1, 1, 0, 0],
    [0, 1, 1, 1],
]

STEPS = {"R": (0, 1), "D": (1, 0), "L": (0, -1), "U": (-1, 0)}


def _replay(grid, path):
    row = col = 0
    seen = {(row, col)}
    for letter in path:
        dr, dc = STEPS[letter]
        row, col = row + dr, col + dc
        assert grid[row][col] == 1
        assert (row, col) not in seen
        seen.add((row, col))
    return row, col


def test_classic_maze():
    assert maze_paths(CLASSIC) == ["DRDDRR", "DDRDRR"]


@pytest.mark.parametrize(
    "grid",
    [
        CLASSIC,
        [[1, 1, 1], [1, 1, 1], [1, 1, 1]],
        [[1, 1], [0, 1]],
    ],
)
def test_every_path_is_valid_and_distinct(grid):
    paths = maze_paths(grid)
    n = len(grid)
    assert paths
    assert len(set(paths)) == len(paths)
    for path in paths:
        assert _replay(grid, path) == (n - 1, n - 1)


def test_blocked_start_has_no_paths():
    assert maze_paths([[0, 1], [1, 1]]) == []


def test_blocked_finish_has_no_paths():
    assert maze_paths([[1, 1], [1, 0]]) == []


def test_single_open_cell_has_empty_path():
    assert maze_paths([[1]]) == [""]


def test_non_square_maze_rejected():
    with pytest.raises(ValueError):
        maze_paths([[1, 1, 1], [1, 1, 1]])