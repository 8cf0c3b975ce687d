import copy

import pytest

from algoset.grids import minimum_effort_path, shortest_path_binary_matrix


@pytest.mark.parametrize("n", [1, 2, 3, 5, 8])
def test_open_square_grid_uses_diagonal(n):
    grid = [[0] * n for _ in range(n)]
    assert shortest_path_binary_matrix(grid) == n


@pytest.mark.parametrize("n", [1, 2, 4, 7])
def test_single_row_walks_every_cell(n):
    assert shortest_path_binary_matrix([[0] * n]) == n


@pytest.mark.parametrize(
    "grid",
    [
        [[1, 0], [0, 0]],
        [[0, 0], [0, 1]],
        [[0, 1, 0], [1, 1, 0], [0, 0, 0]],
        [],
    ],
)
def test_no_path(grid):
    assert shortest_path_binary_matrix(grid) == -1


def test_grid_is_not_modified():
    grid = [[0, 0, 0], [1, 1, 0], [1, 1, 0]]
    before = copy.deepcopy(grid)
    first = shortest_path_binary_matrix(grid)
    assert grid == before
    assert shortest_path_binary_matrix(grid) == first


def test_detour_is_longer_than_open_grid():
    blocked = [[0, 0, 0], [1, 1, 0], [1, 1, 0]]
    open_grid = [[0] * 3 for _ in range(3)]
    assert shortest_path_binary_matrix(blocked) > shortest_path_binary_matrix(open_grid)


def test_effort_example():
    assert minimum_effort_path([[1, 2, 2], [3, 8, 2], [5, 3, 5]]) == 2


def test_uniform_heights_need_no_effort():
    assert minimum_effort_path([[4, 4, 4], [4, 4, 4]]) == 0


def test_single_cell_and_pair():
    assert minimum_effort_path([[9]]) == minimum_effort_path([[3, 3]])
    assert minimum_effort_path([[3, 10]]) == abs(3 - 10)


HEIGHTS = [[1, 2, 1, 1, 1], [1, 2, 1, 2, 1], [1, 2, 1, 2, 1], [1, 2, 1, 2, 1], [1, 1, 1, 2, 1]]


def test_effort_is_at_most_any_fixed_path():
    rows, cols = len(HEIGHTS), len(HEIGHTS[0])
    path = [(0, c) for c in range(cols)] + [(r, cols - 1) for r in range(1, rows)]
    worst = max(
        abs(HEIGHTS[a[0]][a[1]] - HEIGHTS[b[0]][b[1]]) for a, b in zip(path, path[1:])
    )
    assert minimum_effort_path(HEIGHTS) <= worst


def test_effort_invariants():
    base = minimum_effort_path(HEIGHTS)
    shifted = [[h + 100 for h in row] for row in HEIGHTS]
    doubled = [[h * 2 for h in row] for row in HEIGHTS]
    transposed = [list(col) for col in zip(*HEIGHTS)]
    assert minimum_effort_path(shifted) == base
    assert minimum_effort_path(doubled) == 2 * base
    assert minimum_effort_path(transposed) == base


def test_effort_rejects_empty():
    with pytest.raises(ValueError):
        minimum_effort_path([])