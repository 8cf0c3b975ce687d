"""Shortest-path searches over rectangular grids."""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Sequence

_KING_MOVES = (
    (1, 1),
    (0, 1),
    (1, 0),
    (0, -1),
    (-1, 0),
    (-1, -1),
    (1, -1),
    (-1, 1),
)
_ROOK_MOVES = ((0, 1), (1, 0), (-1, 0), (0, -1))


def shortest_path_binary_matrix(grid: Sequence[Sequence[int]]) -> int:
    """Return the number of cells on the shortest clear path between opposite corners.

    The path starts at the top-left and ends at the bottom-right cell. It moves
    in any of the eight directions and only through cells holding 0. Returns
    -1 when there is no such path. The grid is not modified.
    """
    if not grid or not grid[0] or grid[0][0] != 0:
        return -1
    rows, cols = len(grid), len(grid[0])
    target = (rows - 1, cols - 1)
    seen = {(0, 0)}
    queue = deque([(0, 0, 1)])
    while queue:
        row, col, steps = queue.popleft()
        if (row, col) == target:
            return steps
        for d_row, d_col in _KING_MOVES:
            nxt = (row + d_row, col + d_col)
            if (
                0 <= nxt[0] < rows
                and 0 <= nxt[1] < cols
                and nxt not in seen
                and grid[nxt[0]][nxt[1]] == 0
            ):
                seen.add(nxt)
                queue.append((nxt[0], nxt[1], steps + 1))
    return -1


def minimum_effort_path(heights: Sequence[Sequence[int]]) -> int:
    """Return the least possible largest height step on a path between opposite corners.

    Moves go up, down, left or right.
    """
    if not heights or not heights[0]:
        raise ValueError("heights must hold at least one cell")
    rows, cols = len(heights), len(heights[0])
    best: dict[tuple[int, int], int] = {(0, 0): 0}
    heap = [(0, 0, 0)]
    while heap:
        effort, row, col = heapq.heappop(heap)
        if effort > best.get((row, col), effort):
            continue
        for d_row, d_col in _ROOK_MOVES:
            n_row, n_col = row + d_row, col + d_col
            if not (0 <= n_row < rows and 0 <= n_col < cols):
                continue
            step = abs(heights[row][col] - heights[n_row][n_col])
            candidate = max(effort, step)
            if candidate < best.get((n_row, n_col), candidate + 1):
                best[n_row, n_col] = candidate
                heapq.heappush(heap, (candidate, n_row, n_col))
    return best[rows - 1, cols - 1]