"""
3BV difficulty scoring.

3BV (Bechtel's Board Benchmark Value) is the least number of clicks
that solves a board: one per opening plus one per safe cell that no
opening uncovers. Only mines and neighbor counts are read, so the
score is the same whatever the player has opened so far.
"""
from typing import List, Tuple

from .grid import Grid, grid_shape, neighbors


def calculate_3bv(grid: Grid) -> int:
    """
    Compute the 3BV of a mined grid.

    Args:
        grid: Grid with mines placed and neighbor counts computed.

    Returns:
        Number of openings plus number of safe cells outside them.
    """
    rows, cols = grid_shape(grid)
    visited = [[False] * cols for _ in range(rows)]
    score = 0

    # Openings
    for row in range(rows):
        for col in range(cols):
            cell = grid[row][col]
            if cell.is_mine or cell.neighbor_count != 0 or visited[row][col]:
                continue
            score += 1
            _sweep_opening(grid, visited, row, col)

    # Safe cells no opening reaches
    for row in range(rows):
        for col in range(cols):
            if not grid[row][col].is_mine and not visited[row][col]:
                score += 1

    return score


def _sweep_opening(
    grid: Grid, visited: List[List[bool]], row: int, col: int
) -> None:
    """Mark a zero region and its numbered border as visited."""
    stack: List[Tuple[int, int]] = [(row, col)]
    while stack:
        cur_row, cur_col = stack.pop()
        if visited[cur_row][cur_col]:
            continue
        visited[cur_row][cur_col] = True
        if grid[cur_row][cur_col].neighbor_count != 0:
            continue
        for next_row, next_col in neighbors(grid, cur_row, cur_col):
            if not visited[next_row][next_col]:
                stack.append((next_row, next_col))
