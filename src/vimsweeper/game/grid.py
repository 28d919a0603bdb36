"""
Grid model for vimsweeper.

A grid is a plain list of rows of Cells. The functions here create
grids and walk 8-neighborhoods; they never hold on to a grid between
calls.
"""
from typing import Callable, Iterator, List, Tuple

import numpy as np

from .cell import Cell
from .config import ConfigurationError

Grid = List[List[Cell]]

# N, S, E, W, then the diagonals NW, NE, SW, SE
NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = (
    (-1, 0), (1, 0), (0, 1), (0, -1),
    (-1, -1), (-1, 1), (1, -1), (1, 1),
)


def create_grid(rows: int, cols: int) -> Grid:
    """
    Create a grid of closed, unflagged, mine-free cells.

    Args:
        rows: Number of rows.
        cols: Number of columns.

    Returns:
        A rows x cols grid whose cells carry their own coordinates.
    """
    if rows < 1 or cols < 1:
        raise ConfigurationError("Board dimensions must be positive")
    return [[Cell(row, col) for col in range(cols)] for row in range(rows)]


def grid_shape(grid: Grid) -> Tuple[int, int]:
    """Return (rows, cols) of a grid."""
    if not grid:
        return 0, 0
    return len(grid), len(grid[0])


def in_bounds(grid: Grid, row: int, col: int) -> bool:
    """Check if position is within grid bounds."""
    rows, cols = grid_shape(grid)
    return 0 <= row < rows and 0 <= col < cols


def for_each_neighbor(
    grid: Grid, row: int, col: int, fn: Callable[[int, int], None]
) -> None:
    """
    Call fn(neighbor_row, neighbor_col) for every in-bounds neighbor.

    Neighbors are visited in the fixed order of NEIGHBOR_OFFSETS.
    """
    for delta_row, delta_col in NEIGHBOR_OFFSETS:
        new_row = row + delta_row
        new_col = col + delta_col
        if in_bounds(grid, new_row, new_col):
            fn(new_row, new_col)


def neighbors(grid: Grid, row: int, col: int) -> List[Tuple[int, int]]:
    """List the in-bounds neighbor positions of (row, col)."""
    found: List[Tuple[int, int]] = []
    for_each_neighbor(grid, row, col, lambda r, c: found.append((r, c)))
    return found


def iter_cells(grid: Grid) -> Iterator[Cell]:
    """Iterate over every cell in row-major order."""
    for row in grid:
        yield from row


def to_observation(grid: Grid) -> np.ndarray:
    """
    Get the visible grid as a numpy array.

    Returns:
        2D int8 array where:
            -1 = hidden
            -2 = flagged
            0-8 = open with neighbor count
            9 = open mine
    """
    obs = np.zeros(grid_shape(grid), dtype=np.int8)
    for cell in iter_cells(grid):
        obs[cell.row, cell.col] = cell.to_observation()
    return obs


def mine_mask(grid: Grid) -> np.ndarray:
    """Boolean array that is True where a mine sits."""
    mask = np.zeros(grid_shape(grid), dtype=bool)
    for cell in iter_cells(grid):
        mask[cell.row, cell.col] = cell.is_mine
    return mask


def safe_cell_count(grid: Grid) -> int:
    """Number of cells without a mine."""
    return int(np.count_nonzero(~mine_mask(grid)))
