"""
Mine placement for vimsweeper.

Mines are laid after the first reveal so the clicked cell and its
neighbors are always safe.
"""
import logging
import random
from typing import Optional, Set, Tuple

from .config import ConfigurationError
from .grid import (
    Grid, for_each_neighbor, grid_shape, in_bounds, iter_cells, neighbors,
)

logger = logging.getLogger(__name__)


def safe_zone(grid: Grid, first_click: Tuple[int, int]) -> Set[Tuple[int, int]]:
    """Return the first click position together with its neighbors."""
    row, col = first_click
    zone = {(row, col)}
    for_each_neighbor(grid, row, col, lambda r, c: zone.add((r, c)))
    return zone


def place_mines(
    grid: Grid,
    mine_count: int,
    first_click: Tuple[int, int],
    rng: Optional[random.Random] = None,
) -> None:
    """
    Place mines randomly, keeping the safe zone around first_click clear.

    Positions are drawn uniformly and rejected when already mined or
    inside the safe zone. Neighbor counts are recomputed afterwards.

    Args:
        grid: Grid to mutate in place.
        mine_count: Number of mines to add.
        first_click: (row, col) of the first reveal.
        rng: Random source, for reproducible boards.

    Raises:
        ConfigurationError: If first_click is off the grid or the mines
            cannot fit outside the safe zone.
    """
    row, col = first_click
    if not in_bounds(grid, row, col):
        raise ConfigurationError(f"First click {first_click} is off the grid")
    if mine_count < 0:
        raise ConfigurationError("Number of mines cannot be negative")

    zone = safe_zone(grid, first_click)
    available = sum(
        1 for cell in iter_cells(grid)
        if not cell.is_mine and (cell.row, cell.col) not in zone
    )
    if mine_count > available:
        raise ConfigurationError(
            f"Cannot place {mine_count} mines: only {available} cells "
            f"available outside the safe zone"
        )

    rng = rng or random.Random()
    rows, cols = grid_shape(grid)
    placed = 0
    while placed < mine_count:
        r = rng.randrange(rows)
        c = rng.randrange(cols)
        if grid[r][c].is_mine or (r, c) in zone:
            continue
        grid[r][c].is_mine = True
        placed += 1

    compute_neighbor_counts(grid)
    logger.debug(
        "Placed %d mines on %dx%d grid around first click %s",
        mine_count, rows, cols, first_click,
    )


def compute_neighbor_counts(grid: Grid) -> None:
    """Set neighbor_count on every safe cell from the current mines."""
    for cell in iter_cells(grid):
        if cell.is_mine:
            continue
        cell.neighbor_count = sum(
            1 for r, c in neighbors(grid, cell.row, cell.col) if grid[r][c].is_mine
        )
