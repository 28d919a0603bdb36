"""
Minesweeper grid engine.

Provides the grid model, mine placement, reveal logic and 3BV scoring.
"""
from .config import (
    BoardConfig, ConfigurationError, PRESETS, BEGINNER, INTERMEDIATE, EXPERT,
)
from .cell import Cell, CellState
from .grid import (
    Grid, create_grid, for_each_neighbor, grid_shape, in_bounds, neighbors,
    iter_cells, to_observation, mine_mask, safe_cell_count,
)
from .generator import safe_zone, place_mines, compute_neighbor_counts
from .reveal import (
    RevealResult, reveal_cell, count_flags_around, reveal_cells_around,
    toggle_flag, is_cleared, open_all_mines,
)
from .scoring import calculate_3bv

__all__ = [
    "BoardConfig",
    "ConfigurationError",
    "PRESETS",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "Cell",
    "CellState",
    "Grid",
    "create_grid",
    "for_each_neighbor",
    "grid_shape",
    "in_bounds",
    "neighbors",
    "iter_cells",
    "to_observation",
    "mine_mask",
    "safe_cell_count",
    "safe_zone",
    "place_mines",
    "compute_neighbor_counts",
    "RevealResult",
    "reveal_cell",
    "count_flags_around",
    "reveal_cells_around",
    "toggle_flag",
    "is_cleared",
    "open_all_mines",
    "calculate_3bv",
]
