"""
Unit tests for the grid model.
"""
import numpy as np
import pytest
from vimsweeper.game import (
    ConfigurationError, create_grid, for_each_neighbor, grid_shape, in_bounds,
    iter_cells, mine_mask, neighbors, safe_cell_count, to_observation,
)


class TestCreateGrid:
    """Test grid creation."""

    def test_grid_has_requested_shape(self) -> None:
        """Grid should be rows x cols."""
        grid = create_grid(4, 7)
        assert len(grid) == 4
        assert all(len(row) == 7 for row in grid)
        assert grid_shape(grid) == (4, 7)

    def test_cells_carry_their_coordinates(self) -> None:
        """Each cell's stored coordinates match its position."""
        grid = create_grid(3, 5)
        for row in range(3):
            for col in range(5):
                assert (grid[row][col].row, grid[row][col].col) == (row, col)

    def test_new_grid_is_closed_and_empty(self) -> None:
        """New cells are hidden, unflagged, mine-free with zero counts."""
        for cell in iter_cells(create_grid(3, 3)):
            assert cell.is_hidden
            assert not cell.is_mine
            assert cell.neighbor_count == 0

    def test_cells_are_distinct_objects(self) -> None:
        """Mutating one cell must not affect another."""
        grid = create_grid(2, 2)
        grid[0][0].is_mine = True
        assert grid[1][1].is_mine is False

    def test_non_positive_dimensions_raise(self) -> None:
        """Zero rows or columns is a configuration error."""
        with pytest.raises(ConfigurationError):
            create_grid(0, 3)


class TestNeighbors:
    """Test neighbor enumeration."""

    def test_center_has_eight_neighbors(self) -> None:
        """Interior cell should have all 8 neighbors."""
        grid = create_grid(3, 3)
        assert len(neighbors(grid, 1, 1)) == 8

    def test_corner_has_three_neighbors(self) -> None:
        """Corner cell should only have in-bounds neighbors."""
        grid = create_grid(3, 3)
        assert sorted(neighbors(grid, 0, 0)) == [(0, 1), (1, 0), (1, 1)]

    def test_neighbor_order_is_stable(self) -> None:
        """Neighbors come N, S, E, W, then the diagonals."""
        grid = create_grid(3, 3)
        visited = []
        for_each_neighbor(grid, 1, 1, lambda r, c: visited.append((r, c)))
        assert visited == [
            (0, 1), (2, 1), (1, 2), (1, 0),
            (0, 0), (0, 2), (2, 0), (2, 2),
        ]

    def test_single_cell_grid_has_no_neighbors(self) -> None:
        """A 1x1 grid has nothing around its only cell."""
        assert neighbors(create_grid(1, 1), 0, 0) == []

    def test_in_bounds(self) -> None:
        """Bounds check should accept only positions on the grid."""
        grid = create_grid(2, 3)
        assert in_bounds(grid, 1, 2)
        assert not in_bounds(grid, 2, 0)
        assert not in_bounds(grid, 0, -1)


class TestArrays:
    """Test numpy views of the grid."""

    def test_observation_shape_and_dtype(self) -> None:
        """Observation should be an int8 rows x cols array."""
        obs = to_observation(create_grid(4, 6))
        assert obs.shape == (4, 6)
        assert obs.dtype == np.int8
        assert np.all(obs == -1)

    def test_observation_reflects_cell_states(self, corner_mine_grid) -> None:
        """Open, flagged and hidden cells encode differently."""
        corner_mine_grid[0][1].open()
        corner_mine_grid[2][2].toggle_flag()
        obs = to_observation(corner_mine_grid)
        assert obs[0, 1] == 1
        assert obs[2, 2] == -2
        assert obs[0, 0] == -1

    def test_mine_mask(self, corner_mine_grid) -> None:
        """Mask should be True exactly on mines."""
        mask = mine_mask(corner_mine_grid)
        assert mask.dtype == bool
        assert mask[0, 0]
        assert mask.sum() == 1

    def test_safe_cell_count(self, corner_mine_grid, walled_grid) -> None:
        """Safe cells are the ones the mask leaves out."""
        assert safe_cell_count(corner_mine_grid) == 8
        assert safe_cell_count(walled_grid) == 20
        assert safe_cell_count(create_grid(2, 3)) == 6
