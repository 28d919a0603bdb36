"""
Cell module for vimsweeper.

A cell knows its position on the grid, whether it holds a mine,
how many mines surround it, and whether it is hidden, open or flagged.
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """Possible visual states of a cell."""

    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    A single square of the grid.

    Attributes:
        row: Row index, fixed for the lifetime of the grid.
        col: Column index, fixed for the lifetime of the grid.
        is_mine: Whether this cell contains a mine.
        neighbor_count: Mines among the 8 neighbors. Only meaningful
            for safe cells.
        state: Hidden, revealed or flagged. Keeping this in one field
            means a cell can never be open and flagged at once.
    """

    row: int
    col: int
    is_mine: bool = False
    neighbor_count: int = 0
    state: CellState = CellState.HIDDEN

    def open(self) -> bool:
        """
        Open this cell.

        Returns:
            True if the cell was opened, False if it was already
            open or is flagged.
        """
        if self.state != CellState.HIDDEN:
            return False
        self.state = CellState.REVEALED
        return True

    def toggle_flag(self) -> bool:
        """
        Toggle flag on this cell.

        Returns:
            True if flag was toggled, False if cell is open.
        """
        if self.state == CellState.REVEALED:
            return False
        if self.state == CellState.HIDDEN:
            self.state = CellState.FLAGGED
        else:
            self.state = CellState.HIDDEN
        return True

    @property
    def is_hidden(self) -> bool:
        """Check if cell is hidden and unflagged."""
        return self.state == CellState.HIDDEN

    @property
    def is_open(self) -> bool:
        """Check if cell is open."""
        return self.state == CellState.REVEALED

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.state == CellState.FLAGGED

    def to_observation(self) -> int:
        """
        Encode what a player can see of this cell.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            0-8: Open cell with its neighbor count
            9: Open mine
        """
        if self.state == CellState.HIDDEN:
            return -1
        if self.state == CellState.FLAGGED:
            return -2
        if self.is_mine:
            return 9
        return self.neighbor_count
