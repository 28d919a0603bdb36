"""
Board configuration for vimsweeper.

Holds board dimensions and mine count, validated on construction,
plus the classic difficulty presets.
"""
from dataclasses import dataclass
from typing import Dict, Optional


class ConfigurationError(ValueError):
    """Raised when a board cannot be built from the given parameters."""


# ============================================================================
# Board Configuration
# ============================================================================

@dataclass
class BoardConfig:
    """
    Configuration for a vimsweeper board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        num_mines: Total mines to place.
        seed: Optional seed for mine placement.
    """

    width: int = 9
    height: int = 9
    num_mines: int = 10
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.width < 1 or self.height < 1:
            raise ConfigurationError("Board dimensions must be positive")
        if self.num_mines < 0:
            raise ConfigurationError("Number of mines cannot be negative")
        if self.num_mines > self.max_mines:
            raise ConfigurationError(f"Too many mines (max {self.max_mines})")

    @property
    def max_mines(self) -> int:
        """Largest mine count that leaves room for any safe zone."""
        largest_zone = min(self.width, 3) * min(self.height, 3)
        return self.width * self.height - largest_zone

    @property
    def total_cells(self) -> int:
        """Number of cells on the board."""
        return self.width * self.height


# Preset difficulty levels
BEGINNER = BoardConfig(9, 9, 10)
INTERMEDIATE = BoardConfig(16, 16, 40)
EXPERT = BoardConfig(30, 16, 99)

PRESETS: Dict[str, BoardConfig] = {
    "beginner": BEGINNER,
    "intermediate": INTERMEDIATE,
    "expert": EXPERT,
}
