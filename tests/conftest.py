"""
Pytest configuration and shared fixtures.
"""
import random
import sys
from pathlib import Path
from typing import Callable, List

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from vimsweeper.game import (
    BoardConfig, Cell, Grid, compute_neighbor_counts, create_grid,
)
from vimsweeper.session import GameSession


def grid_from_layout(layout: List[str]) -> Grid:
    """
    Build a grid from rows of text.

    "*" is a mine, "." a safe cell. Neighbor counts are computed.
    """
    grid = create_grid(len(layout), len(layout[0]))
    for row, line in enumerate(layout):
        for col, char in enumerate(line):
            grid[row][col].is_mine = char == "*"
    compute_neighbor_counts(grid)
    return grid


# ============================================================================
# Grid Fixtures
# ============================================================================

@pytest.fixture
def make_grid() -> Callable[[List[str]], Grid]:
    """Factory turning a text layout into a grid."""
    return grid_from_layout


@pytest.fixture
def empty_grid() -> Grid:
    """A 5x5 grid with no mines for cascade testing."""
    return create_grid(5, 5)


@pytest.fixture
def corner_mine_grid() -> Grid:
    """A 3x3 grid with a single mine at (0, 0)."""
    return grid_from_layout([
        "*..",
        "...",
        "...",
    ])


@pytest.fixture
def walled_grid() -> Grid:
    """
    A 5x5 grid split by a column of mines.

    The left two columns and the right two columns are separate
    zero regions.
    """
    return grid_from_layout([
        "..*..",
        "..*..",
        "..*..",
        "..*..",
        "..*..",
    ])


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source for reproducible boards."""
    return random.Random(1234)


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell(0, 0)


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(0, 0, is_mine=True)


# ============================================================================
# Session Fixtures
# ============================================================================

@pytest.fixture
def beginner_session() -> GameSession:
    """A seeded 9x9 session with 10 mines."""
    return GameSession(BoardConfig(9, 9, 10, seed=42))


@pytest.fixture
def empty_session() -> GameSession:
    """A 5x5 session with no mines."""
    return GameSession(BoardConfig(5, 5, 0, seed=0))


@pytest.fixture
def make_session() -> Callable[[List[str]], GameSession]:
    """
    Factory for sessions whose mines are laid out by hand.

    The config asks for no random mines, so the first reveal only
    computes counts around the given layout.
    """
    def _make(layout: List[str]) -> GameSession:
        session = GameSession(BoardConfig(len(layout[0]), len(layout), 0))
        for row, line in enumerate(layout):
            for col, char in enumerate(line):
                session.grid[row][col].is_mine = char == "*"
        return session

    return _make
