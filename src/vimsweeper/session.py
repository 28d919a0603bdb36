"""
Game session for vimsweeper.

A session owns one game's grid, cursor and pending repeat count. It
feeds keys through the motion interpreter, applies cursor jumps and
routes reveal, flag and chord requests to the grid engine.
"""
import logging
import random
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional

import numpy as np

from .game.cell import Cell
from .game.config import BoardConfig
from .game.generator import place_mines
from .game.grid import (
    Grid, create_grid, in_bounds, safe_cell_count, to_observation,
)
from .game.reveal import (
    count_flags_around,
    is_cleared,
    open_all_mines,
    reveal_cell,
    reveal_cells_around,
    toggle_flag,
)
from .game.scoring import calculate_3bv
from .motion.actions import Action, ActionType
from .motion.jumps import Position, calculate_jump
from .motion.keymap import classify_key
from .motion.search import find_matches, next_match

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


@dataclass
class GameSummary:
    """
    What a results store would record about a game.

    Attributes:
        state: Final (or current) game state.
        three_bv: 3BV of the board, None before mines are placed.
        clicks: Reveal, flag and chord actions that changed the grid.
        safe_cells: Cells without a mine, None before mines are placed.
    """

    state: GameState
    three_bv: Optional[int]
    clicks: int
    safe_cells: Optional[int] = None

    @property
    def efficiency(self) -> Optional[float]:
        """3BV per click, None until both are known."""
        if self.three_bv is None or self.clicks == 0:
            return None
        return self.three_bv / self.clicks


# ============================================================================
# Session Class
# ============================================================================

@dataclass
class GameSession:
    """
    One game of vimsweeper.

    Mines are placed on the first reveal so the first cell opened and
    its neighbors are safe. Keys go through handle_key.
    """

    config: BoardConfig = field(default_factory=lambda: BoardConfig())
    rng: Optional[random.Random] = field(default=None, repr=False)
    cursor: Position = Position(0, 0)
    _grid: Grid = field(default_factory=list, repr=False)
    _game_state: GameState = GameState.PLAYING
    _mines_placed: bool = False
    _three_bv: Optional[int] = None
    _clicks: int = 0
    _count: str = ""
    _search_query: Optional[str] = None
    _last_query: str = ""

    def __post_init__(self) -> None:
        """Create the random source and the empty grid."""
        if self.rng is None:
            self.rng = random.Random(self.config.seed)
        self._grid = create_grid(self.config.height, self.config.width)

    # ========================================================================
    # Grid Actions
    # ========================================================================

    def reveal(self, row: int, col: int) -> bool:
        """
        Reveal a cell.

        On the first reveal, places mines around a safe zone at this
        cell and scores the board.

        Returns:
            True if the cell was hidden and is now open.
        """
        if not self._can_act(row, col):
            return False
        if not self._grid[row][col].is_hidden:
            return False

        if not self._mines_placed:
            self._handle_first_click(row, col)

        result = reveal_cell(self._grid, row, col)
        self._clicks += 1
        self._after_reveal(result.game_over)
        return True

    def flag(self, row: int, col: int) -> bool:
        """
        Toggle flag on a cell.

        Returns:
            True if flag was toggled, False otherwise.
        """
        if not self._can_act(row, col):
            return False
        if not toggle_flag(self._grid, row, col):
            return False
        self._clicks += 1
        return True

    def chord(self, row: int, col: int) -> bool:
        """
        Reveal all unflagged neighbors if flag count matches the number.

        Returns:
            True if chord was performed, False otherwise.
        """
        if not self._can_chord(row, col):
            return False
        result = reveal_cells_around(self._grid, row, col)
        self._clicks += 1
        self._after_reveal(result.game_over)
        return True

    def smart(self, row: int, col: int) -> bool:
        """Reveal a hidden cell or chord an open one."""
        if not self._can_act(row, col):
            return False
        if self._grid[row][col].is_open:
            return self.chord(row, col)
        return self.reveal(row, col)

    def _can_act(self, row: int, col: int) -> bool:
        """Check the game is running and the position is on the grid."""
        if self._game_state != GameState.PLAYING:
            return False
        return in_bounds(self._grid, row, col)

    def _can_chord(self, row: int, col: int) -> bool:
        """Check if chord action is valid."""
        if not self._can_act(row, col):
            return False
        cell = self._grid[row][col]
        if not cell.is_open or cell.neighbor_count == 0:
            return False
        return count_flags_around(self._grid, row, col) == cell.neighbor_count

    def _handle_first_click(self, row: int, col: int) -> None:
        """Place mines around the first click and score the board."""
        place_mines(self._grid, self.config.num_mines, (row, col), self.rng)
        self._mines_placed = True
        self._three_bv = calculate_3bv(self._grid)
        logger.debug("Board ready, 3BV=%d", self._three_bv)

    def _after_reveal(self, game_over: bool) -> None:
        """Settle the game state after cells were opened."""
        if game_over:
            self._game_state = GameState.LOST
            open_all_mines(self._grid)
            logger.info("Game lost after %d clicks", self._clicks)
        elif is_cleared(self._grid):
            self._game_state = GameState.WON
            logger.info(
                "Game won in %d clicks (3BV %s)", self._clicks, self._three_bv
            )

    # ========================================================================
    # Key Handling
    # ========================================================================

    def handle_key(self, key: str) -> bool:
        """
        Process one keypress.

        Digits build a repeat count; "0" extends a pending count and
        otherwise jumps to column 0. Motions move the cursor, other
        actions act on the cell under it.

        Returns:
            True if the key was understood.
        """
        if self._search_query is not None:
            self._handle_search_key(key)
            return True

        action = classify_key(key)
        if action is not None and action.type == ActionType.DIGIT:
            self._count += action.value
            return True
        if action is not None and action.type == ActionType.ZERO and self._count:
            self._count += "0"
            return True

        multiplier = self._take_count()
        target = calculate_jump(
            key, multiplier, self.cursor, self._grid,
            self.config.height, self.config.width,
        )
        if target is not None:
            self.cursor = target
            return True
        if action is None:
            return False

        self._dispatch(action, multiplier)
        return True

    def _take_count(self) -> int:
        """Consume the pending repeat count, 1 if none was typed."""
        multiplier = int(self._count) if self._count else 1
        self._count = ""
        return multiplier

    def _dispatch(self, action: Action, multiplier: int) -> None:
        """Apply an action that is not a plain cursor jump."""
        row, col = self.cursor
        if action.type == ActionType.REVEAL:
            self.reveal(row, col)
        elif action.type == ActionType.FLAG:
            self.flag(row, col)
        elif action.type == ActionType.SMART:
            self.smart(row, col)
        elif action.type == ActionType.START_ROW:
            self.cursor = Position(row, self._first_unopened_col(row))
        elif action.type == ActionType.START_SEARCH:
            self._search_query = ""
        elif action.type == ActionType.NEXT_MATCH:
            self._jump_to_match(True, multiplier)
        elif action.type == ActionType.PREV_MATCH:
            self._jump_to_match(False, multiplier)

    def _first_unopened_col(self, row: int) -> int:
        for cell in self._grid[row]:
            if not cell.is_open:
                return cell.col
        return 0

    def _handle_search_key(self, key: str) -> None:
        """Edit, commit or cancel the search being typed."""
        if key == "Escape":
            self._search_query = None
        elif key == "Backspace":
            self._search_query = self._search_query[:-1]
        elif key == "Enter":
            self._last_query = self._search_query
            self._search_query = None
            self._jump_to_match(True, 1)
        elif len(key) == 1:
            self._search_query += key

    def _jump_to_match(self, forward: bool, count: int) -> None:
        matches = find_matches(self._grid, self._last_query)
        target = next_match(matches, self.cursor, forward=forward, count=count)
        if target is not None:
            self.cursor = target

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def grid(self) -> Grid:
        """The session's grid."""
        return self._grid

    @property
    def game_state(self) -> GameState:
        """Get current game state."""
        return self._game_state

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self._game_state == GameState.PLAYING

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self._game_state == GameState.WON

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self._game_state == GameState.LOST

    @property
    def mines_placed(self) -> bool:
        """Check if mines have been laid by the first reveal."""
        return self._mines_placed

    @property
    def three_bv(self) -> Optional[int]:
        """3BV of the board, None before the first reveal."""
        return self._three_bv

    @property
    def clicks(self) -> int:
        """Grid-changing reveal, flag and chord actions so far."""
        return self._clicks

    @property
    def pending_count(self) -> str:
        """Digits typed so far for the next motion."""
        return self._count

    @property
    def is_searching(self) -> bool:
        """Check if a search query is being typed."""
        return self._search_query is not None

    @property
    def search_query(self) -> Optional[str]:
        """Query being typed, None when not in search mode."""
        return self._search_query

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not in_bounds(self._grid, row, col):
            return None
        return self._grid[row][col]

    def get_observation(self) -> np.ndarray:
        """Visible grid as an int8 array, see grid.to_observation."""
        return to_observation(self._grid)

    def summary(self) -> GameSummary:
        """Summarize the game for an external results store."""
        safe_cells = safe_cell_count(self._grid) if self._mines_placed else None
        return GameSummary(
            self._game_state, self._three_bv, self._clicks, safe_cells
        )

    def reset(self) -> None:
        """Reset session to initial state for a new game."""
        self._grid = create_grid(self.config.height, self.config.width)
        self.cursor = Position(0, 0)
        self._game_state = GameState.PLAYING
        self._mines_placed = False
        self._three_bv = None
        self._clicks = 0
        self._count = ""
        self._search_query = None
        self._last_query = ""
