"""
Reveal engine for vimsweeper.

Opens cells, flood-fills zero regions, chords around numbers and
reports when a mine was hit. All functions mutate the grid they are
given and return before any other code can see a half-open region.
"""
from typing import List, NamedTuple, Tuple

from .grid import Grid, in_bounds, iter_cells, neighbors


class RevealResult(NamedTuple):
    """Outcome of a reveal: the same grid and whether a mine went off."""

    grid: Grid
    game_over: bool


def reveal_cell(grid: Grid, row: int, col: int) -> RevealResult:
    """
    Reveal a cell, flood-revealing connected zeros and their borders.

    Out of bounds, open and flagged targets are left alone. A mine is
    opened on its own and ends the game.

    Args:
        grid: Grid to mutate.
        row: Row index to reveal.
        col: Column index to reveal.

    Returns:
        RevealResult with game_over True only if a mine was opened.
    """
    if not in_bounds(grid, row, col):
        return RevealResult(grid, False)

    start = grid[row][col]
    if not start.is_hidden:
        return RevealResult(grid, False)

    if start.is_mine:
        start.open()
        return RevealResult(grid, True)

    stack: List[Tuple[int, int]] = [(row, col)]
    while stack:
        cur_row, cur_col = stack.pop()
        cell = grid[cur_row][cur_col]
        if not cell.open():
            continue
        if cell.neighbor_count != 0:
            continue
        for next_row, next_col in neighbors(grid, cur_row, cur_col):
            neighbor = grid[next_row][next_col]
            if neighbor.is_hidden and not neighbor.is_mine:
                stack.append((next_row, next_col))

    return RevealResult(grid, False)


def count_flags_around(grid: Grid, row: int, col: int) -> int:
    """Count flagged cells adjacent to position."""
    if not in_bounds(grid, row, col):
        return 0
    count = 0
    for neighbor_row, neighbor_col in neighbors(grid, row, col):
        if grid[neighbor_row][neighbor_col].is_flagged:
            count += 1
    return count


def reveal_cells_around(grid: Grid, row: int, col: int) -> RevealResult:
    """
    Chord: reveal every unflagged neighbor of (row, col).

    Flags are trusted as placed; whether they really cover mines is
    not checked.

    Returns:
        RevealResult with game_over True if any neighbor reveal hit a mine.
    """
    if not in_bounds(grid, row, col):
        return RevealResult(grid, False)
    game_over = False
    for neighbor_row, neighbor_col in neighbors(grid, row, col):
        if grid[neighbor_row][neighbor_col].is_flagged:
            continue
        if reveal_cell(grid, neighbor_row, neighbor_col).game_over:
            game_over = True
    return RevealResult(grid, game_over)


def toggle_flag(grid: Grid, row: int, col: int) -> bool:
    """
    Toggle flag on a cell.

    Returns:
        True if flag was toggled, False for open or off-grid cells.
    """
    if not in_bounds(grid, row, col):
        return False
    return grid[row][col].toggle_flag()


def is_cleared(grid: Grid) -> bool:
    """Check if every safe cell is open."""
    return all(cell.is_open for cell in iter_cells(grid) if not cell.is_mine)


def open_all_mines(grid: Grid) -> None:
    """Open every mine that is not flagged, as shown after a loss."""
    for cell in iter_cells(grid):
        if cell.is_mine:
            cell.open()
