"""
Stage two of the motion interpreter: grid-aware jump targets.

calculate_jump resolves motions that need the cursor, the repeat
count or the grid itself. It returns None for keys that are not
motions, which callers must keep apart from a jump that lands on the
cursor's own cell.
"""
from typing import NamedTuple, Optional

from ..game.grid import Grid


class Position(NamedTuple):
    """A cursor position."""

    r: int
    c: int


LEFT_KEYS = ("h", "ArrowLeft")
RIGHT_KEYS = ("l", "ArrowRight")
UP_KEYS = ("k", "ArrowUp")
DOWN_KEYS = ("j", "ArrowDown")


def calculate_jump(
    key: str,
    multiplier: int,
    cursor: Position,
    grid: Grid,
    rows: int,
    cols: int,
) -> Optional[Position]:
    """
    Work out where a motion key moves the cursor.

    Args:
        key: Key symbol.
        multiplier: Repeat count, 1 when none was typed.
        cursor: Current position.
        grid: Grid to scan for unopened cells.
        rows: Number of rows.
        cols: Number of columns.

    Returns:
        The new position, or None if key is not a motion.
    """
    r, c = cursor

    # Simple directions
    if key in LEFT_KEYS:
        return Position(r, max(0, c - multiplier))
    if key in RIGHT_KEYS:
        return Position(r, min(cols - 1, c + multiplier))
    if key in UP_KEYS:
        return Position(max(0, r - multiplier), c)
    if key in DOWN_KEYS:
        return Position(min(rows - 1, r + multiplier), c)

    # Line and grid boundaries
    if key == "0":
        return Position(r, 0)
    if key == "$":
        return Position(r, cols - 1)
    if key == "g":
        return Position(0, c)
    if key == "G":
        target = min(rows - 1, multiplier - 1) if multiplier > 1 else rows - 1
        return Position(target, c)

    if key == "w":
        return _scan_unopened(cursor, grid, rows, cols, multiplier, step=1)
    if key == "b":
        return _scan_unopened(cursor, grid, rows, cols, multiplier, step=-1)
    if key == "}":
        return _scan_rows(cursor, grid, rows, multiplier, step=1)
    if key == "{":
        return _scan_rows(cursor, grid, rows, multiplier, step=-1)

    return None


def _scan_unopened(
    cursor: Position, grid: Grid, rows: int, cols: int, multiplier: int, step: int
) -> Position:
    """
    Walk the grid row-major, wrapping at the ends, to the
    multiplier-th unopened cell. Each hop gives up after one full lap.
    """
    total = rows * cols
    index = cursor.r * cols + cursor.c
    for _ in range(multiplier):
        scanned = 0
        while True:
            index = (index + step) % total
            scanned += 1
            if scanned >= total or not grid[index // cols][index % cols].is_open:
                break
    return Position(index // cols, index % cols)


def _first_unopened(grid: Grid, row: int) -> Optional[int]:
    for cell in grid[row]:
        if not cell.is_open:
            return cell.col
    return None


def _scan_rows(
    cursor: Position, grid: Grid, rows: int, multiplier: int, step: int
) -> Position:
    """
    Move to the next row (step=1) or previous row (step=-1) holding an
    unopened cell, landing on its leftmost unopened cell. When no such
    row remains the cursor goes to the edge row and keeps its column.
    """
    r, c = cursor
    edge = rows - 1 if step > 0 else 0
    for _ in range(multiplier):
        if r == edge:
            break
        next_row = r + step
        while True:
            col = _first_unopened(grid, next_row)
            if col is not None:
                r, c = next_row, col
                break
            if next_row == edge:
                r = edge
                break
            next_row += step
    return Position(r, c)
