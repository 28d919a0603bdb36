"""
Search over the grid for "/", "n" and "N".

A query is a single digit, matching open safe cells showing that
number, or "f", matching flagged cells.
"""
from typing import List, Optional

from ..game.grid import Grid, iter_cells
from .jumps import Position

FLAG_QUERY = "f"


def find_matches(grid: Grid, query: str) -> List[Position]:
    """
    List the cells matching query in row-major order.

    Queries other than "0"-"8" or "f" match nothing.
    """
    query = query.strip()
    if query == FLAG_QUERY:
        return [Position(cell.row, cell.col) for cell in iter_cells(grid)
                if cell.is_flagged]
    if len(query) != 1 or not "0" <= query <= "8":
        return []
    wanted = int(query)
    return [
        Position(cell.row, cell.col)
        for cell in iter_cells(grid)
        if cell.is_open and not cell.is_mine and cell.neighbor_count == wanted
    ]


def next_match(
    matches: List[Position],
    cursor: Position,
    forward: bool = True,
    count: int = 1,
) -> Optional[Position]:
    """
    Find the count-th match after (or before) the cursor.

    Matches are ordered row-major, which is plain tuple order for
    positions, and the search wraps around the grid.

    Returns:
        The match position, or None if there are no matches.
    """
    if not matches:
        return None
    here = tuple(cursor)
    if forward:
        start = next((i for i, m in enumerate(matches) if tuple(m) > here), 0)
        pick = start + (count - 1)
    else:
        before = [i for i, m in enumerate(matches) if tuple(m) < here]
        start = before[-1] if before else len(matches) - 1
        pick = start - (count - 1)
    return matches[pick % len(matches)]
