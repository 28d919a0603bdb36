"""
Actions produced by the key classifier.

An Action is built fresh for every keypress and handed straight to
the caller; nothing keeps it around.
"""
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


# Horizontal step used by "$": larger than any board, clamped by the caller
LINE_END = 999


class ActionType(Enum):
    """Kinds of action a single key can request."""

    MOVE_CURSOR = auto()
    REVEAL = auto()
    FLAG = auto()
    SMART = auto()
    DIGIT = auto()
    ZERO = auto()
    GO_TOP = auto()
    GO_BOTTOM = auto()
    START_ROW = auto()
    NEXT_UNREVEALED = auto()
    PREV_UNREVEALED = auto()
    START_SEARCH = auto()
    NEXT_MATCH = auto()
    PREV_MATCH = auto()


@dataclass(frozen=True)
class Action:
    """
    A classified keypress.

    Attributes:
        type: What the key asks for.
        dx: Column step for MOVE_CURSOR.
        dy: Row step for MOVE_CURSOR.
        value: The digit for DIGIT, as typed.
    """

    type: ActionType
    dx: int = 0
    dy: int = 0
    value: Optional[str] = None


def move(dx: int, dy: int) -> Action:
    """Build a MOVE_CURSOR action."""
    return Action(ActionType.MOVE_CURSOR, dx=dx, dy=dy)


def digit(value: str) -> Action:
    """Build a DIGIT action."""
    return Action(ActionType.DIGIT, value=value)
