"""
Vim-style motion interpreter.

Classifies raw keys into actions and resolves grid-aware jumps.
"""
from .actions import Action, ActionType, LINE_END
from .keymap import KEYMAP, classify_key, parse_key_script
from .jumps import Position, calculate_jump
from .search import find_matches, next_match

__all__ = [
    "Action",
    "ActionType",
    "LINE_END",
    "KEYMAP",
    "classify_key",
    "parse_key_script",
    "Position",
    "calculate_jump",
    "find_matches",
    "next_match",
]
