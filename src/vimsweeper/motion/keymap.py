"""
Stage one of the motion interpreter: key symbol to Action.

The table is total. Keys it does not know classify as None, which is
an ordinary outcome rather than an error.
"""
from typing import Dict, List, Optional

from .actions import LINE_END, Action, ActionType, digit, move

KEYMAP: Dict[str, Action] = {
    "0": Action(ActionType.ZERO),
    "_": Action(ActionType.START_ROW),

    "/": Action(ActionType.START_SEARCH),
    "n": Action(ActionType.NEXT_MATCH),
    "N": Action(ActionType.PREV_MATCH),

    "h": move(-1, 0),
    "ArrowLeft": move(-1, 0),
    "j": move(0, 1),
    "ArrowDown": move(0, 1),
    "k": move(0, -1),
    "ArrowUp": move(0, -1),
    "l": move(1, 0),
    "ArrowRight": move(1, 0),

    "$": move(LINE_END, 0),
    "G": Action(ActionType.GO_BOTTOM),
    "g": Action(ActionType.GO_TOP),

    "w": Action(ActionType.NEXT_UNREVEALED),
    "b": Action(ActionType.PREV_UNREVEALED),

    "i": Action(ActionType.REVEAL),
    "Enter": Action(ActionType.REVEAL),
    " ": Action(ActionType.SMART),
    "a": Action(ActionType.FLAG),
}


def classify_key(key: str) -> Optional[Action]:
    """
    Map a key symbol to the Action it requests.

    Args:
        key: A single character or a named key such as "ArrowLeft".

    Returns:
        The Action, DIGIT for 1-9, ZERO for 0, or None if the key
        has no binding.
    """
    if len(key) == 1 and "1" <= key <= "9":
        return digit(key)
    return KEYMAP.get(key)


KEY_ALIASES: Dict[str, str] = {
    "Space": " ",
    "Esc": "Escape",
    "BS": "Backspace",
    "CR": "Enter",
}


def parse_key_script(script: str) -> List[str]:
    """
    Split a typed key script into key symbols.

    Plain characters stand for themselves. Named keys are written in
    angle brackets, e.g. "<Enter>", "<Space>", "<Esc>", "<BS>" or
    "<ArrowLeft>". A "<" with no closing ">" is a literal character.
    """
    keys: List[str] = []
    pos = 0
    while pos < len(script):
        char = script[pos]
        end = script.find(">", pos + 1) if char == "<" else -1
        if end > pos + 1:
            name = script[pos + 1:end]
            keys.append(KEY_ALIASES.get(name, name))
            pos = end + 1
        else:
            keys.append(char)
            pos += 1
    return keys
