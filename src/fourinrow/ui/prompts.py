from __future__ import annotations
import re
from typing import Union

from fourinrow.types import Move

COMMANDS = {
    "q": "quit", "quit": "quit", "exit": "quit",
    "h": "hint", "hint": "hint", "hints": "hint",
    "n": "new", "new": "new",
    "m": "menu", "menu": "menu",
}

# "3 4", "3,4", "3-4" or chess-like "c4" (column letter, row number)
_PAIR = re.compile(r"^(\d+)\s*[,\s\-]\s*(\d+)$")
_LETTER = re.compile(r"^([a-z])\s*(\d+)$")


def parse_command(raw: str, size: int) -> Union[Move, str]:
    """
    Turn one line of input into a 0-indexed Move or a command keyword.
    Raises ValueError with a user-facing message on bad input.
    """
    s = raw.strip().lower()
    if s in COMMANDS:
        return COMMANDS[s]

    m = _PAIR.match(s)
    if m:
        row, col = int(m.group(1)) - 1, int(m.group(2)) - 1
    else:
        m = _LETTER.match(s)
        if not m:
            raise ValueError("Invalid input. Enter a row and column like '3 4', or h/q.")
        col = ord(m.group(1)) - ord("a")
        row = int(m.group(2)) - 1

    if not (0 <= row < size and 0 <= col < size):
        raise ValueError(f"Row and column must be between 1 and {size}.")
    return Move(row, col)


def ask(prompt: str, default: str) -> str:
    raw = input(f"{prompt} [{default}]: ").strip()
    return raw or default
