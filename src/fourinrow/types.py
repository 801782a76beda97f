# src/fourinrow/types.py

from __future__ import annotations
from enum import IntEnum
from typing import NamedTuple, Tuple

EMPTY = 0


class Player(IntEnum):
    A = 1
    B = 2

    @property
    def opponent(self) -> "Player":
        return Player.B if self is Player.A else Player.A


Cell = int                   # EMPTY, 1 or 2
Coord = Tuple[int, int]      # (row, col), 0-indexed


class Move(NamedTuple):
    row: int
    col: int
