from __future__ import annotations
from functools import lru_cache
from itertools import product
from typing import Dict, Sequence, Tuple

from fourinrow.config import (
    BLOCK_THREE_SCORE,
    CENTER_BONUS,
    THREE_SCORE,
    TWO_SCORE,
    WIN_COUNT,
    WIN_SCORE,
)
from fourinrow.core.board import Board
from fourinrow.types import EMPTY, Coord, Player

Window = Tuple[Coord, ...]


@lru_cache(maxsize=None)
def windows(size: int, length: int = WIN_COUNT) -> Tuple[Window, ...]:
    """Every run of `length` cells on a size x size board, in all four directions."""
    out = []

    # Horizontal
    for r in range(size):
        for c in range(size - length + 1):
            out.append(tuple((r, c + i) for i in range(length)))

    # Vertical
    for c in range(size):
        for r in range(size - length + 1):
            out.append(tuple((r + i, c) for i in range(length)))

    # Diagonal down-right
    for r in range(size - length + 1):
        for c in range(size - length + 1):
            out.append(tuple((r + i, c + i) for i in range(length)))

    # Diagonal down-left
    for r in range(size - length + 1):
        for c in range(length - 1, size):
            out.append(tuple((r + i, c - i) for i in range(length)))

    return tuple(out)


@lru_cache(maxsize=None)
def windows_through(size: int) -> Tuple[Tuple[Tuple[int, ...], ...], ...]:
    """
    Indexed by flat cell number (row * size + col): the windows covering
    that cell, each as a tuple of flat cell numbers.
    """
    flat = [tuple(r * size + c for r, c in w) for w in windows(size)]
    return tuple(tuple(w for w in flat if i in w) for i in range(size * size))


@lru_cache(maxsize=None)
def center_cells(size: int) -> Tuple[Coord, ...]:
    lo = (size - 1) // 2
    hi = size // 2
    return tuple((r, c) for r in (lo, hi) for c in (lo, hi))


def score_window(cells: Sequence[int], player: Player) -> int:
    opp = player.opponent
    p_count = cells.count(player)
    o_count = cells.count(opp)
    e_count = cells.count(EMPTY)

    score = 0

    if p_count == 4:
        score += WIN_SCORE
    elif p_count == 3 and e_count == 1:
        score += THREE_SCORE
    elif p_count == 2 and e_count == 2:
        score += TWO_SCORE

    # Opponent threats weigh more than our own threes
    if o_count == 3 and e_count == 1:
        score -= BLOCK_THREE_SCORE
    elif o_count == 2 and e_count == 2:
        score -= TWO_SCORE

    return score


@lru_cache(maxsize=None)
def window_table(player: Player) -> Dict[Tuple[int, ...], int]:
    """score_window() for every possible window content, keyed by cell values."""
    player = Player(player)
    values = (EMPTY, int(Player.A), int(Player.B))
    return {cells: score_window(cells, player) for cells in product(values, repeat=WIN_COUNT)}


def evaluate(board: Board, player: Player) -> int:
    player = Player(player)
    g = board.grid
    table = window_table(player)

    score = 0
    for window in windows(board.size):
        score += table[tuple(g[r][c] for (r, c) in window)]

    for r, c in center_cells(board.size):
        if g[r][c] == player:
            score += CENTER_BONUS

    return score
