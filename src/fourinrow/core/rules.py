from __future__ import annotations
from typing import Optional, List, Tuple

from fourinrow.config import WIN_COUNT
from fourinrow.core.board import Board
from fourinrow.types import EMPTY, Coord, Player

# Horizontal, vertical, diagonal "\", diagonal "/"
DIRECTIONS: Tuple[Tuple[int, int], ...] = ((0, 1), (1, 0), (1, 1), (1, -1))


def _run(board: Board, row: int, col: int, dr: int, dc: int) -> List[Coord]:
    """
    Contiguous same-colour cells through (row, col) along one direction,
    ordered from the earliest cell of the back-run to the end of the forward-run.
    """
    g = board.grid
    player = g[row][col]

    back: List[Coord] = []
    r, c = row - dr, col - dc
    while board.in_bounds(r, c) and g[r][c] == player:
        back.append((r, c))
        r -= dr
        c -= dc
    back.reverse()

    fwd: List[Coord] = []
    r, c = row + dr, col + dc
    while board.in_bounds(r, c) and g[r][c] == player:
        fwd.append((r, c))
        r += dr
        c += dc

    return back + [(row, col)] + fwd


def line_through(board: Board, row: int, col: int) -> Optional[List[Coord]]:
    """
    Win check for the stone just placed at (row, col).
    Only lines through that cell can have been completed, so four scans suffice.
    """
    if board.grid[row][col] == EMPTY:
        return None
    for dr, dc in DIRECTIONS:
        cells = _run(board, row, col, dr, dc)
        if len(cells) >= WIN_COUNT:
            return cells[:WIN_COUNT]
    return None


def check_winner_with_line(board: Board) -> Optional[Tuple[Player, List[Coord]]]:
    g = board.grid
    n = board.size

    for r in range(n):
        for c in range(n):
            p = g[r][c]
            if p == EMPTY:
                continue
            for dr, dc in DIRECTIONS:
                end_r = r + dr * (WIN_COUNT - 1)
                end_c = c + dc * (WIN_COUNT - 1)
                if not board.in_bounds(end_r, end_c):
                    continue
                if all(g[r + dr * i][c + dc * i] == p for i in range(1, WIN_COUNT)):
                    return Player(p), [(r + dr * i, c + dc * i) for i in range(WIN_COUNT)]

    return None


def check_winner(board: Board) -> Optional[Player]:
    res = check_winner_with_line(board)
    return res[0] if res else None


def is_draw(board: Board) -> bool:
    return board.is_full() and check_winner(board) is None
