from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from math import inf
from typing import List, NamedTuple, Optional, Sequence, Tuple, Union

from fourinrow.config import CENTER_BONUS, SEARCH_DEPTH, WIN_SCORE
from fourinrow.core.board import Board
from fourinrow.core.rules import check_winner
from fourinrow.core.scoring import center_cells, evaluate as _evaluate, window_table, windows_through
from fourinrow.game.state import GameSnapshot
from fourinrow.types import EMPTY, Coord, Move, Player

logger = logging.getLogger(__name__)

BoardLike = Union[Board, GameSnapshot, Sequence[Sequence[int]]]


class Suggestion(NamedTuple):
    row: int
    col: int
    score: float

    @property
    def move(self) -> Move:
        return Move(self.row, self.col)


def _as_board(board: BoardLike) -> Board:
    # Always a private copy: the caller's board is never touched
    if isinstance(board, Board):
        return board.copy()
    if isinstance(board, GameSnapshot):
        return board.to_board()
    return Board.from_rows(board)


def _center_distance(size: int, cell: Coord) -> float:
    mid = (size - 1) / 2
    return abs(cell[0] - mid) + abs(cell[1] - mid)


def evaluate(board: BoardLike, player: Player) -> int:
    """Static score of a position from `player`'s point of view."""
    if not isinstance(board, Board):
        board = _as_board(board)
    return _evaluate(board, Player(player))


class _Search:
    """
    One alpha-beta search over a flat copy of the board.

    Stones are placed and taken back in place. Only the windows through the
    placed cell can change, so each placement updates the static score and
    detects a completed four from those windows alone.
    """

    __slots__ = ("cells", "order", "me", "opp", "table", "through", "center", "nodes", "cutoffs")

    def __init__(self, board: Board, me: Player, opp: Player) -> None:
        n = board.size
        self.cells: List[int] = [v for row in board.grid for v in row]
        self.me = int(me)
        self.opp = int(opp)
        self.table = window_table(me)
        self.through = windows_through(n)
        self.center = frozenset(r * n + c for r, c in center_cells(n))

        # Inner nodes also try central cells first. Move order only decides
        # what gets pruned; it never changes a value inside the window.
        ranked = sorted(range(n * n), key=lambda i: _center_distance(n, divmod(i, n)))
        self.order = [i for i in ranked if self.cells[i] == EMPTY]

        self.nodes = 0
        self.cutoffs = 0

    def drop(self, i: int, value: int) -> Tuple[int, bool]:
        """Place `value` at cell `i`; return the static-score change and whether it made four."""
        cells = self.cells
        table = self.table
        ws = self.through[i]

        before = 0
        for a, b, c, d in ws:
            before += table[(cells[a], cells[b], cells[c], cells[d])]

        cells[i] = value

        after = 0
        won = False
        for a, b, c, d in ws:
            key = (cells[a], cells[b], cells[c], cells[d])
            after += table[key]
            if key[0] == key[1] == key[2] == key[3]:
                won = True

        if value == self.me and i in self.center:
            after += CENTER_BONUS
        return after - before, won

    def value_after(
        self,
        i: int,
        value: int,
        empties: int,
        depth: int,
        alpha: float,
        beta: float,
        maximizing: bool,
        score: int,
    ) -> float:
        """
        Value of the node reached by playing `value` at `i`.
        `empties`, `depth` and `maximizing` describe that node; `score` is
        the static score before the stone goes down.
        """
        gain, won = self.drop(i, value)
        self.nodes += 1

        if won:
            result = WIN_SCORE + depth if value == self.me else -WIN_SCORE - depth
        elif empties == 0:
            result = 0
        elif depth == 0:
            result = score + gain
        else:
            result = self.expand(empties, depth, alpha, beta, maximizing, score + gain)

        self.cells[i] = EMPTY
        return result

    def expand(self, empties: int, depth: int, alpha: float, beta: float, maximizing: bool, score: int) -> float:
        cells = self.cells

        if maximizing:
            best = -inf
            for i in self.order:
                if cells[i] != EMPTY:
                    continue
                v = self.value_after(i, self.me, empties - 1, depth - 1, alpha, beta, False, score)
                if v > best:
                    best = v
                if v > alpha:
                    alpha = v
                if beta <= alpha:
                    self.cutoffs += 1
                    break
            return best

        best = inf
        for i in self.order:
            if cells[i] != EMPTY:
                continue
            v = self.value_after(i, self.opp, empties - 1, depth - 1, alpha, beta, True, score)
            if v < best:
                best = v
            if v < beta:
                beta = v
            if beta <= alpha:
                self.cutoffs += 1
                break
        return best


def _terminal(winner: Optional[Player], depth: int, max_player: Player) -> float:
    return WIN_SCORE + depth if winner == max_player else -WIN_SCORE - depth


@dataclass(slots=True)
class MoveAdvisor:
    """
    Depth-limited minimax with alpha-beta pruning.

    The search runs on its own flat copy of the board, so it never shares
    state with the engine or with another search.
    """
    name: str = "Minimax Advisor"
    depth: int = SEARCH_DEPTH

    # Stats of the most recent search
    last_info: dict = field(default_factory=dict)

    def find_best_move(self, board: BoardLike, player: Player) -> Optional[Suggestion]:
        root = _as_board(board)
        me = Player(player)
        opp = me.opponent

        moves = root.empty_cells()
        if not moves:
            self.last_info = {}
            return None

        # Central cells first; the sort is stable so ties keep row-major order
        moves.sort(key=lambda m: _center_distance(root.size, m))

        start = time.perf_counter()
        search = _Search(root, me, opp)
        settled = check_winner(root)
        base = _evaluate(root, me)
        n = root.size
        empties = len(moves)

        best: Optional[Suggestion] = None
        best_score = -inf

        # Siblings only need to beat the best so far; a child that cannot comes
        # back <= alpha and loses the strict comparison, so the pick is unchanged.
        for r, c in moves:
            if settled is not None:
                search.nodes += 1
                score = _terminal(settled, self.depth - 1, me)
            else:
                score = search.value_after(r * n + c, int(me), empties - 1, self.depth - 1, best_score, inf, False, base)
            if score > best_score:
                best_score = score
                best = Suggestion(r, c, score)

        elapsed = time.perf_counter() - start
        self.last_info = {
            "depth": self.depth,
            "nodes": search.nodes,
            "cutoffs": search.cutoffs,
            "eval": best_score,
            "move": (best.row + 1, best.col + 1) if best else None,
            "candidates": len(moves),
            "time_ms": max(1, int(elapsed * 1000)),
        }
        logger.debug("advisor for %s: %s", me.name, self.last_info)
        return best

    def minimax(
        self,
        board: Board,
        depth: int,
        alpha: float,
        beta: float,
        maximizing: bool,
        max_player: Player,
        min_player: Player,
    ) -> float:
        """Value of `board` for `max_player` with `depth` plies left. The board is not modified."""
        winner = check_winner(board)
        if winner == max_player or winner == min_player:
            return _terminal(winner, depth, max_player)
        if board.is_full():
            return 0
        if depth == 0:
            return _evaluate(board, max_player)

        search = _Search(board, max_player, min_player)
        return search.expand(len(search.order), depth, alpha, beta, maximizing, _evaluate(board, max_player))

    def evaluate(self, board: BoardLike, player: Player) -> int:
        return evaluate(board, player)

    def choose_move(self, state: GameSnapshot) -> Move:
        """Agent-style entry point for headless play."""
        best = self.find_best_move(state, state.current)
        if best is None:
            raise ValueError("No valid moves.")
        return best.move
