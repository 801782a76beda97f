from __future__ import annotations

import logging
import random
from typing import Dict, List, Optional

from fourinrow.core.board import Board
from fourinrow.core.rules import line_through
from fourinrow.errors import FourInRowError, GameOver
from fourinrow.game.results import DRAW, ONGOING, GameOutcome, MoveResult, Win, rejected
from fourinrow.game.state import GameSnapshot, PlayerInfo
from fourinrow.storage.store import default_players
from fourinrow.types import Coord, Player

logger = logging.getLogger(__name__)


class GameEngine:
    """
    Authoritative board and turn state for one game.

    Nothing outside this class mutates the board; callers get copies from
    snapshot() / board_copy().
    """

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng or random.Random()
        self._board = Board()
        player_a, player_b = default_players()
        self._players: Dict[Player, PlayerInfo] = {Player.A: player_a, Player.B: player_b}
        self._current = Player.A
        self._game_over = False
        self._winning_line: List[Coord] = []
        self._outcome: GameOutcome = ONGOING
        self._moves = 0

    def new_game(
        self,
        player_a: PlayerInfo,
        player_b: PlayerInfo,
        starting_player: Optional[Player] = None,
    ) -> None:
        self._board = Board()
        self._players = {Player.A: player_a, Player.B: player_b}
        if starting_player is None:
            starting_player = self._rng.choice([Player.A, Player.B])
        self._current = Player(starting_player)
        self._game_over = False
        self._winning_line = []
        self._outcome = ONGOING
        self._moves = 0
        logger.debug("new game: %s vs %s, %s starts", player_a.name, player_b.name, self._current.name)

    def apply_move(self, row: int, col: int) -> MoveResult:
        if self._game_over:
            raise GameOver()

        mover = self._current
        self._board.place(row, col, mover)
        self._moves += 1

        line = line_through(self._board, row, col)
        if line is not None:
            self._game_over = True
            self._winning_line = line
            self._outcome = Win(mover, tuple(line))
            logger.info("%s wins with %s", self._players[mover].name, line)
            return MoveResult(
                success=True,
                outcome=self._outcome,
                placed_by=mover,
                player_info=self._players[mover],
            )

        if self._board.is_full():
            self._game_over = True
            self._outcome = DRAW
            logger.info("draw after %d moves", self._moves)
            return MoveResult(success=True, outcome=DRAW, placed_by=mover)

        self._current = mover.opponent
        return MoveResult(
            success=True,
            outcome=ONGOING,
            placed_by=mover,
            next_player=self._current,
        )

    def play(self, row: int, col: int) -> MoveResult:
        """Like apply_move, but a rejected move comes back as a result value."""
        try:
            return self.apply_move(row, col)
        except FourInRowError as e:
            logger.debug("rejected move (%d, %d): %s", row, col, e.reason)
            return rejected(e.reason)

    # Read accessors

    def current_player(self) -> Player:
        return self._current

    def current_player_info(self) -> PlayerInfo:
        return self._players[self._current]

    def player_info(self, player: Player) -> PlayerInfo:
        return self._players[Player(player)]

    def is_over(self) -> bool:
        return self._game_over

    def outcome(self) -> GameOutcome:
        return self._outcome

    def winning_line(self) -> List[Coord]:
        return list(self._winning_line)

    @property
    def move_count(self) -> int:
        return self._moves

    @property
    def board_size(self) -> int:
        return self._board.size

    def board_copy(self) -> Board:
        return self._board.copy()

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            board=self._board.to_rows(),
            current=self._current,
            game_over=self._game_over,
            players=tuple(sorted(self._players.items())),
            winning_line=tuple(self._winning_line),
            outcome=self._outcome,
            move_count=self._moves,
        )
