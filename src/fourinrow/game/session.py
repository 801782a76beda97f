from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass
from typing import List, Optional

from fourinrow.ai.advisor import Suggestion
from fourinrow.ai.hints import HintService
from fourinrow.game.engine import GameEngine
from fourinrow.game.results import MoveResult
from fourinrow.game.state import GameSnapshot, PlayerInfo
from fourinrow.storage.store import MemoryStore, Score
from fourinrow.types import Player

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RoundRecord:
    winner: Optional[Player]
    timestamp: float


class GameSession:
    """
    One sitting between two named players: several rounds, a running score,
    alternating starters and optional hints.
    """

    def __init__(
        self,
        engine: GameEngine,
        store: MemoryStore,
        hints: Optional[HintService] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.engine = engine
        self.store = store
        self.hints = hints
        self._rng = rng or random.Random()

        self.players: Optional[tuple[PlayerInfo, PlayerInfo]] = None
        self.score = store.get_current_score()
        self.rounds: List[RoundRecord] = []
        self.last_starter: Optional[Player] = None

    @property
    def hints_enabled(self) -> bool:
        return self.hints is not None and self.hints.enabled

    def start(self, player1: PlayerInfo, player2: PlayerInfo) -> Player:
        saved1, saved2 = self.store.get_players()
        if (saved1.name, saved2.name) != (player1.name, player2.name):
            self.score = Score()
        self.store.save_players(player1, player2)
        self.players = (player1, player2)

        starter = self._rng.choice([Player.A, Player.B])
        self.engine.new_game(player1, player2, starter)
        self.last_starter = starter

        self.rounds = []
        if self.hints is not None:
            self.hints.disable()
        logger.info("session started: %s vs %s", player1.name, player2.name)
        return starter

    def new_round(self) -> Player:
        if self.players is None:
            raise RuntimeError("Call start() before new_round().")
        starter = self.last_starter.opponent if self.last_starter else Player.A
        self.engine.new_game(self.players[0], self.players[1], starter)
        self.last_starter = starter
        if self.hints_enabled:
            self.request_hint()
        return starter

    def move(self, row: int, col: int) -> MoveResult:
        result = self.engine.play(row, col)
        if not result.success:
            return result

        if self.hints is not None:
            self.hints.invalidate()

        if result.winner is not None:
            self._record(result.winner)
        elif result.is_draw:
            self._record(None)
        elif self.hints_enabled:
            self.request_hint()

        return result

    def _record(self, winner: Optional[Player]) -> None:
        if self.players is None:
            raise RuntimeError("Call start() before recording a match.")
        if winner is Player.A:
            self.score.player1 += 1
        elif winner is Player.B:
            self.score.player2 += 1
        if winner is not None:
            self.store.save_current_score(self.score)

        self.store.add_match(self.players[0], self.players[1], winner)
        self.rounds.append(RoundRecord(winner=winner, timestamp=time.time()))

    def toggle_hints(self) -> bool:
        if self.hints is None or self.engine.is_over():
            return self.hints_enabled
        if self.hints.enabled:
            self.hints.disable()
        else:
            self.hints.enable()
            self.request_hint()
        return self.hints.enabled

    def request_hint(self) -> None:
        if self.hints is None or self.engine.is_over():
            return
        self.hints.request(self.engine.snapshot())

    def suggestion(self) -> Optional[Suggestion]:
        return self.hints.current() if self.hints is not None else None

    def leave(self) -> None:
        """Back to the menu: the running score does not survive."""
        self.store.reset_current_score()
        self.score = Score()
        if self.hints is not None:
            self.hints.disable()

    def snapshot(self) -> GameSnapshot:
        return self.engine.snapshot()
