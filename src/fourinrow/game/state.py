from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, Optional, Tuple

from fourinrow.core.board import Board
from fourinrow.types import Cell, Coord, Player

if TYPE_CHECKING:
    from fourinrow.game.results import GameOutcome


@dataclass(frozen=True, slots=True)
class PlayerInfo:
    name: str
    color: str

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValueError("Player name must not be empty.")


@dataclass(frozen=True, slots=True)
class GameSnapshot:
    """Read-only copy of everything the engine owns."""
    board: Tuple[Tuple[Cell, ...], ...]
    current: Player
    game_over: bool
    players: Tuple[Tuple[Player, PlayerInfo], ...]
    winning_line: Tuple[Coord, ...]
    outcome: "GameOutcome"
    move_count: int = 0

    def player_info(self, player: Player) -> PlayerInfo:
        return dict(self.players)[Player(player)]

    @property
    def player_map(self) -> Dict[Player, PlayerInfo]:
        return dict(self.players)

    def to_board(self) -> Board:
        return Board.from_rows(self.board)

    def cell(self, row: int, col: int) -> Cell:
        return self.board[row][col]

    def winner(self) -> Optional[Player]:
        return getattr(self.outcome, "player", None)
