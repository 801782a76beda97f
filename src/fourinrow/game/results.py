from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple, Union

from fourinrow.game.state import PlayerInfo
from fourinrow.types import Coord, Player


@dataclass(frozen=True, slots=True)
class Ongoing:
    pass


@dataclass(frozen=True, slots=True)
class Win:
    player: Player
    line: Tuple[Coord, ...]


@dataclass(frozen=True, slots=True)
class Draw:
    pass


GameOutcome = Union[Ongoing, Win, Draw]

ONGOING = Ongoing()
DRAW = Draw()


@dataclass(frozen=True, slots=True)
class MoveResult:
    """
    Result of a move request.
    Rejected moves have success=False and a reason code ("cell_taken",
    "out_of_bounds", "game_over") and leave the game untouched.
    """
    success: bool
    outcome: GameOutcome = field(default=ONGOING)
    placed_by: Optional[Player] = None
    next_player: Optional[Player] = None
    player_info: Optional[PlayerInfo] = None
    reason: Optional[str] = None

    @property
    def winner(self) -> Optional[Player]:
        return self.outcome.player if isinstance(self.outcome, Win) else None

    @property
    def winning_line(self) -> Tuple[Coord, ...]:
        return self.outcome.line if isinstance(self.outcome, Win) else ()

    @property
    def is_draw(self) -> bool:
        return isinstance(self.outcome, Draw)

    @property
    def is_terminal(self) -> bool:
        return not isinstance(self.outcome, Ongoing)

    def to_dict(self) -> Dict[str, Any]:
        winner = self.winner
        return {
            "success": self.success,
            "winner": int(winner) if winner is not None else None,
            "winningCells": [{"row": r, "col": c} for (r, c) in self.winning_line],
            "draw": self.is_draw,
        }


def rejected(reason: str) -> MoveResult:
    return MoveResult(success=False, reason=reason)
