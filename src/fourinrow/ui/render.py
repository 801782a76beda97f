from __future__ import annotations
from typing import Optional, Set

from fourinrow.ai.advisor import Suggestion
from fourinrow.config import CLEAR_SCREEN
from fourinrow.game.state import GameSnapshot
from fourinrow.storage.store import Score
from fourinrow.types import EMPTY, Coord, Player
from fourinrow.ui.colors import c, player_code, BOLD, DIM, FG_CYAN, FG_GRAY, FG_YELLOW, REVERSE

MARKS = {Player.A: "X", Player.B: "O"}


def _piece(snap: GameSnapshot, cell: int) -> str:
    if cell == EMPTY:
        return c("·", FG_GRAY)
    player = Player(cell)
    return c(MARKS[player], player_code(snap.player_info(player).color))


def clear_screen() -> None:
    if CLEAR_SCREEN:
        print("\033[2J\033[H", end="")


def header(snap: GameSnapshot, score: Optional[Score] = None) -> str:
    a = snap.player_info(Player.A)
    b = snap.player_info(Player.B)
    left = c(f"{MARKS[Player.A]} {a.name}", player_code(a.color))
    right = c(f"{MARKS[Player.B]} {b.name}", player_code(b.color))
    if score is None:
        return f"{left}  vs  {right}"
    return f"{left} [{score.player1}]  vs  [{score.player2}] {right}"


def render_board(snap: GameSnapshot, suggestion: Optional[Suggestion] = None) -> str:
    hl: Set[Coord] = set(snap.winning_line)
    size = len(snap.board)
    lines = []

    nums = "    " + " ".join(str(i + 1) for i in range(size))
    lines.append(c(nums, DIM))

    for r in range(size):
        parts = []
        for col in range(size):
            p = _piece(snap, snap.board[r][col])
            if (r, col) in hl:
                p = f"{REVERSE}{p}\033[0m"
            elif suggestion is not None and (suggestion.row, suggestion.col) == (r, col):
                p = c("*", BOLD + FG_YELLOW)
            parts.append(p)
        lines.append(c(f"{r + 1:>2}", DIM) + " | " + " ".join(parts) + " |")

    lines.append(c("    " + "—" * (2 * size - 1), DIM))
    return "\n".join(lines)


def render(
    snap: GameSnapshot,
    status: str = "",
    score: Optional[Score] = None,
    suggestion: Optional[Suggestion] = None,
    hints_on: bool = False,
) -> None:
    clear_screen()

    print(c("FOUR IN A ROW", BOLD))
    print(header(snap, score))
    if status:
        print(c(status, FG_CYAN))
    else:
        print()

    print(render_board(snap, suggestion))
    hint_txt = "h: hints off" if hints_on else "h: hints on"
    if snap.game_over:
        print(c("   n: new round | m: menu | q: quit", DIM))
    else:
        print(c(f"   Enter row and column (e.g. 3 4) | {hint_txt} | m: menu | q: quit", DIM))
