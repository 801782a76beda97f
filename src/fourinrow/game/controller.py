from __future__ import annotations

from fourinrow.game.session import GameSession
from fourinrow.ui.effects import thinking
from fourinrow.ui.prompts import parse_command
from fourinrow.ui.render import MARKS, render


def _turn_status(session: GameSession) -> str:
    info = session.engine.current_player_info()
    return f"{MARKS[session.engine.current_player()]} {info.name}'s turn."


def run_game(session: GameSession) -> str:
    """
    Terminal loop for one session. Returns "menu" or "quit".
    """
    engine = session.engine
    status = f"{engine.current_player_info().name} starts!"

    while True:
        if session.hints_enabled and session.hints is not None:
            thinking(session.hints.pending)

        render(
            session.snapshot(),
            status,
            score=session.score,
            suggestion=session.suggestion(),
            hints_on=session.hints_enabled,
        )

        try:
            cmd = parse_command(input("> "), engine.board_size)
        except ValueError as e:
            status = str(e)
            continue
        except EOFError:
            return "quit"

        if cmd == "quit":
            return "quit"

        if cmd == "menu":
            session.leave()
            return "menu"

        if cmd == "hint":
            if engine.is_over():
                status = "The round is over."
            else:
                on = session.toggle_hints()
                status = "Hints on." if on else "Hints off."
            continue

        if cmd == "new":
            if not engine.is_over():
                status = "Finish the round first."
                continue
            session.new_round()
            status = f"{engine.current_player_info().name} starts!"
            continue

        result = session.move(cmd.row, cmd.col)

        if not result.success:
            status = {
                "cell_taken": "That cell is taken.",
                "game_over": "The round is over. Press n for a new round.",
            }.get(result.reason or "", "Invalid move.")
        elif result.winner is not None:
            status = f"{result.player_info.name} wins!"
        elif result.is_draw:
            status = "Draw!"
        else:
            status = _turn_status(session)
