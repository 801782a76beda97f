from __future__ import annotations

from fourinrow.game.controller import run_game
from fourinrow.game.session import GameSession
from fourinrow.game.state import PlayerInfo
from fourinrow.ui.history import show_history
from fourinrow.ui.prompts import ask


def _ask_player(label: str, default: PlayerInfo) -> PlayerInfo:
    name = ask(f"{label} name", default.name)
    color = ask(f"{label} colour", default.color)
    return PlayerInfo(name.strip() or default.name, color)


def run_menu(session: GameSession) -> None:
    while True:
        print()
        print("Select:")
        print("1) Start game")
        print("2) Match history")
        print("3) Reset progress")
        print("4) Quit")

        try:
            choice = input("Choice: ").strip()
        except EOFError:
            return

        if choice == "1":
            p1_default, p2_default = session.store.get_players()
            p1 = _ask_player("Player 1", p1_default)
            p2 = _ask_player("Player 2", p2_default)
            session.start(p1, p2)
            if run_game(session) == "quit":
                return
            continue

        if choice == "2":
            print()
            show_history(session.store)
            continue

        if choice == "3":
            confirm = input("Reset scores and history (names/colours are kept)? [y/N]: ")
            if confirm.strip().lower() in {"y", "yes"}:
                session.store.reset_scores()
                session.leave()
                print("Progress reset.")
            continue

        if choice in {"4", "q", "quit"}:
            return

        print("\nInvalid choice.\n")
