from __future__ import annotations
from datetime import datetime
from typing import Any, Dict, Iterable, List

from fourinrow.storage.store import MemoryStore
from fourinrow.ui.colors import c, player_code, BOLD, DIM, FG_CYAN


def _date(iso: str) -> str:
    try:
        return datetime.fromisoformat(iso).astimezone().strftime("%d.%m.%Y %H:%M")
    except (TypeError, ValueError):
        return str(iso)


def format_match(match: Dict[str, Any]) -> str:
    p1 = c(match["player1Name"], player_code(match.get("player1Color", "")))
    p2 = c(match["player2Name"], player_code(match.get("player2Color", "")))
    if match["winner"] == 1:
        result = f"{match['player1Name']} wins"
    elif match["winner"] == 2:
        result = f"{match['player2Name']} wins"
    else:
        result = "Draw"
    return f"{p1} vs {p2}  {c(result, BOLD)}  {c(_date(match['date']), DIM)}"


def format_history(history: Iterable[Dict[str, Any]]) -> List[str]:
    lines = [format_match(m) for m in history]
    return lines or [c("No matches recorded yet.", DIM)]


def show_history(store: MemoryStore) -> None:
    history = store.get_history()
    print(c("MATCH HISTORY", BOLD))
    for line in format_history(history):
        print("  " + line)

    names = sorted({m["player1Name"] for m in history} | {m["player2Name"] for m in history})
    if names:
        print()
        print(c("Player stats (W-D-L)", FG_CYAN))
        for name in names:
            s = store.get_player_stats(name)
            print(f"  {name}: {s.wins}-{s.draws}-{s.losses} ({s.total} games)")
