from __future__ import annotations

import csv
import json
import logging
import time
from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from fourinrow.config import DEFAULT_PLAYERS, DEFAULT_STORE_PATH, HISTORY_LIMIT
from fourinrow.errors import StoreError
from fourinrow.game.state import PlayerInfo

logger = logging.getLogger(__name__)

KEY_PLAYERS = "players"
KEY_HISTORY = "history"
KEY_CURRENT_SCORE = "current_score"

HISTORY_COLUMNS = [
    "id", "date",
    "player1Name", "player2Name",
    "player1Color", "player2Color",
    "winner",
]


@dataclass
class Score:
    player1: int = 0
    player2: int = 0


@dataclass(frozen=True)
class PlayerStats:
    wins: int = 0
    losses: int = 0
    draws: int = 0

    @property
    def total(self) -> int:
        return self.wins + self.losses + self.draws


def default_players() -> Tuple[PlayerInfo, PlayerInfo]:
    (n1, c1), (n2, c2) = DEFAULT_PLAYERS
    return PlayerInfo(n1, c1), PlayerInfo(n2, c2)


class MemoryStore:
    """
    Key-value store for player settings, match history and the running score.
    Values live in a dict; JsonStore persists the same dict to disk.
    """

    def __init__(self, history_limit: int = HISTORY_LIMIT) -> None:
        self.history_limit = history_limit
        self._data: Dict[str, Any] = {}
        self._last_id = 0

    # Raw access; subclasses override load/flush

    def _get(self, key: str) -> Any:
        return self._data.get(key)

    def _set(self, key: str, value: Any) -> None:
        self._data[key] = value
        self._flush()

    def _remove(self, *keys: str) -> None:
        for k in keys:
            self._data.pop(k, None)
        self._flush()

    def _flush(self) -> None:
        pass

    # Players

    def get_players(self) -> Tuple[PlayerInfo, PlayerInfo]:
        data = self._get(KEY_PLAYERS)
        if not data:
            return default_players()
        try:
            return PlayerInfo(**data["player1"]), PlayerInfo(**data["player2"])
        except (KeyError, TypeError, ValueError) as e:
            raise StoreError(f"Malformed player settings: {e}") from e

    def save_players(self, player1: PlayerInfo, player2: PlayerInfo) -> None:
        self._set(KEY_PLAYERS, {"player1": asdict(player1), "player2": asdict(player2)})

    # History (newest first)

    def get_history(self) -> List[Dict[str, Any]]:
        return [dict(m) for m in (self._get(KEY_HISTORY) or [])]

    def add_match(
        self,
        player1: PlayerInfo,
        player2: PlayerInfo,
        winner: Optional[int],
    ) -> Dict[str, Any]:
        history = self.get_history()
        record = {
            "id": self._next_id(),
            "date": datetime.now(timezone.utc).isoformat(),
            "player1Name": player1.name,
            "player2Name": player2.name,
            "player1Color": player1.color,
            "player2Color": player2.color,
            "winner": int(winner) if winner is not None else None,
        }
        history.insert(0, record)
        del history[self.history_limit:]
        self._set(KEY_HISTORY, history)
        logger.debug("recorded match %s (history size %d)", record["id"], len(history))
        return record

    def _next_id(self) -> int:
        # Millisecond timestamp, bumped so ids stay unique within one millisecond
        now = int(time.time() * 1000)
        self._last_id = max(now, self._last_id + 1)
        return self._last_id

    # Running score

    def get_current_score(self) -> Score:
        data = self._get(KEY_CURRENT_SCORE)
        if not data:
            return Score()
        return Score(int(data.get("player1", 0)), int(data.get("player2", 0)))

    def save_current_score(self, score: Score) -> None:
        self._set(KEY_CURRENT_SCORE, asdict(score))

    def reset_current_score(self) -> None:
        self._remove(KEY_CURRENT_SCORE)

    # Resets

    def reset_all(self) -> None:
        self._remove(KEY_PLAYERS, KEY_HISTORY, KEY_CURRENT_SCORE)

    def reset_scores(self) -> None:
        """Drop history and running score, keep names and colours."""
        self._remove(KEY_HISTORY, KEY_CURRENT_SCORE)

    # Stats / export

    def get_player_stats(self, player_name: str) -> PlayerStats:
        wins = losses = draws = 0
        for match in self.get_history():
            if match["player1Name"] == player_name:
                mine, theirs = 1, 2
            elif match["player2Name"] == player_name:
                mine, theirs = 2, 1
            else:
                continue
            if match["winner"] == mine:
                wins += 1
            elif match["winner"] == theirs:
                losses += 1
            else:
                draws += 1
        return PlayerStats(wins=wins, losses=losses, draws=draws)

    def export_history_csv(self, path: Path) -> Path:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", newline="") as f:
            w = csv.DictWriter(f, fieldnames=HISTORY_COLUMNS)
            w.writeheader()
            for match in self.get_history():
                w.writerow({k: match.get(k) for k in HISTORY_COLUMNS})
        return path


class JsonStore(MemoryStore):
    """MemoryStore persisted to a single JSON file, rewritten on every change."""

    def __init__(self, path: Path = DEFAULT_STORE_PATH, history_limit: int = HISTORY_LIMIT) -> None:
        super().__init__(history_limit=history_limit)
        self.path = Path(path)
        self._data = self._load()

    def _load(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise StoreError(f"Corrupt store file {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise StoreError(f"Corrupt store file {self.path}: expected an object")
        return data

    def _flush(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        with open(tmp, "w", encoding="utf-8") as f:
            json.dump(self._data, f, indent=2)
        tmp.replace(self.path)
