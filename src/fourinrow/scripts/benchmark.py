from __future__ import annotations

import argparse
import csv
import logging
import random
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Tuple

from fourinrow.ai.advisor import MoveAdvisor
from fourinrow.config import SEARCH_DEPTH
from fourinrow.game.engine import GameEngine
from fourinrow.game.state import PlayerInfo
from fourinrow.types import Player

logger = logging.getLogger(__name__)

BENCH_COLUMNS = [
    "game", "ply", "player",
    "row", "col", "eval",
    "nodes", "cutoffs", "candidates", "time_ms",
    "outcome",
]


@dataclass
class GameLog:
    outcome: str = "D"
    rows: List[Dict[str, object]] = field(default_factory=list)


def play_headless(advisor_a: MoveAdvisor, advisor_b: MoveAdvisor, seed: int, opening_moves: int = 2) -> GameLog:
    """
    One advisor-vs-advisor game. A few random opening stones keep games apart,
    since the advisor itself is deterministic.
    """
    rng = random.Random(seed)
    engine = GameEngine(rng=rng)
    engine.new_game(PlayerInfo("A", "red"), PlayerInfo("B", "yellow"))

    log = GameLog()
    result = None

    for _ in range(opening_moves):
        r, c = rng.choice(engine.board_copy().empty_cells())
        result = engine.apply_move(r, c)

    while not engine.is_over():
        snap = engine.snapshot()
        advisor = advisor_a if snap.current is Player.A else advisor_b
        best = advisor.find_best_move(snap, snap.current)
        if best is None:
            break
        info = advisor.last_info
        log.rows.append({
            "ply": snap.move_count + 1,
            "player": snap.current.name,
            "row": best.row,
            "col": best.col,
            "eval": best.score,
            "nodes": info.get("nodes", 0),
            "cutoffs": info.get("cutoffs", 0),
            "candidates": info.get("candidates", 0),
            "time_ms": info.get("time_ms", 0),
        })
        result = engine.apply_move(best.row, best.col)

    if result is not None and result.winner is not None:
        log.outcome = result.winner.name
    return log


def benchmark(num_games: int = 4, depth: int = SEARCH_DEPTH, seed: int = 1234) -> Tuple[Dict[str, int], List[Dict[str, object]]]:
    wins = {"A": 0, "B": 0, "D": 0}
    rows: List[Dict[str, object]] = []

    for i in range(num_games):
        log = play_headless(MoveAdvisor(depth=depth), MoveAdvisor(depth=depth), seed=seed + i)
        wins[log.outcome] += 1
        for row in log.rows:
            row["game"] = i + 1
            row["outcome"] = log.outcome
            rows.append(row)
        print(f"Game {i + 1}/{num_games} complete ({log.outcome})")

    return wins, rows


def write_csv(rows: List[Dict[str, object]], out_dir: Path) -> Path:
    out_dir.mkdir(parents=True, exist_ok=True)
    ts = time.strftime("%Y%m%d_%H%M%S")
    out_path = out_dir / f"advisor_bench_{ts}.csv"
    with open(out_path, "w", newline="") as f:
        w = csv.DictWriter(f, fieldnames=BENCH_COLUMNS)
        w.writeheader()
        for row in rows:
            w.writerow({k: row.get(k) for k in BENCH_COLUMNS})
    return out_path


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Advisor self-play benchmark.")
    ap.add_argument("--games", type=int, default=4)
    ap.add_argument("--depth", type=int, default=SEARCH_DEPTH)
    ap.add_argument("--seed", type=int, default=1234)
    ap.add_argument("--out-dir", type=str, default="data/bench")
    args = ap.parse_args(argv)

    wins, rows = benchmark(args.games, args.depth, args.seed)

    ms = sorted(int(r["time_ms"]) for r in rows)
    print("\n=== BENCHMARK RESULTS ===")
    print(f"A wins:    {wins['A']}")
    print(f"B wins:    {wins['B']}")
    print(f"Draws:     {wins['D']}")
    if ms:
        print(f"Moves:     {len(ms)}")
        print(f"ms/move:   median={ms[len(ms) // 2]}  max={ms[-1]}")

    out_path = write_csv(rows, Path(args.out_dir))
    print(f"Wrote CSV: {out_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
