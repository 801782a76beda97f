from __future__ import annotations

import argparse
import logging
import random
from pathlib import Path

from fourinrow.ai.advisor import MoveAdvisor
from fourinrow.ai.hints import HintService
from fourinrow.config import DEFAULT_STORE_PATH, SEARCH_DEPTH
from fourinrow.errors import StoreError
from fourinrow.game.engine import GameEngine
from fourinrow.game.session import GameSession
from fourinrow.storage.store import JsonStore
from fourinrow.ui.menu import run_menu


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="fourinrow", description="Four in a row on a 6x6 board.")
    ap.add_argument("--store", type=str, default=str(DEFAULT_STORE_PATH), help="Path of the JSON store file")
    ap.add_argument("--seed", type=int, default=None, help="Seed for the starting-player draw")
    ap.add_argument("--depth", type=int, default=SEARCH_DEPTH, help="Advisor search depth in plies")
    ap.add_argument("-v", "--verbose", action="count", default=0, help="-v for info logs, -vv for debug")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)

    level = logging.WARNING
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        store = JsonStore(Path(args.store))
    except StoreError as e:
        print(e)
        return 1

    rng = random.Random(args.seed)
    with HintService(MoveAdvisor(depth=args.depth)) as hints:
        session = GameSession(GameEngine(rng=rng), store, hints=hints, rng=rng)
        run_menu(session)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
