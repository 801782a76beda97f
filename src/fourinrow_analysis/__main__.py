from __future__ import annotations

import sys

from .cli.analyze_history import main as history_main
from .cli.bench_report import main as bench_main


def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)

    # Default behavior: analyze the match history if no subcommand
    if not argv:
        return history_main([])

    cmd = argv[0].lower()
    rest = argv[1:]

    if cmd in {"history", "analyze"}:
        return history_main(rest)

    if cmd in {"bench", "benchmark"}:
        return bench_main(rest)

    if cmd.startswith("-"):
        return history_main(argv)

    print("Usage:")
    print("  python -m fourinrow_analysis history [--history store.json] [--no-plots]")
    print("  python -m fourinrow_analysis bench [--csv ...] [--outdir figures]")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
