from __future__ import annotations

import argparse
from pathlib import Path

from ..io.load_history import LoadSpec, load_history
from ..metrics.summarize import SummaryConfig, head_to_head, results_over_time, standings
from ..plots.chart import plot_results_over_time, plot_standings_bar


def build_argparser() -> argparse.ArgumentParser:
    from fourinrow.config import DEFAULT_STORE_PATH

    ap = argparse.ArgumentParser(description="Analyze four-in-a-row match history.")
    ap.add_argument("--history", type=str, default=str(DEFAULT_STORE_PATH), help="Store JSON or exported history CSV")
    ap.add_argument("--outdir", type=str, default="figures", help="Directory for saving plots")
    ap.add_argument("--show", action="store_true", help="Show plots instead of saving")
    ap.add_argument("--top", type=int, default=20, help="Top N players in the standings")
    ap.add_argument("--min-games", type=int, default=0, help="Hide players with fewer games")
    ap.add_argument("--freq", type=str, default="D", help="Period for the results-over-time chart (pandas offset alias)")
    ap.add_argument("--no-plots", action="store_true", help="Tables only")
    return ap


def main(argv: list[str] | None = None) -> int:
    ap = build_argparser()
    args = ap.parse_args(argv)

    path = Path(args.history).expanduser()
    df = load_history(LoadSpec(path=path))

    print(f"\nLoaded: {path}")
    print(f"Matches: {len(df):,}")
    if df.empty:
        print("Nothing to analyze yet.")
        return 0

    cfg = SummaryConfig(top_n=args.top, min_games=args.min_games)
    table = standings(df, cfg)
    print("\n=== Standings ===")
    print(table.to_string(index=False))

    h2h = head_to_head(df)
    if not h2h.empty:
        print("\n=== Head to head (row beat column) ===")
        print(h2h.to_string())

    if args.no_plots:
        return 0

    outdir = Path(args.outdir)
    created = [
        plot_standings_bar(table, outdir, show=args.show),
        plot_results_over_time(results_over_time(df, freq=args.freq), outdir, show=args.show),
    ]
    if not args.show:
        print(f"\nSaved {sum(p is not None for p in created)} figures to: {outdir.resolve()}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
