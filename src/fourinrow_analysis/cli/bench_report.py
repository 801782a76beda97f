from __future__ import annotations

import argparse
from pathlib import Path

from ..io.load_history import load_bench, load_latest_from_dir
from ..metrics.summarize import bench_by_candidates, bench_summary
from ..plots.chart import plot_time_hist, plot_time_vs_candidates


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="fourinrow_analysis bench",
        description="Summarize advisor_bench_*.csv from the self-play benchmark.",
    )
    ap.add_argument("--csv", type=str, default=None, help="Path to a benchmark CSV. If omitted, uses latest in --results-dir.")
    ap.add_argument("--results-dir", type=str, default="data/bench", help="Directory containing advisor_bench_*.csv")
    ap.add_argument("--pattern", type=str, default="advisor_bench_*.csv", help="Glob pattern for selecting latest file")
    ap.add_argument("--outdir", type=str, default="figures", help="Directory for saving plots")
    ap.add_argument("--show", action="store_true", help="Show plots instead of saving")
    ap.add_argument("--no-plots", action="store_true", help="Tables only")
    return ap


def main(argv: list[str] | None = None) -> int:
    ap = build_argparser()
    args = ap.parse_args(argv)

    if args.csv:
        csv_path = Path(args.csv)
    else:
        csv_path = load_latest_from_dir(Path(args.results_dir), pattern=args.pattern)

    df = load_bench(csv_path)
    print(f"\nLoaded: {csv_path}")
    print(f"Moves: {len(df):,}")

    print("\n=== Search cost per move ===")
    print(bench_summary(df).to_string())

    if "candidates" in df.columns:
        print("\n=== time_ms by empty cells ===")
        print(bench_by_candidates(df).to_string(index=False))

    if args.no_plots:
        return 0

    outdir = Path(args.outdir)
    plot_time_hist(df, outdir, show=args.show)
    plot_time_vs_candidates(df, outdir, show=args.show)
    if not args.show:
        print(f"\nSaved figures to: {outdir.resolve()}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
