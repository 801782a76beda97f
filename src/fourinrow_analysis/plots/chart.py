from __future__ import annotations

from pathlib import Path

import pandas as pd
import matplotlib.pyplot as plt


def _ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def _finish(fig, outdir: Path, filename: str, *, show: bool) -> Path | None:
    if show:
        plt.show()
        return None
    _ensure_dir(outdir)
    out = outdir / filename
    fig.savefig(out, dpi=200, bbox_inches="tight")
    plt.close(fig)
    return out


def plot_standings_bar(table: pd.DataFrame, outdir: Path, *, show: bool) -> Path | None:
    """Stacked W/D/L bars, one per player, in standings order."""
    if table.empty or "name" not in table.columns:
        return None

    fig = plt.figure(figsize=(10, 5))
    names = table["name"].astype(str)
    bottom = pd.Series(0, index=table.index, dtype=float)
    for col, colour in (("wins", "tab:green"), ("draws", "tab:gray"), ("losses", "tab:red")):
        vals = table[col].astype(float)
        plt.bar(names, vals, bottom=bottom, label=col, color=colour)
        bottom = bottom + vals
    plt.title("Results per player")
    plt.xlabel("player")
    plt.ylabel("games")
    plt.xticks(rotation=45, ha="right")
    plt.legend()

    return _finish(fig, outdir, "standings.png", show=show)


def plot_results_over_time(counts: pd.DataFrame, outdir: Path, *, show: bool) -> Path | None:
    if counts.empty:
        return None

    fig = plt.figure()
    for col in counts.columns:
        plt.plot(counts.index, counts[col], marker="o", label=col)
    plt.title("Results over time")
    plt.xlabel("date")
    plt.ylabel("matches")
    plt.legend()
    fig.autofmt_xdate()

    return _finish(fig, outdir, "results_over_time.png", show=show)


def plot_time_hist(df: pd.DataFrame, outdir: Path, *, show: bool) -> Path | None:
    if "time_ms" not in df.columns or not pd.api.types.is_numeric_dtype(df["time_ms"]):
        return None

    fig = plt.figure()
    plt.hist(df["time_ms"].dropna(), bins=30)
    plt.title("Advisor time per move")
    plt.xlabel("ms")
    plt.ylabel("count")

    return _finish(fig, outdir, "hist_time_ms.png", show=show)


def plot_time_vs_candidates(df: pd.DataFrame, outdir: Path, *, show: bool) -> Path | None:
    if "time_ms" not in df.columns or "candidates" not in df.columns:
        return None

    fig = plt.figure()
    plt.scatter(df["candidates"], df["time_ms"], alpha=0.6)
    plt.title("time_ms vs empty cells")
    plt.xlabel("empty cells at the root")
    plt.ylabel("time_ms")

    return _finish(fig, outdir, "scatter_time_vs_candidates.png", show=show)
