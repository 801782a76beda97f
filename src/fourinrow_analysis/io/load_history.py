from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

import pandas as pd


HISTORY_COLS = [
    "id", "date",
    "player1Name", "player2Name",
    "player1Color", "player2Color",
    "winner",
]

BENCH_NUMERIC = [
    "game", "ply",
    "row", "col", "eval",
    "nodes", "cutoffs", "candidates", "time_ms",
]


@dataclass(frozen=True)
class LoadSpec:
    path: Path
    expected_cols: tuple[str, ...] = tuple(HISTORY_COLS)


def _coerce_numeric(df: pd.DataFrame, cols: Iterable[str]) -> pd.DataFrame:
    out = df.copy()
    for c in cols:
        if c in out.columns:
            out[c] = pd.to_numeric(out[c], errors="coerce")
    return out


def _finish_history(df: pd.DataFrame) -> pd.DataFrame:
    df.columns = [str(c).strip() for c in df.columns]

    missing = [c for c in ("player1Name", "player2Name", "winner") if c not in df.columns]
    if missing:
        raise ValueError(f"History missing required columns {missing}. Columns: {list(df.columns)}")

    df = _coerce_numeric(df, ["id", "winner"])
    df["winner"] = df["winner"].astype("Int64")
    if "date" in df.columns:
        df["date"] = pd.to_datetime(df["date"], errors="coerce", utc=True)

    for c in ("player1Name", "player2Name"):
        df[c] = df[c].astype(str)

    return df.reset_index(drop=True)


def history_frame(records: list[dict]) -> pd.DataFrame:
    if not records:
        return pd.DataFrame(columns=HISTORY_COLS)
    return _finish_history(pd.DataFrame.from_records(records))


def load_history(spec: LoadSpec) -> pd.DataFrame:
    """
    Match history from either the game's JSON store or an exported CSV.
    Rows stay newest-first, as the store keeps them.
    """
    if not spec.path.exists():
        raise FileNotFoundError(f"History not found: {spec.path}")

    if spec.path.suffix.lower() == ".json":
        with open(spec.path, "r", encoding="utf-8") as f:
            data = json.load(f)
        return history_frame(list(data.get("history") or []))

    df = pd.read_csv(spec.path)
    if df.empty:
        return pd.DataFrame(columns=HISTORY_COLS)
    return _finish_history(df)


def load_bench(csv_path: Path) -> pd.DataFrame:
    if not csv_path.exists():
        raise FileNotFoundError(f"CSV not found: {csv_path}")

    df = pd.read_csv(csv_path)
    df.columns = [c.strip() for c in df.columns]
    if "time_ms" not in df.columns:
        raise ValueError(f"CSV missing required column 'time_ms'. Columns: {list(df.columns)}")
    return _coerce_numeric(df, BENCH_NUMERIC)


def load_latest_from_dir(results_dir: Path, pattern: str = "advisor_bench_*.csv") -> Path:
    if not results_dir.exists():
        raise FileNotFoundError(f"Results directory not found: {results_dir}")

    files = sorted(results_dir.glob(pattern))
    if not files:
        raise FileNotFoundError(f"No files matching {pattern} in {results_dir}")

    # Filenames include timestamp, lexicographic sort works
    return files[-1]
