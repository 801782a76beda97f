from __future__ import annotations

from dataclasses import dataclass

import pandas as pd


@dataclass(frozen=True)
class SummaryConfig:
    top_n: int = 20
    min_games: int = 0


def _require_cols(df: pd.DataFrame, cols: list[str]) -> None:
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}. Present: {list(df.columns)}")


def player_results(df: pd.DataFrame) -> pd.DataFrame:
    """
    One row per (match, player) with that player's result: "W", "L" or "D".
    """
    _require_cols(df, ["player1Name", "player2Name", "winner"])

    def side(name_col: str, me: int, them: int) -> pd.DataFrame:
        out = pd.DataFrame({"name": df[name_col].astype(str)})
        out["result"] = "D"
        out.loc[df["winner"].eq(me).fillna(False).to_numpy(dtype=bool), "result"] = "W"
        out.loc[df["winner"].eq(them).fillna(False).to_numpy(dtype=bool), "result"] = "L"
        if "date" in df.columns:
            out["date"] = df["date"]
        return out

    return pd.concat([side("player1Name", 1, 2), side("player2Name", 2, 1)], ignore_index=True)


def standings(df: pd.DataFrame, cfg: SummaryConfig = SummaryConfig()) -> pd.DataFrame:
    cols = ["rk", "name", "games", "wins", "draws", "losses", "win_rate", "points"]
    if df.empty:
        return pd.DataFrame(columns=cols)

    per = player_results(df)
    table = (
        per.groupby("name")["result"]
        .value_counts()
        .unstack(fill_value=0)
        .reindex(columns=["W", "D", "L"], fill_value=0)
        .rename(columns={"W": "wins", "D": "draws", "L": "losses"})
    )
    table["games"] = table[["wins", "draws", "losses"]].sum(axis=1)
    table["win_rate"] = (table["wins"] / table["games"]).round(3)
    table["points"] = table["wins"] + 0.5 * table["draws"]

    if cfg.min_games > 0:
        table = table[table["games"] >= cfg.min_games]

    table = table.reset_index().sort_values(["points", "wins", "name"], ascending=[False, False, True])
    table = table.head(cfg.top_n).reset_index(drop=True)
    table.insert(0, "rk", range(1, len(table) + 1))
    return table[cols]


def head_to_head(df: pd.DataFrame) -> pd.DataFrame:
    """Wins of the row player against the column player."""
    if df.empty:
        return pd.DataFrame()

    per = player_results(df)
    per["opponent"] = pd.concat(
        [df["player2Name"].astype(str), df["player1Name"].astype(str)], ignore_index=True
    ).to_numpy()

    wins = per[per["result"] == "W"]
    if wins.empty:
        return pd.DataFrame()
    return pd.crosstab(wins["name"], wins["opponent"])


def results_over_time(df: pd.DataFrame, freq: str = "D") -> pd.DataFrame:
    """Count of player-1 wins, player-2 wins and draws per period."""
    _require_cols(df, ["date", "winner"])
    if df.empty:
        return pd.DataFrame(columns=["player1", "player2", "draw"])

    label = df["winner"].map({1: "player1", 2: "player2"}).fillna("draw")
    out = (
        pd.DataFrame({"date": df["date"], "label": label})
        .dropna(subset=["date"])
        .groupby([pd.Grouper(key="date", freq=freq), "label"])
        .size()
        .unstack(fill_value=0)
        .reindex(columns=["player1", "player2", "draw"], fill_value=0)
    )
    return out


def bench_summary(df: pd.DataFrame) -> pd.DataFrame:
    """Search cost per move: time, nodes and cutoffs."""
    _require_cols(df, ["time_ms", "nodes", "cutoffs"])

    overall = df[["time_ms", "nodes", "cutoffs"]].describe(percentiles=[0.5, 0.9, 0.99]).T
    overall.index.name = "metric"
    return overall


def bench_by_candidates(df: pd.DataFrame, bucket: int = 6) -> pd.DataFrame:
    _require_cols(df, ["time_ms", "candidates"])
    out = df.copy()
    out["empties"] = (out["candidates"] // bucket) * bucket
    return (
        out.groupby("empties")["time_ms"]
        .agg(["count", "median", "max"])
        .sort_index(ascending=False)
        .reset_index()
    )
