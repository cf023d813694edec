from __future__ import annotations

import pandas as pd


def _require_cols(df: pd.DataFrame, cols: list[str]) -> None:
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}. Present: {list(df.columns)}")


def depth_table(df: pd.DataFrame) -> pd.DataFrame:
    """Search cost per depth, split by pruned / unpruned."""
    _require_cols(df, ["depth", "pruned", "nodes"])

    agg: dict[str, tuple[str, str]] = {
        "runs": ("nodes", "count"),
        "nodes_mean": ("nodes", "mean"),
        "nodes_median": ("nodes", "median"),
    }
    if "cutoffs" in df.columns:
        agg["cutoffs_mean"] = ("cutoffs", "mean")
    if "time_ms" in df.columns:
        agg["time_ms_mean"] = ("time_ms", "mean")
        agg["time_ms_median"] = ("time_ms", "median")

    out = df.groupby(["depth", "pruned"]).agg(**agg).reset_index()
    return out.sort_values(["depth", "pruned"]).reset_index(drop=True)


def pruning_table(df: pd.DataFrame) -> pd.DataFrame:
    """
    Mean nodes with and without alpha-beta per depth, and the share of nodes pruning saved.
    """
    _require_cols(df, ["depth", "pruned", "nodes"])

    pivot = df.pivot_table(index="depth", columns="pruned", values="nodes", aggfunc="mean")
    pivot = pivot.rename(columns={True: "nodes_pruned", False: "nodes_full"})
    for c in ("nodes_pruned", "nodes_full"):
        if c not in pivot.columns:
            pivot[c] = float("nan")

    out = pivot[["nodes_pruned", "nodes_full"]].reset_index()
    out.columns.name = None
    out["saved"] = 1.0 - out["nodes_pruned"] / out["nodes_full"]
    return out


def agreement_rate(df: pd.DataFrame) -> float:
    """
    Share of (position, depth) pairs where pruned and unpruned search agree on
    the best move's score. Should be 1.0: pruning never changes the result.
    """
    _require_cols(df, ["position", "depth", "pruned", "score"])

    pivot = df.pivot_table(index=["position", "depth"], columns="pruned", values="score", aggfunc="first")
    pivot = pivot.rename(columns={True: "pruned", False: "full"})
    if "pruned" not in pivot.columns or "full" not in pivot.columns:
        return float("nan")

    both = pivot.dropna(subset=["pruned", "full"])
    if both.empty:
        return float("nan")
    return float((both["pruned"] == both["full"]).mean())


def numeric_summary(df: pd.DataFrame) -> pd.DataFrame:
    num = df.select_dtypes(include="number")
    if num.empty:
        return pd.DataFrame()
    return num.describe(percentiles=[0.05, 0.25, 0.5, 0.75, 0.95]).T
