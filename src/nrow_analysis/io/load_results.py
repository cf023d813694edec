from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

import pandas as pd


DEFAULT_EXPECTED_COLS = [
    "position", "board",
    "rows", "cols", "win_length", "depth", "pruned",
    "move_row", "move_col", "score",
    "nodes", "cutoffs", "time_ms",
]

NUMERIC_COLS = [
    "position",
    "rows", "cols", "win_length", "depth", "pruned",
    "move_row", "move_col", "score",
    "nodes", "cutoffs", "time_ms",
]


@dataclass(frozen=True)
class LoadSpec:
    csv_path: Path
    expected_cols: tuple[str, ...] = tuple(DEFAULT_EXPECTED_COLS)


def _coerce_numeric(df: pd.DataFrame, cols: Iterable[str]) -> pd.DataFrame:
    out = df.copy()
    for c in cols:
        if c in out.columns:
            out[c] = pd.to_numeric(out[c], errors="coerce")
    return out


def load_results(spec: LoadSpec) -> pd.DataFrame:
    if not spec.csv_path.exists():
        raise FileNotFoundError(f"CSV not found: {spec.csv_path}")

    df = pd.read_csv(spec.csv_path)
    df.columns = [c.strip() for c in df.columns]

    missing = [c for c in ("depth", "pruned", "nodes") if c not in df.columns]
    if missing:
        raise ValueError(f"CSV missing required columns {missing}. Columns: {list(df.columns)}")

    df = _coerce_numeric(df, NUMERIC_COLS)
    df = df.dropna(subset=["depth", "pruned", "nodes"]).copy()
    df["pruned"] = df["pruned"].astype(int).astype(bool)

    return df


def load_latest_from_dir(results_dir: Path, pattern: str = "bench_results_*.csv") -> Path:
    if not results_dir.exists():
        raise FileNotFoundError(f"Results directory not found: {results_dir}")

    files = sorted(results_dir.glob(pattern))
    if not files:
        raise FileNotFoundError(f"No files matching {pattern} in {results_dir}")

    # Filenames carry a timestamp, lexicographic sort works
    return files[-1]
