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


def plot_nodes_by_depth(df: pd.DataFrame, outdir: Path, *, show: bool, log_scale: bool = True) -> Path | None:
    if not {"depth", "pruned", "nodes"} <= set(df.columns):
        return None

    means = df.groupby(["depth", "pruned"])["nodes"].mean().reset_index()

    fig = plt.figure()
    for pruned, label in ((False, "minimax"), (True, "alpha-beta")):
        part = means[means["pruned"] == pruned].sort_values("depth")
        if not part.empty:
            plt.plot(part["depth"], part["nodes"], marker="o", label=label)
    if log_scale:
        plt.yscale("log")
    plt.title("Mean nodes searched by depth")
    plt.xlabel("depth (plies)")
    plt.ylabel("nodes")
    plt.legend()

    return _finish(fig, outdir, "nodes_by_depth.png", show=show)


def plot_time_hist(df: pd.DataFrame, outdir: Path, *, show: bool) -> Path | None:
    if "time_ms" not in df.columns or not pd.api.types.is_numeric_dtype(df["time_ms"]):
        return None

    fig = plt.figure()
    plt.hist(df["time_ms"].dropna(), bins=30)
    plt.title("Histogram: time_ms")
    plt.xlabel("time per move (ms)")
    plt.ylabel("count")

    return _finish(fig, outdir, "hist_time_ms.png", show=show)
