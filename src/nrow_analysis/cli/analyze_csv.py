from __future__ import annotations

import argparse
from pathlib import Path

from ..io.load_results import LoadSpec, load_latest_from_dir, load_results
from ..metrics.summarize import agreement_rate, depth_table, numeric_summary, pruning_table
from ..plots.chart import plot_nodes_by_depth, plot_time_hist


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="nrow_analysis analyze", description="Analyze nrow search benchmark CSV results.")
    ap.add_argument("--csv", type=str, default=None, help="Path to a results CSV. If omitted, uses latest in --results-dir.")
    ap.add_argument("--results-dir", type=str, default="data/results", help="Directory containing bench_results_*.csv")
    ap.add_argument("--pattern", type=str, default="bench_results_*.csv", help="Glob pattern for selecting latest file")

    ap.add_argument("--outdir", type=str, default="figures", help="Directory for saving plots")
    ap.add_argument("--show", action="store_true", help="Show plots instead of saving")
    ap.add_argument("--no-plots", action="store_true", help="Print tables only")
    ap.add_argument("--linear", action="store_true", help="Linear y axis for the nodes plot")

    return ap


def main(argv: list[str] | None = None) -> int:
    ap = build_argparser()
    args = ap.parse_args(argv)

    if args.csv:
        csv_path = Path(args.csv)
    else:
        csv_path = load_latest_from_dir(Path(args.results_dir), pattern=args.pattern)

    df = load_results(LoadSpec(csv_path=csv_path))

    print(f"\nLoaded: {csv_path}")
    print(f"Rows: {len(df):,}  Cols: {len(df.columns)}")

    print("\n=== Cost by depth ===")
    print(depth_table(df).to_string(index=False))

    print("\n=== Pruning savings ===")
    print(pruning_table(df).to_string(index=False))

    if "position" in df.columns and "score" in df.columns:
        print(f"\nPruned/unpruned score agreement: {agreement_rate(df):.3f}")

    desc = numeric_summary(df)
    if not desc.empty:
        print("\n=== Numeric summary ===")
        print(desc.to_string())

    if not args.no_plots:
        outdir = Path(args.outdir)
        plot_nodes_by_depth(df, outdir, show=args.show, log_scale=not args.linear)
        plot_time_hist(df, outdir, show=args.show)
        if not args.show:
            print(f"\nSaved figures to: {outdir.resolve()}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
