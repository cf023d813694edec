import math

import pandas as pd
import pytest

from nrow.scripts.bench import make_positions, run_bench, write_csv
from nrow_analysis.__main__ import main as analysis_main
from nrow_analysis.io.load_results import LoadSpec, load_latest_from_dir, load_results
from nrow_analysis.metrics.summarize import agreement_rate, depth_table, numeric_summary, pruning_table
from nrow_analysis.plots.chart import plot_nodes_by_depth, plot_time_hist


@pytest.fixture
def results_csv(tmp_path):
    rows = run_bench(make_positions(3, 3, 3, plies=2, count=3, seed=4), 3, [2, 3])
    return write_csv(rows, tmp_path / "results")


def _frame():
    return pd.DataFrame(
        {
            "position": [0, 0, 0, 0, 1, 1],
            "depth": [2, 2, 3, 3, 2, 2],
            "pruned": [True, False, True, False, True, False],
            "score": [5, 5, 7, 7, -3, -3],
            "nodes": [10, 40, 30, 120, 20, 40],
            "cutoffs": [2, 0, 6, 0, 3, 0],
            "time_ms": [1.0, 2.0, 3.0, 9.0, 1.5, 2.5],
        }
    )


def test_load_results(results_csv):
    df = load_results(LoadSpec(csv_path=results_csv))
    assert len(df) == 3 * 2 * 2
    assert df["pruned"].dtype == bool
    assert set(df["depth"]) == {2, 3}


def test_load_errors(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_results(LoadSpec(csv_path=tmp_path / "missing.csv"))

    bad = tmp_path / "bad.csv"
    bad.write_text("a,b\n1,2\n")
    with pytest.raises(ValueError):
        load_results(LoadSpec(csv_path=bad))

    with pytest.raises(FileNotFoundError):
        load_latest_from_dir(tmp_path)


def test_load_latest(results_csv):
    assert load_latest_from_dir(results_csv.parent) == results_csv


def test_depth_table():
    table = depth_table(_frame())
    assert list(table["depth"]) == [2, 2, 3, 3]
    row = table[(table["depth"] == 2) & (table["pruned"])].iloc[0]
    assert row["runs"] == 2
    assert row["nodes_mean"] == 15


def test_pruning_table():
    table = pruning_table(_frame())
    d2 = table[table["depth"] == 2].iloc[0]
    assert d2["nodes_pruned"] == 15
    assert d2["nodes_full"] == 40
    assert d2["saved"] == pytest.approx(1 - 15 / 40)


def test_agreement_rate():
    df = _frame()
    assert agreement_rate(df) == 1.0

    df.loc[1, "score"] = 6
    assert agreement_rate(df) == pytest.approx(2 / 3)

    assert math.isnan(agreement_rate(df[df["pruned"]]))


def test_agreement_on_real_results(results_csv):
    df = load_results(LoadSpec(csv_path=results_csv))
    assert agreement_rate(df) == 1.0


def test_numeric_summary():
    desc = numeric_summary(_frame())
    assert "nodes" in desc.index


def test_plots(tmp_path):
    df = _frame()
    assert plot_nodes_by_depth(df, tmp_path, show=False).exists()
    assert plot_time_hist(df, tmp_path, show=False).exists()
    assert plot_time_hist(df.drop(columns=["time_ms"]), tmp_path, show=False) is None


def test_cli(results_csv, tmp_path, capsys):
    rc = analysis_main(["analyze", "--csv", str(results_csv), "--outdir", str(tmp_path / "figs")])
    assert rc == 0
    out = capsys.readouterr().out
    assert "Pruning savings" in out
    assert (tmp_path / "figs" / "nodes_by_depth.png").exists()


def test_cli_unknown_command(capsys):
    assert analysis_main(["frobnicate"]) == 2
