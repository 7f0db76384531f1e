import pandas as pd
import pytest

from benchmark import benchmark_instance, run_benchmark_all


SQUARE = "NAME : square4\nNODE_COORD_SECTION\n1 0 0\n2 0 1\n3 1 1\n4 1 0\nEOF\n"
PENTAGON = "NAME : five\nNODE_COORD_SECTION\n1 0 0\n2 2 0\n3 3 2\n4 1 3\n5 -1 2\nEOF\n"


def test_benchmark_instance_stats(tmp_path):
    path = tmp_path / "square4.tsp"
    path.write_text(SQUARE)
    row = benchmark_instance(str(path), runs=3, optimum=4.0, seed=1, max_iterations=1500)
    assert row["dataset"] == "square4.tsp"
    assert row["runs"] == 3
    assert row["best_dist"] == pytest.approx(4.0)
    assert row["avg_dist"] >= row["best_dist"]
    assert row["best_gap"] == pytest.approx(0.0, abs=1e-9)


def test_run_benchmark_all_writes_csv(tmp_path):
    data = tmp_path / "data"
    data.mkdir()
    (data / "square4.tsp").write_text(SQUARE)
    (data / "five.tsp").write_text(PENTAGON)
    (data / "solutions.txt").write_text("square4 : 4\n")
    out = tmp_path / "out"

    df = run_benchmark_all(str(data), runs=2, seed=0, output_dir=str(out), max_iterations=800)

    assert sorted(df["dataset"]) == ["five.tsp", "square4.tsp"]
    assert (out / "sa_benchmarks.csv").exists()
    five = df[df["dataset"] == "five.tsp"].iloc[0]
    assert five["n_cities"] == 5
    assert pd.isna(five["best_gap"])
