import os
import time
from typing import List, Optional

import numpy as np
import pandas as pd
from tqdm import tqdm

import config
from data_generator import instance_name, load_solutions, load_tsp_file, lookup_optimum
from random_source import RandomSource
from simulated_annealing import SimulatedAnnealingSolver


# =============================================================
# REPEATED RUNS ON ONE INSTANCE
# =============================================================
def benchmark_instance(
    path: str,
    runs: int = config.RUNS_PER_DATASET,
    optimum: Optional[float] = None,
    seed: Optional[int] = config.BENCHMARK_SEED,
    max_iterations: Optional[int] = None,
    time_limit: Optional[float] = None,
    solver_params: Optional[dict] = None
) -> dict:
    """
    Anneal one instance ``runs`` times from independent seeds and
    summarize distance and time.
    """
    cities = load_tsp_file(path)
    sources = RandomSource(seed).spawn(runs)
    solver_params = solver_params or {}

    distances = []
    times = []

    for rng in tqdm(sources, desc=instance_name(path)):
        solver = SimulatedAnnealingSolver(cities, rng=rng, **solver_params)
        start = time.time()
        tour, _ = solver.solve(max_iterations=max_iterations, time_limit=time_limit)
        times.append(time.time() - start)
        distances.append(tour.get_total_distance())

    best_dist = float(np.min(distances))
    row = {
        "dataset": os.path.basename(path),
        "n_cities": len(cities),
        "runs": runs,
        "best_dist": best_dist,
        "avg_dist": float(np.mean(distances)),
        "std_dist": float(np.std(distances)),
        "avg_time": float(np.mean(times)),
        "optimum": optimum,
        "best_gap": None,
        "avg_gap": None,
    }

    if optimum:
        row["best_gap"] = (best_dist - optimum) / optimum * 100
        row["avg_gap"] = (row["avg_dist"] - optimum) / optimum * 100

    return row


# =============================================================
# MAIN
# =============================================================
def run_benchmark_all(
    dataset_dir: str = config.DATASET_DIR,
    runs: int = config.RUNS_PER_DATASET,
    seed: Optional[int] = config.BENCHMARK_SEED,
    output_dir: str = config.OUTPUT_DIR,
    max_iterations: Optional[int] = None,
    time_limit: Optional[float] = None,
    solver_params: Optional[dict] = None
) -> pd.DataFrame:
    tsp_files = sorted(
        f for f in os.listdir(dataset_dir)
        if f.endswith(config.TSP_EXTENSION)
    )
    solutions = load_solutions(os.path.join(dataset_dir, config.SOLUTIONS_FILE))

    rows: List[dict] = []
    for fname in tsp_files:
        path = os.path.join(dataset_dir, fname)
        try:
            rows.append(benchmark_instance(
                path,
                runs=runs,
                optimum=lookup_optimum(solutions, fname),
                seed=seed,
                max_iterations=max_iterations,
                time_limit=time_limit,
                solver_params=solver_params
            ))
        except ValueError as e:
            print(f"Error loading: {path} ({e})")

    df = pd.DataFrame(rows)

    os.makedirs(output_dir, exist_ok=True)
    out_path = os.path.join(output_dir, "sa_benchmarks.csv")
    df.to_csv(out_path, index=False)

    print("\n=== Simulated Annealing Benchmark ===")
    if not df.empty:
        print(df[["dataset", "best_dist", "avg_dist", "std_dist", "avg_time", "best_gap"]].to_string(index=False))
    print(f"\nSaved: {out_path}")

    return df


if __name__ == "__main__":
    run_benchmark_all()
