"""
TSP Solver - Main Application
Pick a TSPLIB instance, anneal it and compare with the known optimum.
"""

import argparse
import os
import sys
from typing import Callable, List, Optional

import config
from data_generator import (
    generate_random_cities,
    instance_name,
    load_solutions,
    load_tsp_file,
    lookup_optimum,
)
from random_source import RandomSource
from simulated_annealing import SimulatedAnnealingSolver, SolveResult


def find_tsp_files(dataset_dir: str) -> List[str]:
    """All .tsp files in the dataset folder, sorted by name."""
    if not os.path.isdir(dataset_dir):
        return []
    return sorted(
        os.path.join(dataset_dir, f)
        for f in os.listdir(dataset_dir)
        if f.endswith(config.TSP_EXTENSION)
    )


def select_file(tsp_files: List[str], input_fn: Callable[[str], str] = input) -> Optional[str]:
    """Interactive selection by 1-based number; None on an invalid choice."""
    print("Available .tsp files:")
    for i, path in enumerate(tsp_files, 1):
        print(f"{i}: {path}")

    answer = input_fn("Select a file by entering its number: ").strip()
    try:
        choice = int(answer)
    except ValueError:
        return None

    if choice < 1 or choice > len(tsp_files):
        return None
    return tsp_files[choice - 1]


def print_result(result: SolveResult, optimum: Optional[float], solutions_file: str):
    print(f"Initial distance: {result.initial_cost:.2f}")
    print(f"Final distance: {result.cost:.2f}")
    print("Tour: " + " ".join(str(city_id) for city_id in result.tour))
    print(f"Iterations: {result.iterations} ({result.elapsed:.2f}s)")

    if optimum is not None:
        gap = ((result.cost - optimum) / optimum) * 100 if optimum else 0.0
        print(f"Correct Answer: {optimum:g}")
        print(f"Gap: {gap:.2f}%")
    else:
        print(f"Correct Answer: Not available in {os.path.basename(solutions_file)}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="TSP Solver - Solve the Traveling Salesman Problem with simulated annealing",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Choose an instance from dataset/ interactively
  python main.py

  # Solve a specific file with a fixed seed
  python main.py --file dataset/circle10.tsp --seed 7

  # Quick run on 40 random cities without plots
  python main.py --random 40 --no-viz --max-iterations 50000

  # Repeated runs over the whole dataset folder
  python main.py --benchmark --runs 5
        """
    )

    parser.add_argument('--file', type=str, help='Path of a .tsp file (skips the interactive prompt)')
    parser.add_argument('--dataset-dir', type=str, default=config.DATASET_DIR,
                        help=f'Folder with .tsp files and {config.SOLUTIONS_FILE} (default: {config.DATASET_DIR})')
    parser.add_argument('--random', type=int, metavar='N',
                        help='Solve N random cities instead of a file')
    parser.add_argument('--seed', type=int, default=None, help='Seed for reproducible runs')

    parser.add_argument('--initial-temperature', type=float, default=config.INITIAL_TEMPERATURE)
    parser.add_argument('--cooling-rate', type=float, default=config.COOLING_RATE)
    parser.add_argument('--temperature-floor', type=float, default=config.TEMPERATURE_FLOOR)
    parser.add_argument('--max-iterations', type=int, default=None,
                        help='Stop after this many annealing steps')
    parser.add_argument('--time-limit', type=float, default=None,
                        help='Stop after this many seconds')

    parser.add_argument('--benchmark', action='store_true',
                        help='Run the solver repeatedly on every instance of the dataset folder')
    parser.add_argument('--runs', type=int, default=config.RUNS_PER_DATASET,
                        help=f'Runs per instance in benchmark mode (default: {config.RUNS_PER_DATASET})')

    parser.add_argument('--no-viz', action='store_true', help='Disable visualizations')
    parser.add_argument('--save-plot', type=str, default=None,
                        help='Save the tour plot to this path')
    parser.add_argument('--verbose', action='store_true', help='Show annealing progress')
    return parser


def main(argv=None, input_fn: Callable[[str], str] = input) -> int:
    """Main entry point; returns the process exit status."""
    args = build_parser().parse_args(argv)

    solver_params = {
        "initial_temperature": args.initial_temperature,
        "cooling_rate": args.cooling_rate,
        "temperature_floor": args.temperature_floor,
    }

    if args.benchmark:
        from benchmark import run_benchmark_all
        seed = args.seed if args.seed is not None else config.BENCHMARK_SEED
        try:
            run_benchmark_all(args.dataset_dir, runs=args.runs, seed=seed,
                              max_iterations=args.max_iterations, time_limit=args.time_limit,
                              solver_params=solver_params)
        except FileNotFoundError as e:
            print(f"Error: {e}")
            return 1
        return 0

    solutions_file = os.path.join(args.dataset_dir, config.SOLUTIONS_FILE)

    if args.random is not None:
        print(f"\nGenerating {args.random} random cities...")
        cities = generate_random_cities(args.random, seed=args.seed)
        name = f"random{args.random}"
    else:
        path = args.file
        if path is None:
            tsp_files = find_tsp_files(args.dataset_dir)
            if not tsp_files:
                print("No .tsp files found in dataset folder.")
                return 1
            path = select_file(tsp_files, input_fn)
            if path is None:
                print("Invalid selection.")
                return 1
            print(f"You selected: {path}")

        try:
            cities = load_tsp_file(path)
        except (FileNotFoundError, ValueError) as e:
            print(f"Error: {e}")
            return 1
        name = instance_name(path)

    try:
        solver = SimulatedAnnealingSolver(
            cities,
            rng=RandomSource(args.seed),
            **solver_params
        )
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    result = solver.run(verbose=args.verbose, max_iterations=args.max_iterations,
                        time_limit=args.time_limit)

    optimum = None
    if args.random is None:
        optimum = lookup_optimum(load_solutions(solutions_file), name)
    print_result(result, optimum, solutions_file)

    if not args.no_viz or args.save_plot:
        from visualization import TSPVisualizer
        visualizer = TSPVisualizer()
        show = not args.no_viz
        visualizer.plot_tour(result.best_tour, title=f"Simulated Annealing ({name})",
                             save_path=args.save_plot, show=show)
        if show:
            visualizer.plot_convergence(solver.best_distance_history,
                                        interval=solver.history_interval,
                                        optimum=optimum)

    return 0


if __name__ == "__main__":
    sys.exit(main())
