"""
Simple Example - Quick Start Guide
Run this to see the simulated annealing solver in action!
"""

from data_generator import generate_random_cities
from random_source import RandomSource
from simulated_annealing import SimulatedAnnealingSolver
from visualization import TSPVisualizer


def simple_example(n_cities: int = 20, seed: int = 0):
    """Anneal a small random instance and plot the result."""
    print("\n" + "=" * 60)
    print("TSP SOLVER - SIMULATED ANNEALING EXAMPLE")
    print("=" * 60 + "\n")

    print(f"Step 1: Generating {n_cities} random cities...")
    cities = generate_random_cities(n_cities, width=100, height=100, seed=seed)
    print(f"✓ Created {len(cities)} cities\n")

    print("Step 2: Annealing (T0=10000, rate=0.9999, floor=1e-5)...")
    solver = SimulatedAnnealingSolver(cities, rng=RandomSource(seed))
    result = solver.run(verbose=True)

    improvement = (result.initial_cost - result.cost) / result.initial_cost * 100

    print("\n" + "=" * 60)
    print("RESULTS")
    print("=" * 60)
    print(f"Initial Distance: {result.initial_cost:.2f}")
    print(f"Final Distance:   {result.cost:.2f}")
    print(f"Improvement:      {improvement:.2f}%")
    print(f"Iterations:       {result.iterations}")
    print(f"Tour:             {result.tour}")
    print("=" * 60 + "\n")

    visualizer = TSPVisualizer()
    visualizer.plot_tour(result.best_tour, title="Simulated Annealing Solution")
    visualizer.plot_convergence(solver.best_distance_history, interval=solver.history_interval,
                                title="Optimization Progress")


if __name__ == "__main__":
    simple_example()
