"""
TSP Solver - Configuration
Default values shared by the solver, the command line and the benchmark.
"""

# ================================
# DATA
# ================================
DATASET_DIR = "dataset"
SOLUTIONS_FILE = "solutions.txt"
TSP_EXTENSION = ".tsp"

# ================================
# SIMULATED ANNEALING
# ================================
INITIAL_TEMPERATURE = 10000.0
COOLING_RATE = 0.9999
TEMPERATURE_FLOOR = 0.00001

# How often (in iterations) the best distance is sampled for convergence plots
HISTORY_INTERVAL = 1000

# ================================
# BENCHMARK
# ================================
OUTPUT_DIR = "benchmarks"
RUNS_PER_DATASET = 10
BENCHMARK_SEED = 42
