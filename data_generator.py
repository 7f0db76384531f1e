import os
import re
from typing import Dict, List, Optional

import numpy as np

from tsp_core import City


COORD_LINE = re.compile(r"^\s*\d+\s+[-+]?\d*\.?\d+([eE][-+]?\d+)?\s+[-+]?\d*\.?\d+([eE][-+]?\d+)?")
SOLUTION_LINE = re.compile(r"^\s*([^\s:]+)\s*:\s*(\S+)")


def load_tsp_file(path) -> List[City]:
    """
    TSPLIB loader for coordinate instances.
    Handles:
        - lowercase/uppercase section names
        - blank lines
        - files that start coordinates without NODE_COORD_SECTION
    Each city keeps the label from the first column as its id.
    """

    if not os.path.exists(path):
        raise FileNotFoundError(f"TSP file not found: {path}")

    with open(path, "r") as f:
        raw_lines = [l.strip() for l in f if l.strip()]

    lines_upper = [l.upper() for l in raw_lines]

    # --------------------------------------------
    # 1. Find the start of NODE_COORD_SECTION
    # --------------------------------------------
    start_index = None
    for i, line in enumerate(lines_upper):
        if "NODE_COORD_SECTION" in line:
            start_index = i + 1
            break

    if start_index is None:
        for i, line in enumerate(raw_lines):
            if COORD_LINE.match(line):
                start_index = i
                break

    if start_index is None:
        raise ValueError(f"Could not find coordinate section in: {path}")

    # --------------------------------------------
    # 2. Parse coordinates
    # --------------------------------------------
    cities = []
    for line in raw_lines[start_index:]:
        if line.upper().startswith("EOF"):
            break

        parts = line.split()
        if len(parts) < 3:
            continue

        try:
            cities.append(City(int(parts[0]), float(parts[1]), float(parts[2])))
        except ValueError:
            continue

    if len(cities) == 0:
        raise ValueError(f"No coordinates parsed in: {path}")

    return cities


def instance_name(path) -> str:
    """File name without directory and without anything after the first dot."""
    return os.path.basename(str(path)).split(".", 1)[0]


def load_solutions(path) -> Dict[str, float]:
    """
    Read the reference table of known optimal distances.

    Lines look like ``berlin52.tsp : 7542``. Instance names are stored
    without extension. Unparsable lines are skipped; a missing file gives
    an empty table.
    """
    solutions = {}
    if not os.path.exists(path):
        print(f"Warning: Cannot open solutions file {path}")
        return solutions

    with open(path, "r") as f:
        for line in f:
            match = SOLUTION_LINE.match(line)
            if not match:
                continue
            try:
                value = float(match.group(2))
            except ValueError:
                continue
            solutions[instance_name(match.group(1))] = value

    return solutions


def lookup_optimum(solutions: Dict[str, float], path) -> Optional[float]:
    return solutions.get(instance_name(path))


def generate_random_cities(n: int, width: float = 100, height: float = 100, seed: Optional[int] = None) -> List[City]:
    """
    Generate random cities for testing.

    Args:
        n: Number of cities to generate
        width: Width of the area
        height: Height of the area
        seed: Optional seed for reproducible layouts

    Returns:
        List of randomly placed cities labelled 1..n
    """
    rng = np.random.default_rng(seed)
    xs = rng.uniform(0, width, size=n)
    ys = rng.uniform(0, height, size=n)
    return [City(i + 1, xs[i], ys[i]) for i in range(n)]


def generate_circle_cities(n: int, radius: float = 50, center_x: float = 50, center_y: float = 50) -> List[City]:
    """
    Generate cities arranged in a circle (for testing).
    The optimal tour visits them in angular order.
    """
    cities = []
    for i in range(n):
        angle = 2 * np.pi * i / n
        x = center_x + radius * np.cos(angle)
        y = center_y + radius * np.sin(angle)
        cities.append(City(i + 1, x, y))
    return cities
