"""
Simulated Annealing Solver with Time-Limit Support + Convergence Logging

Segment-reversal moves, Metropolis acceptance and a geometric cooling
schedule. The search always reports the best tour it committed, not
the state the chain ends in.
"""

import math
import time
from typing import Callable, List, Optional, Sequence, Tuple

from tqdm import tqdm

import config
from random_source import RandomSource
from tsp_core import (
    City,
    DistanceMatrix,
    Tour,
    is_permutation,
    random_permutation,
    reverse_segment,
)


RUNNING = "running"
TERMINATED = "terminated"


def count_cooling_steps(
    initial_temperature: float,
    cooling_rate: float,
    temperature_floor: float
) -> int:
    """Number of real moves before the temperature reaches the floor."""
    if initial_temperature <= temperature_floor:
        return 0
    return math.ceil(math.log(temperature_floor / initial_temperature) / math.log(cooling_rate))


class SolveResult:
    """Outcome of one annealing run, as handed to reporting."""

    def __init__(self, tour: Tour, initial_cost: float, iterations: int,
                 elapsed: float, log: List[Tuple[float, float]]):
        self.best_tour = tour
        self.tour = tour.city_ids()
        self.cost = tour.get_total_distance()
        self.initial_cost = initial_cost
        self.iterations = iterations
        self.elapsed = elapsed
        self.log = log

    def __repr__(self):
        return f"SolveResult(cost={self.cost:.2f}, iterations={self.iterations})"


class SimulatedAnnealingSolver:
    """
    Simulated annealing solver for TSP
    - injected RandomSource (seedable)
    - optional iteration / time caps
    - returns (best_tour, log) like the other solvers
    """

    def __init__(
        self,
        cities: Sequence[City],
        initial_temperature: float = config.INITIAL_TEMPERATURE,
        cooling_rate: float = config.COOLING_RATE,
        temperature_floor: float = config.TEMPERATURE_FLOOR,
        rng: Optional[RandomSource] = None,
        history_interval: int = config.HISTORY_INTERVAL
    ):
        if initial_temperature <= 0:
            raise ValueError(f"initial_temperature must be positive, got {initial_temperature}")
        if temperature_floor <= 0:
            raise ValueError(f"temperature_floor must be positive, got {temperature_floor}")
        if not 0 < cooling_rate < 1:
            raise ValueError(f"cooling_rate must be in (0, 1), got {cooling_rate}")

        self.cities = list(cities)
        self.n_cities = len(self.cities)
        self.initial_temperature = initial_temperature
        self.cooling_rate = cooling_rate
        self.temperature_floor = temperature_floor
        self.rng = rng if rng is not None else RandomSource()
        self.history_interval = max(1, int(history_interval))

        self.distance_matrix = DistanceMatrix(self.cities)

        # search state
        self.current_order: Optional[List[int]] = None
        self.current_cost = 0.0
        self.best_order: Optional[List[int]] = None
        self.best_cost = float("inf")
        self.temperature = initial_temperature
        self.iteration = 0
        self.status = RUNNING
        self.best_distance_history: List[float] = []

    # ---------------------------------------
    # Initialization
    # ---------------------------------------

    def initialize(self, initial_order: Optional[Sequence[int]] = None):
        """Start a fresh search from ``initial_order`` or a random permutation."""
        if initial_order is None:
            order = random_permutation(self.n_cities, self.rng)
        else:
            order = list(initial_order)
            if not is_permutation(order, self.n_cities):
                raise ValueError("initial tour must be a permutation of all city positions")

        self.current_order = order
        self.current_cost = self.cost(order)
        self.best_order = list(order)
        self.best_cost = self.current_cost
        self.temperature = self.initial_temperature
        self.iteration = 0
        self.best_distance_history = [self.best_cost]
        self.status = TERMINATED if self._is_finished() else RUNNING

    def cost(self, order: Sequence[int]) -> float:
        return self.distance_matrix.tour_length(order)

    def _is_finished(self) -> bool:
        return self.n_cities < 2 or self.temperature <= self.temperature_floor

    # ---------------------------------------
    # Moves & acceptance
    # ---------------------------------------

    def draw_move(self) -> Tuple[int, int]:
        """Two distinct positions with i < j; equal draws are redrawn."""
        while True:
            i = self.rng.randint(self.n_cities)
            j = self.rng.randint(self.n_cities)
            if i != j:
                break
        if i > j:
            i, j = j, i
        return i, j

    def accept(self, delta: float, temperature: float) -> bool:
        """Metropolis criterion. Improvements never consume a random draw."""
        if delta < 0:
            return True
        return math.exp(-delta / temperature) > self.rng.uniform()

    def step(self) -> bool:
        """
        One annealing transition: propose, evaluate, accept or roll back, cool.

        Returns whether the move was accepted.
        """
        order = self.current_order
        i, j = self.draw_move()
        reverse_segment(order, i, j)

        new_cost = self.cost(order)
        delta = new_cost - self.current_cost

        accepted = self.accept(delta, self.temperature)
        if accepted:
            self.current_cost = new_cost
            if self.current_cost < self.best_cost:
                self.best_cost = self.current_cost
                self.best_order = list(order)
        else:
            reverse_segment(order, i, j)

        self.temperature *= self.cooling_rate
        self.iteration += 1

        if self.iteration % self.history_interval == 0:
            self.best_distance_history.append(self.best_cost)

        if self._is_finished():
            self.status = TERMINATED
        return accepted

    # ---------------------------------------
    # SOLVE (optionally capped)
    # ---------------------------------------

    def solve(
        self,
        verbose: bool = False,
        callback: Optional[Callable] = None,
        time_limit: Optional[float] = None,
        max_iterations: Optional[int] = None,
        initial_order: Optional[Sequence[int]] = None
    ) -> Tuple[Tour, list]:
        """
        Returns:
            best_tour
            log = [(time, best_distance)]
        """
        self.initialize(initial_order)

        start = time.time()
        log = [(0.0, self.best_cost)]

        if self.status == TERMINATED:
            if verbose:
                print(f"[SA] {self.n_cities} cities, nothing to optimize.")
            return self.get_best_tour(), log

        progress = None
        if verbose:
            total = count_cooling_steps(self.initial_temperature, self.cooling_rate, self.temperature_floor)
            if max_iterations is not None:
                total = min(total, max_iterations)
            progress = tqdm(total=total, desc="SA", unit="it")

        while self.status == RUNNING:
            if max_iterations is not None and self.iteration >= max_iterations:
                break
            if time_limit is not None and time.time() - start >= time_limit:
                break

            best_before = self.best_cost
            self.step()

            if self.best_cost < best_before:
                log.append((time.time() - start, self.best_cost))

            if callback:
                callback(self)

            if progress is not None and self.iteration % self.history_interval == 0:
                progress.update(self.history_interval)
                progress.set_postfix(best=f"{self.best_cost:.2f}", T=f"{self.temperature:.4g}")

        if progress is not None:
            progress.update(self.iteration - progress.n)
            progress.close()
            print(f"[SA] Done after {self.iteration} iterations | Best = {self.best_cost:.2f}")

        if self.best_distance_history[-1] != self.best_cost:
            self.best_distance_history.append(self.best_cost)

        return self.get_best_tour(), log

    def run(self, **kwargs) -> SolveResult:
        """Solve and package the result with original city ids."""
        start = time.time()
        best_tour, log = self.solve(**kwargs)
        initial_cost = log[0][1]
        return SolveResult(best_tour, initial_cost, self.iteration, time.time() - start, log)

    def get_best_tour(self) -> Optional[Tour]:
        if self.best_order is None:
            return None
        return Tour(self.best_order, self.cities)
