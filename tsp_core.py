"""
TSP Solver - Core Module
Contains the fundamental data structures and the cost model for the TSP problem.
"""

import numpy as np
from typing import List, Sequence


class City:
    """Represents a city with its original label and x, y coordinates."""

    __slots__ = ("id", "x", "y")

    def __init__(self, id: int, x: float, y: float):
        object.__setattr__(self, "id", int(id))
        object.__setattr__(self, "x", float(x))
        object.__setattr__(self, "y", float(y))

    def __setattr__(self, name, value):
        raise AttributeError("City is immutable")

    def distance_to(self, city: 'City') -> float:
        """Calculate Euclidean distance to another city."""
        return distance(self, city)

    def __repr__(self):
        return f"City({self.id}, {self.x:.2f}, {self.y:.2f})"

    def __eq__(self, other):
        if not isinstance(other, City):
            return False
        return self.id == other.id and self.x == other.x and self.y == other.y

    def __hash__(self):
        return hash((self.id, self.x, self.y))


def distance(a: City, b: City) -> float:
    """Euclidean distance between two cities."""
    dx = a.x - b.x
    dy = a.y - b.y
    return float(np.sqrt(dx * dx + dy * dy))


def total_distance(order: Sequence[int], cities: Sequence[City]) -> float:
    """
    Length of the closed tour visiting ``cities`` in ``order``.

    The edge from the last position back to the first is included,
    so a tour of ``n`` positions sums exactly ``n`` edges.
    """
    n = len(order)
    if n <= 1:
        return 0.0

    dist = 0.0
    for i in range(n):
        a = cities[order[i]]
        b = cities[order[(i + 1) % n]]
        dist += distance(a, b)
    return dist


# ---------------------------------------
# Tour state & moves
# ---------------------------------------

def random_permutation(n: int, rng) -> List[int]:
    """Uniformly shuffled list of positions ``0..n-1``."""
    return rng.permutation(n)


def reverse_segment(order: List[int], i: int, j: int):
    """
    Reverse positions ``i..j`` (inclusive) in place.

    Indices are ordered first, so ``(i, j)`` and ``(j, i)`` are the same
    move. Applying the same reversal twice restores the order.
    """
    if i > j:
        i, j = j, i
    order[i:j + 1] = order[i:j + 1][::-1]


def is_permutation(order: Sequence[int], n: int) -> bool:
    """True when ``order`` holds every position of ``[0, n)`` exactly once."""
    return len(order) == n and sorted(order) == list(range(n))


class Tour:
    """Represents a tour (solution) as an ordered sequence of city positions."""

    def __init__(self, order: Sequence[int], cities: Sequence[City]):
        self.order = list(order)
        self.cities = cities
        self._distance = None

    def get_total_distance(self) -> float:
        """Calculate the total distance of the tour."""
        if self._distance is None:
            self._distance = total_distance(self.order, self.cities)
        return self._distance

    def city_ids(self) -> List[int]:
        """Original city labels in visiting order."""
        return [self.cities[i].id for i in self.order]

    def reverse_segment(self, i: int, j: int):
        reverse_segment(self.order, i, j)
        self.invalidate_cache()

    def clone(self) -> 'Tour':
        """Create a copy of the tour sharing the city collection."""
        return Tour(self.order, self.cities)

    def invalidate_cache(self):
        """Invalidate cached distance value."""
        self._distance = None

    def __len__(self):
        return len(self.order)

    def __repr__(self):
        return f"Tour(cities={len(self.order)}, distance={self.get_total_distance():.2f})"

    def __getitem__(self, index):
        return self.cities[self.order[index]]


class DistanceMatrix:
    """Precomputed distance matrix for efficient distance lookups."""

    def __init__(self, cities: Sequence[City]):
        self.cities = cities
        self.n = len(cities)
        self.matrix = np.zeros((self.n, self.n))

        # Precompute all distances
        for i in range(self.n):
            for j in range(i + 1, self.n):
                dist = distance(cities[i], cities[j])
                self.matrix[i][j] = dist
                self.matrix[j][i] = dist

    def get_distance_by_index(self, i: int, j: int) -> float:
        """Get distance by city positions."""
        return float(self.matrix[i][j])

    def tour_length(self, order: Sequence[int]) -> float:
        """Cyclic tour length using the precomputed matrix."""
        if len(order) <= 1:
            return 0.0
        idx = np.asarray(order)
        return float(self.matrix[idx, np.roll(idx, -1)].sum())
