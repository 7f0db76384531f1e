import numpy as np
from typing import List, Optional


class RandomSource:
    """
    Randomness handed to the solvers.

    Wraps a numpy Generator so every run can be reproduced from a seed
    instead of relying on module-level random state.
    """

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self.generator = np.random.default_rng(seed)

    def randint(self, n: int) -> int:
        """Uniform integer in [0, n)."""
        return int(self.generator.integers(0, n))

    def uniform(self) -> float:
        """Uniform float in [0, 1)."""
        return float(self.generator.random())

    def permutation(self, n: int) -> List[int]:
        return [int(i) for i in self.generator.permutation(n)]

    def spawn(self, count: int) -> List['RandomSource']:
        """Independent child sources, one per benchmark run."""
        seeds = self.generator.integers(0, 2**31 - 1, size=count)
        return [RandomSource(int(s)) for s in seeds]

    def __repr__(self):
        return f"RandomSource(seed={self.seed})"
