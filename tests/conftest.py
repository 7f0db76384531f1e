import matplotlib
matplotlib.use("Agg")

import pytest

from tsp_core import City


@pytest.fixture
def square_cities():
    return [City(1, 0, 0), City(2, 0, 1), City(3, 1, 1), City(4, 1, 0)]


class ScriptedSource:
    """Replays fixed draws so moves can be checked step by step."""

    def __init__(self, ints, reals=(0.0,)):
        self.ints = list(ints)
        self.reals = list(reals)
        self.int_calls = 0
        self.real_calls = 0

    def randint(self, n):
        value = self.ints[self.int_calls % len(self.ints)]
        self.int_calls += 1
        return value

    def uniform(self):
        value = self.reals[self.real_calls % len(self.reals)]
        self.real_calls += 1
        return value

    def permutation(self, n):
        return list(range(n))


@pytest.fixture
def scripted_source():
    return ScriptedSource
