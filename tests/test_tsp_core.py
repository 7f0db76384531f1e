import math

import pytest

from data_generator import generate_random_cities
from random_source import RandomSource
from tsp_core import (
    City,
    DistanceMatrix,
    Tour,
    distance,
    is_permutation,
    random_permutation,
    reverse_segment,
    total_distance,
)


def test_distance_is_euclidean_and_symmetric():
    a = City(1, 0, 0)
    b = City(2, 3, 4)
    assert distance(a, b) == 5.0
    assert distance(b, a) == distance(a, b)
    assert a.distance_to(b) == 5.0


def test_distance_zero_only_for_same_coordinates():
    assert distance(City(1, 2.5, -1), City(7, 2.5, -1)) == 0.0
    assert distance(City(1, 0, 0), City(2, 0, 1e-9)) > 0.0


def test_city_is_immutable():
    city = City(3, 1.0, 2.0)
    with pytest.raises(AttributeError):
        city.x = 5.0


def test_total_distance_includes_wrap_edge(square_cities):
    assert total_distance([0, 1, 2, 3], square_cities) == pytest.approx(4.0)
    # crossing tour: two sides plus two diagonals
    assert total_distance([0, 2, 1, 3], square_cities) == pytest.approx(2 + 2 * math.sqrt(2))


@pytest.mark.parametrize("order", [[], [0]])
def test_total_distance_degenerate(order, square_cities):
    assert total_distance(order, square_cities) == 0.0


def test_two_city_tour_counts_edge_twice():
    cities = [City(1, 0, 0), City(2, 3, 4)]
    assert total_distance([0, 1], cities) == 10.0


def test_total_distance_is_deterministic():
    cities = generate_random_cities(25, seed=3)
    order = RandomSource(5).permutation(25)
    assert total_distance(order, cities) == total_distance(order, cities)


def test_full_reversal_keeps_cost():
    cities = generate_random_cities(30, seed=11)
    order = RandomSource(2).permutation(30)
    assert total_distance(order[::-1], cities) == pytest.approx(total_distance(order, cities))


def test_reverse_segment_is_inclusive():
    order = [0, 1, 2, 3, 4, 5]
    reverse_segment(order, 1, 4)
    assert order == [0, 4, 3, 2, 1, 5]


def test_reverse_segment_orders_indices():
    a = [0, 1, 2, 3, 4, 5]
    b = list(a)
    reverse_segment(a, 1, 4)
    reverse_segment(b, 4, 1)
    assert a == b


def test_reverse_segment_is_involution():
    original = RandomSource(8).permutation(12)
    for i in range(12):
        for j in range(i + 1, 12):
            order = list(original)
            reverse_segment(order, i, j)
            reverse_segment(order, i, j)
            assert order == original


def test_random_permutation_is_permutation():
    order = random_permutation(50, RandomSource(1))
    assert is_permutation(order, 50)


def test_is_permutation_rejects_duplicates_and_omissions():
    assert is_permutation([2, 0, 1], 3)
    assert not is_permutation([0, 0, 1], 3)
    assert not is_permutation([0, 1], 3)
    assert not is_permutation([0, 1, 3], 3)


def test_tour_reports_original_ids(square_cities):
    tour = Tour([2, 0, 3, 1], square_cities)
    assert tour.city_ids() == [3, 1, 4, 2]
    assert tour[0] is square_cities[2]


def test_tour_cache_invalidated_on_reversal(square_cities):
    tour = Tour([0, 1, 2, 3], square_cities)
    assert tour.get_total_distance() == pytest.approx(4.0)
    tour.reverse_segment(1, 2)
    assert tour.order == [0, 2, 1, 3]
    assert tour.get_total_distance() == pytest.approx(2 + 2 * math.sqrt(2))


def test_tour_clone_is_independent(square_cities):
    tour = Tour([0, 1, 2, 3], square_cities)
    copy = tour.clone()
    copy.reverse_segment(0, 3)
    assert tour.order == [0, 1, 2, 3]


def test_distance_matrix_matches_cost_model():
    cities = generate_random_cities(20, seed=4)
    matrix = DistanceMatrix(cities)
    order = RandomSource(9).permutation(20)
    assert matrix.tour_length(order) == pytest.approx(total_distance(order, cities))
    assert matrix.get_distance_by_index(3, 7) == distance(cities[3], cities[7])
    assert matrix.tour_length([]) == 0.0
    assert matrix.tour_length([5]) == 0.0
