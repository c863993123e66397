import itertools
import numpy as np

from stoch.algorithms.naive import naive_tsp
from stoch.defaults.cost import tour_length
from stoch.graph import distance_matrix
from stoch.tasks import UNIT_SQUARE_CITIES, random_cities


def test_naive_tsp_unit_square():
    tour, distance = naive_tsp(UNIT_SQUARE_CITIES)
    assert tour.is_valid(5)
    assert np.isclose(distance, 2*np.hypot(0.4, 0.4) + 3*0.8)


def test_naive_tsp_is_minimum():
    cities = random_cities(6, np.random.default_rng(0))
    distances = distance_matrix(cities)
    tour, distance = naive_tsp(cities)

    assert np.isclose(distance, tour_length(tour, distances))
    assert all(distance <= tour_length(p, distances) + 1e-12 for p in itertools.permutations(range(1, 6)))


def test_naive_tsp_degenerate():
    tour, distance = naive_tsp(UNIT_SQUARE_CITIES[:1])
    assert len(tour) == 0
    assert distance == 0.
