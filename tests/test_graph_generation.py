import numpy as np
import networkx as nx

from stoch.graph import City, as_cities, city_graph, distance_matrix, get_distance_multi
from stoch.tasks import random_cities, random_coefficients, random_weights, UNIT_SQUARE_CITIES
from stoch.defaults.params import DEFAULT_RANDOM_CITIES


def test_city_graph_is_complete():
    G = city_graph(cities)
    n = len(cities)
    assert G.number_of_nodes() == n
    assert G.number_of_edges() == n * (n - 1) // 2
    assert nx.is_connected(G)
    assert G.nodes[3]["pos"] == (cities[3].x, cities[3].y)


def test_distance_matrix():
    D = distance_matrix(cities)
    assert D.shape == (len(cities), len(cities))
    assert np.allclose(D, D.T)
    assert np.allclose(np.diag(D), 0.)
    assert np.isclose(D[0, 1], np.hypot(cities[0].x - cities[1].x, cities[0].y - cities[1].y))


def test_distance_multi():
    D = distance_matrix(UNIT_SQUARE_CITIES)
    assert np.isclose(get_distance_multi(D, [1, 2, 3, 4, 1]), 3.2)
    assert get_distance_multi(D, [2]) == 0.


def test_as_cities_accepts_pairs():
    converted = as_cities([(0, 0), (1, 1), City(7, 2, 2)])
    assert [c.id for c in converted] == [0, 1, 2]
    assert converted[2] == City(2, 2., 2.)


def test_random_tasks():
    rng = np.random.default_rng(1)
    generated = random_cities(50, rng)
    assert len(generated) == 50
    assert all(0.1 <= c.x <= 0.9 and 0.1 <= c.y <= 0.9 for c in generated)

    coefficients = random_coefficients(4, rng)
    assert len(coefficients) == 5
    assert all(-5 <= c <= 5 for c in coefficients)

    weights = random_weights(6, rng)
    assert weights.shape == (6,)
    assert (weights >= 0).all()


def test_random_cities_default_count():
    assert len(random_cities(rng=np.random.default_rng(4))) == DEFAULT_RANDOM_CITIES


cities = random_cities(12, np.random.default_rng(3))
