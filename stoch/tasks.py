import numpy as np

from stoch.graph import City
from stoch.defaults.params import DEFAULT_RANDOM_CITIES



UNIT_SQUARE_CITIES = [
    City(0, 0.5, 0.5),
    City(1, 0.1, 0.1),
    City(2, 0.9, 0.1),
    City(3, 0.9, 0.9),
    City(4, 0.1, 0.9),
]


def random_cities(count=DEFAULT_RANDOM_CITIES, rng=None, margin=0.1):
    """Return `count` cities placed uniformly in [margin, 1 - margin]^2 (kept away from the edges of a unit canvas)"""
    rng = rng if rng is not None else np.random.default_rng()
    coords = rng.random((count, 2)) * (1 - 2*margin) + margin
    return [City(idx, float(x), float(y)) for idx, (x, y) in enumerate(coords)]


def random_weights(n, rng=None):
    """Random non-negative weight vector of length `n` (not normalized)"""
    rng = rng if rng is not None else np.random.default_rng()
    return rng.random(n)


def random_coefficients(degree, rng=None, low=-5, high=5):
    """Random integer polynomial coefficients of the given degree (index = power)"""
    rng = rng if rng is not None else np.random.default_rng()
    return tuple(int(c) for c in rng.integers(low, high + 1, size=degree + 1))
