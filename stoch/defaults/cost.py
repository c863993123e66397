import numpy as np
from numpy.polynomial import polynomial as P

from stoch.model.cost import CostFn
from stoch.model.objective import Objective, MINIMIZE, MAXIMIZE
from stoch.graph import distance_matrix, get_distance_multi



def tour_length(tour, distances):
    """
    Length of the closed cycle start -> tour[0] -> ... -> tour[-1] -> start, where the start is city 0 (row/column 0
    of `distances`). Returns 0 when there are fewer than 2 cities or the tour is empty.
    """
    order = list(tour)
    if len(distances) < 2 or len(order) == 0:
        return 0.
    return get_distance_multi(distances, [0] + order + [0])


def evaluate_polynomial(n, coefficients):
    """f(n) = sum_i coefficients[i] * n**i"""
    if len(coefficients) == 0:
        return 0.
    return float(P.polyval(float(n), np.asarray(coefficients, dtype=float)))


class TourLengthCost(CostFn):
    """Closed-tour length over a fixed set of cities"""

    def __init__(self, cities):
        self.cities = cities
        self.distances = distance_matrix(cities)
        super(TourLengthCost, self).__init__(cost_fn_handle=tour_length, cost_args=[self.distances])


class PolynomialCost(CostFn):
    """Polynomial evaluated at the integer value of a `BitString`"""

    def __init__(self, coefficients):
        self.coefficients = tuple(coefficients)
        super(PolynomialCost, self).__init__(
            cost_fn_handle=evaluate_polynomial,
            cost_args=[self.coefficients],
            encoder_fn_handle=int,
        )


def tour_objective(cities):
    return Objective(TourLengthCost(cities), direction=MINIMIZE)


def polynomial_objective(coefficients):
    return Objective(PolynomialCost(coefficients), direction=MAXIMIZE)
