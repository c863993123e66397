from itertools import permutations

from stoch.model.solution import PermutationTour
from stoch.defaults.cost import tour_length
from stoch.graph import distance_matrix



def naive_tsp(cities):
    """
    Solve the TSP using the naive / brute-force method, with city 0 as the fixed start.
    Only practical for a handful of cities (the search covers (n-1)! tours).

    Returns (`tour`, `distance`), where `tour` is the best `PermutationTour` and `distance` its closed length.
    """
    distances = distance_matrix(cities)
    city_count = len(distances)
    if city_count < 2:
        return PermutationTour(()), 0.

    best_tour, best_distance = None, float("inf")
    for perm in permutations(range(1, city_count)):
        length = tour_length(perm, distances)
        if length < best_distance:
            best_tour, best_distance = perm, length

    return PermutationTour(best_tour), best_distance
