import math
import networkx as nx
import numpy as np
from collections import namedtuple


City = namedtuple("City", ["id", "x", "y"])


def as_cities(points):
    """Accept `City` tuples or bare (x, y) pairs and return a list of `City`, ids assigned by position"""
    cities = []
    for idx, point in enumerate(points):
        if isinstance(point, City):
            cities.append(City(idx, float(point.x), float(point.y)))
        else:
            x, y = point
            cities.append(City(idx, float(x), float(y)))
    return cities


def distance(city_a, city_b):
    return math.hypot(city_a.x - city_b.x, city_a.y - city_b.y)


def city_graph(cities):
    """Complete undirected graph over the cities, with Euclidean distances as edge weights and positions as `pos`"""
    cities = as_cities(cities)
    G = nx.complete_graph(len(cities))
    for city in cities:
        G.nodes[city.id]["pos"] = (city.x, city.y)
    for a, b in G.edges():
        G.edges[a, b]["weight"] = distance(cities[a], cities[b])
    return G


def get_distance_matrix(graph):
    """Dense matrix of edge weights, indexed by node position (zero on the diagonal)"""
    return nx.to_numpy_array(graph, nodelist=sorted(graph.nodes()), weight="weight")


def distance_matrix(cities):
    return get_distance_matrix(city_graph(cities))


def get_distance_multi(distances, node_list):
    """Sum of consecutive distances along `node_list`"""
    if len(node_list) < 2:
        return 0.
    nodes = np.asarray(node_list)
    return float(np.sum(distances[nodes[:-1], nodes[1:]]))
