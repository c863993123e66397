import numpy as np

from stoch.api.core import solve_tsp
from stoch.algorithms.naive import naive_tsp
from stoch.analysis import history_frame, run_summary
from stoch.tasks import random_cities, UNIT_SQUARE_CITIES



sequence, distance, state = solve_tsp(UNIT_SQUARE_CITIES, random_seed=0)
_, optimal = naive_tsp(UNIT_SQUARE_CITIES)

print("unit square tour:", sequence)
print("annealed distance:", distance, "optimal distance:", optimal)

cities = random_cities(30, np.random.default_rng(1))
sequence, distance, state = solve_tsp(cities, random_seed=1, verbose=True, max_iters=10000, cooling_rate=0.999)

print("tour:", sequence)
print(run_summary(state))
print(history_frame(state).iloc[::1000])
