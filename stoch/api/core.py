import numpy as np
from functools import partial

from stoch.utils import extract_kwargs, complement
from stoch.errors import PreconditionError
from stoch.graph import as_cities
from stoch.model.params import AnnealingParams
from stoch.model.solution import PermutationTour, BitString
from stoch.model.optimizer import Annealer
from stoch.model.sampler import AliasSampler
from stoch.defaults.cost import tour_objective, polynomial_objective
from stoch.defaults.modifier import get_modifier, TOUR_MODIFIERS, BITSTRING_MODIFIERS
from stoch.defaults.params import TOUR_DEFAULTS, TOY_DEFAULTS, TOUR_BOUNDS, TOY_BOUNDS, MIN_CITIES, validate_params
from stoch.algorithms import alias



def _with_overrides(params, defaults, overrides):
    """Start from `params` (or `defaults`) and replace any AnnealingParams fields given as keyword arguments"""
    params = params or defaults
    fields = extract_kwargs(AnnealingParams.__init__, overrides)
    unknown = complement(overrides, fields)
    if unknown:
        raise TypeError(f"Unknown annealing parameters: {', '.join(unknown)}")
    return params.updated(**fields) if fields else params


def tour_annealer(cities, params=None, rng=None, seed=None, verbose=False, bounds=TOUR_BOUNDS, **overrides):
    """
    Annealer for the closed-tour TSP over `cities` (City tuples or (x, y) pairs), with city 0 as the fixed start.

    Raises `PreconditionError` for fewer than 3 cities, a neighbor strategy that does not apply to tours, or parameters
    outside `bounds` (pass `bounds=None` to check only the structural preconditions).
    """
    params = _with_overrides(params, TOUR_DEFAULTS, overrides)
    validate_params(params, bounds)
    cities = as_cities(cities)

    if len(cities) < MIN_CITIES:
        raise PreconditionError(f"Add at least {MIN_CITIES} cities to start the simulation (got {len(cities)})")
    if params.neighbor not in TOUR_MODIFIERS:
        raise PreconditionError(f"Neighbor strategy `{params.neighbor}` does not apply to tours; use `{'`, `'.join(TOUR_MODIFIERS)}`")

    return Annealer(
        objective=tour_objective(cities),
        modifier=get_modifier(params.neighbor),
        params=params,
        initial_solution_fn=partial(PermutationTour.random, len(cities)),
        rng=rng,
        seed=seed,
        verbose=verbose,
    )


def bitstring_annealer(params=None, rng=None, seed=None, verbose=False, bounds=TOY_BOUNDS, **overrides):
    """
    Annealer maximizing the polynomial `params.coefficients` over `params.num_bits`-bit unsigned integers.
    A bit width of 0 or less gives an inert annealer whose states are empty and already complete.

    Parameters outside `bounds` raise `PreconditionError`; `bounds=None` checks only the structural preconditions.
    """
    params = _with_overrides(params, TOY_DEFAULTS, overrides)
    validate_params(params, bounds)

    if params.neighbor not in BITSTRING_MODIFIERS:
        raise PreconditionError(f"Neighbor strategy `{params.neighbor}` does not apply to bitstrings; use `{'`, `'.join(BITSTRING_MODIFIERS)}`")

    return Annealer(
        objective=polynomial_objective(params.coefficients),
        modifier=get_modifier(params.neighbor),
        params=params,
        initial_solution_fn=partial(BitString.random, params.num_bits),
        rng=rng,
        seed=seed,
        inert=params.num_bits <= 0,
        verbose=verbose,
    )


def initialize(annealer, solution=None):
    return annealer.initialize(solution)


def step(state, annealer):
    return annealer.step(state)


def run_to_completion(annealer, state=None, num_steps=None):
    return annealer.run(state, num_steps=num_steps)


def solve_tsp(cities, params=None, random_seed=None, verbose=False, **kwargs):
    """
    Main function for solving a TSP instance with simulated annealing.

    Parameters:

      `cities`: List of `City` tuples or (x, y) pairs (len >= 3); the first one is the fixed start of the tour.

      `params`: AnnealingParams; defaults to `TOUR_DEFAULTS`. Individual fields can be overridden with keyword
        arguments (e.g. `max_iters=500`).

      `random_seed`: int specifying the seed of the random generator used for the run.

    Returns:

        (`sequence`, `distance`, `state`), where:

        `sequence` = best visiting order found, including the start city at both ends
        `distance` = length of that closed tour
        `state` = final AnnealingState (history, temperatures, ...)
    """
    annealer = tour_annealer(cities, params, seed=random_seed, verbose=verbose, **kwargs)
    state = annealer.run()
    return list(state.best.cycle()), state.best_cost, state


def maximize_polynomial(params=None, random_seed=None, verbose=False, **kwargs):
    """
    Run the bitstring search to completion. Returns (`best_value`, `best_state`, `state`) where `best_state` is the
    integer maximizing the polynomial among those visited (None for an inert configuration).
    """
    annealer = bitstring_annealer(params, seed=random_seed, verbose=verbose, **kwargs)
    state = annealer.run()
    best = state.best.value if state.best is not None else None
    return state.best_cost, best, state


def build_tables(weights):
    return alias.build_tables(weights)


def sample(table, rng=None):
    rng = rng if rng is not None else np.random.default_rng()
    return alias.sample(table, rng)


def sample_batch(table, count, rng=None):
    rng = rng if rng is not None else np.random.default_rng()
    return alias.sample_batch(table, count, rng)


def alias_sampler(weights, random_seed=None):
    return AliasSampler(weights, seed=random_seed)
