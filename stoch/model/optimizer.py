import numpy as np
from functools import partial

from stoch.utils import cprint
from stoch.errors import PreconditionError
from stoch.model.objective import Objective
from stoch.model.modifier import ModifierFn
from stoch.model.params import AnnealingParams
from stoch.defaults.params import check_params
from stoch.defaults.scheduler import temperature
from stoch.algorithms.annealing import anneal, anneal_step, initial_state, empty_state



class Annealer():
    """
    Simulated annealing engine bound to one problem: an `Objective` (cost plus direction), a `ModifierFn` producing
    neighbors, an immutable `AnnealingParams` record (schedule, temperature, run length) and a random generator.

    The engine keeps no run state of its own. `initialize()` returns the iteration-0 snapshot and `step(state)` returns
    the next snapshot, so the caller decides when (and whether) the next step happens; `run()` is just `step` applied
    until the run completes.
    """
    def __init__(self,
                objective: Objective,
                modifier: ModifierFn,
                params: AnnealingParams,
                initial_solution_fn=None,  # callable(rng) -> Solution used by `initialize()` when no solution is given
                rng: np.random.Generator=None,
                seed: int=None,
                inert: bool=False,         # problem has nothing to search; `initialize()` returns the empty state
                verbose: bool=False,
        ):
        """
        Initializer or constructor for an instance of the Annealer class

        Arguments:
        ==========
        `objective` [Objective]: evaluates solutions and knows whether lower or higher is better
        `modifier` [ModifierFn]: generates one neighbor of a solution per step
        `params` [AnnealingParams]: immutable run configuration
        `initial_solution_fn` [Callable or None]: draws a starting solution from the generator
        `rng` [np.random.Generator or None]: source of all random draws; created from `seed` if not given
        `seed` [int or None]: seed used when `rng` is not supplied
        `inert` [bool]: marks degenerate configurations (e.g. zero bit width) that produce an empty, complete state
        `verbose` [bool]: print progress information and show a progress bar during `run()`
        """

        problems = check_params(params)
        if problems:
            raise PreconditionError("Invalid annealing parameters: " + "; ".join(problems))

        self.Objective = objective
        self.Modifier = modifier
        self.params = params
        self.initial_solution_fn = initial_solution_fn
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.inert = inert
        self.verbose = verbose
        self.cprint = partial(cprint, condition=verbose)

    def temperature(self, iteration):
        return temperature(iteration, self.params)

    def initialize(self, solution=None):
        """
        Iteration-0 snapshot, starting from `solution` or from a fresh draw of `initial_solution_fn`
        """
        if self.inert:
            return empty_state(self.Objective)

        if solution is None:
            assert self.initial_solution_fn is not None, "Must supply a starting solution or an `initial_solution_fn`!"
            solution = self.initial_solution_fn(self.rng)

        state = initial_state(solution, self.params, self.Objective)
        self.cprint(f"Initial {self.Objective.direction} objective: {state.current_cost}")
        return state

    def step(self, state):
        """
        Single annealing step; returns a new snapshot
        """
        return anneal_step(state, self.params, self.Objective, self.Modifier, self.rng)

    def run(self, state=None, num_steps=None):
        """
        Run from `state` (or from a fresh initial state) until the run completes, or for `num_steps` steps
        """
        if state is None:
            state = self.initialize()
        if state.complete:
            return state

        state = anneal(
            None,
            self.params,
            self.Objective,
            self.Modifier,
            rng=self.rng,
            num_steps=num_steps,
            state=state,
            verbose=self.verbose,
        )

        self.cprint(f"Best objective after {state.iteration} iterations: {state.best_cost} ({state.accepted_worse} worse moves accepted)")
        return state
