import numpy as np
from tqdm import tqdm

from stoch.model.state import AnnealingState, IterationRecord
from stoch.defaults.scheduler import temperature
from stoch.defaults.step import MH_step



def empty_state(objective=None):
    """
    Inert state for configurations with nothing to search (e.g. a bit width of 0). It is already complete, so stepping
    it is a no-op.
    """
    worst = objective.worst() if objective is not None else float("-inf")
    return AnnealingState(
        current=None,
        current_cost=0.,
        best=None,
        best_cost=worst,
        temperature=0.,
        complete=True,
    )


def initial_state(solution, params, objective):
    """State at iteration 0: `solution` is both current and best, and the history holds one record at T(0)"""
    T = temperature(0, params)
    value = objective.eval(solution)
    record = IterationRecord(
        iteration=0,
        value=value,
        best_value=value,
        temperature=T,
        acceptance_probability=1.0,
        accepted=True,
        bits=solution.snapshot(),
    )
    return AnnealingState(
        current=solution,
        current_cost=value,
        best=solution,
        best_cost=value,
        temperature=T,
        iteration=0,
        history=(record,),
    )


def anneal_step(state, params, objective, modifier, rng, step_fn=MH_step):
    """
    Advance a run by exactly one iteration and return the new snapshot (the input is left untouched).

    The temperature is computed for the next iteration index, one neighbor is proposed and accepted or rejected,
    `accepted_worse` counts accepted moves that are worse than the pre-step current value, and the best solution is
    replaced only if the post-step current value strictly beats it. Complete states are returned as they are.
    """
    if state.complete or state.iteration >= params.max_iters:
        return state.stopped()

    iteration = state.iteration + 1
    T = temperature(iteration, params)

    current, current_cost, accepted, delta, p = step_fn(
        state.current,
        state.current_cost,
        T,
        modifierClass=modifier,
        objectiveClass=objective,
        rng=rng,
    )

    accepted_worse = state.accepted_worse
    if accepted and delta < 0:
        accepted_worse += 1

    best, best_cost = state.best, state.best_cost
    if objective.is_better(current_cost, best_cost):
        best, best_cost = current, current_cost

    record = IterationRecord(
        iteration=iteration,
        value=current_cost,
        best_value=best_cost,
        temperature=T,
        acceptance_probability=p,
        accepted=accepted,
        bits=current.snapshot(),
    )

    return state.advance(
        record,
        current=current,
        current_cost=current_cost,
        best=best,
        best_cost=best_cost,
        temperature=T,
        iteration=iteration,
        accepted_worse=accepted_worse,
        complete=iteration >= params.max_iters,
    )


def anneal(
    solution,
    params,
    objective,
    modifier,
    rng=None,
    num_steps=None,
    state=None,
    verbose=False,
):
    """
    Simulated annealing run built from repeated `anneal_step` calls, starting from `state` if given (to resume a
    paused run) or from a fresh initial state around `solution`.

    `num_steps` truncates the run after that many steps; by default the run continues until `params.max_iters`.
    """
    rng = rng if rng is not None else np.random.default_rng()
    if state is None:
        state = initial_state(solution, params, objective)

    remaining = params.max_iters - state.iteration
    num_steps = remaining if num_steps is None else min(num_steps, remaining)

    iter_range = tqdm(range(num_steps)) if verbose else range(num_steps)
    for _ in iter_range:
        state = anneal_step(state, params, objective, modifier, rng)
        if state.complete:
            break

    return state
