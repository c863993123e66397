import math

from stoch.model.params import GEOMETRIC, LINEAR, LOGARITHMIC


DEFAULT_INITIAL_TEMP = 1000.
DEFAULT_ALPHA = 0.99
TEMPERATURE_FLOOR = 1e-3



# Every schedule is a function of the iteration index alone, so a run that is paused and resumed sees exactly the
# same temperatures as one that runs straight through.

def annealing_schedule_geometric(iteration, initial_temp=DEFAULT_INITIAL_TEMP, alpha=DEFAULT_ALPHA, max_iters=None):
    return initial_temp * alpha**iteration


def annealing_schedule_linear(iteration, initial_temp=DEFAULT_INITIAL_TEMP, alpha=DEFAULT_ALPHA, max_iters=1):
    T = initial_temp - (initial_temp / max_iters) * iteration
    return max(T, TEMPERATURE_FLOOR)


def annealing_schedule_logarithmic(iteration, initial_temp=DEFAULT_INITIAL_TEMP, alpha=DEFAULT_ALPHA, max_iters=None):
    T = initial_temp / (1 + math.log(1 + iteration + 1))
    return max(T, TEMPERATURE_FLOOR)


SCHEDULERS = {
    GEOMETRIC: annealing_schedule_geometric,
    LINEAR: annealing_schedule_linear,
    LOGARITHMIC: annealing_schedule_logarithmic,
}


def get_scheduler(kind):
    assert kind in SCHEDULERS, f"Unknown cooling schedule `{kind}`; please use `{'`, `'.join(SCHEDULERS)}`"
    return SCHEDULERS[kind]


def temperature(iteration, params):
    """Temperature at `iteration` for the schedule, initial temperature, rate and run length in `params`"""
    return get_scheduler(params.schedule)(
        iteration,
        initial_temp=params.initial_temp,
        alpha=params.cooling_rate,
        max_iters=params.max_iters,
    )
