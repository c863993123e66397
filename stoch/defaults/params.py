from collections import namedtuple

from stoch.errors import PreconditionError
from stoch.model.params import (
    AnnealingParams,
    GEOMETRIC,
    SWAP,
    SINGLE_BIT_FLIP,
    SCHEDULE_KINDS,
    NEIGHBOR_KINDS,
)


MIN_CITIES = 3
SEARCH_SPACE_MAX_BITS = 8

# Defaults used when a front end resets a run
TOUR_DEFAULTS = AnnealingParams(
    initial_temp=1000.,
    cooling_rate=0.99,
    max_iters=3000,
    schedule=GEOMETRIC,
    neighbor=SWAP,
)

TOY_DEFAULTS = AnnealingParams(
    initial_temp=5.0,
    cooling_rate=0.99,
    max_iters=100,
    schedule=GEOMETRIC,
    neighbor=SINGLE_BIT_FLIP,
    coefficients=(1, -2, 3, -1, 2, -1),
    num_bits=5,
)

ALIAS_DEFAULT_WEIGHTS = (0.3, 0.1, 0.1, 0.25, 0.25)
ALIAS_DEFAULT_SAMPLE_SIZE = 1000
DEFAULT_RANDOM_CITIES = 10


ParamBounds = namedtuple(
    "ParamBounds",
    ["temperature", "cooling_rate", "iterations", "num_bits", "degree", "coefficient"],
)

TOUR_BOUNDS = ParamBounds(
    temperature=(100., 5000.),
    cooling_rate=(0.8, 0.999),
    iterations=(100, 10000),
    num_bits=None,
    degree=None,
    coefficient=None,
)

TOY_BOUNDS = ParamBounds(
    temperature=(0.1, 10.0),
    cooling_rate=(0.5, 0.99),
    iterations=(10, 500),
    num_bits=(1, 10),
    degree=(0, 8),
    coefficient=(-5., 5.),
)


def _within(value, bounds):
    lo, hi = bounds
    return lo <= value <= hi


def check_params(params: AnnealingParams):
    """
    Structural preconditions any run needs regardless of front end limits. Returns a list of problems (empty if none).
    """
    problems = []
    if not params.initial_temp > 0:
        problems.append(f"initial_temp must be positive (got {params.initial_temp})")
    if not params.max_iters > 0:
        problems.append(f"max_iters must be positive (got {params.max_iters})")
    if params.schedule not in SCHEDULE_KINDS:
        problems.append(f"unknown cooling schedule `{params.schedule}`")
    if params.neighbor not in NEIGHBOR_KINDS:
        problems.append(f"unknown neighbor strategy `{params.neighbor}`")
    if params.schedule == GEOMETRIC and not 0 < params.cooling_rate < 1:
        problems.append(f"geometric cooling needs 0 < cooling_rate < 1 (got {params.cooling_rate})")
    return problems


def validate_params(params: AnnealingParams, bounds: ParamBounds=None):
    """
    Raise `PreconditionError` listing every violated constraint: the structural ones from `check_params` plus the
    configuration ranges in `bounds` (e.g. `TOUR_BOUNDS`, `TOY_BOUNDS`) if given.
    """
    problems = check_params(params)

    if bounds is not None:
        if not _within(params.initial_temp, bounds.temperature):
            problems.append(f"initial_temp {params.initial_temp} outside {bounds.temperature}")
        if not _within(params.cooling_rate, bounds.cooling_rate):
            problems.append(f"cooling_rate {params.cooling_rate} outside {bounds.cooling_rate}")
        if not _within(params.max_iters, bounds.iterations):
            problems.append(f"max_iters {params.max_iters} outside {bounds.iterations}")
        # a width of 0 or less is the inert configuration, not a range violation
        if bounds.num_bits is not None and params.num_bits > 0 and not _within(params.num_bits, bounds.num_bits):
            problems.append(f"num_bits {params.num_bits} outside {bounds.num_bits}")
        if bounds.degree is not None and not _within(params.degree, bounds.degree):
            problems.append(f"polynomial degree {params.degree} outside {bounds.degree}")
        if bounds.coefficient is not None:
            bad = [c for c in params.coefficients if not _within(c, bounds.coefficient)]
            if bad:
                problems.append(f"coefficients {bad} outside {bounds.coefficient}")

    if problems:
        raise PreconditionError("Invalid annealing parameters: " + "; ".join(problems))
    return params
