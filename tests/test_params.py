import pytest

from stoch.model.params import AnnealingParams
from stoch.defaults.params import (
    TOUR_DEFAULTS,
    TOY_DEFAULTS,
    TOUR_BOUNDS,
    TOY_BOUNDS,
    validate_params,
    check_params,
)
from stoch.errors import PreconditionError


def test_defaults_are_within_bounds():
    assert validate_params(TOUR_DEFAULTS, TOUR_BOUNDS) is TOUR_DEFAULTS
    assert validate_params(TOY_DEFAULTS, TOY_BOUNDS) is TOY_DEFAULTS


def test_display_names_normalized():
    params = AnnealingParams(5.0, 0.9, 50, schedule="Logarithmic", neighbor="Two Bit Flip", coefficients=[1, 2])
    assert params.schedule == "logarithmic"
    assert params.neighbor == "two_bit_flip"
    assert params.coefficients == (1., 2.)
    assert params.degree == 1


def test_params_are_immutable():
    with pytest.raises(Exception):
        TOY_DEFAULTS.num_bits = 3
    assert TOY_DEFAULTS.updated(num_bits=3).num_bits == 3
    assert TOY_DEFAULTS.num_bits == 5


def test_structural_checks():
    assert check_params(TOY_DEFAULTS) == []
    assert len(check_params(AnnealingParams(0., 1.2, 0, schedule="cubic", neighbor="jump"))) == 4
    # cooling rate is only checked for the geometric schedule
    assert check_params(TOY_DEFAULTS.updated(schedule="linear", cooling_rate=1.0)) == []


def test_bounds_violations_listed():
    params = TOY_DEFAULTS.updated(initial_temp=20., num_bits=11, coefficients=(1,) * 10 + (9,))
    with pytest.raises(PreconditionError) as excinfo:
        validate_params(params, TOY_BOUNDS)

    message = str(excinfo.value)
    assert "initial_temp" in message
    assert "num_bits" in message
    assert "degree" in message
    assert "coefficients" in message


def test_tour_bounds():
    with pytest.raises(PreconditionError):
        validate_params(TOUR_DEFAULTS.updated(max_iters=50), TOUR_BOUNDS)
    with pytest.raises(PreconditionError):
        validate_params(TOUR_DEFAULTS.updated(cooling_rate=0.5), TOUR_BOUNDS)


def test_with_degree_resizes_coefficients():
    params = TOY_DEFAULTS.updated(coefficients=(1, -2, 3))

    lower = params.with_degree(1)
    assert lower.coefficients == (1., -2.)
    assert lower.degree == 1

    higher = params.with_degree(4)
    assert higher.coefficients == (1., -2., 3., 0., 0.)
    assert higher.degree == 4

    assert params.with_degree(0).coefficients == (1.,)
    assert params.coefficients == (1., -2., 3.)
    assert validate_params(TOY_DEFAULTS.with_degree(8), TOY_BOUNDS).degree == 8


def test_inert_width_is_not_a_range_violation():
    assert validate_params(TOY_DEFAULTS.updated(num_bits=0), TOY_BOUNDS).num_bits == 0
    with pytest.raises(PreconditionError):
        validate_params(TOY_DEFAULTS.updated(num_bits=64), TOY_BOUNDS)
