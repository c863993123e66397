import numpy as np

from stoch.analysis import history_frame, search_space, search_space_frame, frequency_frame, run_summary
from stoch.api.core import bitstring_annealer, tour_annealer, build_tables, sample_batch
from stoch.defaults.cost import evaluate_polynomial
from stoch.defaults.params import TOY_DEFAULTS, ALIAS_DEFAULT_WEIGHTS
from stoch.tasks import UNIT_SQUARE_CITIES


def test_history_frame_bitstring():
    state = bitstring_annealer(seed=0).run()
    df = history_frame(state)

    assert len(df) == TOY_DEFAULTS.max_iters + 1
    assert list(df.index) == list(range(TOY_DEFAULTS.max_iters + 1))
    assert "bits" in df.columns
    assert df["bits"].str.len().eq(TOY_DEFAULTS.num_bits).all()
    assert df["best_value"].is_monotonic_increasing


def test_history_frame_tour():
    state = tour_annealer(UNIT_SQUARE_CITIES, seed=1, max_iters=100).run()
    df = history_frame(state)

    assert "bits" not in df.columns
    assert df["best_value"].is_monotonic_decreasing


def test_history_frame_empty_state():
    state = bitstring_annealer(num_bits=0).initialize()
    assert len(history_frame(state)) == 0


def test_search_space():
    space = search_space(TOY_DEFAULTS)
    assert len(space) == 2**TOY_DEFAULTS.num_bits
    assert space[3] == (3, evaluate_polynomial(3, TOY_DEFAULTS.coefficients))

    assert search_space(TOY_DEFAULTS.updated(num_bits=9)) == []
    assert search_space(TOY_DEFAULTS.updated(num_bits=0)) == []

    df = search_space_frame(TOY_DEFAULTS.updated(num_bits=3))
    assert df.loc[5, "bits"] == "101"


def test_frequency_frame():
    table = build_tables(ALIAS_DEFAULT_WEIGHTS)
    samples = sample_batch(table, 5000, np.random.default_rng(2))
    df = frequency_frame(table, samples)

    assert df["count"].sum() == 5000
    assert np.isclose(df["empirical"].sum(), 1.)
    assert np.allclose(df["expected"], ALIAS_DEFAULT_WEIGHTS)
    assert (df["abs_error"] < 0.03).all()


def test_run_summary():
    state = bitstring_annealer(seed=3).run()
    summary = run_summary(state)

    assert summary["status"] == "complete"
    assert summary["iteration"] == TOY_DEFAULTS.max_iters
    assert summary["best_value"] == state.best_cost
    assert 0. <= summary["acceptance_rate"] <= 1.
