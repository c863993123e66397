import numpy as np
import pytest

from stoch.model.modifier import ModifierFn
from stoch.model.solution import PermutationTour, BitString
from stoch.defaults.modifier import (
    CitySwap,
    SingleBitFlip,
    TwoBitFlip,
    RandomWalk,
    BitFlipMix,
    get_modifier,
)


def hamming(a, b):
    return sum(x != y for x, y in zip(a.bits, b.bits))


def test_city_swap_keeps_permutation():
    """
    Swapping changes either zero positions (same index drawn twice) or exactly two
    """

    modifier = CitySwap()
    tour = PermutationTour.random(8, rng)
    seen_noop = False
    for _ in range(200):
        neighbor = modifier.modify(tour, rng)
        assert neighbor.is_valid(8)
        changed = sum(a != b for a, b in zip(tour, neighbor))
        assert changed in (0, 2)
        seen_noop = seen_noop or changed == 0

    assert seen_noop


def test_single_bit_flip():
    modifier = SingleBitFlip()
    state = BitString(0b10110, 5)
    for _ in range(50):
        assert hamming(state, modifier.modify(state, rng)) == 1


def test_two_bit_flip_distinct_indices():
    modifier = TwoBitFlip()
    state = BitString(0b1001101, 7)
    for _ in range(50):
        assert hamming(state, modifier.modify(state, rng)) == 2

    # fewer than two bits: nothing to flip
    narrow = BitString(1, 1)
    assert modifier.modify(narrow, rng) == narrow


def test_random_walk_stays_in_range():
    modifier = RandomWalk()
    state = BitString(0, 4)
    values = {modifier.modify(state, rng).value for _ in range(300)}
    assert values <= set(range(16))
    assert len(values) > 8


def test_zero_width_neighbors_are_inert():
    empty = BitString(0, 0)
    for modifier in [SingleBitFlip(), TwoBitFlip(), RandomWalk()]:
        assert modifier.modify(empty, rng) == empty


def test_modifier_mix_uses_all_functions():
    calls = []

    def tag(name):
        def fn(state, rng):
            calls.append(name)
            return state
        return fn

    modifier = ModifierFn([tag("a"), tag("b")], [0.5, 0.5])
    for _ in range(100):
        modifier.modify(None, rng)

    assert set(calls) == {"a", "b"}


def test_modifier_args_and_kwargs():
    modifier = ModifierFn([lambda state, rng, step, scale=1: state + step*scale], mod_fn_args=[3], mod_fn_kwargs=[{"scale": 2}])
    assert modifier.modify(1, rng) == 7


def test_bitflip_mix_probabilities_must_sum_to_one():
    with pytest.raises(ValueError):
        BitFlipMix(mod_probs=[0.5, 0.5, 0.5])
    assert BitFlipMix().modify(BitString(3, 4), rng).num_bits == 4


def test_get_modifier_by_name():
    assert isinstance(get_modifier("two_bit_flip"), TwoBitFlip)
    with pytest.raises(AssertionError):
        get_modifier("three_bit_flip")


rng = np.random.default_rng(5)
