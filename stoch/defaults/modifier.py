import numpy as np

from stoch.model.modifier import ModifierFn
from stoch.model.solution import BitString
from stoch.model.params import SWAP, SINGLE_BIT_FLIP, TWO_BIT_FLIP, RANDOM_WALK



def swap_positions(tour, rng):
    """Exchange two uniformly chosen positions of the tour; drawing the same position twice leaves it unchanged"""
    length = len(tour)
    if length == 0:
        return tour
    i, j = rng.integers(0, length, size=2)
    return tour.swap(int(i), int(j))


def flip_single_bit(state, rng):
    if state.num_bits <= 0:
        return state
    return state.flip(int(rng.integers(0, state.num_bits)))


def flip_two_bits(state, rng):
    """Flip two distinct bits, redrawing the second index until it differs from the first"""
    if state.num_bits < 2:
        return state
    first = int(rng.integers(0, state.num_bits))
    second = first
    while second == first:
        second = int(rng.integers(0, state.num_bits))
    return state.flip(first, second)


def random_walk(state, rng):
    """Jump to a uniformly drawn value, independent of the current one"""
    return BitString.random(state.num_bits, rng)


class CitySwap(ModifierFn):
    def __init__(self):
        super(CitySwap, self).__init__(mod_fn_handles=[swap_positions], mod_probs=[1.0])

class SingleBitFlip(ModifierFn):
    def __init__(self):
        super(SingleBitFlip, self).__init__(mod_fn_handles=[flip_single_bit], mod_probs=[1.0])

class TwoBitFlip(ModifierFn):
    def __init__(self):
        super(TwoBitFlip, self).__init__(mod_fn_handles=[flip_two_bits], mod_probs=[1.0])

class RandomWalk(ModifierFn):
    def __init__(self):
        super(RandomWalk, self).__init__(mod_fn_handles=[random_walk], mod_probs=[1.0])

#NOTE: not selectable by name; mixes local flips with the occasional long jump for callers building their own Annealer
class BitFlipMix(ModifierFn):
    """Single flips, double flips and random jumps mixed by probability"""
    def __init__(self, mod_probs=[0.6, 0.3, 0.1]):
        if not np.isclose(sum(mod_probs), 1.0):
            raise ValueError("mod_probs must sum to 1.0!")
        super(BitFlipMix, self).__init__(
            mod_fn_handles=[flip_single_bit, flip_two_bits, random_walk],
            mod_probs=mod_probs,
        )


MODIFIERS = {
    SWAP: CitySwap,
    SINGLE_BIT_FLIP: SingleBitFlip,
    TWO_BIT_FLIP: TwoBitFlip,
    RANDOM_WALK: RandomWalk,
}

TOUR_MODIFIERS = (SWAP,)
BITSTRING_MODIFIERS = (SINGLE_BIT_FLIP, TWO_BIT_FLIP, RANDOM_WALK)


def get_modifier(kind):
    assert kind in MODIFIERS, f"Unknown neighbor strategy `{kind}`; please use `{'`, `'.join(MODIFIERS)}`"
    return MODIFIERS[kind]()
