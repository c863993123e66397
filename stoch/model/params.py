from dataclasses import dataclass, field, replace
from typing import Tuple

from stoch.utils import normalize_name


GEOMETRIC = "geometric"
LINEAR = "linear"
LOGARITHMIC = "logarithmic"
SCHEDULE_KINDS = (GEOMETRIC, LINEAR, LOGARITHMIC)

SWAP = "swap"
SINGLE_BIT_FLIP = "single_bit_flip"
TWO_BIT_FLIP = "two_bit_flip"
RANDOM_WALK = "random_walk"
NEIGHBOR_KINDS = (SWAP, SINGLE_BIT_FLIP, TWO_BIT_FLIP, RANDOM_WALK)


@dataclass(frozen=True)
class AnnealingParams:
    """
    Immutable parameter record for one annealing run.

    `initial_temp`: starting temperature (> 0)
    `cooling_rate`: decay factor of the geometric schedule (0 < rate < 1)
    `max_iters`: number of steps in a full run (> 0)
    `schedule`: one of `geometric`, `linear`, `logarithmic`
    `neighbor`: one of `swap` (tours), `single_bit_flip`, `two_bit_flip`, `random_walk` (bitstrings)
    `coefficients`: polynomial coefficients, index = power (bitstring search only)
    `num_bits`: bit width r of the bitstring search
    """

    initial_temp: float
    cooling_rate: float
    max_iters: int
    schedule: str = GEOMETRIC
    neighbor: str = SWAP
    coefficients: Tuple[float, ...] = field(default_factory=tuple)
    num_bits: int = 0

    def __post_init__(self):
        # accept the display names used by front ends ("Two Bit Flip", "Geometric")
        object.__setattr__(self, "schedule", normalize_name(self.schedule))
        object.__setattr__(self, "neighbor", normalize_name(self.neighbor))
        object.__setattr__(self, "coefficients", tuple(float(c) for c in self.coefficients))
        object.__setattr__(self, "max_iters", int(self.max_iters))
        object.__setattr__(self, "num_bits", int(self.num_bits))

    @property
    def degree(self) -> int:
        return max(len(self.coefficients) - 1, 0)

    def updated(self, **changes):
        """Copy of the record with some fields replaced"""
        return replace(self, **changes)

    def with_degree(self, degree: int):
        """Copy with `degree + 1` coefficients: existing ones are kept up to the new degree, new powers start at 0"""
        assert degree >= 0, "`degree` must be non-negative"
        coefficients = self.coefficients[:degree + 1]
        coefficients += (0.,) * (degree + 1 - len(coefficients))
        return replace(self, coefficients=coefficients)
