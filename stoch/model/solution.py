import numpy as np
from typing import Iterable, Optional, Tuple


class Solution():
    """
    Base class for the states that an `Annealer` moves between: `PermutationTour` or `BitString`. The engine only
    uses `kind` and `snapshot()`.
    """

    kind = None

    def snapshot(self):
        """Per-iteration snapshot stored in the run history (None if the variant has nothing extra to record)"""
        return None


class PermutationTour(Solution):
    """
    Ordered visiting sequence of city indices for a closed tour. City 0 is the fixed start and is not part of `order`,
    so a tour over `city_count` cities is a permutation of `1..city_count-1`.
    """

    kind = "tour"

    def __init__(self, order: Iterable[int]):
        self.order = tuple(int(c) for c in order)

    @classmethod
    def identity(cls, city_count: int):
        return cls(range(1, city_count))

    @classmethod
    def random(cls, city_count: int, rng: np.random.Generator):
        """Uniformly shuffled tour over `city_count` cities (start city excluded)"""
        order = np.arange(1, city_count)
        rng.shuffle(order)
        return cls(order)

    def swap(self, i: int, j: int):
        """Return a new tour with positions `i` and `j` exchanged (a copy of `self` if i == j)"""
        order = list(self.order)
        order[i], order[j] = order[j], order[i]
        return PermutationTour(order)

    def is_valid(self, city_count: int) -> bool:
        return sorted(self.order) == list(range(1, city_count))

    def cycle(self) -> Tuple[int, ...]:
        """Full closed cycle including the start city at both ends"""
        return (0,) + self.order + (0,)

    def __len__(self):
        return len(self.order)

    def __iter__(self):
        return iter(self.order)

    def __eq__(self, other):
        return isinstance(other, PermutationTour) and self.order == other.order

    def __hash__(self):
        return hash(self.order)

    def __repr__(self):
        return f"PermutationTour({list(self.order)})"


def int_to_bits(value: int, num_bits: int) -> Tuple[int, ...]:
    """Most-significant-bit-first binary expansion of `value` clamped to `[0, 2^num_bits)`"""
    if num_bits <= 0:
        return ()
    value = max(0, min(int(value), 2**num_bits - 1))
    return tuple((value >> shift) & 1 for shift in range(num_bits - 1, -1, -1))


def bits_to_int(bits: Iterable[int]) -> int:
    value = 0
    for bit in bits:
        value = (value << 1) | (int(bit) & 1)
    return value


class BitString(Solution):
    """
    Unsigned integer in `[0, 2^num_bits)` together with its bit array (MSB first). The bit array is always derived from
    the value, so the two can never disagree; perturbations return new instances.
    """

    kind = "bitstring"

    def __init__(self, value: int, num_bits: int):
        self.num_bits = max(int(num_bits), 0)
        self.value = 0 if self.num_bits == 0 else max(0, min(int(value), 2**self.num_bits - 1))
        self.bits = int_to_bits(self.value, self.num_bits)

    @classmethod
    def from_bits(cls, bits: Iterable[int]):
        bits = tuple(bits)
        return cls(bits_to_int(bits), len(bits))

    @classmethod
    def random(cls, num_bits: int, rng: np.random.Generator):
        if num_bits <= 0:
            return cls(0, 0)
        return cls(int(rng.integers(0, 2**num_bits)), num_bits)

    def flip(self, *indices: int):
        """Return a new bitstring with each bit at `indices` inverted"""
        bits = list(self.bits)
        for idx in indices:
            bits[idx] = 1 - bits[idx]
        return BitString.from_bits(bits)

    def snapshot(self) -> Optional[Tuple[int, ...]]:
        return self.bits

    def __int__(self):
        return self.value

    def __eq__(self, other):
        return isinstance(other, BitString) and (self.value, self.num_bits) == (other.value, other.num_bits)

    def __hash__(self):
        return hash((self.value, self.num_bits))

    def __repr__(self):
        return f"BitString({self.value}, bits={''.join(str(b) for b in self.bits)})"
