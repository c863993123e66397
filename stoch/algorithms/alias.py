import numpy as np
from collections import namedtuple
from dataclasses import dataclass
from warnings import warn

from stoch.errors import PreconditionError, UniformFallbackWarning



@dataclass(frozen=True, eq=False)
class AliasTable:
    """
    Tables for O(1) sampling from a discrete distribution. `probs` is the normalized input distribution,
    `prob_table[j]` the probability of keeping bucket j and `alias_table[j]` the outcome used otherwise.
    """
    probs: np.ndarray
    prob_table: np.ndarray
    alias_table: np.ndarray

    @property
    def n(self):
        return len(self.prob_table)

    def __len__(self):
        return self.n


AliasDraw = namedtuple("AliasDraw", ["bucket", "coin", "kept", "outcome"])


def normalize(weights):
    """
    Scale non-negative weights to sum to one. A vector summing to zero falls back to the uniform distribution and
    emits a `UniformFallbackWarning`.
    """
    weights = np.asarray(weights, dtype=float)
    if weights.ndim != 1 or weights.size == 0:
        raise PreconditionError("Weights must be a non-empty 1-D sequence")
    if np.any(weights < 0) or not np.all(np.isfinite(weights)):
        raise PreconditionError(f"Weights must be finite and non-negative, got {weights.tolist()}")

    peak = weights.max()
    if peak <= 0:
        warn(
            f"Weights {weights.tolist()} sum to zero; using a uniform distribution instead",
            UniformFallbackWarning,
            stacklevel=2,
        )
        return np.full(weights.size, 1.0 / weights.size)

    # scale by the largest weight first so the sum cannot overflow
    scaled = weights / peak
    return scaled / scaled.sum()


def build_tables(weights):
    """
    Vose's alias method: O(n) construction of the probability and alias tables for the distribution given by
    `weights` (normalized first).
    """
    probs = normalize(weights)
    n = probs.size
    scaled = probs * n

    prob_table = np.zeros(n)
    alias_table = np.arange(n)

    small = [i for i in range(n) if scaled[i] < 1]
    large = [i for i in range(n) if scaled[i] >= 1]

    while small and large:
        s = small.pop()
        l = large.pop()

        prob_table[s] = scaled[s]
        alias_table[s] = l

        scaled[l] -= (1 - scaled[s])
        if scaled[l] < 1:
            small.append(l)
        else:
            large.append(l)

    # leftovers are due to floating point residue and always keep their own bucket
    for i in large + small:
        prob_table[i] = 1.

    return AliasTable(probs=probs, prob_table=prob_table, alias_table=alias_table)


def sample_trace(table, rng):
    """One draw with its intermediate steps: the bucket, the coin flip, whether the bucket was kept, and the outcome"""
    bucket = int(rng.integers(0, table.n))
    coin = float(rng.random())
    kept = coin < table.prob_table[bucket]
    outcome = bucket if kept else int(table.alias_table[bucket])
    return AliasDraw(bucket, coin, bool(kept), outcome)


def sample(table, rng):
    return sample_trace(table, rng).outcome


def sample_batch(table, count, rng):
    """`count` independent draws, vectorized over the buckets and coins"""
    if count <= 0:
        return np.zeros(0, dtype=int)
    buckets = rng.integers(0, table.n, size=count)
    coins = rng.random(count)
    return np.where(coins < table.prob_table[buckets], buckets, table.alias_table[buckets])


def empirical_frequencies(samples, n):
    """Fraction of `samples` equal to each outcome 0..n-1"""
    samples = np.asarray(samples, dtype=int)
    if samples.size == 0:
        return np.zeros(n)
    return np.bincount(samples, minlength=n)[:n] / samples.size
