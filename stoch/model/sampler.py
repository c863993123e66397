import numpy as np

from stoch.algorithms.alias import build_tables, sample, sample_trace, sample_batch, empirical_frequencies


class AliasSampler():
    """
    Weighted discrete sampler holding a weight vector, the alias tables built from it and the random generator used
    for draws. Tables are rebuilt only when the weights change.

    =============
    Usage example:
    =============
    ```
    sampler = AliasSampler([0.3, 0.1, 0.1, 0.25, 0.25], seed=0)
    outcomes = sampler.sample_batch(1000)
    sampler.frequencies(outcomes)   # close to [0.3, 0.1, 0.1, 0.25, 0.25]
    ```
    """

    def __init__(self, weights, rng: np.random.Generator=None, seed: int=None):
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.set_weights(weights)

    def set_weights(self, weights):
        self.weights = np.asarray(weights, dtype=float)
        self.table = build_tables(self.weights)
        return self.table

    def set_weight(self, index, weight):
        """Change a single weight (e.g. one slider) and rebuild the tables"""
        weights = self.weights.copy()
        weights[index] = weight
        return self.set_weights(weights)

    @property
    def probs(self):
        return self.table.probs

    @property
    def n(self):
        return self.table.n

    def sample(self):
        return sample(self.table, self.rng)

    def trace(self):
        return sample_trace(self.table, self.rng)

    def sample_batch(self, count):
        return sample_batch(self.table, count, self.rng)

    def frequencies(self, samples):
        return empirical_frequencies(samples, self.n)
