import numpy as np

from stoch.api.core import alias_sampler
from stoch.defaults.params import ALIAS_DEFAULT_WEIGHTS, ALIAS_DEFAULT_SAMPLE_SIZE
from stoch.analysis import frequency_frame



sampler = alias_sampler(ALIAS_DEFAULT_WEIGHTS, random_seed=0)
print("single draw:", sampler.trace())

samples = sampler.sample_batch(ALIAS_DEFAULT_SAMPLE_SIZE)
print(frequency_frame(sampler.table, samples))

sampler.set_weight(1, 2.0)
print(frequency_frame(sampler.table, sampler.sample_batch(100000)))
