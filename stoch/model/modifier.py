import numpy as np
from typing import List, Callable


def uniform_probs(num_fns):
    return [1.0/num_fns] * num_fns


class ModifierFn():
    """
    Class wrapper for storing functions that generate a neighbor of an input state using one of a finite set of possible
    perturbation functions. The `self.modify()` method of this class perturbs the input state using a single one of the
    functions in `mod_fn_handles`, and samples stochastically which function to use according to its corresponding
    probability (`mod_probs[i]`).

    Every perturbation function receives the state and the random generator as its first two arguments and must return
    a new state (inputs are never modified in place).
    """

    def __init__(
        self,
        mod_fn_handles: List[Callable],       # list of function handles corresponding to the available perturbation functions
        mod_probs: List[float]=None,          # probability of using each of the available perturbation functions
        mod_fn_args = None,                   # non-keyword arguments for each of the functions in `mod_fn_handles`
        mod_fn_kwargs = None,                 # keyword arguments for each of the functions in `mod_fn_handles`
    ):

        """
        Initializer or constructor for an instance of the `ModifierFn` class

        Arguments:
        ==========
        `mod_fn_handles` [List[Callable]]: list of functions with signature `fn(state, rng, *args, **kwargs)` returning a new state
        `mod_probs` [List[float] or None]: list of probabilities of picking each of the functions in `mod_fn_handles` (uniform by default)
        `mod_fn_args` [List[List] or None]: list of lists of optional ordered arguments to each of the functions in `mod_fn_handles`
        `mod_fn_kwargs` [List[Dict] or None]: list of dicts of keyword arguments to each of the functions in `mod_fn_handles`
        """

        mod_probs = uniform_probs(len(mod_fn_handles)) if not mod_probs else mod_probs
        assert len(mod_fn_handles) == len(mod_probs), "Number of perturbation functions must match number of associated sampling probabilities"

        self.mod_fn_handles = mod_fn_handles

        if mod_fn_args is not None:
            assert len(mod_fn_handles) == len(mod_fn_args), "Number of argument lists does not match number of provided modification functions!"
            self.mod_fn_args = [arg if isinstance(arg, list) else [arg] for arg in mod_fn_args]
        else:
            self.mod_fn_args = len(mod_fn_handles) * [[]]

        if mod_fn_kwargs is not None:
            assert len(mod_fn_handles) == len(mod_fn_kwargs), "Number of provided keyword-argument dicts does not match number of provided modification functions!"
            self.mod_fn_kwargs = mod_fn_kwargs
        else:
            self.mod_fn_kwargs = len(mod_fn_handles) * [{}]

        if isinstance(mod_probs, (list, tuple, np.ndarray)):
            self.mod_probs = mod_probs
        else:
            raise TypeError(
                'mod_probs must be a list, tuple or 1-D numpy array'
            )

    def modify(self, state, rng: np.random.Generator):
        """
        Randomly selects one of the perturbation functions and uses it to produce a neighbor of the current state
        """

        if len(self.mod_fn_handles) == 1:
            mod_i = 0 # no selection draw for a single strategy
        else:
            mod_i = rng.choice(len(self.mod_fn_handles), p=self.mod_probs)
        return self.mod_fn_handles[mod_i](state, rng, *self.mod_fn_args[mod_i], **self.mod_fn_kwargs[mod_i])
