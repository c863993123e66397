from stoch.api.core import maximize_polynomial
from stoch.analysis import search_space_frame, history_frame
from stoch.defaults.params import TOY_DEFAULTS, TOY_BOUNDS, validate_params



params = validate_params(TOY_DEFAULTS.updated(neighbor="Two Bit Flip", schedule="Logarithmic"), TOY_BOUNDS)
landscape = search_space_frame(params)

value, best, state = maximize_polynomial(params, random_seed=0)

print("search space maximum:", landscape["value"].max(), "at", landscape["value"].idxmax())
print("annealed maximum:", value, "at", best, f"({state.accepted_worse} worse moves accepted)")
print(history_frame(state).tail(10))
