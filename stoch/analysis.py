import pandas as pd

from stoch.defaults.cost import evaluate_polynomial
from stoch.defaults.params import SEARCH_SPACE_MAX_BITS
from stoch.model.solution import int_to_bits



def history_frame(state):
    """
    One row per iteration record of an annealing run (iteration, value, best value, temperature, acceptance
    probability, whether the move was accepted and, for bitstring runs, the bits as a string)
    """
    rows = []
    for record in state.history:
        row = {
            "iteration": record.iteration,
            "value": record.value,
            "best_value": record.best_value,
            "temperature": record.temperature,
            "acceptance_probability": record.acceptance_probability,
            "accepted": record.accepted,
        }
        if record.bits is not None:
            row["bits"] = "".join(str(b) for b in record.bits)
        rows.append(row)

    columns = ["iteration", "value", "best_value", "temperature", "acceptance_probability", "accepted"]
    df = pd.DataFrame(rows, columns=columns + (["bits"] if rows and "bits" in rows[0] else []))
    return df.set_index("iteration")


def search_space(params, max_bits=SEARCH_SPACE_MAX_BITS):
    """
    Every (state, value) pair of the polynomial landscape, or an empty list when the bit width is 0 or larger than
    `max_bits` (too many states to enumerate for display).
    """
    if params.num_bits <= 0 or params.num_bits > max_bits:
        return []
    return [(n, evaluate_polynomial(n, params.coefficients)) for n in range(2**params.num_bits)]


def search_space_frame(params, max_bits=SEARCH_SPACE_MAX_BITS):
    df = pd.DataFrame(search_space(params, max_bits), columns=["state", "value"])
    df["bits"] = ["".join(str(b) for b in int_to_bits(n, params.num_bits)) for n in df["state"]]
    return df.set_index("state")


def frequency_frame(table, samples):
    """
    Expected probability, alias-table entries and empirical frequency (over `samples`) for every outcome
    """
    counts = pd.Series(samples, dtype=int).value_counts().reindex(range(table.n), fill_value=0)
    total = max(len(samples), 1)
    df = pd.DataFrame({
        "expected": table.probs,
        "prob_table": table.prob_table,
        "alias": table.alias_table,
        "count": counts.values,
    })
    df["empirical"] = df["count"] / total
    df["abs_error"] = (df["empirical"] - df["expected"]).abs()
    df.index.name = "outcome"
    return df


def run_summary(state):
    """Headline numbers of an annealing run"""
    return {
        "status": state.status,
        "iteration": state.iteration,
        "current_value": state.current_cost,
        "best_value": state.best_cost,
        "temperature": state.temperature,
        "accepted_worse": state.accepted_worse,
        "acceptance_rate": float(pd.Series([r.accepted for r in state.history[1:]], dtype=float).mean())
            if len(state.history) > 1 else float("nan"),
    }
