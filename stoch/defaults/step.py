import numpy as np


ZERO_TEMPERATURE = 1e-6


def acceptance_probability(delta, T, epsilon=ZERO_TEMPERATURE):
    """
    Metropolis criterion written in terms of the improvement `delta` of a move (positive = better, whichever direction
    is being optimized): improvements and ties are always accepted, worse moves with probability exp(delta / T), and
    nothing worse is accepted once the temperature has dropped to (numerically) zero.
    """
    if delta >= 0:
        return 1.0
    if T <= epsilon:
        return 0.0
    return float(np.exp(delta / T))


def metropolis(delta, T, rng: np.random.Generator):
    """
    Draw one acceptance decision. Returns (accepted, probability); the uniform draw is consumed even when the outcome
    is certain.
    """
    p = acceptance_probability(delta, T)
    return bool(rng.random() < p), p


def MH_step(state, current_value, T, modifierClass=None, objectiveClass=None, rng=None):
    """
    Metropolis-Hastings proposal: generate a neighbor of `state`, evaluate it and decide whether to move there.

    Returns (next_state, next_value, accepted, delta, probability) where `delta` is the improvement of the proposal
    over `current_value` (negative for a worse move).
    """
    assert modifierClass and objectiveClass, "Must supply `modifierClass` and `objectiveClass` (this should be handled by an Annealer instance)!"

    proposal = modifierClass.modify(state, rng)
    proposal_value = objectiveClass.eval(proposal)
    delta = objectiveClass.improvement(current_value, proposal_value)

    accepted, p = metropolis(delta, T, rng)
    if accepted:
        return proposal, proposal_value, True, delta, p
    return state, current_value, False, delta, p
