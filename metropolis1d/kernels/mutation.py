"""Mutation (proposal) kernel mixing small and large mutations."""

import numpy as np

_SMALL_STEP = np.float32(0.1)
_HALF = np.float32(0.5)


def mutate(prev_sample, rng, small_mutate_prob):
    """
    Propose a new state from the current one.

    With probability ``small_mutate_prob`` a small mutation is performed,
    otherwise a large one. Both branches use one uniform draw for the choice
    and one for the mutation itself.

    Parameters
    ----------
    prev_sample : numpy.float32
        Current chain state
    rng : Pcg32
        Random number generator
    small_mutate_prob : float
        Probability of a small mutation; callers clamp it to [0, 1]

    Returns
    -------
    proposed : numpy.float32
        Proposed state
    """
    if rng.next_f32() < small_mutate_prob:
        return mutate_small(prev_sample, rng)
    return mutate_large(prev_sample, rng)


def mutate_large(prev_sample, rng):
    """Large mutation: X -> U(0, 1), independent of the current state."""
    return rng.next_f32()


def mutate_small(prev_sample, rng):
    """Small mutation: X -> X + U(-0.05, 0.05).

    The result may leave [0, 1]; such proposals land where the target
    density is zero and are never accepted.
    """
    return np.float32(prev_sample) + _SMALL_STEP * (rng.next_f32() - _HALF)
