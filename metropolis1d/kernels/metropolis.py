"""Metropolis-Hastings sampler for one-dimensional targets."""

import numpy as np
from metropolis1d.datatypes import Sample
from metropolis1d.kernels.mutation import mutate
from metropolis1d.rng import Pcg32

_ONE = np.float32(1.0)


def metropolis_sampling(
    target,
    seed=0,
    metropolis_samples=10000,
    burn_in_samples=100,
    small_mutate_prob=0.5,
    expected_value_technique=False,
    verbose=False
):
    """
    Metropolis-Hastings sampler with mixed small/large mutations.

    Runs the chain::

        X = X0
        for i = 1 to burn_in_samples + metropolis_samples
            X' = mutate(X)
            a = min(1, f(X') / f(X))
            if expected_value_technique and past burn-in
                record(X, 1 - a)
                record(X', a)
            if random() < a
                X = X'
            if not expected_value_technique and past burn-in
                record(X, 1)

    The initial state X0 is always recorded first with weight 1.

    Parameters
    ----------
    target : TargetFunction
        Density to sample from
    seed : int, optional
        64-bit seed of the PCG32 generator (default: 0)
    metropolis_samples : int, optional
        Number of iterations recorded after burn-in (default: 10000)
    burn_in_samples : int, optional
        Number of iterations run before recording starts (default: 100)
    small_mutate_prob : float, optional
        Probability of a small mutation, clamped to [0, 1] (default: 0.5)
    expected_value_technique : bool, optional
        If True, record both the current and the proposed state weighted by
        the acceptance probability (default: False)
    verbose : bool, optional
        If True, print progress updates (default: False)

    Returns
    -------
    samples : list of Sample
        Recorded (value, weight) pairs in generation order
    acceptance_rate : float
        Fraction of proposals that were accepted, burn-in included

    Notes
    -----
    A state with zero density makes the acceptance ratio non-finite. The
    resulting ``nan`` weights are recorded as they are; the target must be
    positive wherever the chain can be.
    """
    small_mutate_prob = np.clip(np.float32(small_mutate_prob), 0.0, 1.0)
    num_iterations = burn_in_samples + metropolis_samples

    rng = Pcg32(seed)
    x = rng.next_f32()
    f_x = target(x)
    samples = [Sample(x, _ONE)]
    n_accepted = 0

    if verbose:
        print(f"Running {num_iterations} Metropolis-Hastings iterations "
              f"({burn_in_samples} burn-in)...")

    for i in range(num_iterations):
        x_prime = mutate(x, rng, small_mutate_prob)
        f_x_prime = target(x_prime)

        acceptance = np.minimum(f_x_prime / f_x, _ONE)
        recording = i >= burn_in_samples

        if expected_value_technique and recording:
            samples.append(Sample(x, _ONE - acceptance))
            samples.append(Sample(x_prime, acceptance))

        if rng.next_f32() < acceptance:
            x = x_prime
            f_x = f_x_prime
            n_accepted += 1

        if not expected_value_technique and recording:
            samples.append(Sample(x, _ONE))

        # Progress indicator
        if verbose and (i + 1) % 5000 == 0:
            print(f"  Iteration {i+1}/{num_iterations} "
                  f"(accept rate: {n_accepted/(i+1):.2%})")

    acceptance_rate = n_accepted / num_iterations if num_iterations else 0.0

    return samples, acceptance_rate
