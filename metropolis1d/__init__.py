"""
Metropolis1D: Metropolis-Hastings Sampling in One Dimension

A small library that draws samples from one-dimensional, possibly
unnormalized densities on the unit interval with the Metropolis-Hastings
algorithm and turns them into a histogram directly comparable to the density.
Runs are seeded with a PCG32 generator and reproducible bit-for-bit.

Example:
    >>> from metropolis1d import Metropolis, TargetType
    >>>
    >>> metropolis = Metropolis.gen_sample_sequence(
    ...     seed=0,
    ...     target=TargetType.SINUS,
    ...     metropolis_samples=10000,
    ...     burn_in_samples=100,
    ...     small_mutate_prob=0.5,
    ...     expected_value_technique=True,
    ... )
    >>> density = metropolis.sample_distribution(num_bins=50)
"""

__version__ = "0.1.0"
__license__ = "MIT"

# Import core components
from metropolis1d.rng import Pcg32
from metropolis1d.targets import (
    TargetFunction,
    ShiftedSquare,
    Sinus,
    TargetType,
    get_target,
)
from metropolis1d.kernels import mutate, mutate_small, mutate_large, metropolis_sampling
from metropolis1d.datatypes import Sample, SamplingConfig, SamplingResult
from metropolis1d.inference import (
    Metropolis,
    gen_sample_sequence,
    sample_distribution,
    histogram_steps,
    sample_density,
)

__all__ = [
    "Pcg32",
    "TargetFunction",
    "ShiftedSquare",
    "Sinus",
    "TargetType",
    "get_target",
    "mutate",
    "mutate_small",
    "mutate_large",
    "metropolis_sampling",
    "Sample",
    "SamplingConfig",
    "SamplingResult",
    "Metropolis",
    "gen_sample_sequence",
    "sample_distribution",
    "histogram_steps",
    "sample_density",
]
