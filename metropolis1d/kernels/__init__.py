"""MCMC sampling kernels."""

from metropolis1d.kernels.mutation import mutate, mutate_small, mutate_large
from metropolis1d.kernels.metropolis import metropolis_sampling

__all__ = ["mutate", "mutate_small", "mutate_large", "metropolis_sampling"]
