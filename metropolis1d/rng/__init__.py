"""Deterministic random number generation."""

from metropolis1d.rng.pcg32 import Pcg32

__all__ = ["Pcg32"]
