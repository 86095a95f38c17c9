"""High-level inference API."""

from metropolis1d.inference.histogram import sample_distribution, histogram_steps
from metropolis1d.inference.metropolis import Metropolis, gen_sample_sequence
from metropolis1d.inference.pipeline import sample_density

__all__ = [
    "Metropolis",
    "gen_sample_sequence",
    "sample_distribution",
    "histogram_steps",
    "sample_density",
]
