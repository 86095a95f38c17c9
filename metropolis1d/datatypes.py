"""
Core data structures shared by the sampler, the histogram estimator and
the configuration-to-output pipeline.
"""
from typing import NamedTuple, Callable, Union

import numpy as np

from metropolis1d.targets import TargetFunction, TargetType


class Sample(NamedTuple):
    """Recorded chain state and the probability mass it carries"""
    value: np.float32
    weight: np.float32


class SamplingConfig(NamedTuple):
    """Snapshot of every parameter of a sampling run"""
    seed: int = 0
    target: Union[TargetType, str, TargetFunction] = TargetType.SHIFTED_SQUARE
    expected_value_technique: bool = False
    small_mutate_prob: float = 0.5
    burn_in_samples: int = 100
    metropolis_samples: int = 10000
    num_bins: int = 50

    def replace(self, **changes) -> "SamplingConfig":
        """New snapshot with some fields changed"""
        return self._replace(**changes)


class SamplingResult(NamedTuple):
    density: np.ndarray  # (num_bins,) float32 rescaled histogram
    reference: Callable  # double precision target density for plotting
    metropolis: "Metropolis"  # noqa: F821
