"""Metropolis sampling result and density estimate."""

import numpy as np
from metropolis1d.inference.histogram import sample_distribution
from metropolis1d.kernels.metropolis import metropolis_sampling
from metropolis1d.targets import get_target


def _check_count(name, value):
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer)):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
    return int(value)


class Metropolis:
    """Sample sequence of one Metropolis run.

    Holds the recorded (value, weight) samples together with the
    normalization constant of the target they were drawn from. Instances are
    not updated in place: changing any parameter means generating a new one
    with :meth:`gen_sample_sequence`.

    Parameters
    ----------
    sample_sequence : sequence of Sample
        Recorded samples in generation order
    norm : float
        Normalization constant of the sampled target
    acceptance_rate : float, optional
        Fraction of accepted proposals (default: None)

    Examples
    --------
    >>> from metropolis1d import Metropolis, TargetType
    >>>
    >>> metropolis = Metropolis.gen_sample_sequence(
    ...     seed=0,
    ...     target=TargetType.SHIFTED_SQUARE,
    ...     metropolis_samples=10000,
    ...     burn_in_samples=100,
    ... )
    >>> density = metropolis.sample_distribution(50)
    """

    def __init__(self, sample_sequence, norm, acceptance_rate=None):
        self._sample_sequence = tuple(sample_sequence)
        self._norm = np.float32(norm)
        self._acceptance_rate = acceptance_rate

    @classmethod
    def gen_sample_sequence(
        cls,
        seed,
        target,
        metropolis_samples,
        burn_in_samples,
        small_mutate_prob,
        expected_value_technique,
        verbose=False
    ):
        """
        Run a Metropolis chain and record its samples.

        Parameters
        ----------
        seed : int
            64-bit seed of the random number generator
        target : TargetType, str or TargetFunction
            Target to sample from
        metropolis_samples : int
            Number of recorded iterations after burn-in
        burn_in_samples : int
            Number of unrecorded iterations before recording starts
        small_mutate_prob : float
            Probability of a small mutation, clamped to [0, 1]
        expected_value_technique : bool
            Record the expected value of each transition instead of its
            random outcome
        verbose : bool, optional
            If True, print progress information (default: False)

        Returns
        -------
        metropolis : Metropolis
            The recorded sample sequence

        Raises
        ------
        ValueError
            If a sample count is negative, the seed is not a 64-bit unsigned
            integer, or the target is unknown
        """
        target = get_target(target)
        metropolis_samples = _check_count("metropolis_samples", metropolis_samples)
        burn_in_samples = _check_count("burn_in_samples", burn_in_samples)

        if verbose:
            print(f"\n{'='*70}")
            print(f"Metropolis Sampling: {target.name}")
            print(f"{'='*70}\n")

        samples, acceptance_rate = metropolis_sampling(
            target,
            seed=seed,
            metropolis_samples=metropolis_samples,
            burn_in_samples=burn_in_samples,
            small_mutate_prob=small_mutate_prob,
            expected_value_technique=bool(expected_value_technique),
            verbose=verbose,
        )

        if verbose:
            print(f"Acceptance rate: {acceptance_rate:.2%}")
            print(f"\n{'='*70}")
            print("Sampling complete!")
            print(f"{'='*70}\n")

        return cls(samples, target.norm, acceptance_rate)

    @property
    def sample_sequence(self):
        """Recorded samples as a tuple of ``Sample``."""
        return self._sample_sequence

    @property
    def norm(self):
        """Normalization constant of the sampled target."""
        return self._norm

    @property
    def acceptance_rate(self):
        """Fraction of accepted proposals, or None if unknown."""
        return self._acceptance_rate

    @property
    def values(self):
        """Sample values as a float32 array."""
        return np.array([s.value for s in self._sample_sequence], dtype=np.float32)

    @property
    def weights(self):
        """Sample weights as a float32 array."""
        return np.array([s.weight for s in self._sample_sequence], dtype=np.float32)

    def __len__(self):
        return len(self._sample_sequence)

    def sample_distribution(self, num_bins):
        """
        Distribution of the samples in ``num_bins`` bins, rescaled to match
        the target density.

        Parameters
        ----------
        num_bins : int
            Number of equal-width bins over [0, 1), at least 1

        Returns
        -------
        bins : numpy.ndarray
            float32 array of shape (num_bins,)

        Raises
        ------
        ValueError
            If ``num_bins`` is smaller than 1
        """
        return sample_distribution(self.values, self.weights, num_bins, self._norm)

    def summary(self):
        """
        Compute weighted summary statistics of the samples.

        Returns
        -------
        summary : dict
            Weighted mean and standard deviation, number of records, total
            weight and acceptance rate
        """
        values = self.values.astype(np.float64)
        weights = self.weights.astype(np.float64)
        total_weight = float(np.sum(weights))
        mean = float(np.sum(weights * values) / total_weight)
        variance = float(np.sum(weights * (values - mean) ** 2) / total_weight)

        return {
            'mean': mean,
            'std': float(np.sqrt(variance)),
            'num_records': len(self),
            'total_weight': total_weight,
            'acceptance_rate': self._acceptance_rate,
        }

    def print_summary(self):
        """Print summary statistics in a formatted table."""
        summary = self.summary()
        rate = summary['acceptance_rate']
        rate_str = "n/a" if rate is None else f"{rate:.2%}"

        print("\nSample Summary:")
        print("="*60)
        print(f"{'Mean':<10} {'Std':<10} {'Records':<10} {'Weight':<12} {'Accept':<10}")
        print("-"*60)
        print(f"{summary['mean']:<10.3f} {summary['std']:<10.3f} "
              f"{summary['num_records']:<10d} {summary['total_weight']:<12.1f} {rate_str:<10}")
        print("="*60)

    def __repr__(self):
        """String representation of the sample sequence."""
        return f"Metropolis(num_samples={len(self)}, norm={self._norm})"


def gen_sample_sequence(
    seed,
    target,
    metropolis_samples,
    burn_in_samples,
    small_mutate_prob,
    expected_value_technique,
    verbose=False
):
    """Functional alias of :meth:`Metropolis.gen_sample_sequence`."""
    return Metropolis.gen_sample_sequence(
        seed,
        target,
        metropolis_samples,
        burn_in_samples,
        small_mutate_prob,
        expected_value_technique,
        verbose=verbose,
    )
