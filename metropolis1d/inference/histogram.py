"""Histogram density estimation from weighted samples."""

import numpy as np


def check_num_bins(num_bins):
    """Validate a bin count, returning it as a Python int."""
    if isinstance(num_bins, (bool, np.bool_)) or not isinstance(num_bins, (int, np.integer)):
        raise ValueError(f"num_bins must be an integer, got {num_bins!r}")
    if num_bins < 1:
        raise ValueError(f"num_bins must be at least 1, got {num_bins}")
    return int(num_bins)


def sample_distribution(values, weights, num_bins, norm):
    """
    Bin weighted samples over [0, 1) into a density comparable to the target.

    Each value falls into bin ``floor(value * num_bins)``, clamped into
    ``[0, num_bins - 1]``, so values that a small mutation pushed outside the
    unit interval count towards the nearest edge bin. Every bin is then
    divided by ``total_weight / num_bins * norm``.

    Parameters
    ----------
    values : array_like
        Sample values
    weights : array_like
        Sample weights, same length as ``values``
    num_bins : int
        Number of equal-width bins, must be at least 1
    norm : float
        Normalization constant of the target

    Returns
    -------
    bins : numpy.ndarray
        float32 array of shape (num_bins,)

    Raises
    ------
    ValueError
        If ``num_bins`` is not a positive integer or the lengths differ
    """
    num_bins = check_num_bins(num_bins)

    values = np.asarray(values, dtype=np.float32)
    weights = np.asarray(weights, dtype=np.float32)
    if values.shape != weights.shape:
        raise ValueError(
            f"values and weights must have the same shape, "
            f"got {values.shape} and {weights.shape}"
        )

    index = np.floor(values * np.float32(num_bins))
    index = np.clip(index, 0, num_bins - 1).astype(np.intp)

    # np.add.at is unbuffered: bins accumulate in generation order
    bins = np.zeros(num_bins, dtype=np.float32)
    np.add.at(bins, index, weights)

    # Sequential float32 sum (np.sum would use pairwise summation)
    total = np.float32(0.0)
    for b in bins:
        total += b

    normalisation = total / np.float32(num_bins) * np.float32(norm)
    return bins / normalisation


def histogram_steps(bins):
    """
    Step-line coordinates for drawing a histogram over [0, 1].

    Parameters
    ----------
    bins : array_like
        Bin heights of shape (num_bins,)

    Returns
    -------
    x : numpy.ndarray
        Bin edges, each interior edge repeated, shape (2 * num_bins,)
    y : numpy.ndarray
        Bin heights, each repeated twice, shape (2 * num_bins,)
    """
    bins = np.asarray(bins)
    num_bins = bins.shape[0]
    left = np.arange(num_bins) / num_bins
    right = np.arange(1, num_bins + 1) / num_bins
    x = np.stack([left, right], axis=1).reshape(-1)
    y = np.repeat(bins, 2)
    return x, y
