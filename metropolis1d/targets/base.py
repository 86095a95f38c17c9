"""Base class for target densities."""

import numpy as np


class TargetFunction:
    """Base class for all target densities.

    A target pairs a (possibly unnormalized) density over the unit interval
    with a precomputed normalization constant. The constant is only used to
    rescale sampled histograms for comparison with the density; the sampler
    itself only ever looks at density ratios.

    All targets must implement:
    - density(x): single precision density on float32 arrays
    - reference(x): double precision density used for plotting
    """

    name = None
    norm = None

    def __call__(self, x):
        """
        Evaluate the density in single precision.

        Values outside the support [0, 1] have density 0.

        Parameters
        ----------
        x : float or array_like
            Point(s) at which to evaluate the density

        Returns
        -------
        density : numpy.float32 or numpy.ndarray
            Non-negative density value(s)
        """
        x = np.asarray(x, dtype=np.float32)
        inside = (x >= 0) & (x <= 1)
        density = np.where(inside, self.density(x), np.float32(0.0))
        return density.astype(np.float32)[()]

    def density(self, x):
        """
        Compute the density on a float32 array, ignoring the support.

        Parameters
        ----------
        x : numpy.ndarray
            float32 values

        Returns
        -------
        density : numpy.ndarray
            float32 density values
        """
        raise NotImplementedError(
            f"{self.__class__.__name__} must implement density()"
        )

    def reference(self, x):
        """
        Evaluate the density in double precision for display.

        Parameters
        ----------
        x : float or array_like
            Point(s) at which to evaluate the density

        Returns
        -------
        density : float or numpy.ndarray
            Non-negative density value(s)
        """
        raise NotImplementedError(
            f"{self.__class__.__name__} must implement reference()"
        )

    def __setattr__(self, name, value):
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    def __eq__(self, other):
        return type(self) is type(other)

    def __hash__(self):
        return hash(type(self))

    def __repr__(self):
        """String representation of the target."""
        return f"{self.__class__.__name__}(norm={self.norm})"


def on_support(x, values):
    """Zero out double precision values outside [0, 1]."""
    x = np.asarray(x, dtype=np.float64)
    return np.where((x >= 0) & (x <= 1), values, 0.0)[()]
