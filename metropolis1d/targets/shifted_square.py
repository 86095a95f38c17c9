"""Shifted square target density."""

import numpy as np
from metropolis1d.targets.base import TargetFunction, on_support


class ShiftedSquare(TargetFunction):
    """Shifted square density f(x) = (x - 0.5)^2 on [0, 1].

    The density vanishes at x = 0.5 and rises to 0.25 at both ends of the
    interval. Its integral is 1/12, so the normalization constant is 12.

    Examples
    --------
    >>> from metropolis1d import ShiftedSquare
    >>> target = ShiftedSquare()
    >>> float(target(0.0))
    0.25
    >>> float(target(2.0))
    0.0
    """

    name = "Shifted Square"
    norm = np.float32(12.0)

    def density(self, x):
        shifted = x - np.float32(0.5)
        return shifted * shifted

    def reference(self, x):
        x = np.asarray(x, dtype=np.float64)
        return on_support(x, (x - 0.5) ** 2)
