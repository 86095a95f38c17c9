"""Rectified sine target density."""

import numpy as np
from metropolis1d.targets.base import TargetFunction, on_support


class Sinus(TargetFunction):
    """Rectified sine density f(x) = |sin(10x)| on [0, 1].

    The density has three full humps and part of a fourth on the unit
    interval, with zeros at multiples of pi/10. Its integral is about 0.616.

    Examples
    --------
    >>> from metropolis1d import Sinus
    >>> target = Sinus()
    >>> float(target(0.0))
    0.0
    """

    name = "Sinus"
    norm = np.float32(1.0) / np.float32(0.616)

    def density(self, x):
        # sin is taken in double precision and rounded once, so the result
        # does not depend on numpy's float32 SIMD kernels; it can be one ULP
        # away from a single precision sinf
        scaled = (np.float32(10.0) * x).astype(np.float64)
        return np.abs(np.sin(scaled)).astype(np.float32)

    def reference(self, x):
        x = np.asarray(x, dtype=np.float64)
        return on_support(x, np.abs(np.sin(10.0 * x)))
