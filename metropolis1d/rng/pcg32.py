"""PCG32 pseudo-random number generator.

Implements the PCG XSH RR 64/32 generator (O'Neill, "PCG: A Family of Simple
Fast Space-Efficient Statistically Good Algorithms for Random Number
Generation"). The output stream only depends on the seed, so a chain seeded
with the same value is reproduced bit-for-bit on every platform and by any
other implementation of the same variant.
"""

import numpy as np

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF

MULTIPLIER = 6364136223846793005

# Increment of the LCG used to expand a 64-bit seed into state and stream
SEED_INCREMENT = 11634580027462260723

_F32_SCALE = np.float32(1.0 / (1 << 24))
_F64_SCALE = 1.0 / (1 << 53)
_F32_EXPONENT_BITS = 127 << 23


def _output(state):
    """XSH RR output permutation of a 64-bit LCG state."""
    xorshifted = (((state >> 18) ^ state) >> 27) & _MASK32
    rot = state >> 59
    return ((xorshifted >> rot) | (xorshifted << ((32 - rot) & 31))) & _MASK32


def _check_u64(name, value):
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer)):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    value = int(value)
    if not 0 <= value <= _MASK64:
        raise ValueError(f"{name} must be in [0, 2**64), got {value}")
    return value


class Pcg32:
    """PCG32 generator with 64 bits of state and a selectable stream.

    Parameters
    ----------
    seed : int, optional
        64-bit unsigned seed (default: 0)

    Examples
    --------
    >>> rng = Pcg32(42)
    >>> u = rng.next_f32()
    >>> 0.0 <= u < 1.0
    True
    """

    def __init__(self, seed=0):
        self.seed = _check_u64("seed", seed)

        # Four PCG32 outputs fill the 128-bit seed (state then stream,
        # little-endian 32-bit words)
        expand = self.seed
        words = []
        for _ in range(4):
            expand = (expand * MULTIPLIER + SEED_INCREMENT) & _MASK64
            words.append(_output(expand))
        state = words[0] | (words[1] << 32)
        stream = words[2] | (words[3] << 32)

        # The increment must be odd, hence one bit of the stream is discarded
        self._init_state(state, stream | 1)

    @classmethod
    def from_seed_u64(cls, seed):
        """Create a generator from a 64-bit seed (same as ``Pcg32(seed)``)."""
        return cls(seed)

    @classmethod
    def from_state_stream(cls, state, stream):
        """Create a generator the way the reference ``pcg32_srandom`` does.

        Parameters
        ----------
        state : int
            Initial 64-bit state
        stream : int
            Stream selector; only the low 63 bits are used

        Returns
        -------
        rng : Pcg32
            Generator positioned at the start of the requested stream
        """
        state = _check_u64("state", state)
        stream = _check_u64("stream", stream)
        rng = cls.__new__(cls)
        rng.seed = None
        rng._init_state(state, ((stream << 1) | 1) & _MASK64)
        return rng

    def _init_state(self, state, increment):
        self.increment = increment
        self.state = (state + increment) & _MASK64
        self._step()

    def _step(self):
        self.state = (self.state * MULTIPLIER + self.increment) & _MASK64

    def next_u32(self):
        """Return the next 32-bit unsigned integer."""
        state = self.state
        self._step()
        return _output(state)

    def next_u64(self):
        """Return the next 64-bit unsigned integer (low word drawn first)."""
        low = self.next_u32()
        high = self.next_u32()
        return (high << 32) | low

    def next_f32(self):
        """Return a single precision uniform draw in [0, 1).

        Uses the upper 24 bits of one 32-bit output, so every value is an
        exact multiple of 2**-24.
        """
        return np.float32(self.next_u32() >> 8) * _F32_SCALE

    def next_f64(self):
        """Return a double precision uniform draw in [0, 1)."""
        return (self.next_u64() >> 11) * _F64_SCALE

    def in_range(self, low, high):
        """Return a single precision uniform draw in [low, high).

        Parameters
        ----------
        low : float
            Inclusive lower bound
        high : float
            Exclusive upper bound, must be greater than ``low``

        Returns
        -------
        value : numpy.float32
            Uniform draw in the half-open interval

        Raises
        ------
        ValueError
            If the bounds are not finite or ``low >= high``
        """
        low = np.float32(low)
        high = np.float32(high)
        if not low < high:
            raise ValueError(f"in_range requires low < high, got [{low}, {high})")
        scale = high - low
        if not np.isfinite(scale):
            raise ValueError(f"in_range requires a finite range, got [{low}, {high})")

        while True:
            # 23 mantissa bits with a zero exponent give a float in [1, 2)
            bits = np.uint32((self.next_u32() >> 9) | _F32_EXPONENT_BITS)
            value0_1 = bits.view(np.float32) - np.float32(1.0)
            res = value0_1 * scale + low
            if res < high:
                return res
            # Rounding reached the upper bound: shrink the scale and redraw
            scale = np.nextafter(scale, np.float32(0.0))

    def __repr__(self):
        """String representation of the generator."""
        return f"Pcg32(state={self.state:#018x}, increment={self.increment:#018x})"
