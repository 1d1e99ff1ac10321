"""Polar discriminator turning IQ samples into instantaneous frequency."""

import numpy as np


class FskDemodulator:
    """Phase difference between consecutive samples, continued across blocks."""

    def __init__(self):
        self._last = None

    def demodulate(self, samples):
        """Return the phase step in radians for each sample."""
        x = np.asarray(samples, dtype=np.complex128).ravel()
        if not x.size:
            return np.empty(0, dtype=np.float64)
        last = x[0] if self._last is None else self._last
        prev = np.concatenate(([last], x[:-1]))
        self._last = x[-1]
        return np.angle(x * np.conj(prev))

    def reset(self):
        """Forget the last sample of the previous block."""
        self._last = None