"""Streaming FIR filter with a windowed-sinc low-pass designer."""

import numpy as np

from .windows import blackman_harris, sinc


class FirFilter:
    """FIR filter that keeps its delay line across calls to :meth:`filter`."""

    def __init__(self, taps=()):
        self._taps = np.empty(0, dtype=np.float64)
        self._history = np.empty(0, dtype=np.float64)
        if len(taps):
            self.set_taps(taps)

    @property
    def taps(self):
        return self._taps.copy()

    def set_taps(self, taps):
        """Replace the filter coefficients."""
        arr = np.array(taps, dtype=np.float64).ravel()
        if not arr.size:
            raise ValueError("filter needs at least one tap")
        self._taps = arr

    def lowpass_blackman_harris(self, relative_width, input_size, transition_bw=0.0):
        """Design a low-pass filter with cut-off ``relative_width`` of the sampling rate.

        The tap count is 4/transition_bw (transition defaults to width squared),
        limited to ``input_size`` and made odd. Designs of at most four taps,
        or of the same length as the current filter, leave the taps unchanged.
        """
        if not input_size:
            raise ValueError("input size must be set before designing a filter")
        transition = transition_bw or relative_width * relative_width
        if transition <= 0:
            size = int(input_size)
        else:
            size = min(int(4.0 / transition), int(input_size))
        size |= 1
        if size <= 4 or size == self._taps.size:
            return
        mid = size // 2
        taps = np.array(
            [sinc(2.0 * relative_width * (i - mid)) * blackman_harris(i, size) for i in range(size)]
        )
        self._taps = taps / taps.sum()

    def filter(self, samples):
        """Filter a block of samples, continuing from the previous block."""
        x = np.asarray(samples).ravel()
        if not self._taps.size:
            raise ValueError("filter has no taps")
        if self._taps.size > x.size + 1:
            raise ValueError(f"more taps ({self._taps.size}) than samples ({x.size})")
        keep = self._taps.size - 1
        dtype = np.result_type(x.dtype, self._history.dtype, np.float64)
        if not x.size:
            return np.empty(0, dtype=dtype)
        history = self._history
        if history.size < keep:
            history = np.concatenate((np.zeros(keep - history.size, dtype=history.dtype), history))
        else:
            history = history[history.size - keep:]
        buff = np.concatenate((history, x)).astype(dtype, copy=False)
        out = np.convolve(buff, self._taps[::-1], mode="valid")
        self._history = buff[buff.size - keep:].copy()
        return out