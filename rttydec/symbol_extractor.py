"""Recovers bits from demodulated samples by locating sign changes."""

import math

import numpy as np

OVERFLOW_SAMPLES = 3e4


def _round_half_away(x):
    return int(math.copysign(math.floor(abs(x) + 0.5), x))


class SymbolExtractor:
    """Finds symbol boundaries in a demodulated signal and turns segments into bits."""

    def __init__(self, sampling_rate=0.0, symbol_rate=1.0):
        self.sampling_rate = float(sampling_rate)
        self.symbol_rate = float(symbol_rate)
        self._samples = np.empty(0, dtype=np.float64)
        self._bits = []

    @property
    def samples_per_bit(self):
        if not self.symbol_rate:
            return 0
        return _round_half_away(self.sampling_rate / self.symbol_rate)

    @property
    def pending(self):
        """Number of samples not yet turned into bits."""
        return self._samples.size

    def push_samples(self, samples):
        """Append demodulated samples; an overfull buffer is dropped first."""
        x = np.asarray(samples, dtype=np.float64).ravel()
        if not x.size:
            return
        if self._samples.size > OVERFLOW_SAMPLES:
            self._samples = np.empty(0, dtype=np.float64)
        self._samples = np.concatenate((self._samples, x))

    def __call__(self):
        return self.process()

    def process(self):
        """Turn every complete segment between boundaries into bits; return how many."""
        if not self.sampling_rate or not self.symbol_rate:
            return 0
        if self._samples.size < self.sampling_rate / self.symbol_rate * 3:
            return 0
        spb = self.samples_per_bit
        if not spb:
            return 0
        flips = self._find_flip_points(spb)
        if not flips:
            return 0
        added = 0
        last = 0
        for flip in flips:
            value = bool(self._samples[last:flip].mean() > 0)
            count = _round_half_away((flip - last) / spb)
            last = flip
            self._bits.extend([value] * count)
            added += count
        self._samples = self._samples[min(last, self._samples.size):]
        return added

    def get(self, count=0):
        """Remove and return up to ``count`` bits; all of them when ``count`` is 0."""
        if count == 0:
            count = len(self._bits)
        n = min(count, len(self._bits))
        result = self._bits[:n]
        del self._bits[:n]
        return result

    def _find_flip_points(self, spb):
        cumsum = np.concatenate(([0.0], np.cumsum(self._samples)))
        points = []
        offset = 0
        while (flip := self._first_flip_point(offset, spb, cumsum)) is not None:
            points.append(flip)
            offset = flip
        return points

    def _first_flip_point(self, start, spb, cumsum):
        size = self._samples.size
        if size - start < spb:
            return None
        radius = max(4, spb // 4)
        first = start + radius
        limit = size - spb
        if first >= limit:
            return None
        idx = np.arange(first, limit)
        lo = np.maximum(idx - radius, 0)
        hi = np.minimum(idx + radius, size)
        avg_left = (cumsum[idx] - cumsum[lo]) / (idx - lo)
        avg_right = (cumsum[hi] - cumsum[idx]) / (hi - idx)
        differ = np.sign(avg_left) != np.sign(avg_right)
        if not differ.any():
            return None
        left = int(np.argmax(differ))
        same_after = ~differ[left + 1:]
        if not same_after.any():
            return None
        right = left + 1 + int(np.argmax(same_after))
        weights = np.abs(avg_right - avg_left)[left:right]
        return int(idx[left + int(np.argmax(weights))])