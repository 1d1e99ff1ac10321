"""Complex IQ samples together with their sampling rate."""

import numpy as np


class IQVector:
    """A growable array of complex samples tagged with a sampling rate."""

    def __init__(self, samples=(), sampling_rate=0.0):
        self.samples = np.array(samples, dtype=np.complex128).ravel()
        self.sampling_rate = float(sampling_rate)

    def __len__(self):
        return self.samples.size

    def __iter__(self):
        return iter(self.samples)

    def __getitem__(self, index):
        return self.samples[index]

    def extend(self, samples):
        """Append samples at the end."""
        extra = np.asarray(samples, dtype=np.complex128).ravel()
        self.samples = np.concatenate((self.samples, extra))

    def copy(self):
        """Independent copy with the same sampling rate."""
        return IQVector(self.samples, self.sampling_rate)

    def clear(self):
        """Drop all samples, keeping the sampling rate."""
        self.samples = np.empty(0, dtype=np.complex128)

    def __repr__(self):
        return f"IQVector(len={len(self)}, sampling_rate={self.sampling_rate})"