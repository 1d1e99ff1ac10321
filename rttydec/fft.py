"""Forward FFT with the zero frequency moved to the middle."""

import numpy as np

from .iqvector import IQVector


def spectrum(samples):
    """Unnormalised forward DFT of ``samples`` with its two halves swapped.

    Bin ``i`` is exchanged with bin ``i + n // 2`` for ``i < n // 2``, so for
    an even length the zero frequency lands at index ``n // 2``. For an odd
    length the last bin stays in place.
    """
    if isinstance(samples, IQVector):
        x = samples.samples
    else:
        x = np.asarray(samples, dtype=np.complex128).ravel()
    if not x.size:
        return np.empty(0, dtype=np.complex128)
    out = np.fft.fft(x)
    half = out.size // 2
    return np.concatenate((out[half:2 * half], out[:half], out[2 * half:]))