"""Window and sinc functions for filter design."""

import math

_A0 = 0.35874
_A1 = 0.48829
_A2 = 0.14128
_A3 = 0.01168


def sinc(x):
    """Unnormalised sinc: sin(x)/x, with sinc(0) == 1."""
    if x:
        return math.sin(x) / x
    return 1.0


def blackman_harris(x, n):
    """Four-term Blackman-Harris window value at index ``x`` of ``n`` points."""
    n_1 = float(n - 1)
    return (
        _A0
        - _A1 * math.cos(2.0 * math.pi * x / n_1)
        + _A2 * math.cos(4.0 * math.pi * x / n_1)
        - _A3 * math.cos(6.0 * math.pi * x / n_1)
    )