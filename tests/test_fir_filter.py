import numpy as np
import pytest

from rttydec.fir_filter import FirFilter


def test_single_tap_is_identity():
    fir = FirFilter([1.0])
    data = np.array([1 + 2j, 3, -4j, 5])
    assert np.allclose(fir.filter(data), data)


def test_delay_tap_shifts_and_carries_history():
    fir = FirFilter([0.0, 1.0])
    first = fir.filter([1.0, 2.0, 3.0])
    second = fir.filter([4.0, 5.0])
    assert np.allclose(first, [0.0, 1.0, 2.0])
    assert np.allclose(second, [3.0, 4.0])


def test_chunked_equals_whole():
    rng = np.random.default_rng(1)
    taps = rng.normal(size=5)
    signal = rng.normal(size=40) + 1j * rng.normal(size=40)
    whole = FirFilter(taps).filter(signal)
    fir = FirFilter(taps)
    parts = np.concatenate((fir.filter(signal[:20]), fir.filter(signal[20:])))
    assert np.allclose(parts, whole)


def test_no_taps_raises():
    with pytest.raises(ValueError):
        FirFilter().filter([1.0, 2.0])


def test_empty_taps_rejected():
    with pytest.raises(ValueError):
        FirFilter().set_taps([])


def test_more_taps_than_samples_raises():
    fir = FirFilter([1.0, 1.0, 1.0, 1.0])
    with pytest.raises(ValueError):
        fir.filter([1.0, 2.0])


def test_lowpass_tap_count_and_shape():
    fir = FirFilter()
    fir.lowpass_blackman_harris(0.1, 1000, 0.025)
    taps = fir.taps
    assert taps.size == 161
    assert taps.sum() == pytest.approx(1.0)
    assert np.allclose(taps, taps[::-1])


def test_lowpass_limited_by_input_size():
    fir = FirFilter()
    fir.lowpass_blackman_harris(0.1, 51, 0.01)
    assert fir.taps.size == 51


def test_lowpass_too_short_keeps_previous_taps():
    fir = FirFilter([1.0])
    fir.lowpass_blackman_harris(0.1, 3, 0.025)
    assert np.array_equal(fir.taps, [1.0])


def test_lowpass_without_input_size_raises():
    with pytest.raises(ValueError):
        FirFilter().lowpass_blackman_harris(0.1, 0, 0.025)


def test_default_transition_is_width_squared():
    default = FirFilter()
    default.lowpass_blackman_harris(0.2, 1000)
    explicit = FirFilter()
    explicit.lowpass_blackman_harris(0.2, 1000, 0.2 * 0.2)
    assert np.allclose(default.taps, explicit.taps)


def test_lowpass_passes_dc_and_blocks_high_tone():
    n = 2048
    dc_filter = FirFilter()
    dc_filter.lowpass_blackman_harris(0.05, n, 0.025)
    out_dc = dc_filter.filter(np.ones(n, dtype=complex))
    assert abs(out_dc[-1]) == pytest.approx(1.0)

    tone_filter = FirFilter()
    tone_filter.lowpass_blackman_harris(0.05, n, 0.025)
    tone = np.exp(2j * np.pi * 0.4 * np.arange(n))
    out_tone = tone_filter.filter(tone)
    assert np.max(np.abs(out_tone[500:])) < 0.01