import numpy as np
import pytest

from rttydec.fsk_demod import FskDemodulator


def _tone(step, n, start=0):
    return np.exp(1j * step * np.arange(start, start + n))


def test_first_output_of_first_block_is_zero():
    demod = FskDemodulator()
    out = demod.demodulate(_tone(0.3, 10))
    assert out[0] == 0.0


def test_constant_tone_gives_constant_step():
    demod = FskDemodulator()
    out = demod.demodulate(_tone(0.3, 10))
    assert np.allclose(out[1:], 0.3)


def test_continuity_across_blocks():
    demod = FskDemodulator()
    demod.demodulate(_tone(0.5, 8))
    out = demod.demodulate(_tone(0.5, 8, start=8))
    assert np.allclose(out, 0.5)


def test_negative_frequency_gives_negative_steps():
    demod = FskDemodulator()
    out = demod.demodulate(_tone(-0.2, 16))
    assert np.allclose(out[1:], -0.2)


def test_output_is_real_and_same_length():
    demod = FskDemodulator()
    out = demod.demodulate(_tone(0.1, 33))
    assert out.shape == (33,)
    assert not np.iscomplexobj(out)


def test_empty_input_gives_empty_output():
    assert FskDemodulator().demodulate([]).size == 0


def test_reset_restarts_state():
    demod = FskDemodulator()
    demod.demodulate(_tone(0.4, 5))
    demod.reset()
    out = demod.demodulate(_tone(0.4, 5, start=100))
    assert out[0] == pytest.approx(0.0)