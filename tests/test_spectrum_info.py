import numpy as np

from rttydec.spectrum_info import SpectrumInfo


def test_empty_spectrum():
    info = SpectrumInfo()
    assert len(info) == 0
    assert info.minimum == 0.0
    assert info.maximum == 0.0
    assert info.peak_left_valid is False


def test_from_power_sets_extremes():
    info = SpectrumInfo.from_power([3.0, -1.0, 2.0])
    assert len(info) == 3
    assert info.minimum == -1.0
    assert info.maximum == 3.0


def test_from_power_empty_keeps_zero_extremes():
    info = SpectrumInfo.from_power([])
    assert len(info) == 0
    assert info.minimum == 0.0


def test_extra_info_is_kept():
    info = SpectrumInfo.from_power([1.0, 2.0], sampling_rate=8000.0, peak_left=5, peak_left_valid=True)
    assert info.sampling_rate == 8000.0
    assert info.peak_left == 5
    assert info.peak_left_valid is True


def test_iteration_and_indexing():
    info = SpectrumInfo(power=[1.0, 2.0, 4.0])
    assert list(info) == [1.0, 2.0, 4.0]
    assert info[2] == 4.0
    assert np.array_equal(info.power, np.array([1.0, 2.0, 4.0]))