import numpy as np

from rttydec.iqvector import IQVector


def test_construct_with_samples_and_rate():
    vec = IQVector([1 + 1j, 2], sampling_rate=48000.0)
    assert len(vec) == 2
    assert vec.sampling_rate == 48000.0
    assert vec[0] == 1 + 1j


def test_default_rate_is_zero_and_empty():
    vec = IQVector()
    assert vec.sampling_rate == 0.0
    assert len(vec) == 0


def test_extend_appends_in_order():
    vec = IQVector([1j], 100.0)
    vec.extend([2, 3j])
    assert np.array_equal(vec.samples, np.array([1j, 2, 3j]))


def test_copy_is_independent():
    vec = IQVector([1, 2, 3], 250.0)
    dup = vec.copy()
    dup.extend([4])
    dup.samples[0] = 9
    assert len(vec) == 3
    assert vec[0] == 1
    assert dup.sampling_rate == 250.0


def test_construction_copies_input():
    source = np.array([1 + 0j, 2 + 0j])
    vec = IQVector(source)
    source[0] = 5
    assert vec[0] == 1


def test_clear_keeps_rate():
    vec = IQVector([1, 2], 10.0)
    vec.clear()
    assert len(vec) == 0
    assert vec.sampling_rate == 10.0


def test_iteration_yields_samples():
    vec = IQVector([1, 2j])
    assert list(vec) == [1, 2j]