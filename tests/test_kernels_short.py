import numpy as np
import pytest

from rttydec.kernels_short import KERNEL_NAMES, kernel


@pytest.mark.parametrize(
    "name, length",
    [("d_2_r_2", 69), ("d_4_r_4", 139), ("d_16_r_8", 54), ("d_32_r_16", 107)],
)
def test_kernel_lengths(name, length):
    assert kernel(name).size == length


@pytest.mark.parametrize("name", KERNEL_NAMES)
def test_kernels_are_symmetric(name):
    taps = kernel(name)
    assert np.array_equal(taps, taps[::-1])


@pytest.mark.parametrize("name", KERNEL_NAMES)
def test_peak_is_in_the_middle(name):
    taps = kernel(name)
    peak = int(np.argmax(taps))
    mid = (taps.size - 1) / 2
    assert abs(peak - mid) <= 0.5


@pytest.mark.parametrize("name", KERNEL_NAMES)
def test_kernels_are_single_precision(name):
    assert kernel(name).dtype == np.float32


def test_pinned_values_from_table():
    taps = kernel("d_2_r_2")
    assert taps[0] == np.float32(0.000399985734121014)
    assert taps[34] == np.float32(0.480536048712957740)
    assert kernel("d_4_r_4")[69] == np.float32(0.240164834839879550)


def test_returned_array_is_a_copy():
    first = kernel("d_16_r_8")
    first[:] = 0
    assert kernel("d_16_r_8")[0] == np.float32(-0.000010553664672862)


def test_unknown_kernel_raises():
    with pytest.raises(KeyError):
        kernel("d_3_r_3")


def test_long_kernel_not_here():
    with pytest.raises(KeyError):
        kernel("d_8_r_8")