import numpy as np
import pytest

from rttydec.kernels_long import KERNEL_NAMES, kernel


@pytest.mark.parametrize(
    "name, length",
    [
        ("d_8_r_8", 280),
        ("d_64_r_32", 212),
        ("d_128_r_32", 174),
        ("d_256_r_64", 348),
    ],
)
def test_kernel_lengths(name, length):
    assert kernel(name).size == length


def test_kernel_names_cover_long_stages():
    lengths = {name: kernel(name).size for name in KERNEL_NAMES}
    assert lengths == {
        "d_8_r_8": 280,
        "d_64_r_32": 212,
        "d_128_r_32": 174,
        "d_256_r_64": 348,
    }


@pytest.mark.parametrize("name", ["d_8_r_8", "d_64_r_32", "d_128_r_32", "d_256_r_64"])
def test_kernels_are_symmetric(name):
    taps = kernel(name)
    assert np.array_equal(taps, taps[::-1])


@pytest.mark.parametrize("name", ["d_8_r_8", "d_64_r_32", "d_128_r_32", "d_256_r_64"])
def test_kernels_are_single_precision(name):
    assert kernel(name).dtype == np.float32


@pytest.mark.parametrize("name", ["d_8_r_8", "d_64_r_32", "d_128_r_32", "d_256_r_64"])
def test_peak_is_in_the_middle(name):
    taps = kernel(name)
    peak = int(np.argmax(taps))
    mid = taps.size // 2
    assert peak in (mid - 1, mid)


def test_first_and_centre_values():
    assert kernel("d_8_r_8")[0] == pytest.approx(0.000005299484859782, rel=1e-6)
    assert kernel("d_8_r_8")[139] == pytest.approx(0.119409036455313980, rel=1e-6)
    assert kernel("d_256_r_64")[0] == pytest.approx(-0.000006032200297229, rel=1e-6)
    assert kernel("d_128_r_32")[86] == pytest.approx(0.022871979661449618, rel=1e-6)


def test_returned_array_is_a_fresh_copy():
    first = kernel("d_64_r_32")
    original = first[0]
    first[:] = 0.0
    assert kernel("d_64_r_32")[0] == original


def test_unknown_name_raises():
    with pytest.raises(KeyError):
        kernel("d_2_r_2")