import numpy as np

from rttydec.symbol_extractor import SymbolExtractor

SPB = 10
PATTERN = [1, 0, 1, 1, 0, 0, 0, 1, 0, 1]


def _signal(pattern, spb=SPB):
    return np.repeat([1.0 if bit else -1.0 for bit in pattern], spb)


def _extractor():
    return SymbolExtractor(sampling_rate=100.0 * SPB, symbol_rate=100.0)


def test_extracts_bits_up_to_last_boundary():
    ex = _extractor()
    ex.push_samples(_signal(PATTERN))
    ex.process()
    bits = ex.get()
    assert bits == [bool(b) for b in PATTERN[:8]]
    assert ex.pending == len(PATTERN) * SPB - 8 * SPB


def test_bits_are_prefix_of_longer_pattern():
    pattern = [1, 0] * 20 + [1, 1, 1, 0, 0, 1]
    ex = _extractor()
    ex.push_samples(_signal(pattern))
    ex.process()
    bits = ex.get()
    assert len(bits) > 0
    assert bits == [bool(b) for b in pattern[: len(bits)]]


def test_get_with_count():
    ex = _extractor()
    ex.push_samples(_signal(PATTERN))
    ex.process()
    first = ex.get(3)
    rest = ex.get()
    assert first == [bool(b) for b in PATTERN[:3]]
    assert first + rest == [bool(b) for b in PATTERN[:8]]
    assert ex.get() == []


def test_no_sampling_rate_means_no_bits():
    ex = SymbolExtractor()
    ex.push_samples(_signal(PATTERN))
    assert ex.process() == 0
    assert ex.get() == []


def test_needs_three_symbols():
    ex = _extractor()
    ex.push_samples(_signal([1, 0]))
    ex.process()
    assert ex.get() == []
    assert ex.pending == 2 * SPB


def test_empty_push_is_ignored():
    ex = _extractor()
    ex.push_samples([])
    assert ex.pending == 0


def test_overflow_drops_buffer():
    ex = _extractor()
    ex.push_samples(np.ones(30001))
    ex.push_samples(np.ones(5))
    assert ex.pending == 5


def test_samples_per_bit_from_rates():
    ex = SymbolExtractor(sampling_rate=48000.0, symbol_rate=50.0)
    assert ex.samples_per_bit == 960


def test_process_returns_bit_count():
    ex = _extractor()
    ex.push_samples(_signal(PATTERN))
    added = ex.process()
    assert added == len(ex.get())