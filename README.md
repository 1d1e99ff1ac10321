# rttydec

Signal-processing building blocks for decoding RTTY telemetry, as sent by
high-altitude balloons, from complex IQ samples. Everything works on numpy
arrays; numpy is the only runtime dependency.

## Installation

```
pip install .
```

## What is in the package

| Module | Contents |
| --- | --- |
| `rttydec.iqvector` | `IQVector`: complex samples with a `sampling_rate`; `extend`, `copy`, `clear` |
| `rttydec.kernels_short` | `kernel(name)` for `d_2_r_2`, `d_4_r_4`, `d_16_r_8`, `d_32_r_16` |
| `rttydec.kernels_long` | `kernel(name)` for `d_8_r_8`, `d_64_r_32`, `d_128_r_32`, `d_256_r_64` |
| `rttydec.windows` | `sinc(x)` and `blackman_harris(x, n)` |
| `rttydec.fir_filter` | `FirFilter`: streaming FIR filter and Blackman-Harris low-pass designer |
| `rttydec.fft` | `spectrum(samples)`: forward FFT with the two halves swapped |
| `rttydec.spectrum_info` | `SpectrumInfo`: power values with noise floor, peaks and sampling rate |
| `rttydec.fsk_demod` | `FskDemodulator`: polar discriminator, continued across blocks |
| `rttydec.symbol_extractor` | `SymbolExtractor`: bits from a demodulated signal |
| `rttydec.rtty` | `RTTY`: characters from bits (start bit, data bits LSB first, stop bits) |
| `rttydec.crc` | `crc(text)`: CRC16-CCITT as four upper-case hex digits |

## Usage

### Filtering and decimating

`kernel(name)` returns a fresh `float32` array. `FirFilter` keeps its delay
line between calls to `filter`, so a stream can be fed in blocks; taking every
N-th output sample decimates it.

```python
import numpy as np
from rttydec.fir_filter import FirFilter
from rttydec.kernels_short import kernel

stage = FirFilter(kernel("d_4_r_4"))
block = np.exp(2j * np.pi * 0.01 * np.arange(4096))
decimated = stage.filter(block)[::4]
```

`FirFilter.lowpass_blackman_harris(relative_width, input_size, transition_bw=0.0)`
designs a low-pass filter whose cut-off is given as a fraction of the sampling
rate. The tap count is `4 / transition_bw` (the transition defaults to the width
squared), limited to `input_size` and made odd. A design of four taps or fewer,
or of the same length as the current taps, leaves the filter unchanged.
`filter` raises `ValueError` when there are no taps or more taps than samples
plus one.

### Spectrum

```python
from rttydec.fft import spectrum
from rttydec.spectrum_info import SpectrumInfo

bins = spectrum(decimated)              # zero frequency at index len // 2
power = 10 * np.log10(np.abs(bins) ** 2 + 1e-12)
info = SpectrumInfo.from_power(power, sampling_rate=25_000.0)
info.minimum, info.maximum
```

### Demodulating and recovering characters

```python
from rttydec.fsk_demod import FskDemodulator
from rttydec.symbol_extractor import SymbolExtractor
from rttydec.rtty import RTTY

demod = FskDemodulator()
extractor = SymbolExtractor(sampling_rate=25_000.0, symbol_rate=300.0)
framer = RTTY(bits=8, stops=2)

extractor.push_samples(demod.demodulate(decimated))
extractor.process()                     # number of bits produced
framer.push(extractor.get())            # get(count=0) takes all bits
framer.process()                        # number of characters framed
text = framer.get()                     # bytes
```

`RTTY` can also be driven with bits directly. The frame for `"A"` with 7 data
bits and 2 stop bits:

```python
framer = RTTY(bits=7, stops=2)
framer.push([0, 1, 0, 0, 0, 0, 0, 1, 1, 1])
framer.process()   # 1
framer.get()       # b"A"
```

### Checksums

```python
from rttydec.crc import crc

crc("123456789")   # "29B1"
```

`crc` is CRC16-CCITT with polynomial 0x1021 and initial value 0xFFFF, the
checksum carried after the `*` of UKHAS telemetry sentences.

## What the package does not do

The package provides the stages of an RTTY receiver, not a receiver. It has no
object that runs them as one pipeline, no automatic frequency correction, no
search for telemetry sentences in the decoded text, no reading of IQ samples
from files or radios, no image reassembly, and no command-line program. Joining
the stages, and deciding where a sentence starts and ends, is left to the
caller.

## Tests

```
pip install .[test]
pytest
```