"""Power spectrum with the peak and noise information shown next to it."""

from dataclasses import dataclass, field

import numpy as np


@dataclass
class SpectrumInfo:
    """Power values in dB plus noise floor, peaks and sampling rate."""

    power: np.ndarray = field(default_factory=lambda: np.empty(0, dtype=np.float64))
    minimum: float = 0.0
    maximum: float = 0.0
    noise_floor: float = 0.0
    noise_variance: float = 0.0
    sampling_rate: float = 0.0
    shift: float = 0.0
    peak_left: int = 0
    peak_right: int = 0
    peak_left_valid: bool = False
    peak_right_valid: bool = False

    def __post_init__(self):
        self.power = np.array(self.power, dtype=np.float64).ravel()

    @classmethod
    def from_power(cls, power, **info):
        """Build from power values, filling in their minimum and maximum."""
        spectrum = cls(power=power, **info)
        if spectrum.power.size:
            spectrum.minimum = float(spectrum.power.min())
            spectrum.maximum = float(spectrum.power.max())
        return spectrum

    def __len__(self):
        return self.power.size

    def __iter__(self):
        return iter(self.power)

    def __getitem__(self, index):
        return self.power[index]