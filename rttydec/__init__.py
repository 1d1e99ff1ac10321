"""Signal-processing stages for decoding RTTY telemetry from complex IQ samples."""

__version__ = "0.1.0"