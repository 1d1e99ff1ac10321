[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rttydec"
version = "0.1.0"
description = "Building blocks for decoding RTTY telemetry from complex IQ samples"
requires-python = ">=3.10"
keywords = ["rtty", "fsk", "sdr", "iq", "telemetry", "balloon", "dsp", "fir", "crc"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Telecommunications Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Ham Radio",
    "Topic :: Scientific/Engineering",
]
dependencies = [
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["rttydec"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
