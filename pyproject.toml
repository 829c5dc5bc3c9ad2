[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "audiodsp"
version = "0.1.0"
description = "Sample-by-sample audio DSP building blocks: oscillators, noise sources, resonators, physical models and utilities"
requires-python = ">=3.10"
dependencies = []
keywords = ["dsp", "audio", "synthesis", "oscillator", "noise", "resonator", "looper"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Sound/Audio :: Sound Synthesis",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["audiodsp"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
