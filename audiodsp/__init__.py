"""Sample-by-sample audio DSP: oscillators, noise sources, resonators, physical models and utilities."""

__version__ = "0.1.0"