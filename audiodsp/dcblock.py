"""DC-blocking high-pass filter."""

from __future__ import annotations


class DcBlock:
    """Removes the DC component of a signal."""

    def __init__(self, sample_rate: float) -> None:
        self._input = 0.0
        self._output = 0.0
        self._gain = 1.0 - 10.0 / sample_rate

    def process(self, value: float) -> float:
        """Filter one sample."""
        out = value - self._input + self._gain * self._output
        self._output = out
        self._input = value
        return out