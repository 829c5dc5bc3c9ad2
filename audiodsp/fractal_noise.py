"""Fractal noise: several octaves of a noise source stacked together."""

from __future__ import annotations

from typing import Callable, Protocol

from .dsp import fclamp


class NoiseSource(Protocol):
    """A noise generator with a settable frequency in Hz."""

    freq: float

    def process(self) -> float: ...


class FractalRandomGenerator:
    """Sums ``order`` noise sources, each an octave above the previous one.

    ``factory`` is called with the sample rate to build each source.
    """

    def __init__(
        self,
        factory: Callable[[float], NoiseSource],
        order: int,
        sample_rate: float,
    ) -> None:
        if order < 0:
            raise ValueError("order must not be negative")
        self._sample_rate = sample_rate
        self.color = 0.5
        self.freq = 440.0
        self._generators = [factory(sample_rate) for _ in range(order)]

    @property
    def order(self) -> int:
        """Number of stacked noise sources."""
        return len(self._generators)

    @property
    def freq(self) -> float:
        """Frequency of the lowest source in Hz, limited to the sample rate."""
        return self._frequency

    @freq.setter
    def freq(self, value: float) -> None:
        self._frequency = fclamp(value, 0.0, self._sample_rate)

    @property
    def color(self) -> float:
        """Amount of high-frequency noise, 0 (dark) to 1 (bright)."""
        return self._decay

    @color.setter
    def color(self, value: float) -> None:
        self._decay = fclamp(value, 0.0, 1.0)

    def process(self) -> float:
        """Next sample."""
        gain = 0.5
        total = 0.0
        frequency = self._frequency
        for generator in self._generators:
            generator.freq = frequency
            total += generator.process() * gain
            gain *= self._decay
            frequency *= 2.0
        return total