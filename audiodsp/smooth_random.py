"""Smoothly interpolated random modulation source."""

from __future__ import annotations

import random

from .dsp import fclamp, rand_unit


class SmoothRandomGenerator:
    """Slews with a smoothstep curve between random targets in ``[-1, 1]``."""

    def __init__(self, sample_rate: float, rng: random.Random | None = None) -> None:
        self._sample_rate = sample_rate
        self._rng = rng
        self.freq = 1.0
        self._phase = 0.0
        self._from = 0.0
        self._interval = 0.0

    @property
    def freq(self) -> float:
        """Rate of new random targets in Hz, limited to the sample rate."""
        return self._frequency * self._sample_rate

    @freq.setter
    def freq(self, value: float) -> None:
        self._frequency = fclamp(value / self._sample_rate, 0.0, 1.0)

    def process(self) -> float:
        """Next value in ``[-1, 1]``."""
        self._phase += self._frequency
        if self._phase >= 1.0:
            self._phase -= 1.0
            self._from += self._interval
            self._interval = rand_unit(self._rng) * 2.0 - 1.0 - self._from
        t = self._phase * self._phase * (3.0 - 2.0 * self._phase)
        return self._from + self._interval * t