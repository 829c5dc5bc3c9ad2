"""Noise through a band-limited sample-and-hold clocked at a target rate."""

from __future__ import annotations

import random

from .dsp import fclamp, next_blep_sample, rand_unit, this_blep_sample


class ClockedNoise:
    """Random steps at ``freq``, crossfading to raw noise at high rates."""

    def __init__(self, sample_rate: float, rng: random.Random | None = None) -> None:
        self._sample_rate = sample_rate
        self._rng = rng
        self._phase = 0.0
        self._sample = 0.0
        self._next_sample = 0.0
        self._frequency = 0.001

    @property
    def freq(self) -> float:
        """Rate of new random values in Hz, limited to the sample rate."""
        return self._frequency * self._sample_rate

    @freq.setter
    def freq(self, value: float) -> None:
        self._frequency = fclamp(value / self._sample_rate, 0.0, 1.0)

    def process(self) -> float:
        """Next sample."""
        this_sample = self._next_sample
        next_sample = 0.0
        sample = self._sample
        frequency = self._frequency

        raw_sample = rand_unit(self._rng) * 2.0 - 1.0
        raw_amount = fclamp(4.0 * (frequency - 0.25), 0.0, 1.0)

        self._phase += frequency
        if self._phase >= 1.0:
            self._phase -= 1.0
            t = self._phase / frequency if frequency else 0.0
            discontinuity = raw_sample - sample
            this_sample += discontinuity * this_blep_sample(t)
            next_sample += discontinuity * next_blep_sample(t)
            sample = raw_sample

        next_sample += sample
        self._next_sample = next_sample
        self._sample = sample
        return this_sample + raw_amount * (raw_sample - this_sample)

    def sync(self) -> None:
        """Force a new random value on the next sample."""
        self._phase = 1.0