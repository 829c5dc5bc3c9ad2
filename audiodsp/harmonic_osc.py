"""Additive oscillator built on the Chebyshev recurrence."""

from __future__ import annotations

import math
from collections.abc import Sequence

from .dsp import TWOPI_F


def _differs(a: float, b: float) -> bool:
    return abs(a - b) > 0.000001


class HarmonicOscillator:
    """Sum of ``num_harmonics`` consecutive harmonics with individual amplitudes."""

    def __init__(self, sample_rate: float, num_harmonics: int = 16) -> None:
        if num_harmonics < 1:
            raise ValueError("num_harmonics must be at least 1")
        self._sample_rate = sample_rate
        self._num_harmonics = num_harmonics
        self._phase = 0.0
        self._frequency = 0.0
        self._first_harmonic_index = 0
        self._recalc = False
        self._amplitude = [0.0] * num_harmonics
        self._new_amplitude = [0.0] * num_harmonics
        self._amplitude[0] = 1.0
        self._new_amplitude[0] = 1.0
        self.first_harm_idx = 1
        self.freq = 440.0
        self._recalc = False

    @property
    def num_harmonics(self) -> int:
        """Number of harmonics summed."""
        return self._num_harmonics

    @property
    def freq(self) -> float:
        """Fundamental frequency in Hz, limited to half the sample rate either way."""
        return self._frequency * self._sample_rate

    @freq.setter
    def freq(self, value: float) -> None:
        freq = max(min(value / self._sample_rate, 0.5), -0.5)
        self._recalc = _differs(freq, self._frequency) or self._recalc
        self._frequency = freq

    @property
    def first_harm_idx(self) -> int:
        """Harmonic number of the first amplitude slot; values below 1 become 1."""
        return self._first_harmonic_index

    @first_harm_idx.setter
    def first_harm_idx(self, value: int) -> None:
        value = max(int(value), 1)
        self._recalc = value != self._first_harmonic_index or self._recalc
        self._first_harmonic_index = value

    def set_amplitudes(self, amplitudes: Sequence[float]) -> None:
        """Set every harmonic's amplitude; needs at least ``num_harmonics`` values."""
        if len(amplitudes) < self._num_harmonics:
            raise ValueError(
                f"expected at least {self._num_harmonics} amplitudes, got {len(amplitudes)}"
            )
        for i, amp in enumerate(amplitudes[: self._num_harmonics]):
            self._recalc = _differs(self._new_amplitude[i], amp) or self._recalc
            self._new_amplitude[i] = amp

    def set_single_amp(self, amp: float, idx: int) -> None:
        """Set one harmonic's amplitude; indices out of range are ignored."""
        if not 0 <= idx < self._num_harmonics:
            return
        self._recalc = _differs(self._amplitude[idx], amp) or self._recalc
        self._new_amplitude[idx] = amp

    def process(self) -> float:
        """Next sample."""
        if self._recalc:
            self._recalc = False
            for i, new_amp in enumerate(self._new_amplitude):
                f = min(self._frequency * (self._first_harmonic_index + i), 0.5)
                self._amplitude[i] = new_amp * (1.0 - f * 2.0)

        self._phase += self._frequency
        if self._phase >= 1.0:
            self._phase -= 1.0
        phase = self._phase
        two_x = 2.0 * math.sin(phase * TWOPI_F)

        if self._first_harmonic_index == 1:
            previous = 1.0
            current = two_x * 0.5
        else:
            k = float(self._first_harmonic_index)
            previous = math.sin((phase * (k - 1.0) + 0.25) * TWOPI_F)
            current = math.sin(phase * k * TWOPI_F)

        total = 0.0
        for amp in self._amplitude:
            total += amp * current
            previous, current = current, two_x * current - previous
        return total