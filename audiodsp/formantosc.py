"""Sine formant oscillator with an alias-free phase reset from a carrier."""

from __future__ import annotations

import math

from .dsp import TWOPI_F, next_blep_sample, this_blep_sample


def _sine(phase: float) -> float:
    return math.sin(phase * TWOPI_F)


def _normalize(freq: float, sample_rate: float) -> float:
    return max(min(freq / sample_rate, 0.25), -0.25)


class FormantOscillator:
    """A formant sine whose phase is reset by a carrier."""

    def __init__(self, sample_rate: float) -> None:
        self._sample_rate = sample_rate
        self._carrier_phase = 0.0
        self._formant_phase = 0.0
        self._next_sample = 0.0
        self._carrier_frequency = 0.0
        self._formant_frequency = 100.0
        self._phase_shift = 0.0
        self._ps_inc = 0.0

    @property
    def formant_freq(self) -> float:
        """Formant frequency in Hz, limited to a quarter of the sample rate either way."""
        return self._formant_frequency * self._sample_rate

    @formant_freq.setter
    def formant_freq(self, value: float) -> None:
        self._formant_frequency = _normalize(value, self._sample_rate)

    @property
    def carrier_freq(self) -> float:
        """Carrier (main) frequency in Hz, limited to a quarter of the sample rate either way."""
        return self._carrier_frequency * self._sample_rate

    @carrier_freq.setter
    def carrier_freq(self, value: float) -> None:
        self._carrier_frequency = _normalize(value, self._sample_rate)

    @property
    def phase_shift(self) -> float:
        """Phase shift in cycles, applied on the next sample."""
        return self._phase_shift + self._ps_inc

    @phase_shift.setter
    def phase_shift(self, value: float) -> None:
        self._ps_inc = value - self._phase_shift

    def process(self) -> float:
        """Next sample."""
        this_sample = self._next_sample
        next_sample = 0.0
        carrier_freq = self._carrier_frequency
        formant_freq = self._formant_frequency

        self._carrier_phase += carrier_freq
        if self._carrier_phase >= 1.0:
            self._carrier_phase -= 1.0
            reset_time = self._carrier_phase / carrier_freq
            formant_at_reset = self._formant_phase + (1.0 - reset_time) * formant_freq
            before = _sine(
                formant_at_reset + self._phase_shift + self._ps_inc * (1.0 - reset_time)
            )
            after = _sine(self._phase_shift + self._ps_inc)
            discontinuity = after - before
            this_sample += discontinuity * this_blep_sample(reset_time)
            next_sample += discontinuity * next_blep_sample(reset_time)
            self._formant_phase = reset_time * formant_freq
        else:
            self._formant_phase += formant_freq
            if self._formant_phase >= 1.0:
                self._formant_phase -= 1.0

        self._phase_shift += self._ps_inc
        self._ps_inc = 0.0

        next_sample += _sine(self._formant_phase + self._phase_shift)
        self._next_sample = next_sample
        return this_sample