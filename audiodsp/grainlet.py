"""Granular oscillator: a phase-distorted sine times a formant sine, synced to a carrier."""

from __future__ import annotations

import math

from .dsp import TWOPI_F, next_blep_sample, this_blep_sample


def _sine(phase: float) -> float:
    return math.sin(phase * TWOPI_F)


def _carrier(phase: float, shape: float) -> float:
    shape *= 3.0
    shape_integral = int(shape)
    t = 1.0 - (shape - shape_integral)

    if shape_integral == 0:
        phase = min(phase * (1.0 + t * t * t * 15.0), 1.0)
        phase += 0.75
    elif shape_integral == 1:
        breakpoint = 0.001 + 0.499 * t * t * t
        if phase < breakpoint:
            phase *= 0.5 / breakpoint
        else:
            phase = 0.5 + (phase - breakpoint) * 0.5 / (1.0 - breakpoint)
        phase += 0.75
    else:
        t = 1.0 - t
        phase = min(0.25 + phase * (0.5 + t * t * t * 14.5), 0.75)
    return (_sine(phase) + 1.0) * 0.25


def _grainlet(carrier_phase: float, formant_phase: float, shape: float, bleed: float) -> float:
    carrier = _carrier(carrier_phase, shape)
    formant = _sine(formant_phase)
    return carrier * (formant + bleed) / (1.0 + bleed)


class GrainletOscillator:
    """Grain oscillator with band-limited carrier resets."""

    def __init__(self, sample_rate: float) -> None:
        self._sample_rate = sample_rate
        self._carrier_phase = 0.0
        self._formant_phase = 0.0
        self._next_sample = 0.0
        self._carrier_shape = 0.0
        self._carrier_bleed = 0.0
        self.freq = 440.0
        self.formant_freq = 220.0
        self.shape = 0.5
        self.bleed = 0.5

    @property
    def freq(self) -> float:
        """Carrier frequency in Hz, limited to half the sample rate."""
        return self._carrier_frequency * self._sample_rate

    @freq.setter
    def freq(self, value: float) -> None:
        self._carrier_frequency = min(value / self._sample_rate, 0.5)

    @property
    def formant_freq(self) -> float:
        """Formant frequency in Hz, limited to half the sample rate."""
        return self._formant_frequency * self._sample_rate

    @formant_freq.setter
    def formant_freq(self, value: float) -> None:
        self._formant_frequency = min(value / self._sample_rate, 0.5)

    @property
    def shape(self) -> float:
        """Waveshaping; behaves differently in thirds of ``[0, 1]``."""
        return self._new_carrier_shape

    @shape.setter
    def shape(self, value: float) -> None:
        self._new_carrier_shape = value

    @property
    def bleed(self) -> float:
        """Amount of formant bleeding through; works best in ``[0, 1]``."""
        return self._new_carrier_bleed

    @bleed.setter
    def bleed(self, value: float) -> None:
        self._new_carrier_bleed = value

    def process(self) -> float:
        """Next sample."""
        this_sample = self._next_sample
        next_sample = 0.0
        carrier_freq = self._carrier_frequency
        formant_freq = self._formant_frequency
        new_shape = self._new_carrier_shape
        new_bleed = self._new_carrier_bleed

        self._carrier_phase += carrier_freq
        if self._carrier_phase >= 1.0:
            self._carrier_phase -= 1.0
            reset_time = self._carrier_phase / carrier_freq
            shape_inc = new_shape - self._carrier_shape
            bleed_inc = new_bleed - self._carrier_bleed
            before = _grainlet(
                1.0,
                self._formant_phase + (1.0 - reset_time) * formant_freq,
                new_shape + shape_inc * (1.0 - reset_time),
                new_bleed + bleed_inc * (1.0 - reset_time),
            )
            after = _grainlet(0.0, 0.0, new_shape, new_bleed)
            discontinuity = after - before
            this_sample += discontinuity * this_blep_sample(reset_time)
            next_sample += discontinuity * next_blep_sample(reset_time)
            self._formant_phase = reset_time * formant_freq
        else:
            self._formant_phase += formant_freq
            if self._formant_phase >= 1.0:
                self._formant_phase -= 1.0

        self._carrier_bleed = new_bleed
        self._carrier_shape = new_shape
        next_sample += _grainlet(
            self._carrier_phase, self._formant_phase, new_shape, new_bleed
        )
        self._next_sample = next_sample
        return this_sample