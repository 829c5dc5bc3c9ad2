"""Z oscillator: a formant sine multiplied by and synced to a carrier."""

from __future__ import annotations

import math

from .dsp import TWOPI_F, next_blep_sample, this_blep_sample


def _sine(phase: float) -> float:
    return math.sin(phase * TWOPI_F)


def _z(c: float, d: float, f: float, shape: float, mode: float) -> float:
    ramp_down = 0.5 * (1.0 + _sine(0.5 * d + 0.25))

    if mode < 0.333:
        offset = 1.0
        phase_shift = 0.25 + mode * 1.50
    elif mode < 0.666:
        phase_shift = 0.7495 - (mode - 0.33) * 0.75
        offset = -_sine(phase_shift)
    else:
        phase_shift = 0.7495 - (mode - 0.33) * 0.75
        offset = 0.001

    discontinuity = _sine(f + phase_shift)
    if shape < 0.5:
        shape *= 2.0
        if c >= 0.5:
            ramp_down *= shape
        contour = 1.0 + (_sine(c + 0.25) - 1.0) * shape
    else:
        contour = _sine(c + shape * 0.5)
    return (ramp_down * (offset + discontinuity) - offset) * contour


class ZOscillator:
    """Formant sine reset twice per carrier cycle, with band-limited resets."""

    def __init__(self, sample_rate: float) -> None:
        self._sample_rate = sample_rate
        self._carrier_phase = 0.0
        self._discontinuity_phase = 0.0
        self._formant_phase = 0.0
        self._next_sample = 0.0
        self.freq = 220.0
        self.formant_freq = 550.0
        self.mode = 0.0
        self.shape = 1.0
        self._carrier_shape = self._shape_new
        self._mode = self._mode_new

    @property
    def freq(self) -> float:
        """Carrier frequency in Hz, limited to a quarter of the sample rate."""
        return self._carrier_frequency * self._sample_rate

    @freq.setter
    def freq(self, value: float) -> None:
        self._carrier_frequency = min(value / self._sample_rate, 0.25)

    @property
    def formant_freq(self) -> float:
        """Formant frequency in Hz, limited to a quarter of the sample rate."""
        return self._formant_frequency * self._sample_rate

    @formant_freq.setter
    def formant_freq(self, value: float) -> None:
        self._formant_frequency = min(value / self._sample_rate, 0.25)

    @property
    def shape(self) -> float:
        """Contour of the waveform; works best in ``[0, 1]``."""
        return self._shape_new

    @shape.setter
    def shape(self, value: float) -> None:
        self._shape_new = value

    @property
    def mode(self) -> float:
        """Offset and phase shift: below 1/3 phase shift only, above 2/3 offset only."""
        return self._mode_new

    @mode.setter
    def mode(self, value: float) -> None:
        self._mode_new = value

    def process(self) -> float:
        """Next sample."""
        this_sample = self._next_sample
        next_sample = 0.0
        carrier_freq = self._carrier_frequency
        formant_freq = self._formant_frequency
        shape_new = self._shape_new
        mode_new = self._mode_new

        self._discontinuity_phase += 2.0 * carrier_freq
        self._carrier_phase += carrier_freq

        if self._discontinuity_phase >= 1.0:
            self._discontinuity_phase -= 1.0
            reset_time = self._discontinuity_phase / (2.0 * carrier_freq)

            wrapped = self._carrier_phase >= 1.0
            carrier_phase_before = 1.0 if wrapped else 0.5
            carrier_phase_after = 0.0 if wrapped else 0.5

            mode_sub = self._mode + (1.0 - reset_time) * (self._mode - mode_new)
            shape_sub = self._carrier_shape + (1.0 - reset_time) * (
                self._carrier_shape - shape_new
            )
            before = _z(
                carrier_phase_before,
                1.0,
                self._formant_phase + (1.0 - reset_time) * formant_freq,
                shape_sub,
                mode_sub,
            )
            after = _z(carrier_phase_after, 0.0, 0.0, shape_new, mode_new)

            discontinuity = after - before
            this_sample += discontinuity * this_blep_sample(reset_time)
            next_sample += discontinuity * next_blep_sample(reset_time)
            self._formant_phase = reset_time * formant_freq

            if self._carrier_phase > 1.0:
                self._carrier_phase = self._discontinuity_phase * 0.5
        else:
            self._formant_phase += formant_freq
            if self._formant_phase >= 1.0:
                self._formant_phase -= 1.0

        if self._carrier_phase >= 1.0:
            self._carrier_phase -= 1.0

        self._carrier_shape = shape_new
        self._mode = mode_new
        next_sample += _z(
            self._carrier_phase,
            self._discontinuity_phase,
            self._formant_phase,
            shape_new,
            mode_new,
        )
        self._next_sample = next_sample
        return this_sample