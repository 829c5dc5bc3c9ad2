"""VOSIM oscillator: two sines multiplied by and synced to a carrier."""

from __future__ import annotations

import math

from .dsp import TWOPI_F


def _sine(phase: float) -> float:
    return math.sin(TWOPI_F * phase)


class VosimOscillator:
    """Two formant sines windowed by a raised-cosine carrier."""

    def __init__(self, sample_rate: float) -> None:
        self._sample_rate = sample_rate
        self._carrier_phase = 0.0
        self._formant_1_phase = 0.0
        self._formant_2_phase = 0.0
        self.freq = 105.0
        self.form1_freq = 1390.0
        self.form2_freq = 817.0
        self.shape = 0.5

    def _normalize(self, value: float) -> float:
        return min(value / self._sample_rate, 0.25)

    @property
    def freq(self) -> float:
        """Carrier frequency in Hz, limited to a quarter of the sample rate."""
        return self._carrier_frequency * self._sample_rate

    @freq.setter
    def freq(self, value: float) -> None:
        self._carrier_frequency = self._normalize(value)

    @property
    def form1_freq(self) -> float:
        """First formant frequency in Hz, limited to a quarter of the sample rate."""
        return self._formant_1_frequency * self._sample_rate

    @form1_freq.setter
    def form1_freq(self, value: float) -> None:
        self._formant_1_frequency = self._normalize(value)

    @property
    def form2_freq(self) -> float:
        """Second formant frequency in Hz, limited to a quarter of the sample rate."""
        return self._formant_2_frequency * self._sample_rate

    @form2_freq.setter
    def form2_freq(self, value: float) -> None:
        self._formant_2_frequency = self._normalize(value)

    @property
    def shape(self) -> float:
        """Waveshaping, works in ``[-1, 1]``."""
        return self._carrier_shape

    @shape.setter
    def shape(self, value: float) -> None:
        self._carrier_shape = value

    def process(self) -> float:
        """Next sample."""
        self._carrier_phase += self._carrier_frequency
        if self._carrier_phase >= 1.0:
            self._carrier_phase -= 1.0
            reset_time = self._carrier_phase / self._carrier_frequency
            self._formant_1_phase = reset_time * self._formant_1_frequency
            self._formant_2_phase = reset_time * self._formant_2_frequency
        else:
            self._formant_1_phase += self._formant_1_frequency
            if self._formant_1_phase >= 1.0:
                self._formant_1_phase -= 1.0
            self._formant_2_phase += self._formant_2_frequency
            if self._formant_2_phase >= 1.0:
                self._formant_2_phase -= 1.0

        carrier = _sine(self._carrier_phase * 0.5 + 0.25) + 1.0
        reset_phase = 0.75 - 0.25 * self._carrier_shape
        reset_amplitude = _sine(reset_phase)
        formant_0 = _sine(self._formant_1_phase + reset_phase) - reset_amplitude
        formant_1 = _sine(self._formant_2_phase + reset_phase) - reset_amplitude
        return carrier * (formant_0 + formant_1) * 0.25 + reset_amplitude