"""Saw oscillator with a variable slope or notch."""

from __future__ import annotations

from .dsp import (
    fclamp,
    next_blep_sample,
    next_integrated_blep_sample,
    this_blep_sample,
    this_integrated_blep_sample,
)

_NOTCH_DEPTH = 0.2


def _naive_sample(
    phase: float,
    pw: float,
    slope_up: float,
    slope_down: float,
    triangle_amount: float,
    notch_amount: float,
) -> float:
    notch_saw = phase if phase < pw else 1.0 + _NOTCH_DEPTH
    triangle = phase * slope_up if phase < pw else 1.0 - (phase - pw) * slope_down
    return notch_saw * notch_amount + triangle * triangle_amount


class VariableSawOscillator:
    """Band-limited saw morphing between a notched saw and a variable-slope triangle."""

    def __init__(self, sample_rate: float) -> None:
        self._sample_rate = sample_rate
        self._phase = 0.0
        self._next_sample = 0.0
        self._previous_pw = 0.5
        self._high = False
        self._pw = 0.5
        self._frequency = 0.0
        self.freq = 220.0
        self.pw = 0.0
        self.waveshape = 1.0

    @property
    def freq(self) -> float:
        """Frequency in Hz, limited to a quarter of the sample rate."""
        return self._frequency * self._sample_rate

    @freq.setter
    def freq(self, value: float) -> None:
        frequency = min(value / self._sample_rate, 0.25)
        if frequency >= 0.25:
            self._pw = 0.5
        self._frequency = frequency

    @property
    def pw(self) -> float:
        """Notch position or slope; kept away from the cycle edges by twice the frequency."""
        return self._pw

    @pw.setter
    def pw(self, value: float) -> None:
        f = self._frequency
        self._pw = 0.5 if f >= 0.25 else fclamp(value, f * 2.0, 1.0 - 2.0 * f)

    @property
    def waveshape(self) -> float:
        """0 gives the notched saw, 1 the variable-slope triangle."""
        return self._waveshape

    @waveshape.setter
    def waveshape(self, value: float) -> None:
        self._waveshape = value

    def process(self) -> float:
        """Next sample."""
        this_sample = self._next_sample
        next_sample = 0.0
        frequency = self._frequency
        pw = self._pw

        triangle_amount = self._waveshape
        notch_amount = 1.0 - self._waveshape
        slope_up = 1.0 / pw
        slope_down = 1.0 / (1.0 - pw)

        self._phase += frequency

        if not self._high and self._phase >= pw:
            triangle_step = (slope_up + slope_down) * frequency * triangle_amount
            notch = (_NOTCH_DEPTH + 1.0 - pw) * notch_amount
            t = (self._phase - pw) / (self._previous_pw - pw + frequency)
            this_sample += notch * this_blep_sample(t)
            next_sample += notch * next_blep_sample(t)
            this_sample -= triangle_step * this_integrated_blep_sample(t)
            next_sample -= triangle_step * next_integrated_blep_sample(t)
            self._high = True
        elif self._phase >= 1.0:
            self._phase -= 1.0
            triangle_step = (slope_up + slope_down) * frequency * triangle_amount
            notch = (_NOTCH_DEPTH + 1.0) * notch_amount
            t = self._phase / frequency
            this_sample -= notch * this_blep_sample(t)
            next_sample -= notch * next_blep_sample(t)
            this_sample += triangle_step * this_integrated_blep_sample(t)
            next_sample += triangle_step * next_integrated_blep_sample(t)
            self._high = False

        next_sample += _naive_sample(
            self._phase, pw, slope_up, slope_down, triangle_amount, notch_amount
        )
        self._previous_pw = pw
        self._next_sample = next_sample
        return (2.0 * this_sample - 1.0) / (1.0 + _NOTCH_DEPTH)