"""Multi-waveform oscillator, including polyBLEP band-limited shapes."""

from __future__ import annotations

import math
from enum import IntEnum

from .dsp import TWOPI_F, fastmod1f, fclamp


class Waveform(IntEnum):
    """Output waveforms; POLYBLEP ones are band-limited, the rest are naive."""

    SIN = 0
    TRI = 1
    SAW = 2
    RAMP = 3
    SQUARE = 4
    POLYBLEP_TRI = 5
    POLYBLEP_SAW = 6
    POLYBLEP_SQUARE = 7


def _polyblep(phase_inc: float, t: float) -> float:
    dt = phase_inc
    if dt == 0.0:
        return 0.0
    if t < dt:
        t /= dt
        return t + t - t * t - 1.0
    if t > 1.0 - dt:
        t = (t - 1.0) / dt
        return t * t + t + t + 1.0
    return 0.0


class Oscillator:
    """Phase-accumulating oscillator; defaults to a 100 Hz sine at amplitude 0.5."""

    def __init__(self, sample_rate: float) -> None:
        self._sr_recip = 1.0 / sample_rate
        self.amp = 0.5
        self._pw = 0.5
        self._phase = 0.0
        self._waveform = Waveform.SIN
        self._last_out = 0.0
        self._eoc = True
        self._eor = True
        self.freq = 100.0

    @property
    def freq(self) -> float:
        """Frequency in Hz."""
        return self._freq

    @freq.setter
    def freq(self, value: float) -> None:
        self._freq = value
        self._phase_inc = value * self._sr_recip

    @property
    def waveform(self) -> Waveform:
        """Current waveform; unknown values fall back to a sine."""
        return self._waveform

    @waveform.setter
    def waveform(self, value: int) -> None:
        try:
            self._waveform = Waveform(value)
        except ValueError:
            self._waveform = Waveform.SIN

    @property
    def pw(self) -> float:
        """Pulse width for the square shapes, clamped to ``[0, 1]``."""
        return self._pw

    @pw.setter
    def pw(self, value: float) -> None:
        self._pw = fclamp(value, 0.0, 1.0)

    @property
    def eor(self) -> bool:
        """True when the last sample crossed the end of the rise."""
        return self._eor

    @property
    def eoc(self) -> bool:
        """True when the last sample completed a cycle."""
        return self._eoc

    @property
    def is_rising(self) -> bool:
        """True in the first half of the cycle."""
        return self._phase < 0.5

    @property
    def is_falling(self) -> bool:
        """True in the second half of the cycle."""
        return self._phase >= 0.5

    def process(self) -> float:
        """Next sample."""
        phase = self._phase
        inc = self._phase_inc
        wf = self._waveform
        if wf is Waveform.SIN:
            out = math.sin(phase * TWOPI_F)
        elif wf is Waveform.TRI:
            t = -1.0 + 2.0 * phase
            out = 2.0 * (abs(t) - 0.5)
        elif wf is Waveform.SAW:
            out = -1.0 * (phase * 2.0 - 1.0)
        elif wf is Waveform.RAMP:
            out = phase * 2.0 - 1.0
        elif wf is Waveform.SQUARE:
            out = 1.0 if phase < self._pw else -1.0
        elif wf is Waveform.POLYBLEP_TRI:
            out = 1.0 if phase < 0.5 else -1.0
            out += _polyblep(inc, phase)
            out -= _polyblep(inc, fastmod1f(phase + 0.5))
            # Leaky integrator turns the band-limited square into a triangle.
            out = inc * out + (1.0 - inc) * self._last_out
            self._last_out = out
            out *= 4.0
        elif wf is Waveform.POLYBLEP_SAW:
            out = 2.0 * phase - 1.0
            out -= _polyblep(inc, phase)
            out *= -1.0
        else:
            out = 1.0 if phase < self._pw else -1.0
            out += _polyblep(inc, phase)
            out -= _polyblep(inc, fastmod1f(phase + (1.0 - self._pw)))
            out *= 0.707

        self._phase += inc
        if self._phase > 1.0:
            self._phase -= 1.0
            self._eoc = True
        else:
            self._eoc = False
        self._eor = self._phase - inc < 0.5 and self._phase >= 0.5
        return out * self.amp

    def phase_add(self, phase: float) -> None:
        """Add ``phase`` (in cycles) to the current phase."""
        self._phase += phase

    def reset(self, phase: float = 0.0) -> None:
        """Set the phase, in cycles."""
        self._phase = phase