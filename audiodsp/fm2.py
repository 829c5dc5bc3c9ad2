"""Two-operator FM voice."""

from __future__ import annotations

from .oscillator import Oscillator, Waveform

_IDX_SCALAR = 0.2
_IDX_SCALAR_RECIP = 1.0 / _IDX_SCALAR


class Fm2:
    """A sine modulator driving the phase of a sine carrier."""

    def __init__(self, sample_rate: float) -> None:
        self._car = Oscillator(sample_rate)
        self._mod = Oscillator(sample_rate)
        self._lfreq = 440.0
        self._lratio = 2.0
        self.frequency = self._lfreq
        self.ratio = self._lratio
        for osc in (self._car, self._mod):
            osc.amp = 1.0
            osc.waveform = Waveform.SIN
        self._idx = 1.0

    @property
    def frequency(self) -> float:
        """Carrier frequency in Hz (stored as an absolute value)."""
        return self._freq

    @frequency.setter
    def frequency(self, value: float) -> None:
        self._freq = abs(value)

    @property
    def ratio(self) -> float:
        """Modulator frequency relative to the carrier (absolute value)."""
        return self._ratio

    @ratio.setter
    def ratio(self, value: float) -> None:
        self._ratio = abs(value)

    @property
    def index(self) -> float:
        """FM depth; 5 corresponds to a full cycle of phase deviation."""
        return self._idx * _IDX_SCALAR_RECIP

    @index.setter
    def index(self, value: float) -> None:
        self._idx = value * _IDX_SCALAR

    def process(self) -> float:
        """Next sample."""
        if self._lratio != self._ratio or self._lfreq != self._freq:
            self._lratio = self._ratio
            self._lfreq = self._freq
            self._car.freq = self._lfreq
            self._mod.freq = self._lfreq * self._lratio
        modval = self._mod.process()
        self._car.phase_add(modval * self._idx)
        return self._car.process()

    def reset(self) -> None:
        """Reset both oscillators' phases."""
        self._car.reset()
        self._mod.reset()