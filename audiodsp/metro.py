"""Clock generator producing ticks at a fixed frequency."""

from __future__ import annotations

from .dsp import TWOPI_F


class Metro:
    """Emits a tick once per period of ``freq``."""

    def __init__(self, freq: float, sample_rate: float) -> None:
        self._sample_rate = sample_rate
        self._phase = 0.0
        self.freq = freq

    @property
    def freq(self) -> float:
        """Tick frequency in Hz."""
        return self._freq

    @freq.setter
    def freq(self, value: float) -> None:
        self._freq = value
        self._phase_inc = (TWOPI_F * value) / self._sample_rate

    def process(self) -> bool:
        """Advance one sample; True when a tick occurs."""
        self._phase += self._phase_inc
        if self._phase >= TWOPI_F:
            self._phase -= TWOPI_F
            return True
        return False

    def reset(self) -> None:
        """Set the phase back to zero."""
        self._phase = 0.0