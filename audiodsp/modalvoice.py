"""Modal synthesis voice: mallet click or noise, low-pass filtered, into a resonator."""

from __future__ import annotations

import random

from .dsp import ONE_TWELFTH, fclamp
from .dust import Dust
from .resonator import FilterMode, Resonator, ResonatorSvf


class ModalVoice:
    """A struck (or continuously excited) resonant body."""

    def __init__(self, sample_rate: float, rng: random.Random | None = None) -> None:
        self._sample_rate = sample_rate
        self._aux = 0.0
        self._trig = False
        self._excitation_filter = ResonatorSvf(1)
        self._resonator = Resonator(0.015, 24, sample_rate)
        self._dust = Dust(rng)
        self.sustain = False
        self.freq = 440.0
        self.accent = 0.3
        self.structure = 0.6
        self.brightness = 0.8
        self.damping = 0.6

    @property
    def sustain(self) -> bool:
        """When True the body is continuously excited with noise."""
        return self._sustain

    @sustain.setter
    def sustain(self, value: bool) -> None:
        self._sustain = bool(value)

    @property
    def freq(self) -> float:
        """Root frequency in Hz, limited to a quarter of the sample rate."""
        return self._f0 * self._sample_rate

    @freq.setter
    def freq(self, value: float) -> None:
        self._resonator.freq = value
        self._f0 = fclamp(value / self._sample_rate, 0.0, 0.25)

    @property
    def accent(self) -> float:
        """Strike strength, clamped to ``[0, 1]``."""
        return self._accent

    @accent.setter
    def accent(self, value: float) -> None:
        self._accent = fclamp(value, 0.0, 1.0)

    @property
    def structure(self) -> float:
        """General character of the resonator, clamped to ``[0, 1]``."""
        return self._resonator.structure

    @structure.setter
    def structure(self, value: float) -> None:
        self._resonator.structure = value

    @property
    def brightness(self) -> float:
        """Brightness of the body and noise density, clamped to ``[0, 1]``."""
        return self._brightness

    @brightness.setter
    def brightness(self, value: float) -> None:
        self._brightness = fclamp(value, 0.0, 1.0)
        self._density = self._brightness * self._brightness

    @property
    def damping(self) -> float:
        """Decay time of the body, clamped to ``[0, 1]``."""
        return self._damping

    @damping.setter
    def damping(self, value: float) -> None:
        self._damping = fclamp(value, 0.0, 1.0)

    @property
    def aux(self) -> float:
        """The filtered excitation signal from the last processed sample."""
        return self._aux

    def trig(self) -> None:
        """Strike the body on the next sample."""
        self._trig = True

    def process(self, trigger: bool = False) -> float:
        """Next sample; ``trigger`` strikes the body."""
        accent = self._accent
        brightness = self._brightness + 0.25 * accent * (1.0 - self._brightness)
        damping = self._damping + 0.25 * accent * (1.0 - self._damping)

        sustain = self._sustain
        semitone_range = 36.0 if sustain else 60.0
        f = 4.0 * self._f0 if sustain else 2.0 * self._f0
        cutoff = min(
            f
            * 2.0
            ** (ONE_TWELFTH * ((brightness * (2.0 - brightness) - 0.5) * semitone_range)),
            0.499,
        )
        q = 0.7 if sustain else 1.5

        excitation = 0.0
        if sustain:
            dust_f = 0.00005 + 0.99995 * self._density * self._density
            self._dust.density = dust_f
            excitation = self._dust.process() * (4.0 - dust_f * 3.0) * accent
        elif trigger or self._trig:
            attenuation = 1.0 - damping * 0.5
            amplitude = (0.12 + 0.08 * accent) * attenuation
            excitation = (
                amplitude * 2.0 ** (ONE_TWELFTH * (cutoff * cutoff * 24.0)) / cutoff
            )
            self._trig = False

        excitation = self._excitation_filter.process(
            [cutoff], [q], [1.0], excitation, FilterMode.LOW_PASS
        )
        self._aux = excitation

        self._resonator.brightness = brightness
        self._resonator.damping = damping
        return self._resonator.process(excitation)