"""Modal resonator: a bank of band-pass state-variable filters tuned to partials."""

from __future__ import annotations

import math
from collections.abc import Sequence
from enum import Enum

from .dsp import PI_F, TWOPI_F

_PI_POW3 = PI_F * PI_F * PI_F
_PI_POW5 = _PI_POW3 * PI_F * PI_F
_TAN_A = 3.260e-01 * _PI_POW3
_TAN_B = 1.823e-01 * _PI_POW5

MAX_NUM_MODES = 24
MODE_BATCH_SIZE = 4
_RATIO_FRAC = 1.0 / 12.0
_STIFF_FRAC_2 = 1.0 / 0.6


class FilterMode(Enum):
    """Filter response taken from each state-variable filter.

    Only LOW_PASS reads the low-pass output; every other mode reads the band-pass one.
    """

    LOW_PASS = 0
    BAND_PASS = 1
    BAND_PASS_NORMALIZED = 2
    HIGH_PASS = 3


def _fasttan(f: float) -> float:
    f2 = f * f
    return f * (PI_F + f2 * (_TAN_A + _TAN_B * f2))


class ResonatorSvf:
    """A batch of state-variable filters fed in series, their outputs summed."""

    def __init__(self, batch_size: int) -> None:
        if batch_size < 1:
            raise ValueError("batch_size must be at least 1")
        self.batch_size = batch_size
        self.reset()

    def reset(self) -> None:
        """Clear every filter's state."""
        self._state_1 = [0.0] * self.batch_size
        self._state_2 = [0.0] * self.batch_size

    def process(
        self,
        f: Sequence[float],
        q: Sequence[float],
        gain: Sequence[float],
        value: float,
        mode: FilterMode = FilterMode.BAND_PASS,
    ) -> float:
        """Run one sample through all filters; returns the gain-weighted sum.

        ``f`` holds normalised frequencies (cycles per sample), ``q`` the
        resonances and ``gain`` the output weights, one per filter.
        """
        n = self.batch_size
        if len(f) < n or len(q) < n or len(gain) < n:
            raise ValueError(f"expected at least {n} values for f, q and gain")
        low_pass = mode is FilterMode.LOW_PASS
        total = 0.0
        for i in range(n):
            g = _fasttan(f[i])
            r = 1.0 / q[i]
            h = 1.0 / (1.0 + r * g + g * g)
            s1 = self._state_1[i]
            s2 = self._state_2[i]
            hp = (value - (r + g) * s1 - s2) * h
            bp = g * hp + s1
            self._state_1[i] = g * hp + bp
            lp = g * bp + s2
            self._state_2[i] = g * bp + lp
            total += gain[i] * (lp if low_pass else bp)
        return total


def _nth_harmonic_compensation(n: int, stiffness: float) -> float:
    stretch_factor = 1.0
    for _ in range(n - 1):
        stretch_factor += stiffness
        stiffness *= 0.93 if stiffness < 0.0 else 0.98
    return 1.0 / stretch_factor


def _calc_stiffness(sig: float) -> float:
    if sig < 0.25:
        return -(0.25 - sig) * 0.25
    if sig < 0.3:
        return 0.0
    if sig < 0.9:
        return (sig - 0.3) * _STIFF_FRAC_2
    sig = (sig - 0.9) * 10.0
    sig *= sig
    return 1.5 - math.cos(sig * PI_F) * 0.5


def _clamp01(value: float) -> float:
    return max(min(value, 1.0), 0.0)


class Resonator:
    """Resonant body simulated by up to 24 tuned band-pass modes.

    Modes are rendered in batches of four; a trailing incomplete batch is not heard.
    """

    def __init__(self, position: float, resolution: int, sample_rate: float) -> None:
        self._sample_rate = sample_rate
        self.freq = 440.0
        self.structure = 0.5
        self.brightness = 0.5
        self.damping = 0.5
        self._resolution = min(resolution, MAX_NUM_MODES)
        amplitude = math.cos(position * TWOPI_F) * 0.25
        self._mode_amplitude = [
            amplitude if i < self._resolution else 0.0 for i in range(MAX_NUM_MODES)
        ]
        self._mode_filters = [
            ResonatorSvf(MODE_BATCH_SIZE) for _ in range(MAX_NUM_MODES // MODE_BATCH_SIZE)
        ]

    @property
    def resolution(self) -> int:
        """Number of modes computed."""
        return self._resolution

    @property
    def freq(self) -> float:
        """Fundamental frequency in Hz."""
        return self._frequency * self._sample_rate

    @freq.setter
    def freq(self, value: float) -> None:
        self._frequency = value / self._sample_rate

    @property
    def structure(self) -> float:
        """General character (stiffness) of the body, clamped to ``[0, 1]``."""
        return self._structure

    @structure.setter
    def structure(self, value: float) -> None:
        self._structure = _clamp01(value)

    @property
    def brightness(self) -> float:
        """Brightness, clamped to ``[0, 1]``."""
        return self._brightness

    @brightness.setter
    def brightness(self, value: float) -> None:
        self._brightness = _clamp01(value)

    @property
    def damping(self) -> float:
        """Decay time control, clamped to ``[0, 1]``."""
        return self._damping

    @damping.setter
    def damping(self, value: float) -> None:
        self._damping = _clamp01(value)

    def process(self, value: float) -> float:
        """Excite the body with ``value`` and return the next sample."""
        stiffness = _calc_stiffness(self._structure)
        f0 = self._frequency * _nth_harmonic_compensation(3, stiffness)
        harmonic = f0
        stretch_factor = 1.0

        q_sqrt = 2.0 ** (self._damping * 79.7 * _RATIO_FRAC)
        q = 500.0 * q_sqrt * q_sqrt
        brightness = self._brightness
        brightness *= 1.0 - self._structure * 0.3
        brightness *= 1.0 - self._damping * 0.3
        q_loss = brightness * (2.0 - brightness) * 0.85 + 0.15

        mode_f: list[float] = []
        mode_q: list[float] = []
        mode_a: list[float] = []
        filters = iter(self._mode_filters)
        out = 0.0

        for amplitude in self._mode_amplitude[: self._resolution]:
            mode_frequency = min(harmonic * stretch_factor, 0.499)
            mode_f.append(mode_frequency)
            mode_q.append(1.0 + mode_frequency * q)
            mode_a.append(amplitude * (1.0 - mode_frequency * 2.0))

            if len(mode_f) == MODE_BATCH_SIZE:
                out += next(filters).process(
                    mode_f, mode_q, mode_a, value, FilterMode.BAND_PASS
                )
                mode_f, mode_q, mode_a = [], [], []

            stretch_factor += stiffness
            # Negative stiffness shrinks faster so partials never fold below zero.
            stiffness *= 0.93 if stiffness < 0.0 else 0.98
            harmonic += f0
            q *= q_loss

        return out