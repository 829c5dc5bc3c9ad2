"""Physical model of dripping water."""

from __future__ import annotations

import math
import random

from .dsp import PI_F

_SOUND_DECAY = 0.95
_SYSTEM_DECAY = 0.996
_GAIN = 1.0
_NUM_SOURCES = 10.0
_CENTER_FREQ0 = 450.0
_CENTER_FREQ1 = 600.0
_CENTER_FREQ2 = 750.0
_RESON = 0.9985
_FREQ_SWEEP = 1.0001
_MAX_SHAKE = 2000.0

_RAND_MAX = 2147483647
_HALF_RAND = 1073741823.5
_NOISE_SCALE = 1.0 / 1073741823.0


class Drip:
    """Dripping water: random bursts through three swept resonators.

    ``dettack`` is the time in seconds after which no new energy enters.
    """

    def __init__(
        self, sample_rate: float, dettack: float, rng: random.Random | None = None
    ) -> None:
        self._sample_rate = sample_rate
        self._dettack = dettack
        self._rng = rng if rng is not None else random.Random()
        self._reset()

    @property
    def sample_rate(self) -> float:
        """Sample rate in Hz."""
        return self._sample_rate

    @property
    def dettack(self) -> float:
        """Time in seconds over which sound is fed in after a trigger."""
        return self._dettack

    def _random(self, maximum: int) -> int:
        return self._rng.randint(0, _RAND_MAX) % (maximum + 1)

    def _noise(self) -> float:
        return (self._rng.randint(0, _RAND_MAX) - _HALF_RAND) * _NOISE_SCALE

    def _coeff(self, freq: float) -> float:
        return -_RESON * 2.0 * math.cos(freq * 2.0 * PI_F / self._sample_rate)

    def _reset(self) -> None:
        self._num_tubes = 10.0
        self._damp = 0.2
        self._shake_max = 0.0
        self._freq = 450.0
        self._freq1 = 600.0
        self._freq2 = 720.0
        self._amp = 0.3

        self._snd_level = 0.0
        self._kloop = self._sample_rate * self._dettack
        self._outputs00 = self._outputs01 = 0.0
        self._outputs10 = self._outputs11 = 0.0
        self._outputs20 = self._outputs21 = 0.0

        self._center_freqs0 = self._res_freq0 = _CENTER_FREQ0
        self._center_freqs1 = self._res_freq1 = _CENTER_FREQ1
        self._center_freqs2 = self._res_freq2 = _CENTER_FREQ2
        self._num_objects = _NUM_SOURCES
        self._sound_decay = _SOUND_DECAY
        self._system_decay = _SYSTEM_DECAY
        gain = math.log(_NUM_SOURCES) * _GAIN / _NUM_SOURCES
        self._gains0 = self._gains1 = self._gains2 = gain
        self._coeffs01 = self._coeffs11 = self._coeffs21 = _RESON * _RESON
        self._coeffs00 = self._coeff(_CENTER_FREQ0)
        self._coeffs10 = self._coeff(_CENTER_FREQ1)
        self._coeffs20 = self._coeff(_CENTER_FREQ2)

        self._shake_energy = min(self._amp * _MAX_SHAKE * 0.1, _MAX_SHAKE)
        self._shake_damp = 0.0
        self._shake_max_save = 0.0
        self._final_z0 = self._final_z1 = self._final_z2 = 0.0

    def _update_parameters(self) -> None:
        if self._num_tubes != 0.0 and self._num_tubes != self._num_objects:
            self._num_objects = max(self._num_tubes, 1.0)
        if self._freq != 0.0 and self._freq != self._res_freq0:
            self._res_freq0 = self._freq
            self._coeffs00 = self._coeff(self._res_freq0)
        if self._damp != 0.0 and self._damp != self._shake_damp:
            self._shake_damp = self._damp
            self._system_decay = _SYSTEM_DECAY + self._shake_damp * 0.002
        if self._shake_max != 0.0 and self._shake_max != self._shake_max_save:
            self._shake_max_save = self._shake_max
            self._shake_energy = min(
                self._shake_energy + self._shake_max_save * _MAX_SHAKE * 0.1, _MAX_SHAKE
            )
        if self._freq1 != 0.0 and self._freq1 != self._res_freq1:
            self._res_freq1 = self._freq1
            self._coeffs10 = self._coeff(self._res_freq1)
        if self._freq2 != 0.0 and self._freq2 != self._res_freq2:
            self._res_freq2 = self._freq2
            self._coeffs20 = self._coeff(self._res_freq2)

    def process(self, trig: bool = False) -> float:
        """Next sample; ``trig`` starts a new drip."""
        if trig:
            self._reset()
        self._update_parameters()

        self._kloop -= 1.0
        if self._kloop == 0.0:
            self._shake_energy = 0.0

        shake_energy = self._shake_energy * self._system_decay

        if self._random(32767) < self._num_objects:
            j = self._random(3)
            if j == 0:
                self._center_freqs0 = self._res_freq1 * (0.75 + 0.25 * self._noise())
                self._gains0 = abs(self._noise())
            elif j == 1:
                self._center_freqs1 = self._res_freq1 * (1.0 + 0.25 * self._noise())
                self._gains1 = abs(self._noise())
            else:
                self._center_freqs2 = self._res_freq1 * (1.25 + 0.25 * self._noise())
                self._gains2 = abs(self._noise())

        self._gains0 *= _RESON
        if self._gains0 > 0.001:
            self._center_freqs0 *= _FREQ_SWEEP
            self._coeffs00 = self._coeff(self._center_freqs0)
        self._gains1 *= _RESON
        if self._gains1 > 0.0:
            self._center_freqs1 *= _FREQ_SWEEP
            self._coeffs10 = self._coeff(self._center_freqs1)
        self._gains2 *= _RESON
        if self._gains2 > 0.001:
            self._center_freqs2 *= _FREQ_SWEEP
            self._coeffs20 = self._coeff(self._center_freqs2)

        snd_level = shake_energy * self._sound_decay
        excitation = snd_level * self._noise()

        inputs0 = excitation * self._gains0
        inputs0 -= self._outputs00 * self._coeffs00
        inputs0 -= self._outputs01 * self._coeffs01
        self._outputs01 = self._outputs00
        self._outputs00 = inputs0
        data = self._gains0 * self._outputs00

        # The upper two resonators never latch their input, so their
        # outputs stay silent and only the first one is heard.
        self._outputs11 = self._outputs10
        self._outputs10 = 0.0
        data += self._gains1 * self._outputs10
        self._outputs21 = self._outputs20
        self._outputs20 = 0.0
        data += self._gains2 * self._outputs20

        self._final_z2 = self._final_z1
        self._final_z1 = self._final_z0
        self._final_z0 = data * 4.0

        self._shake_energy = shake_energy
        self._snd_level = snd_level
        return (self._final_z2 - self._final_z0) * 0.005