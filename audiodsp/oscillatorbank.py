"""Divide-down organ style bank of seven sawtooth and square oscillators."""

from __future__ import annotations

from collections.abc import Sequence

from .dsp import next_blep_sample, this_blep_sample

_NUM_VOICES = 7


def _differs(a: float, b: float) -> bool:
    return abs(a - b) > 0.0000001


class OscillatorBank:
    """Mix of Saw 8', Square 8', Saw 4', Square 4', Saw 2', Square 2' and Saw 1'."""

    def __init__(self, sample_rate: float) -> None:
        self._sample_rate = sample_rate
        self._phase = 0.0
        self._next_sample = 0.0
        self._segment = 0
        self._frequency = 0.0
        self._freq_setting = 0.0
        self._recalc = True
        self._gain = 0.0
        self.gain = 1.0
        self._registration = [0.0] * _NUM_VOICES
        self._unshifted = [0.0] * _NUM_VOICES
        self.set_single_amp(1.0, 0)
        self.freq = 440.0

    @property
    def freq(self) -> float:
        """Frequency of the 8' oscillator in Hz, limited to half the sample rate."""
        return self._freq_setting * self._sample_rate

    @freq.setter
    def freq(self, value: float) -> None:
        freq = min(value / self._sample_rate, 0.5)
        self._recalc = _differs(freq, self._frequency) or self._recalc
        self._frequency = freq
        self._freq_setting = freq

    @property
    def gain(self) -> float:
        """Overall gain, clamped to ``[0, 1]``."""
        return self._gain

    @gain.setter
    def gain(self, value: float) -> None:
        self._gain = max(min(value, 1.0), 0.0)

    @property
    def amplitudes(self) -> tuple[float, ...]:
        """The seven voice amplitudes as last set."""
        return tuple(self._unshifted)

    def set_amplitudes(self, amplitudes: Sequence[float]) -> None:
        """Set all seven amplitudes, in the order listed on the class."""
        if len(amplitudes) < _NUM_VOICES:
            raise ValueError(
                f"expected at least {_NUM_VOICES} amplitudes, got {len(amplitudes)}"
            )
        for i, amp in enumerate(amplitudes[:_NUM_VOICES]):
            self._recalc = _differs(self._unshifted[i], amp) or self._recalc
            self._unshifted[i] = amp

    def set_single_amp(self, amp: float, idx: int) -> None:
        """Set one voice's amplitude; indices outside 0-6 are ignored."""
        if not 0 <= idx < _NUM_VOICES:
            return
        self._recalc = _differs(self._unshifted[idx], amp) or self._recalc
        self._unshifted[idx] = amp

    def process(self) -> float:
        """Next sample."""
        if self._recalc:
            self._recalc = False
            self._frequency *= 8.0
            # Very high notes are played as higher harmonics of a lower wave.
            shift = 0
            while self._frequency > 0.5:
                shift += 2
                self._frequency *= 0.5
            self._registration = ([0.0] * shift + self._unshifted)[:_NUM_VOICES]

        r = self._registration
        gain = self._gain
        saw_8 = (r[0] + 2.0 * r[1]) * gain
        saw_4 = (r[2] - r[1] + 2.0 * r[3]) * gain
        saw_2 = (r[4] - r[3] + 2.0 * r[5]) * gain
        saw_1 = (r[6] - r[5]) * gain

        this_sample = self._next_sample
        next_sample = 0.0
        frequency = self._frequency

        self._phase += frequency
        next_segment = int(self._phase)
        if next_segment != self._segment:
            discontinuity = 0.0
            if next_segment == 8:
                self._phase -= 8.0
                next_segment -= 8
                discontinuity -= saw_8
            if next_segment & 3 == 0:
                discontinuity -= saw_4
            if next_segment & 1 == 0:
                discontinuity -= saw_2
            discontinuity -= saw_1
            if discontinuity != 0.0:
                fraction = self._phase - next_segment
                t = fraction / frequency
                this_sample += this_blep_sample(t) * discontinuity
                next_sample += next_blep_sample(t) * discontinuity
        self._segment = next_segment

        phase = self._phase
        segment = self._segment
        next_sample += (phase - 4.0) * saw_8 * 0.125
        next_sample += (phase - (segment & 4) - 2.0) * saw_4 * 0.25
        next_sample += (phase - (segment & 6) - 1.0) * saw_2 * 0.5
        next_sample += (phase - (segment & 7) - 0.5) * saw_1
        self._next_sample = next_sample
        return 2.0 * this_sample