"""Continuously variable waveform oscillator with optional hard sync."""

from __future__ import annotations

from .dsp import (
    fclamp,
    next_blep_sample,
    next_integrated_blep_sample,
    this_blep_sample,
    this_integrated_blep_sample,
)


def _naive_sample(
    phase: float,
    pw: float,
    slope_up: float,
    slope_down: float,
    triangle_amount: float,
    square_amount: float,
) -> float:
    saw = phase
    square = 0.0 if phase < pw else 1.0
    triangle = phase * slope_up if phase < pw else 1.0 - (phase - pw) * slope_down
    saw += (square - saw) * square_amount
    saw += (triangle - saw) * triangle_amount
    return saw


class VariableShapeOscillator:
    """Morphs saw/ramp/triangle into square; the heard oscillator can sync to a master."""

    def __init__(self, sample_rate: float) -> None:
        self._sample_rate = sample_rate
        self._master_phase = 0.0
        self._slave_phase = 0.0
        self._next_sample = 0.0
        self._previous_pw = 0.5
        self._high = False
        self._pw = 0.5
        self._slave_frequency = 0.0
        self.freq = 440.0
        self.waveshape = 0.0
        self.sync = False
        # The pulse-width limits depend on the sync frequency, so set it first.
        self.sync_freq = 220.0
        self.pw = 0.0

    @property
    def freq(self) -> float:
        """Master (sync source) frequency in Hz, limited to a quarter of the sample rate."""
        return self._master_frequency * self._sample_rate

    @freq.setter
    def freq(self, value: float) -> None:
        self._master_frequency = min(value / self._sample_rate, 0.25)

    @property
    def sync_freq(self) -> float:
        """Frequency of the heard oscillator in Hz, limited to a quarter of the sample rate."""
        return self._slave_frequency * self._sample_rate

    @sync_freq.setter
    def sync_freq(self, value: float) -> None:
        frequency = value / self._sample_rate
        if frequency >= 0.25:
            self._pw = 0.5
            frequency = 0.25
        self._slave_frequency = frequency

    @property
    def pw(self) -> float:
        """Pulse width for the square, or the saw/ramp/triangle balance otherwise."""
        return self._pw

    @pw.setter
    def pw(self, value: float) -> None:
        f = self._slave_frequency
        self._pw = 0.5 if f >= 0.25 else fclamp(value, f * 2.0, 1.0 - 2.0 * f)

    @property
    def waveshape(self) -> float:
        """0 is saw/ramp/triangle, 1 is square."""
        return self._waveshape

    @waveshape.setter
    def waveshape(self, value: float) -> None:
        self._waveshape = value

    @property
    def sync(self) -> bool:
        """Whether the heard oscillator is hard-synced to the master."""
        return self._enable_sync

    @sync.setter
    def sync(self, value: bool) -> None:
        self._enable_sync = bool(value)

    def process(self) -> float:
        """Next sample."""
        this_sample = self._next_sample
        next_sample = 0.0
        reset = False
        transition_during_reset = False
        reset_time = 0.0

        pw = self._pw
        slave_freq = self._slave_frequency
        square_amount = max(self._waveshape - 0.5, 0.0) * 2.0
        triangle_amount = max(1.0 - self._waveshape * 2.0, 0.0)
        slope_up = 1.0 / pw
        slope_down = 1.0 / (1.0 - pw)

        if self._enable_sync:
            self._master_phase += self._master_frequency
            if self._master_phase >= 1.0:
                self._master_phase -= 1.0
                reset_time = self._master_phase / self._master_frequency
                phase_at_reset = self._slave_phase + (1.0 - reset_time) * slave_freq
                reset = True
                if phase_at_reset >= 1.0:
                    phase_at_reset -= 1.0
                    transition_during_reset = True
                if not self._high and phase_at_reset >= pw:
                    transition_during_reset = True
                value = _naive_sample(
                    phase_at_reset, pw, slope_up, slope_down, triangle_amount, square_amount
                )
                this_sample -= value * this_blep_sample(reset_time)
                next_sample -= value * next_blep_sample(reset_time)

        self._slave_phase += slave_freq
        while transition_during_reset or not reset:
            if not self._high:
                if self._slave_phase < pw:
                    break
                t = (self._slave_phase - pw) / (self._previous_pw - pw + slave_freq)
                triangle_step = (slope_up + slope_down) * slave_freq * triangle_amount
                this_sample += square_amount * this_blep_sample(t)
                next_sample += square_amount * next_blep_sample(t)
                this_sample -= triangle_step * this_integrated_blep_sample(t)
                next_sample -= triangle_step * next_integrated_blep_sample(t)
                self._high = True

            if self._slave_phase < 1.0:
                break
            self._slave_phase -= 1.0
            t = self._slave_phase / slave_freq
            triangle_step = (slope_up + slope_down) * slave_freq * triangle_amount
            this_sample -= (1.0 - triangle_amount) * this_blep_sample(t)
            next_sample -= (1.0 - triangle_amount) * next_blep_sample(t)
            this_sample += triangle_step * this_integrated_blep_sample(t)
            next_sample += triangle_step * next_integrated_blep_sample(t)
            self._high = False

        if self._enable_sync and reset:
            self._slave_phase = reset_time * slave_freq
            self._high = False

        next_sample += _naive_sample(
            self._slave_phase, pw, slope_up, slope_down, triangle_amount, square_amount
        )
        self._previous_pw = pw
        self._next_sample = next_sample
        return 2.0 * this_sample - 1.0