"""Sample-and-hold and track-and-hold running in parallel."""

from __future__ import annotations

from enum import Enum


class SampleHoldMode(Enum):
    """Which of the two held values to output."""

    SAMPLE_HOLD = 0
    TRACK_HOLD = 1


class SampleHold:
    """Dual sample-and-hold / track-and-hold."""

    def __init__(self) -> None:
        self._track = 0.0
        self._sample = 0.0
        self._previous = False

    def process(
        self,
        trigger: bool,
        value: float,
        mode: SampleHoldMode = SampleHoldMode.SAMPLE_HOLD,
    ) -> float:
        """Update both holds with ``value`` and return the selected one."""
        if trigger:
            if not self._previous:
                self._sample = value
            self._track = value
        self._previous = trigger
        return self._sample if mode is SampleHoldMode.SAMPLE_HOLD else self._track