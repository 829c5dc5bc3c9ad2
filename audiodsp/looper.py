"""Multimode audio looper with normal, one-time dub, replace and decaying modes."""

from __future__ import annotations

import math
from enum import Enum

from .dsp import HALFPI_F

_FRIP_DECAY = 0.7071067811865476
_WINDOW_SAMPS = 1200
_WINDOW_FACTOR = 1.0 / _WINDOW_SAMPS
_NEAR_BEGINNING_SAMPS = 4800


class LooperMode(Enum):
    """Recording behaviour.

    NORMAL adds input to the loop for as long as recording is on.
    ONETIME_DUB waits for the loop start, adds one full pass, then stops.
    REPLACE overwrites the loop while recording.
    FRIPPERTRONICS adds input while the old material decays on each pass.
    """

    NORMAL = 0
    ONETIME_DUB = 1
    REPLACE = 2
    FRIPPERTRONICS = 3


class _State(Enum):
    EMPTY = 0
    REC_FIRST = 1
    PLAYING = 2
    REC_DUB = 3


class Looper:
    """A looper over an internal buffer of ``size`` samples."""

    def __init__(self, size: int) -> None:
        if size < 2:
            raise ValueError("size must be at least 2")
        self._size = size
        self._buffer = [0.0] * size
        self._state = _State.EMPTY
        self.mode = LooperMode.NORMAL
        self.half_speed = False
        self.reverse = False
        self._rec_queue = False
        self._win_idx = 0
        self._win = 0.0
        self._pos = 0.0
        self._recsize = 0
        self._near_beginning = False

    @property
    def recording(self) -> bool:
        """True while the buffer is being written to."""
        return self._state in (_State.REC_DUB, _State.REC_FIRST)

    @property
    def recording_queued(self) -> bool:
        """True while a one-time dub waits for the loop start."""
        return self._rec_queue

    @property
    def near_beginning(self) -> bool:
        """True while playing within the first 4800 samples of the loop."""
        return self._near_beginning

    def _increment(self) -> float:
        inc = 0.5 if self.half_speed else 1.0
        return -inc if self.reverse else inc

    def _read(self) -> float:
        return self._buffer[int(self._pos)]

    def _write(self, value: float) -> None:
        self._buffer[int(self._pos)] = value

    def _advance_window(self) -> None:
        if self._win_idx < _WINDOW_SAMPS - 1:
            self._win_idx += 1

    def _advance_loop(self, inc: float) -> bool:
        self._pos += inc
        if self._pos > self._recsize - 1:
            self._pos = 0.0
            return True
        if self._pos < 0:
            self._pos = float(self._recsize - 1)
            return True
        return False

    def process(self, value: float) -> float:
        """Read and write one sample according to the state and mode."""
        state = self._state
        inc = 1.0 if state in (_State.EMPTY, _State.REC_FIRST) else self._increment()
        self._win = math.sin(HALFPI_F * (self._win_idx * _WINDOW_FACTOR))
        win = self._win
        sig = 0.0

        if state is _State.REC_FIRST:
            self._write(value * win)
            self._advance_window()
            self._recsize = int(self._pos)
            self._pos += inc
            if self._pos > self._size - 1:
                self._state = _State.PLAYING
                self._recsize = int(self._pos - 1)
                self._pos = 0.0
        elif state is _State.PLAYING:
            sig = self._read()
            # The first samples after recording are written back with the
            # input faded out, for a seamless loop point.
            if self._win_idx < _WINDOW_SAMPS - 1:
                self._write(sig + value * (1.0 - win))
                self._win_idx += 1
            hit_loop = self._advance_loop(inc)
            if hit_loop and self._rec_queue and self.mode is LooperMode.ONETIME_DUB:
                self._rec_queue = False
                self._state = _State.REC_DUB
                self._win_idx = 0
        elif state is _State.REC_DUB:
            sig = self._read()
            if self.mode is LooperMode.REPLACE:
                self._write(value * win)
            elif self.mode is LooperMode.FRIPPERTRONICS:
                self._write(value * win + sig * _FRIP_DECAY)
            else:
                self._write(value * win + sig)
            self._advance_window()
            hit_loop = self._advance_loop(inc)
            if hit_loop and self.mode is LooperMode.ONETIME_DUB:
                self._state = _State.PLAYING
                self._win_idx = 0

        self._near_beginning = (
            self._state is not _State.EMPTY
            and not self.recording
            and self._pos < _NEAR_BEGINNING_SAMPS
        )
        return sig

    def clear(self) -> None:
        """Mark the loop empty; the buffer contents are left in place."""
        self._state = _State.EMPTY

    def trig_record(self) -> None:
        """Start a new loop, close the first loop, or toggle overdubbing."""
        state = self._state
        if state is _State.EMPTY:
            self._pos = 0.0
            self._recsize = 0
            self._state = _State.REC_FIRST
            self.half_speed = False
            self.reverse = False
        elif state in (_State.REC_FIRST, _State.REC_DUB):
            self._state = _State.PLAYING
        elif state is _State.PLAYING:
            if self.mode is LooperMode.ONETIME_DUB:
                self._rec_queue = True
            else:
                self._state = _State.REC_DUB
        if not self._rec_queue:
            self._win_idx = 0

    def increment_mode(self) -> None:
        """Step to the next mode, wrapping after the last."""
        modes = list(LooperMode)
        self.mode = modes[(modes.index(self.mode) + 1) % len(modes)]

    def toggle_reverse(self) -> None:
        """Flip reverse playback."""
        self.reverse = not self.reverse

    def toggle_half_speed(self) -> None:
        """Flip half-speed playback."""
        self.half_speed = not self.half_speed