"""Fast multiplicative-congruential white noise."""

from __future__ import annotations

_COEFF = 4.6566129e-010


def _wrap_i32(value: int) -> int:
    return ((value + 0x80000000) & 0xFFFFFFFF) - 0x80000000


class WhiteNoise:
    """White noise in ``[-amp, amp]`` from a 32-bit congruential generator."""

    def __init__(self) -> None:
        self.amp = 1.0
        self._seed = 1

    @property
    def seed(self) -> int:
        """Current generator state; setting 0 stores 1."""
        return self._seed

    @seed.setter
    def seed(self, value: int) -> None:
        value = _wrap_i32(int(value))
        self._seed = 1 if value == 0 else value

    def process(self) -> float:
        """Next noise sample."""
        self._seed = _wrap_i32(self._seed * 16807)
        return (self._seed * _COEFF) * self.amp