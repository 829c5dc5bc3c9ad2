"""Randomly clocked impulses."""

from __future__ import annotations

import random

from .dsp import fclamp, rand_unit


class Dust:
    """Sparse random impulses whose rate follows ``density``."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng
        self.density = 0.5

    @property
    def density(self) -> float:
        """Impulse density, clamped to ``[0, 1]``."""
        return self._density_setting

    @density.setter
    def density(self, value: float) -> None:
        self._density_setting = fclamp(value, 0.0, 1.0)
        self._density = self._density_setting * 0.3

    def process(self) -> float:
        """Next sample: an impulse in ``[0, 1)`` or zero."""
        u = rand_unit(self._rng)
        if u < self._density:
            return u / self._density
        return 0.0