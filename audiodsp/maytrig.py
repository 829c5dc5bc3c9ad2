"""Probabilistic trigger."""

from __future__ import annotations

import random

from .dsp import rand_unit


class Maytrig:
    """Fires with a given probability each time it is processed."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng

    def process(self, prob: float) -> bool:
        """True with probability ``prob`` (1 always, below 0 never)."""
        return rand_unit(self._rng) <= prob