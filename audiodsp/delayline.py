"""Circular delay line with linear, Hermite and allpass reads."""

from __future__ import annotations


class DelayLine:
    """A fixed-size delay line; delay 1 reads the most recently written sample."""

    def __init__(self, max_size: int) -> None:
        if max_size < 1:
            raise ValueError("max_size must be at least 1")
        self.max_size = max_size
        self.reset()

    def reset(self) -> None:
        """Clear the buffer and set the delay to one sample."""
        self._line = [0.0] * self.max_size
        self._write_ptr = 0
        self._delay = 1
        self._frac = 0.0

    def set_delay(self, delay: float) -> None:
        """Set the stored delay; a float delay keeps a fractional part."""
        if isinstance(delay, int):
            self._frac = 0.0
            integral = delay
        else:
            integral = int(delay)
            self._frac = delay - integral
        self._delay = integral if integral < self.max_size else self.max_size - 1

    def write(self, sample: float) -> None:
        """Write a sample and advance the write position."""
        self._line[self._write_ptr] = sample
        self._write_ptr = (self._write_ptr - 1 + self.max_size) % self.max_size

    def read(self, delay: float | None = None) -> float:
        """Linearly interpolated read at ``delay``, or at the stored delay."""
        if delay is None:
            integral, frac = self._delay, self._frac
        else:
            integral = int(delay)
            frac = delay - integral
        a = self._line[(self._write_ptr + integral) % self.max_size]
        b = self._line[(self._write_ptr + integral + 1) % self.max_size]
        return a + (b - a) * frac

    def read_hermite(self, delay: float) -> float:
        """Cubic Hermite interpolated read at ``delay``."""
        integral = int(delay)
        f = delay - integral
        t = self._write_ptr + integral + self.max_size
        size = self.max_size
        xm1 = self._line[(t - 1) % size]
        x0 = self._line[t % size]
        x1 = self._line[(t + 1) % size]
        x2 = self._line[(t + 2) % size]
        c = (x1 - xm1) * 0.5
        v = x0 - x1
        w = c + v
        a = w + v + (x2 - x0) * 0.5
        b_neg = w + a
        return (((a * f) - b_neg) * f + c) * f + x0

    def allpass(self, sample: float, delay: int, coefficient: float) -> float:
        """Allpass step through the line with an integer ``delay``."""
        read = self._line[(self._write_ptr + int(delay)) % self.max_size]
        written = sample + coefficient * read
        self.write(written)
        return -written * coefficient + read