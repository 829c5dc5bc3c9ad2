"""Shared math helpers, constants and curve functions used by the DSP modules."""

from __future__ import annotations

import math
import random
import struct
from enum import Enum

PI_F = 3.1415927410125732421875
TWOPI_F = 2.0 * PI_F
HALFPI_F = PI_F * 0.5
ONE_TWELFTH = 1.0 / 12.0

_FLT_MIN_NORMAL = 1.1754943508222875e-38
_FLOAT_ONE_BITS = 0x3F800000
_U32_MASK = 0xFFFFFFFF


class Mapping(Enum):
    """Response curves for :func:`fmap`."""

    LINEAR = "linear"
    EXP = "exp"
    LOG = "log"


def _wrap_i32(value: int) -> int:
    return ((value + 0x80000000) & _U32_MASK) - 0x80000000


def _float_bits(f: float) -> int:
    return struct.unpack("<i", struct.pack("<f", f))[0]


def _bits_float(bits: int) -> float:
    return struct.unpack("<f", struct.pack("<i", _wrap_i32(bits)))[0]


def fclamp(value: float, low: float, high: float) -> float:
    """Clamp ``value`` to ``[low, high]`` (the upper bound wins if they cross)."""
    return min(max(value, low), high)


def fastpower(f: float, n: int) -> float:
    """Approximate ``f ** n`` by manipulating the single-precision exponent."""
    if n < 1:
        raise ValueError("n must be at least 1")
    bits = _float_bits(f) - _FLOAT_ONE_BITS
    bits <<= n - 1
    return _bits_float(bits + _FLOAT_ONE_BITS)


def fastroot(f: float, n: int) -> float:
    """Approximate the ``n``-th root of ``f`` by manipulating the exponent."""
    if n < 1:
        raise ValueError("n must be at least 1")
    bits = _float_bits(f) - _FLOAT_ONE_BITS
    bits >>= n - 1
    return _bits_float(bits + _FLOAT_ONE_BITS)


def fastmod1f(x: float) -> float:
    """Fractional part of ``x``, always in ``[0, 1)``."""
    return x - math.floor(x)


def pow10f(x: float) -> float:
    """Ten raised to ``x``."""
    return math.exp(2.302585092994046 * x)


def fastlog2f(f: float) -> float:
    """Polynomial approximation of ``log2(abs(f))``."""
    frac, exponent = math.frexp(abs(f))
    result = 1.23149591368684
    result *= frac
    result += -4.11852516267426
    result *= frac
    result += 6.02197014179219
    result *= frac
    result += -3.13396450166353
    return result + exponent


def fastlog10f(f: float) -> float:
    """Approximation of ``log10(abs(f))``."""
    return fastlog2f(f) * 0.3010299956639812


def mtof(m: float) -> float:
    """Convert a MIDI note number to a frequency in Hz."""
    return 2.0 ** ((m - 69.0) / 12.0) * 440.0


def fonepole(out: float, value: float, coeff: float) -> float:
    """One-pole low-pass step; returns the new filter state."""
    return out + coeff * (value - out)


def fmap(value: float, low: float, high: float, curve: Mapping = Mapping.LINEAR) -> float:
    """Map ``value`` in ``[0, 1]`` onto ``[low, high]`` along ``curve``."""
    if curve is Mapping.EXP:
        return fclamp(low + (value * value) * (high - low), low, high)
    if curve is Mapping.LOG:
        a = 1.0 / math.log10(high / low)
        return fclamp(low * 10.0 ** (value / a), low, high)
    return fclamp(low + value * (high - low), low, high)


def median(a, b, c):
    """Median of three values."""
    if b < a:
        if b < c:
            return c if c < a else a
        return b
    if a < c:
        return c if c < b else b
    return a


def this_blep_sample(t: float) -> float:
    """Band-limited step correction for the sample at the discontinuity."""
    return 0.5 * t * t


def next_blep_sample(t: float) -> float:
    """Band-limited step correction for the sample after the discontinuity."""
    t = 1.0 - t
    return -0.5 * t * t


def next_integrated_blep_sample(t: float) -> float:
    """Integrated step correction for the sample after the discontinuity."""
    t1 = 0.5 * t
    t2 = t1 * t1
    t4 = t2 * t2
    return 0.1875 - t1 + 1.5 * t2 - t4


def this_integrated_blep_sample(t: float) -> float:
    """Integrated step correction for the sample at the discontinuity."""
    return next_integrated_blep_sample(1.0 - t)


def soft_limit(x: float) -> float:
    """Rational soft limiter."""
    return x * (27.0 + x * x) / (27.0 + 9.0 * x * x)


def soft_clip(x: float) -> float:
    """Soft limiter that saturates hard to +/-1 beyond +/-3."""
    if x < -3.0:
        return -1.0
    if x > 3.0:
        return 1.0
    return soft_limit(x)


def test_float(x: float, y: float = 0.0) -> float:
    """Return ``x`` if it is zero or a normal finite float, otherwise ``y``."""
    if x == 0 or (math.isfinite(x) and abs(x) >= _FLT_MIN_NORMAL):
        return x
    return y


def soft_saturate(value: float, thresh: float) -> float:
    """Soft saturation above ``thresh``, levelling off at ``(thresh + 1) / 2``."""
    flip = value < 0.0
    magnitude = -value if flip else value
    if magnitude < thresh:
        return value
    if magnitude > 1.0:
        out = (thresh + 1.0) / 2.0
    elif magnitude > thresh:
        temp = (magnitude - thresh) / (1.0 - thresh)
        out = thresh + (magnitude - thresh) / (1.0 + temp * temp)
    else:
        return 0.0
    return -out if flip else out


def is_power2(x: int) -> bool:
    """True when the 32-bit unsigned ``x`` has at most one bit set."""
    x &= _U32_MASK
    return ((x - 1) & _U32_MASK & x) == 0


def get_next_power2(x: int) -> int:
    """Smallest power of two not below ``x`` in 32-bit unsigned arithmetic."""
    x = (x - 1) & _U32_MASK
    for shift in (1, 2, 4, 8, 16):
        x |= x >> shift
    return (x + 1) & _U32_MASK


def rand_unit(rng: random.Random | None = None) -> float:
    """A uniform random float in ``[0, 1)`` from ``rng`` or the module generator."""
    return (rng or random).random()