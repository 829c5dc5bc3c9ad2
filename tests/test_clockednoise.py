import random

import pytest

from audiodsp.clockednoise import ClockedNoise

SR = 48000.0


def test_default_frequency():
    noise = ClockedNoise(SR, random.Random(1))
    assert noise.freq == pytest.approx(0.001 * SR)


def test_frequency_is_clamped():
    noise = ClockedNoise(SR, random.Random(1))
    noise.freq = 2 * SR
    assert noise.freq == SR
    noise.freq = -100.0
    assert noise.freq == 0.0


def test_zero_frequency_is_silent():
    noise = ClockedNoise(SR, random.Random(2))
    noise.freq = 0.0
    assert [noise.process() for _ in range(200)] == [0.0] * 200


def test_full_rate_is_raw_noise():
    noise = ClockedNoise(SR, random.Random(3))
    noise.freq = SR
    out = [noise.process() for _ in range(500)]
    assert all(-1.0 <= v < 1.0 for v in out)
    assert len(set(out)) > 400


def test_sync_forces_new_value():
    noise = ClockedNoise(SR, random.Random(4))
    noise.freq = 1.0
    before = [noise.process() for _ in range(100)]
    assert before == [0.0] * 100
    noise.sync()
    after = [noise.process() for _ in range(3)]
    assert any(v != 0.0 for v in after)


def test_held_values_change_slowly():
    noise = ClockedNoise(SR, random.Random(5))
    noise.freq = SR / 100.0
    out = [noise.process() for _ in range(2000)]
    repeats = sum(1 for a, b in zip(out, out[1:]) if a == b)
    assert repeats > 1500
    assert all(abs(v) <= 2.0 for v in out)


def test_same_seed_reproduces():
    a = ClockedNoise(SR, random.Random(6))
    b = ClockedNoise(SR, random.Random(6))
    a.freq = b.freq = 3000.0
    assert [a.process() for _ in range(300)] == [b.process() for _ in range(300)]