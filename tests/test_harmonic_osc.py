import math

import pytest

from audiodsp.harmonic_osc import HarmonicOscillator


def test_default_is_pure_sine():
    sr = 48000.0
    osc = HarmonicOscillator(sr)
    inc = osc.freq / sr
    phase = 0.0
    for _ in range(200):
        phase = (phase + inc) % 1.0
        assert osc.process() == pytest.approx(math.sin(2 * math.pi * phase), abs=1e-5)


def test_first_harmonic_index_shifts_partial():
    sr = 48000.0
    osc = HarmonicOscillator(sr, 4)
    osc.first_harm_idx = 3
    inc = osc.freq / sr
    phase = 0.0
    ratios = []
    for _ in range(50):
        out = osc.process()
        phase = (phase + inc) % 1.0
        ref = math.sin(2 * math.pi * 3 * phase)
        if abs(ref) > 0.1:
            ratios.append(out / ref)
    assert ratios
    assert all(r == pytest.approx(ratios[0], rel=1e-4) for r in ratios)
    assert 0.0 < ratios[0] < 1.0


def test_first_harmonic_index_minimum():
    osc = HarmonicOscillator(48000.0)
    osc.first_harm_idx = -4
    assert osc.first_harm_idx == 1


def test_frequency_clamping():
    osc = HarmonicOscillator(1000.0)
    osc.freq = 2000.0
    assert osc.freq == pytest.approx(500.0)
    osc.freq = -2000.0
    assert osc.freq == pytest.approx(-500.0)


def test_set_amplitudes_too_short_raises():
    osc = HarmonicOscillator(48000.0, 8)
    with pytest.raises(ValueError):
        osc.set_amplitudes([0.1] * 7)


def test_silence_when_all_amplitudes_zero():
    osc = HarmonicOscillator(48000.0, 4)
    osc.set_amplitudes([0.0] * 4)
    assert all(osc.process() == 0.0 for _ in range(100))


def test_out_of_range_single_amp_ignored():
    a = HarmonicOscillator(48000.0, 4)
    b = HarmonicOscillator(48000.0, 4)
    b.set_single_amp(0.5, 4)
    b.set_single_amp(0.5, -1)
    assert [a.process() for _ in range(100)] == [b.process() for _ in range(100)]


def test_single_amp_adds_harmonic():
    a = HarmonicOscillator(48000.0, 4)
    b = HarmonicOscillator(48000.0, 4)
    b.set_single_amp(0.3, 1)
    out_a = [a.process() for _ in range(100)]
    out_b = [b.process() for _ in range(100)]
    assert out_a != out_b
    assert max(abs(x) for x in out_b) < 1.5