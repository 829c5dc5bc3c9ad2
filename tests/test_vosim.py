import math

import pytest

from audiodsp.vosim import VosimOscillator


def test_defaults():
    osc = VosimOscillator(48000.0)
    assert osc.freq == pytest.approx(105.0)
    assert osc.form1_freq == pytest.approx(1390.0)
    assert osc.form2_freq == pytest.approx(817.0)
    assert osc.shape == 0.5


def test_frequencies_limited_to_quarter_sample_rate():
    osc = VosimOscillator(1000.0)
    osc.freq = 900.0
    osc.form1_freq = 300.0
    osc.form2_freq = 251.0
    assert osc.freq == pytest.approx(250.0)
    assert osc.form1_freq == pytest.approx(250.0)
    assert osc.form2_freq == pytest.approx(250.0)


def test_silent_formants_output_reset_amplitude():
    osc = VosimOscillator(48000.0)
    osc.form1_freq = 0.0
    osc.form2_freq = 0.0
    osc.shape = 0.0
    samples = [osc.process() for _ in range(100)]
    assert all(x == pytest.approx(-1.0) for x in samples)


def test_output_bounded_and_finite():
    osc = VosimOscillator(48000.0)
    samples = [osc.process() for _ in range(5000)]
    assert all(math.isfinite(x) for x in samples)
    assert max(abs(x) for x in samples) <= 3.0
    assert max(samples) > min(samples)


def test_deterministic():
    a = VosimOscillator(44100.0)
    b = VosimOscillator(44100.0)
    for osc in (a, b):
        osc.shape = -0.3
    assert [a.process() for _ in range(500)] == [b.process() for _ in range(500)]


def test_shape_changes_output():
    a = VosimOscillator(48000.0)
    b = VosimOscillator(48000.0)
    b.shape = 1.0
    assert [a.process() for _ in range(100)] != [b.process() for _ in range(100)]