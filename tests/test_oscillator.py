import math

import pytest

from audiodsp.oscillator import Oscillator, Waveform

SR = 48000.0


def _osc(waveform, amp=1.0):
    osc = Oscillator(SR)
    osc.waveform = waveform
    osc.amp = amp
    return osc


@pytest.mark.parametrize(
    "waveform, first",
    [
        (Waveform.SIN, 0.0),
        (Waveform.TRI, 1.0),
        (Waveform.SAW, 1.0),
        (Waveform.RAMP, -1.0),
        (Waveform.SQUARE, 1.0),
    ],
)
def test_first_sample_of_naive_shapes(waveform, first):
    assert _osc(waveform).process() == pytest.approx(first)


def test_default_amplitude_scales_output():
    osc = Oscillator(SR)
    osc.waveform = Waveform.SQUARE
    assert osc.process() == pytest.approx(0.5)
    assert osc.freq == 100.0


def test_unknown_waveform_falls_back_to_sine():
    osc = Oscillator(SR)
    osc.waveform = 99
    assert osc.waveform is Waveform.SIN


def test_pulse_width_is_clamped():
    osc = Oscillator(SR)
    osc.pw = 2.0
    assert osc.pw == 1.0
    osc.pw = -1.0
    assert osc.pw == 0.0


def test_reset_sets_phase():
    osc = _osc(Waveform.SQUARE)
    osc.reset(0.75)
    assert osc.process() == -1.0
    assert osc.is_falling is True
    osc.reset()
    assert osc.is_rising is True


def test_phase_add_moves_phase():
    osc = _osc(Waveform.SQUARE)
    osc.freq = 0.0
    osc.phase_add(0.6)
    assert osc.process() == -1.0


def test_end_of_cycle_count():
    osc = Oscillator(SR)
    osc.freq = SR / 100.0
    eocs = 0
    eors = 0
    for _ in range(1000):
        osc.process()
        eocs += osc.eoc
        eors += osc.eor
    assert 9 <= eocs <= 10
    assert 9 <= eors <= 10


def test_sine_is_periodic():
    osc = _osc(Waveform.SIN)
    osc.freq = SR / 8.0
    out = [osc.process() for _ in range(64)]
    for k in range(len(out) - 8):
        assert out[k] == pytest.approx(out[k + 8], abs=1e-6)


@pytest.mark.parametrize(
    "waveform",
    [Waveform.SIN, Waveform.TRI, Waveform.SAW, Waveform.RAMP, Waveform.SQUARE],
)
def test_naive_shapes_bounded_by_amp(waveform):
    osc = _osc(waveform, amp=0.8)
    osc.freq = 1234.0
    out = [osc.process() for _ in range(2000)]
    assert max(abs(v) for v in out) <= 0.8 + 1e-9


@pytest.mark.parametrize(
    "waveform",
    [Waveform.POLYBLEP_TRI, Waveform.POLYBLEP_SAW, Waveform.POLYBLEP_SQUARE],
)
def test_polyblep_shapes_bounded(waveform):
    osc = _osc(waveform)
    osc.freq = 440.0
    out = [osc.process() for _ in range(4000)]
    assert all(math.isfinite(v) and abs(v) <= 2.0 for v in out)
    assert max(out) > 0.0 > min(out)