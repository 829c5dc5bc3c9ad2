import math

import pytest

from audiodsp.variableshapeosc import VariableShapeOscillator

SR = 48000.0


def _run(osc, n=4800):
    return [osc.process() for _ in range(n)]


def test_defaults():
    osc = VariableShapeOscillator(SR)
    assert osc.sync is False
    assert osc.waveshape == 0.0
    assert osc.freq == pytest.approx(440.0)
    assert osc.sync_freq == pytest.approx(220.0)


def test_frequencies_limited_to_quarter_sample_rate():
    osc = VariableShapeOscillator(SR)
    osc.freq = SR
    osc.sync_freq = SR
    assert osc.freq == pytest.approx(SR / 4)
    assert osc.sync_freq == pytest.approx(SR / 4)


def test_pw_fixed_at_half_when_sync_frequency_maxed():
    osc = VariableShapeOscillator(SR)
    osc.pw = 0.2
    osc.sync_freq = SR
    assert osc.pw == 0.5
    osc.pw = 0.9
    assert osc.pw == 0.5


def test_pw_kept_inside_bounds():
    osc = VariableShapeOscillator(SR)
    osc.sync_freq = 480.0
    f = osc.sync_freq / SR
    osc.pw = -3.0
    assert osc.pw == pytest.approx(2.0 * f)
    osc.pw = 3.0
    assert osc.pw == pytest.approx(1.0 - 2.0 * f)


def test_square_is_mostly_full_scale():
    osc = VariableShapeOscillator(SR)
    osc.sync_freq = 480.0
    osc.pw = 0.5
    osc.waveshape = 1.0
    out = _run(osc)
    full = sum(1 for x in out if abs(abs(x) - 1.0) < 1e-9)
    assert full / len(out) > 0.9
    assert abs(sum(out) / len(out)) < 0.05


def test_saw_has_zero_mean():
    osc = VariableShapeOscillator(SR)
    osc.sync_freq = 480.0
    osc.pw = 0.5
    osc.waveshape = 0.5
    _run(osc, 100)
    out = _run(osc, 4800)
    assert abs(sum(out) / len(out)) < 0.05
    assert all(abs(x) < 1.5 for x in out)


@pytest.mark.parametrize("shape", [0.0, 0.25, 0.5, 0.75, 1.0])
@pytest.mark.parametrize("sync", [False, True])
def test_output_bounded(shape, sync):
    osc = VariableShapeOscillator(SR)
    osc.freq = 150.0
    osc.sync_freq = 410.0
    osc.pw = 0.4
    osc.waveshape = shape
    osc.sync = sync
    out = _run(osc)
    assert all(math.isfinite(x) and abs(x) < 1.6 for x in out)


def test_sync_changes_output():
    plain = VariableShapeOscillator(SR)
    synced = VariableShapeOscillator(SR)
    for osc in (plain, synced):
        osc.freq = 150.0
        osc.sync_freq = 410.0
        osc.pw = 0.5
    synced.sync = True
    diff = max(abs(a - b) for a, b in zip(_run(plain), _run(synced)))
    assert diff > 1e-3


def test_deterministic():
    a = VariableShapeOscillator(SR)
    b = VariableShapeOscillator(SR)
    for osc in (a, b):
        osc.sync = True
        osc.freq = 200.0
        osc.sync_freq = 630.0
        osc.pw = 0.3
        osc.waveshape = 0.8
    assert _run(a, 2000) == _run(b, 2000)