import math

import pytest

from audiodsp.oscillatorbank import OscillatorBank

SR = 48000.0


def _run(bank, n=2000):
    return [bank.process() for _ in range(n)]


def test_default_amplitudes_select_first_voice():
    bank = OscillatorBank(SR)
    assert bank.amplitudes == (1.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0)


def test_set_amplitudes_round_trip():
    bank = OscillatorBank(SR)
    amps = [0.1, 0.2, 0.1, 0.2, 0.1, 0.2, 0.1]
    bank.set_amplitudes(amps)
    assert bank.amplitudes == tuple(amps)


def test_set_amplitudes_too_short_raises():
    bank = OscillatorBank(SR)
    with pytest.raises(ValueError):
        bank.set_amplitudes([0.5, 0.5])


@pytest.mark.parametrize("idx", [-1, 7, 100])
def test_single_amp_out_of_range_ignored(idx):
    bank = OscillatorBank(SR)
    before = bank.amplitudes
    bank.set_single_amp(0.7, idx)
    assert bank.amplitudes == before
    reference = OscillatorBank(SR)
    assert _run(bank, 500) == _run(reference, 500)


def test_single_amp_sets_slot():
    bank = OscillatorBank(SR)
    bank.set_single_amp(0.4, 3)
    assert bank.amplitudes[3] == 0.4


@pytest.mark.parametrize("value,expected", [(2.0, 1.0), (-1.0, 0.0), (0.25, 0.25)])
def test_gain_is_clamped(value, expected):
    bank = OscillatorBank(SR)
    bank.gain = value
    assert bank.gain == expected


def test_freq_limited_to_half_sample_rate():
    bank = OscillatorBank(SR)
    bank.freq = SR
    assert bank.freq == pytest.approx(SR / 2)


def test_zero_gain_is_silent():
    bank = OscillatorBank(SR)
    bank.gain = 0.0
    assert all(x == 0.0 for x in _run(bank))


def test_zero_amplitudes_are_silent():
    bank = OscillatorBank(SR)
    bank.set_amplitudes([0.0] * 7)
    assert all(x == 0.0 for x in _run(bank))


def test_output_scales_linearly_with_gain():
    full = OscillatorBank(SR)
    half = OscillatorBank(SR)
    half.gain = 0.5
    for a, b in zip(_run(full), _run(half)):
        assert b == pytest.approx(0.5 * a, abs=1e-12)


def test_output_is_deterministic_and_bounded():
    a = OscillatorBank(SR)
    b = OscillatorBank(SR)
    for bank in (a, b):
        bank.set_amplitudes([1 / 7] * 7)
        bank.freq = 220.0
    out_a = _run(a, 4000)
    assert out_a == _run(b, 4000)
    assert all(math.isfinite(x) and abs(x) < 4.0 for x in out_a)
    assert max(out_a) > 0.0 > min(out_a)


def test_high_frequency_stays_finite():
    bank = OscillatorBank(SR)
    bank.set_amplitudes([1 / 7] * 7)
    bank.freq = 15000.0
    out = _run(bank, 3000)
    assert all(math.isfinite(x) and abs(x) < 10.0 for x in out)