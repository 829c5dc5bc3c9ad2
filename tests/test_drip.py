import math
import random

from audiodsp.drip import Drip


def _render(drip, n, first_trig=False):
    out = [drip.process(first_trig)]
    out.extend(drip.process(False) for _ in range(n - 1))
    return out


def test_properties_keep_construction_values():
    drip = Drip(48000.0, 0.5, random.Random(0))
    assert drip.sample_rate == 48000.0
    assert drip.dettack == 0.5


def test_produces_sound_after_start():
    drip = Drip(48000.0, 0.5, random.Random(1))
    out = _render(drip, 200)
    assert max(abs(v) for v in out) > 0.0


def test_output_is_finite_and_bounded():
    drip = Drip(48000.0, 0.5, random.Random(2))
    for value in _render(drip, 20000):
        assert math.isfinite(value)
        assert abs(value) < 10.0


def test_same_seed_gives_same_output():
    a = Drip(44100.0, 0.25, random.Random(7))
    b = Drip(44100.0, 0.25, random.Random(7))
    assert _render(a, 1000) == _render(b, 1000)


def test_trigger_on_fresh_instance_matches_plain_start():
    a = Drip(44100.0, 0.25, random.Random(5))
    b = Drip(44100.0, 0.25, random.Random(5))
    assert _render(a, 300, first_trig=True) == _render(b, 300)


def test_trigger_restarts_from_initial_state():
    rng = random.Random(11)
    a = Drip(8000.0, 0.25, rng)
    _render(a, 3000)
    state = rng.getstate()
    restarted = _render(a, 500, first_trig=True)
    rng.setstate(state)
    fresh = Drip(8000.0, 0.25, rng)
    assert restarted == _render(fresh, 500)


def test_sound_dies_away_after_dettack():
    drip = Drip(1000.0, 0.25, random.Random(3))
    out = _render(drip, 40000)
    assert max(abs(v) for v in out[-1000:]) < 1e-6
    assert max(abs(v) for v in out[:250]) > max(abs(v) for v in out[-1000:])