import pytest

from audiodsp.delayline import DelayLine


@pytest.fixture
def ramp_line():
    line = DelayLine(16)
    for value in range(1, 11):
        line.write(float(value))
    return line


def test_read_returns_recent_samples(ramp_line):
    assert ramp_line.read(1.0) == 10.0
    assert ramp_line.read(2.0) == 9.0
    assert ramp_line.read(10.0) == 1.0


def test_fractional_read_interpolates(ramp_line):
    assert ramp_line.read(1.5) == pytest.approx((ramp_line.read(1.0) + ramp_line.read(2.0)) / 2)


def test_stored_delay(ramp_line):
    ramp_line.set_delay(3)
    assert ramp_line.read() == ramp_line.read(3.0)
    ramp_line.set_delay(2.5)
    assert ramp_line.read() == pytest.approx(ramp_line.read(2.5))


def test_set_delay_clamps_to_size(ramp_line):
    ramp_line.set_delay(100)
    assert ramp_line.read() == ramp_line.read(15.0)


def test_default_delay_is_one_sample(ramp_line):
    assert ramp_line.read() == ramp_line.read(1.0)


def test_hermite_exact_on_linear_data(ramp_line):
    assert ramp_line.read_hermite(3.0) == pytest.approx(ramp_line.read(3.0))
    assert ramp_line.read_hermite(2.5) == pytest.approx(ramp_line.read(2.5))


def test_allpass_with_zero_coefficient_is_pure_delay(ramp_line):
    expected = ramp_line.read(3.0)
    assert ramp_line.allpass(7.0, 3, 0.0) == expected
    assert ramp_line.read(1.0) == 7.0


def test_reset_clears(ramp_line):
    ramp_line.reset()
    assert all(ramp_line.read(float(d)) == 0.0 for d in range(16))


def test_wraps_around():
    line = DelayLine(4)
    for value in range(1, 7):
        line.write(float(value))
    assert line.read(1.0) == 6.0
    assert line.read(4.0) == 3.0


def test_invalid_size():
    with pytest.raises(ValueError):
        DelayLine(0)