# audiodsp

This package provides small building blocks for making and shaping audio
one sample at a time. It has no dependencies. To use a module, create it
with the sample rate, set its parameters as attributes, and call
`process()` once for each sample.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

### Utilities

- `audiodsp.dsp` holds the helper functions: `fclamp`, `mtof`, `fmap`
  (its curve is chosen with `Mapping.LINEAR`, `Mapping.EXP` or
  `Mapping.LOG`), `fonepole`, `median`, `soft_limit`, `soft_clip`,
  `soft_saturate` and `test_float`. It also has the fast approximations
  `fastpower`, `fastroot`, `fastmod1f`, `pow10f`, `fastlog2f` and
  `fastlog10f`, the band-limited step helpers (`this_blep_sample`,
  `next_blep_sample` and their integrated forms), `is_power2`,
  `get_next_power2` and `rand_unit`. Constants: `PI_F`, `TWOPI_F`,
  `HALFPI_F` and `ONE_TWELFTH`.
- `audiodsp.dcblock.DcBlock` removes the DC offset from a signal.
- `audiodsp.delayline.DelayLine` is a circular delay line. It offers
  `write`, `set_delay`, a linear `read`, `read_hermite` and `allpass`.
- `audiodsp.metro.Metro` is a clock. `process()` returns `True` once per
  period of `freq`.
- `audiodsp.samplehold.SampleHold` runs a sample-and-hold and a
  track-and-hold side by side. Pick the output with `SampleHoldMode`.
- `audiodsp.maytrig.Maytrig` fires with a given probability.
- `audiodsp.smooth_random.SmoothRandomGenerator` glides smoothly between
  random values in `[-1, 1]`.
- `audiodsp.looper.Looper` is a looper over an internal buffer. Its
  `LooperMode` values are `NORMAL`, `ONETIME_DUB`, `REPLACE` and
  `FRIPPERTRONICS`. It offers `trig_record`, `clear`, `increment_mode`,
  `toggle_reverse` and `toggle_half_speed`. It reports its state through
  `recording`, `recording_queued` and `near_beginning`.

### Noise

- `audiodsp.whitenoise.WhiteNoise` is a fast congruential white noise
  generator with an `amp` attribute and a `seed` attribute.
- `audiodsp.dust.Dust` produces sparse random impulses at a chosen
  `density`.
- `audiodsp.clockednoise.ClockedNoise` gives random steps at `freq`,
  smoothed so they do not alias. `sync()` forces a new value.
- `audiodsp.fractal_noise.FractalRandomGenerator` stacks octaves of any
  noise source that has a `freq` attribute and a `process()` method.
- `audiodsp.grainlet.GrainletOscillator` is a granular oscillator.

### Oscillators

- `audiodsp.oscillator.Oscillator` has naive and polyBLEP waveforms,
  chosen from `Waveform`. Its attributes are `freq`, `amp`, `pw` and
  `waveform`, plus the flags `eoc`, `eor`, `is_rising` and `is_falling`.
- `audiodsp.fm2.Fm2` is a two-operator FM voice with `frequency`,
  `ratio` and `index`.
- `audiodsp.formantosc.FormantOscillator`
- `audiodsp.harmonic_osc.HarmonicOscillator` is an additive oscillator.
  Set its harmonics with `set_amplitudes` or `set_single_amp`.
- `audiodsp.vosim.VosimOscillator`
- `audiodsp.oscillatorbank.OscillatorBank` mixes seven saw and square
  waves in the style of a divide-down organ.
- `audiodsp.variablesawosc.VariableSawOscillator`
- `audiodsp.variableshapeosc.VariableShapeOscillator` can optionally
  hard-sync to a master frequency.
- `audiodsp.zoscillator.ZOscillator`

### Physical modelling

- `audiodsp.resonator.ResonatorSvf` is a batch of state-variable filters.
  Its response is chosen with `FilterMode`.
- `audiodsp.resonator.Resonator` is a modal resonant body with up to 24
  modes.
- `audiodsp.modalvoice.ModalVoice` feeds a mallet click, or continuous
  noise, into a resonator.
- `audiodsp.drip.Drip` models dripping water.

## Example

```python
import random

from audiodsp.clockednoise import ClockedNoise
from audiodsp.fractal_noise import FractalRandomGenerator
from audiodsp.metro import Metro
from audiodsp.modalvoice import ModalVoice
from audiodsp.oscillator import Oscillator, Waveform

sample_rate = 48000.0

osc = Oscillator(sample_rate)
osc.waveform = Waveform.POLYBLEP_SAW
osc.freq = 220.0
saw = [osc.process() for _ in range(512)]

clock = Metro(2.0, sample_rate)
voice = ModalVoice(sample_rate, rng=random.Random(1))
struck = [voice.process(clock.process()) for _ in range(4800)]

noise = FractalRandomGenerator(ClockedNoise, 4, sample_rate)
noise.freq = 100.0
texture = [noise.process() for _ in range(512)]
```

Some modules draw random numbers: `Maytrig`, `Dust`, `ClockedNoise`,
`SmoothRandomGenerator`, `ModalVoice` and `Drip`. Each accepts an
optional `rng`, which is a `random.Random` instance. Passing one with a
fixed seed makes a run repeatable.

## What it does not do

The package only computes samples as Python floats. It does not play
audio on a sound device. It does not read or write audio files. It has no
command-line program.