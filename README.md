# controlbox

Small building blocks for control engineering, plus a command that
draws time-domain plots to an image file.

## Installation

```
pip install .
```

To run the tests, install the `test` extra (`pip install .[test]`) and
run `pytest`.

## What is in the package

- `controlbox.hysteresis`
  - `LinearFn(m, n)` is the line `y = m * x + n`. It can be called as a
    function.
  - `Hysteresis` switches between a lower and an upper branch at the
    `lower` and `upper` thresholds. Inside the band it stays on the branch
    it came from, which is tracked as a `Direction`.
  - `HysteresisBuilder` configures the thresholds through chainable
    methods: `lower_x`, `upper_x`, `lower_y`, `upper_y`, `spread_x`,
    `spread_y`, `cross` and `upper_direction`. Finish the chain with
    `build()`.
  - `TransferFunction` is the abstract base class that provides
    `transfer()`.
  - `NotDefinedError` is a `ValueError` subclass meant for transfer
    functions that are evaluated outside their domain. `Hysteresis` itself
    is defined for every input and never raises it.
- `controlbox.pt1`
  - `PT1(sample_time, t1_time, kp)` is a floating-point first-order lag
    element.
  - `FixedPointPT1` is the same element in 32-bit fixed-point arithmetic
    with 10 fractional bits. It raises `OverflowError` when an
    intermediate value does not fit into 32 bits.
  - Both constructors raise `ValueError` unless `sample_time > 0`,
    `t1_time >= sample_time` and `0 < kp < 1000`.
- `controlbox.signal`
  - `TimeSignal` is the abstract base class for signals.
  - `StepFunction` is a step with the defaults `pre_value=0.0`,
    `post_value=1.0` and `step_time=0.0`. The methods `pre`, `post` and
    `step` return modified copies.
  - `SuperPosition(first, second)` is the sum of two signals.
  - `NamedTimeSignal(name, signal)` is a signal with a name attached.
- `controlbox.time_range`
  - `TimeRange` is an immutable, iterable range of sampling times. By
    default it runs from 0 to 100 ms with an interval of 1.
  - The `set_*` methods return copies. They raise `ValueError` when the
    start would exceed the end, or when the interval would be larger than
    the range.
  - Iterating yields the sample times after `start`. The last sample can
    lie one interval beyond `end`.
- `controlbox.simulator`
  - `Series` is the data behind a plot trace.
  - `time_signal_series`, `parabola_example` and `pt1_step_response`
    compute that data.
  - `is_positive_number` and `apply_time_range_inputs` check and apply
    textual inputs.
  - `render_time_domain` draws the three plots into an image with
    matplotlib.

## Examples

A hysteresis whose branches switch at 0.5 and 1.0:

```python
from controlbox.hysteresis import HysteresisBuilder, LinearFn

h = (
    HysteresisBuilder(LinearFn(m=1.0, n=0.0), LinearFn(m=1.0, n=1.0))
    .lower_x(0.5)
    .upper_x(1.0)
    .build()
)
print(h.transfer(0.75))  # 0.75, still on the lower branch
print(h.transfer(2.0))   # 3.0, switched to the upper branch
print(h.transfer(0.75))  # 1.75, stays on the upper branch inside the band
```

The response of a PT1 element to a unit step:

```python
from controlbox.pt1 import PT1

pt1 = PT1(sample_time=1.0, t1_time=10.0, kp=1.0)
print([round(pt1.transfer(1.0), 3) for _ in range(5)])
```

A step function sampled over a time range:

```python
from controlbox.signal import StepFunction
from controlbox.time_range import TimeRange

step = StepFunction().pre(2.0).post(3.0).step(1.1)
samples = [step.time_to_signal(t) for t in TimeRange()]
```

## Simulator

Render the time-domain page into an image file:

```
controlbox-sim -o time_domain.png
```

The image holds three plots:

- the step signal (stepping to 1.0 at 10 ms) over the chosen time range;
- a parabola example;
- the step response of a PT1 element.

The command has these options:

- `--sampling-interval`, `--start` and `--end` set the time range. Text
  that cannot be parsed counts as zero.
- `--t1` and `--ts` set the PT1 time constant and the sample time, both in
  milliseconds.
- `--kp` sets the amplification.

After writing the file, the command prints a summary of the time range.
If the inputs are inconsistent, it prints an error and exits with status 2.

Running `controlbox-sim /error` prints `Error Page.` and exits with status 0.

Use `controlbox-sim --help` to list all options.

## What it does not do

There is no interactive user interface. The simulator does not serve a web
page and has no input forms or live-updating plots. Parameters are given
on the command line, and the result is a static image file.