"""Time domain simulator: sample signals, simulate a PT1 step response and plot them."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

from matplotlib.figure import Figure

from controlbox.pt1 import PT1
from controlbox.signal import StepFunction, TimeSignal
from controlbox.time_range import TimeRange

LANDING_ROUTE = "/"
ERROR_ROUTE = "/error"


@dataclass(frozen=True)
class Series:
    """A named sequence of ``(time, value)`` samples."""

    name: str
    times: tuple[float, ...]
    values: tuple[float, ...]

    def __post_init__(self) -> None:
        if len(self.times) != len(self.values):
            raise ValueError("times and values must have the same length")

    def __len__(self) -> int:
        return len(self.times)


def _parse_float(text: str) -> float | None:
    if not text or text != text.strip() or "_" in text:
        return None
    try:
        return float(text)
    except ValueError:
        return None


def is_positive_number(text: str) -> bool:
    """Return whether ``text`` is a number greater than zero."""
    value = _parse_float(text)
    return value is not None and value > 0.0


def apply_time_range_inputs(
    time_range: TimeRange, sampling_interval: str, start: str, end: str
) -> TimeRange:
    """Apply textual inputs to ``time_range``; unparsable text counts as zero.

    Raises ``ValueError`` when the resulting range is inconsistent.
    """
    def parsed(text: str) -> float:
        value = _parse_float(text)
        return 0.0 if value is None else value

    updated = time_range.set_sampling_interval(parsed(sampling_interval))
    updated = updated.set_start(parsed(start))
    return updated.set_end(parsed(end))


def time_signal_series(time_range: TimeRange, signal: TimeSignal) -> Series:
    """Sample ``signal`` at every point of ``time_range``."""
    times = tuple(time_range)
    return Series(
        name="Time signal",
        times=times,
        values=tuple(signal.time_to_signal(t) for t in times),
    )


def _arange(start: float, end: float, step: float) -> tuple[float, ...]:
    if step == 0:
        raise ValueError("step must not be zero")
    count = max(0, math.ceil((end - start) / step))
    return tuple(start + step * index for index in range(count))


def parabola_example(n: int = 11) -> Series:
    """Sample ``t ** 2`` at ``n`` evenly spaced points over ``[0, 10)``."""
    if n <= 0:
        raise ValueError("number of points must be positive")
    times = _arange(0.0, 10.0, 10.0 / n)
    return Series(name="Scatter", times=times, values=tuple(t**2.0 for t in times))


def pt1_step_response(t1: int = 10, ts: int = 1, kp: float = 1.0) -> tuple[Series, Series]:
    """Return the unit step stimulus and the response of a PT1 element to it.

    ``t1`` and ``ts`` are given in milliseconds.
    """
    element = PT1(ts * 1000.0, t1 * 1000.0, kp)
    times = _arange(-5.0 * ts, float(5 * t1), float(ts))
    stimulus = tuple(1.0 if t > 0.0 else 0.0 for t in times)
    response = tuple(element.transfer(u) for u in stimulus)
    return (
        Series(name="Step function stimulus", times=times, values=stimulus),
        Series(name="PT1 Response", times=times, values=response),
    )


def _plot(axes, series: Iterable[Series], *, legend: bool) -> None:
    for item in series:
        axes.plot(item.times, item.values, marker="o", markersize=3, label=item.name)
    if legend:
        axes.legend()


def render_time_domain(
    path: str | Path,
    time_range: TimeRange | None = None,
    signal: TimeSignal | None = None,
    t1: int = 10,
    ts: int = 1,
    kp: float = 1.0,
) -> Path:
    """Draw the time domain page and save it as an image at ``path``."""
    if time_range is None:
        time_range = TimeRange()
    if signal is None:
        signal = StepFunction().step(10.0).post(1.0)
    stimulus, response = pt1_step_response(t1, ts, kp)

    figure = Figure(figsize=(9, 12), layout="constrained")
    signal_axes, example_axes, pt1_axes = figure.subplots(3, 1)

    _plot(signal_axes, [time_signal_series(time_range, signal)], legend=False)
    signal_axes.set_title("Signal in Time Domain", fontweight="bold")
    signal_axes.set_xlabel(f"time [{time_range.unit_of_measurement}]")
    signal_axes.set_ylabel("Signal Aplitude")

    _plot(example_axes, [parabola_example()], legend=True)
    example_axes.set_title("Line and Scatter Plot", fontweight="bold")
    example_axes.set_xlabel("time [ms]")

    _plot(pt1_axes, [stimulus, response], legend=True)
    pt1_axes.plot(
        [0.0, float(t1)], [0.0, float(kp)],
        color="lightseagreen", linewidth=3, linestyle="-.",
    )
    pt1_axes.set_title(f"PT1 Element (ts: {ts}ms T1: {t1}ms)", fontweight="bold")
    pt1_axes.set_xlabel("time [ms]")

    target = Path(path)
    figure.savefig(target)
    return target


def _time_range_summary(time_range: TimeRange) -> str:
    return (
        f"Time Range - Start:{time_range.start} End {time_range.end} "
        f"Interval {time_range.sampling_interval}"
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Render the requested page; the landing page is written as an image."""
    defaults = TimeRange()
    parser = argparse.ArgumentParser(description="Simulate control elements in the time domain.")
    parser.add_argument("route", nargs="?", default=LANDING_ROUTE, choices=[LANDING_ROUTE, ERROR_ROUTE])
    parser.add_argument("-o", "--output", default="time_domain.png")
    parser.add_argument("--sampling-interval", default=str(defaults.sampling_interval))
    parser.add_argument("--start", default=str(defaults.start))
    parser.add_argument("--end", default=str(defaults.end))
    parser.add_argument("--t1", type=int, default=10, help="T1 time [ms]")
    parser.add_argument("--ts", type=int, default=1, help="sample time [ms]")
    parser.add_argument("--kp", type=float, default=1.0, help="amplification")
    args = parser.parse_args(argv)

    if args.route == ERROR_ROUTE:
        print("Error Page.")
        return 0

    try:
        time_range = apply_time_range_inputs(defaults, args.sampling_interval, args.start, args.end)
        target = render_time_domain(args.output, time_range, None, args.t1, args.ts, args.kp)
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 2

    print(_time_range_summary(time_range))
    print(f"written {target}")
    return 0


if __name__ == "__main__":
    sys.exit(main())