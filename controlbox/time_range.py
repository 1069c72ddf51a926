"""Evenly sampled range of points in time."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, replace

DEFAULT_SAMPLES = 100


@dataclass(frozen=True)
class TimeRange:
    """Sampling points from ``start`` to ``end`` spaced by ``sampling_interval``.

    Iterating yields the sample times that follow ``start``; the last one
    may lie one interval beyond ``end``.
    """

    unit_of_measurement: str = "ms"
    start: float = 0.0
    end: float = 100.0
    sampling_interval: float = 1.0

    def set_unit_of_measurement(self, unit_of_measurement: str) -> TimeRange:
        """Return a copy with a different unit label."""
        return replace(self, unit_of_measurement=unit_of_measurement)

    def set_start(self, start: float) -> TimeRange:
        """Return a copy starting at ``start``; it must not exceed the end."""
        if start > self.end:
            raise ValueError("Start must be less than end")
        return replace(self, start=start)

    def set_end(self, end: float) -> TimeRange:
        """Return a copy ending at ``end``; it must not precede the start."""
        if self.start > end:
            raise ValueError("Start must be less than end")
        return replace(self, end=end)

    def set_number_of_samples(self, samples: int | None = None) -> TimeRange:
        """Return a copy whose interval splits the range into ``samples`` steps."""
        if samples is None:
            samples = DEFAULT_SAMPLES
        if samples <= 0:
            raise ValueError("Number of samples must be positive")
        return replace(self, sampling_interval=(self.end - self.start) / samples)

    def set_sampling_interval(self, sampling_interval: float) -> TimeRange:
        """Return a copy with a different interval; it must fit into the range."""
        if self.end - self.start < sampling_interval:
            raise ValueError("Sampling interval exceeds the time range")
        return replace(self, sampling_interval=sampling_interval)

    def __iter__(self) -> Iterator[float]:
        current = self.start
        while not current > self.end:
            current += self.sampling_interval
            yield current

    def __len__(self) -> int:
        return int((self.end - self.start) / self.sampling_interval)