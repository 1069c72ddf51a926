"""Signals defined over time: step functions and their combinations."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from typing import Any


class TimeSignal(ABC):
    """A signal whose value is determined by the point in time."""

    @abstractmethod
    def time_to_signal(self, time: float) -> Any:
        """Return the signal value at ``time``."""


@dataclass(frozen=True)
class StepFunction(TimeSignal):
    """Jumps from ``pre_value`` to ``post_value`` right after ``step_time``."""

    pre_value: Any = 0.0
    post_value: Any = 1.0
    step_time: float = 0.0

    def pre(self, pre_value: Any) -> StepFunction:
        """Return a copy with a different value before the step."""
        return replace(self, pre_value=pre_value)

    def post(self, post_value: Any) -> StepFunction:
        """Return a copy with a different value after the step."""
        return replace(self, post_value=post_value)

    def step(self, step_time: float) -> StepFunction:
        """Return a copy that steps at a different time."""
        return replace(self, step_time=step_time)

    def time_to_signal(self, time: float) -> Any:
        if self.step_time < time:
            return self.post_value
        return self.pre_value

    def __str__(self) -> str:
        return (
            f"Step(step_time={self.step_time}, pre={self.pre_value}, "
            f"post={self.post_value})"
        )


@dataclass(frozen=True)
class SuperPosition(TimeSignal):
    """The sum of two signals."""

    first: TimeSignal
    second: TimeSignal

    def time_to_signal(self, time: float) -> Any:
        return self.first.time_to_signal(time) + self.second.time_to_signal(time)

    def __str__(self) -> str:
        return f"SuperPosition({self.first}, {self.second})"


@dataclass(frozen=True)
class NamedTimeSignal(TimeSignal):
    """A signal carrying a descriptive name."""

    name: str = "Default Step Function"
    signal: TimeSignal = field(default_factory=StepFunction)

    def time_to_signal(self, time: float) -> Any:
        return self.signal.time_to_signal(time)

    def __str__(self) -> str:
        return f"Time Signal: {self.name} = {self.signal}"