"""First order lag (PT1) element.

``out[k] = out[k-1] + alpha * (kp * in[k] - out[k-1])``
"""

from __future__ import annotations

from dataclasses import dataclass

FIXED_POINT_SHIFT_BITS = 10
FIXED_POINT_ONE = 1 << FIXED_POINT_SHIFT_BITS

_I32_MIN = -(1 << 31)
_I32_MAX = (1 << 31) - 1


def _validate(sample_time: float, t1_time: float, kp: float) -> None:
    if not sample_time > 0.0:
        raise ValueError("sample time must be positive")
    if not t1_time >= sample_time:
        raise ValueError("T1 time must not be smaller than the sample time")
    if not 0.0 < kp < 1000.0:
        raise ValueError("amplification must lie between 0 and 1000")


def _i32(value: int) -> int:
    if not _I32_MIN <= value <= _I32_MAX:
        raise OverflowError("value does not fit into a 32 bit integer")
    return value


@dataclass(init=False)
class PT1:
    """Floating point PT1 element."""

    alpha: float
    kp: float
    previous_output: float

    def __init__(self, sample_time: float, t1_time: float, kp: float) -> None:
        _validate(sample_time, t1_time, kp)
        self.kp = float(kp)
        self.alpha = sample_time / t1_time
        self.previous_output = 0.0

    def transfer(self, value: float) -> float:
        """Feed one input sample and return the new output."""
        out = self.previous_output + self.alpha * (value * self.kp - self.previous_output)
        self.previous_output = out
        return out


@dataclass(init=False)
class FixedPointPT1:
    """PT1 element in 32 bit fixed point arithmetic with 10 fractional bits."""

    alpha: int
    kp: int
    previous_output: int

    def __init__(self, sample_time: float, t1_time: float, kp: float) -> None:
        _validate(sample_time, t1_time, kp)
        self.kp = _i32(int(kp * FIXED_POINT_ONE))
        self.alpha = _i32(int(t1_time * FIXED_POINT_ONE / (t1_time + sample_time)))
        self.previous_output = 0

    def transfer(self, value: int) -> int:
        """Feed one integer input sample and return the new integer output."""
        scaled = _i32(value * self.kp)
        delta = _i32(scaled - self.previous_output)
        step = _i32(self.alpha * delta)
        out = _i32(self.previous_output + step) >> FIXED_POINT_SHIFT_BITS
        self.previous_output = out
        return out >> FIXED_POINT_SHIFT_BITS