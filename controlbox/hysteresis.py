"""Hysteresis transfer element built from two linear branches."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any


class NotDefinedError(ValueError):
    """Raised when a transfer function is evaluated outside its domain."""

    def __init__(self, message: str = "Outside of definition range") -> None:
        super().__init__(message)


class TransferFunction(ABC):
    """An element that maps an input value to an output value."""

    @abstractmethod
    def transfer(self, u: Any) -> Any:
        """Return the output for input ``u``; may update internal state."""


class Direction(Enum):
    """Which branch the hysteresis follows inside its band."""

    FROM_UPPER = "from_upper"
    FROM_LOWER = "from_lower"


@dataclass(frozen=True)
class LinearFn:
    """The straight line ``y = m * x + n``."""

    m: Any
    n: Any

    def __call__(self, x: Any) -> Any:
        return self.m * x + self.n


@dataclass
class Hysteresis(TransferFunction):
    """Two linear branches switched at the ``lower`` and ``upper`` thresholds."""

    lower_fn: LinearFn
    upper_fn: LinearFn
    lower: Any
    upper: Any
    direction: Direction = Direction.FROM_LOWER

    def transfer(self, u: Any) -> Any:
        if self.lower > u:
            self.direction = Direction.FROM_LOWER
            return self.lower_fn(u)
        if self.upper < u:
            self.direction = Direction.FROM_UPPER
            return self.upper_fn(u)
        if self.direction is Direction.FROM_LOWER:
            return self.lower_fn(u)
        return self.upper_fn(u)


class HysteresisBuilder:
    """Fluent builder for :class:`Hysteresis`.

    Each configuring method returns the builder so calls can be chained.
    """

    def __init__(self, lower_fn: LinearFn, upper_fn: LinearFn) -> None:
        self._lower_fn = lower_fn
        self._upper_fn = upper_fn
        self._upper: Any = None
        self._lower: Any = None
        self._spread: Any = 0
        self._midpoint: Any = 0
        self._direction = Direction.FROM_LOWER

    def __repr__(self) -> str:
        return (
            f"HysteresisBuilder(lower_fn={self._lower_fn!r}, upper_fn={self._upper_fn!r}, "
            f"lower={self._lower!r}, upper={self._upper!r}, midpoint={self._midpoint!r}, "
            f"spread={self._spread!r}, direction={self._direction!r})"
        )

    @property
    def _slopes_differ(self) -> bool:
        return self._lower_fn.m != self._upper_fn.m

    def _crossing_with_offset(self, delta_y: Any) -> Any:
        # m_lower * x + n_lower + delta_y = m_upper * x + n_upper
        return (self._lower_fn.n - self._upper_fn.n + delta_y) / (
            self._upper_fn.m - self._lower_fn.m
        )

    def build(self) -> Hysteresis:
        """Create the hysteresis from the configured thresholds."""
        if self._lower is not None:
            lower = self._lower
        elif self._upper is not None:
            lower = self._upper - self._spread
        else:
            lower = self._midpoint - self._spread / 2

        if self._upper is not None:
            upper = self._upper
        elif self._lower is not None:
            upper = self._lower + self._spread
        else:
            upper = self._midpoint + self._spread / 2

        return Hysteresis(
            lower_fn=self._lower_fn,
            upper_fn=self._upper_fn,
            lower=lower,
            upper=upper,
            direction=self._direction,
        )

    def spread_x(self, s: Any) -> HysteresisBuilder:
        """Set the band width measured along the input axis."""
        self._spread = s
        return self

    def spread_y(self, s: Any) -> HysteresisBuilder:
        """Set the band width from an output gap between the branches."""
        if self._slopes_differ:
            self._spread = s / (self._upper_fn.m - self._lower_fn.m)
        return self

    def cross(self) -> HysteresisBuilder:
        """Centre the band on the point where the two branches intersect."""
        if self._slopes_differ:
            self._midpoint = self._crossing_with_offset(0)
        return self

    def lower_x(self, s: Any) -> HysteresisBuilder:
        """Fix the lower threshold on the input axis."""
        self._lower = s
        return self

    def upper_x(self, s: Any) -> HysteresisBuilder:
        """Fix the upper threshold on the input axis."""
        self._upper = s
        return self

    def lower_y(self, delta_y: Any) -> HysteresisBuilder:
        """Put the lower threshold where the upper branch lies ``delta_y`` above the lower."""
        if self._slopes_differ:
            self._lower = self._crossing_with_offset(delta_y)
        return self

    def upper_y(self, delta_y: Any) -> HysteresisBuilder:
        """Put the upper threshold where the upper branch lies ``delta_y`` above the lower."""
        if self._slopes_differ:
            self._upper = self._crossing_with_offset(delta_y)
        return self

    def upper_direction(self) -> HysteresisBuilder:
        """Start the built hysteresis on the upper branch."""
        self._direction = Direction.FROM_UPPER
        return self