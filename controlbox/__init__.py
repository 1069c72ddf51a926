"""Control-system building blocks: hysteresis, PT1 elements, time signals and a plotting simulator."""

__version__ = "0.1.0"
__all__ = ["hysteresis", "pt1", "signal", "time_range", "simulator"]