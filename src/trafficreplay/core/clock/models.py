"""Discrete replay clock.

Usage:
    tick = Tick.zero()
    tick = tick.next().next()
    tick.as_time()  # 0.2 seconds since start of day
    time_to_tick(0.2) == tick
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering

TIMESTEP = 0.1
"""Fixed duration of one tick, in seconds."""


@total_ordering
@dataclass(frozen=True, slots=True)
class Tick:
    """Non-negative step count of the replay clock.

    `next()` is always defined. `prev()` is only defined above zero; calling
    it at zero is a caller bug.
    """

    value: int = 0

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError(f"Tick cannot be negative, got {self.value}")

    @classmethod
    def zero(cls) -> Tick:
        return cls(0)

    def is_zero(self) -> bool:
        return self.value == 0

    def next(self) -> Tick:
        return Tick(self.value + 1)

    def prev(self) -> Tick:
        """Step back once.

        Raises:
            ValueError: If this is tick zero.
        """
        if self.value == 0:
            raise ValueError("Tick zero has no predecessor")
        return Tick(self.value - 1)

    def as_time(self) -> float:
        """Absolute simulation time of this tick, in seconds since start of day."""
        return self.value * TIMESTEP

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Tick):
            return NotImplemented
        return self.value < other.value

    def __str__(self) -> str:
        return format_time(self.as_time())


def time_to_tick(time: float) -> Tick:
    """Inverse of `Tick.as_time` for step-aligned times.

    Times between steps round to the nearest tick.
    """
    return Tick(round(time / TIMESTEP))


def format_time(time: float) -> str:
    """Render seconds since start of day as `H:MM:SS.S`."""
    tenths = round(time * 10)
    hours, rest = divmod(tenths, 36000)
    minutes, rest = divmod(rest, 600)
    seconds, tenth = divmod(rest, 10)
    return f"{hours}:{minutes:02}:{seconds:02}.{tenth}"


def format_duration(duration: float) -> str:
    """Render a duration compactly, e.g. `35.0s`, `1m35.0s`, `1h2m5.0s`.

    Negative durations keep their sign.
    """
    sign = "-" if duration < 0 else ""
    tenths = round(abs(duration) * 10)
    hours, rest = divmod(tenths, 36000)
    minutes, rest = divmod(rest, 600)
    seconds = rest / 10
    if hours:
        return f"{sign}{hours}h{minutes}m{seconds:.1f}s"
    if minutes:
        return f"{sign}{minutes}m{seconds:.1f}s"
    return f"{sign}{seconds:.1f}s"
