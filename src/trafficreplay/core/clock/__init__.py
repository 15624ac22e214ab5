"""Replay clock: ticks, time conversion and time formatting."""

from trafficreplay.core.clock.models import (
    TIMESTEP,
    Tick,
    format_duration,
    format_time,
    time_to_tick,
)

__all__ = [
    "TIMESTEP",
    "Tick",
    "time_to_tick",
    "format_time",
    "format_duration",
]
