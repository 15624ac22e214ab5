"""Traffic signal phases, cycles and periodic phase resolution."""

from trafficreplay.core.signal.models import Phase, SignalCycle
from trafficreplay.core.signal.resolver import (
    CountdownIndicator,
    absent_crosswalks,
    countdown_fraction,
    current_phase_and_remaining,
)

__all__ = [
    "Phase",
    "SignalCycle",
    "current_phase_and_remaining",
    "countdown_fraction",
    "CountdownIndicator",
    "absent_crosswalks",
]
