"""Resolve which phase of a signal cycle is active at a given time.

The cycle repeats indefinitely from time zero, so resolution is periodic in
`SignalCycle.total_duration` and never clamps. Nothing here is cached: the
active phase changes continuously, so every query recomputes from scratch.

Usage:
    phase, remaining = current_phase_and_remaining(cycle, sim_time)
    bar = CountdownIndicator.for_phase(phase, remaining)
    hidden = absent_crosswalks(phase, map, intersection)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from trafficreplay.core.identity import IntersectionId, TurnId
from trafficreplay.core.signal.models import Phase, SignalCycle

if TYPE_CHECKING:
    from trafficreplay.map.protocol import MapView


def current_phase_and_remaining(cycle: SignalCycle, time: float) -> tuple[Phase, float]:
    """Active phase and the time left in it.

    Args:
        cycle: Signal cycle to resolve.
        time: Absolute simulation time in seconds.

    Returns:
        (active phase, seconds remaining in that phase).
    """
    elapsed = time % cycle.total_duration
    cumulative = 0.0
    for phase in cycle.phases:
        cumulative += phase.duration
        if cumulative > elapsed:
            return phase, cumulative - elapsed
    # Float accumulation can land exactly on the total; that instant belongs
    # to the start of the next cycle.
    first = cycle.phases[0]
    return first, first.duration


def countdown_fraction(phase: Phase, remaining: float) -> float:
    """Share of the phase still to run, clamped to [0, 1]."""
    return min(max(remaining / phase.duration, 0.0), 1.0)


@dataclass(frozen=True, slots=True)
class CountdownIndicator:
    """Fixed-size timer bar whose filled part shrinks as the phase runs out."""

    fraction: float
    width: float = 50.0
    height: float = 100.0

    @classmethod
    def for_phase(
        cls,
        phase: Phase,
        remaining: float,
        width: float = 50.0,
        height: float = 100.0,
    ) -> CountdownIndicator:
        return cls(fraction=countdown_fraction(phase, remaining), width=width, height=height)

    @property
    def filled_height(self) -> float:
        return self.fraction * self.height


def absent_crosswalks(
    phase: Phase, map: MapView, intersection: IntersectionId
) -> frozenset[TurnId]:
    """Crosswalks of the intersection that the phase does not permit.

    The renderer hides these so only walkable crossings are drawn.
    """
    return frozenset(
        turn.id
        for turn in map.get_turns_in_intersection(intersection)
        if turn.is_crosswalk() and not phase.permits(turn.id)
    )
