"""Signal timing models.

Usage:
    cycle = SignalCycle((Phase(30.0, {turn_a}), Phase(20.0, {turn_b})))
    cycle.total_duration  # 50.0
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from trafficreplay.core.identity import TurnId


@dataclass(frozen=True, slots=True)
class Phase:
    """Sub-interval of a cycle during which a fixed set of turns may go."""

    duration: float
    permitted: frozenset[TurnId]

    def __init__(self, duration: float, permitted: Iterable[TurnId] = ()):
        object.__setattr__(self, "duration", duration)
        object.__setattr__(self, "permitted", frozenset(permitted))

    def permits(self, turn: TurnId) -> bool:
        return turn in self.permitted


@dataclass(frozen=True, slots=True)
class SignalCycle:
    """Repeating ordered sequence of phases at one intersection.

    Raises:
        ValueError: If the cycle is empty or any phase has a non-positive duration.
    """

    phases: tuple[Phase, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "phases", tuple(self.phases))
        if not self.phases:
            raise ValueError("Signal cycle must have at least one phase")
        for idx, phase in enumerate(self.phases):
            if phase.duration <= 0:
                raise ValueError(
                    f"Phase {idx} has non-positive duration {phase.duration}"
                )

    @property
    def total_duration(self) -> float:
        return sum(phase.duration for phase in self.phases)

    def __iter__(self) -> Iterator[Phase]:
        return iter(self.phases)

    def __len__(self) -> int:
        return len(self.phases)
