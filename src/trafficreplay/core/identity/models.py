"""Identifiers for map objects and agents.

The map collaborator owns these objects; here they are only lookup keys.

Usage:
    lane = LaneId(3)
    turn = TurnId(parent=IntersectionId(1), src=LaneId(3), dst=LaneId(7))
    on: Traversable = turn
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class LaneId:
    index: int

    def __str__(self) -> str:
        return f"Lane #{self.index}"


@dataclass(frozen=True, slots=True, order=True)
class IntersectionId:
    index: int

    def __str__(self) -> str:
        return f"Intersection #{self.index}"


@dataclass(frozen=True, slots=True, order=True)
class TurnId:
    """A movement through an intersection from one lane onto another."""

    parent: IntersectionId
    src: LaneId
    dst: LaneId

    def __str__(self) -> str:
        return f"Turn({self.src}, {self.dst})"


@dataclass(frozen=True, slots=True, order=True)
class CarId:
    index: int

    def __str__(self) -> str:
        return f"Car #{self.index}"


@dataclass(frozen=True, slots=True, order=True)
class PedestrianId:
    index: int

    def __str__(self) -> str:
        return f"Pedestrian #{self.index}"


@dataclass(frozen=True, slots=True, order=True)
class BusRouteId:
    index: int

    def __str__(self) -> str:
        return f"Bus route #{self.index}"


@dataclass(frozen=True, slots=True, order=True)
class BusStopId:
    """A stop on one side of a lane, identified by its sidewalk lane and position."""

    sidewalk: LaneId
    idx: int

    def __str__(self) -> str:
        return f"Bus stop {self.sidewalk}/{self.idx}"


Traversable = LaneId | TurnId
"""Something an agent can occupy: a lane or a turn."""
