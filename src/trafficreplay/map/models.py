"""Static map topology as seen by the replay core.

These are read-only views of objects the map loader owns.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from trafficreplay.core.geometry import Pt2D, polyline_length
from trafficreplay.core.identity import IntersectionId, LaneId, TurnId


class LaneType(Enum):
    DRIVING = auto()
    PARKING = auto()
    SIDEWALK = auto()
    BIKING = auto()
    BUS = auto()


class TurnType(Enum):
    SHARED_SIDEWALK_CORNER = auto()
    CROSSWALK = auto()
    STRAIGHT = auto()
    RIGHT = auto()
    LEFT = auto()

    def is_for_vehicles(self) -> bool:
        return self not in (TurnType.CROSSWALK, TurnType.SHARED_SIDEWALK_CORNER)


@dataclass(frozen=True, slots=True)
class Lane:
    """A lane with its center line, from its source to its destination intersection."""

    id: LaneId
    lane_type: LaneType
    center: tuple[Pt2D, ...]
    src_i: IntersectionId
    dst_i: IntersectionId

    @property
    def length(self) -> float:
        return polyline_length(self.center)

    def is_for_driving(self) -> bool:
        return self.lane_type in (LaneType.DRIVING, LaneType.BUS)


@dataclass(frozen=True, slots=True)
class Turn:
    id: TurnId
    turn_type: TurnType
    geom: tuple[Pt2D, ...]

    @property
    def length(self) -> float:
        return polyline_length(self.geom)

    def is_crosswalk(self) -> bool:
        return self.turn_type is TurnType.CROSSWALK


@dataclass(frozen=True, slots=True)
class StopSign:
    """Stop-controlled intersection: which incoming lanes must stop."""

    id: IntersectionId
    must_stop: frozenset[LaneId]
