"""Identity: lightweight ids for lanes, turns, intersections and agents."""

from trafficreplay.core.identity.models import (
    BusRouteId,
    BusStopId,
    CarId,
    IntersectionId,
    LaneId,
    PedestrianId,
    Traversable,
    TurnId,
)

__all__ = [
    "LaneId",
    "IntersectionId",
    "TurnId",
    "Traversable",
    "CarId",
    "PedestrianId",
    "BusRouteId",
    "BusStopId",
]
