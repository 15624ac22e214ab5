"""Map protocol: the read-only topology the replay core consumes.

The map loader owns parsing and validation. Anything satisfying this
protocol can back replay, signal resolution and highlighting.

Usage:
    map = StaticMap.build(lanes=..., turns=..., signals=...)
    world = ReplayWorld(map)
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Protocol, runtime_checkable

from trafficreplay.core.identity import IntersectionId, LaneId, TurnId
from trafficreplay.core.signal import SignalCycle
from trafficreplay.map.models import Lane, StopSign, Turn


@runtime_checkable
class MapView(Protocol):
    """Abstract map interface. Lookups that miss return None, never raise."""

    def all_lanes(self) -> Iterator[Lane]:
        """Iterate every lane, ordered by id."""
        ...

    def get_lane(self, lane: LaneId) -> Lane | None:
        """Look up a lane."""
        ...

    def get_turn(self, turn: TurnId) -> Turn | None:
        """Look up a turn."""
        ...

    def get_turns_from_lane(self, lane: LaneId) -> list[Turn]:
        """Turns starting at the end of a lane, ordered by id."""
        ...

    def get_turns_in_intersection(self, intersection: IntersectionId) -> list[Turn]:
        """All turns through an intersection, ordered by id."""
        ...

    def maybe_get_traffic_signal(self, intersection: IntersectionId) -> SignalCycle | None:
        """Signal cycle of the intersection, if it is signalized."""
        ...

    def maybe_get_stop_sign(self, intersection: IntersectionId) -> StopSign | None:
        """Stop sign of the intersection, if it is stop-controlled."""
        ...
