"""In-memory map implementation.

Dict-backed topology for tests, demos and small synthetic maps. Malformed
topology is rejected at construction time; nothing downstream re-validates.

Usage:
    map = StaticMap(lanes=[...], turns=[...], signals={i: cycle})
    map.get_turns_from_lane(LaneId(0))
"""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Iterable, Iterator, Mapping

from trafficreplay.core.identity import IntersectionId, LaneId, TurnId
from trafficreplay.core.signal import SignalCycle
from trafficreplay.map.models import Lane, StopSign, Turn

logger = logging.getLogger(__name__)


class MapLoadError(ValueError):
    """Raised when map topology is inconsistent. Fatal at load time."""

    pass


class StaticMap:
    """Immutable map built once from lanes, turns and intersection controls.

    Args:
        lanes: All lanes. Ids must be unique.
        turns: All turns. Their source and destination lanes must exist.
        signals: Signal cycle per signalized intersection.
        stop_signs: Stop sign per stop-controlled intersection.

    Raises:
        MapLoadError: If the topology is inconsistent.
    """

    def __init__(
        self,
        lanes: Iterable[Lane],
        turns: Iterable[Turn] = (),
        signals: Mapping[IntersectionId, SignalCycle] | None = None,
        stop_signs: Iterable[StopSign] = (),
    ):
        self._lanes: dict[LaneId, Lane] = {}
        for lane in lanes:
            if lane.id in self._lanes:
                raise MapLoadError(f"Duplicate lane {lane.id}")
            if len(lane.center) < 2:
                raise MapLoadError(f"{lane.id} needs at least 2 center points")
            self._lanes[lane.id] = lane

        self._turns: dict[TurnId, Turn] = {}
        self._turns_from: dict[LaneId, list[Turn]] = defaultdict(list)
        self._turns_at: dict[IntersectionId, list[Turn]] = defaultdict(list)
        for turn in turns:
            self._check_turn(turn)
            self._turns[turn.id] = turn
            self._turns_from[turn.id.src].append(turn)
            self._turns_at[turn.id.parent].append(turn)
        for group in (*self._turns_from.values(), *self._turns_at.values()):
            group.sort(key=lambda t: t.id)

        self._signals: dict[IntersectionId, SignalCycle] = dict(signals or {})
        for intersection, cycle in self._signals.items():
            self._check_signal(intersection, cycle)

        self._stop_signs: dict[IntersectionId, StopSign] = {}
        for sign in stop_signs:
            if sign.id in self._signals:
                raise MapLoadError(f"{sign.id} has both a signal and a stop sign")
            self._stop_signs[sign.id] = sign

        logger.debug(
            "Loaded map with %d lanes, %d turns, %d signals, %d stop signs",
            len(self._lanes),
            len(self._turns),
            len(self._signals),
            len(self._stop_signs),
        )

    def _check_turn(self, turn: Turn) -> None:
        if turn.id in self._turns:
            raise MapLoadError(f"Duplicate turn {turn.id}")
        for lane_id in (turn.id.src, turn.id.dst):
            if lane_id not in self._lanes:
                raise MapLoadError(f"{turn.id} references missing {lane_id}")
        if len(turn.geom) < 2:
            raise MapLoadError(f"{turn.id} needs at least 2 geometry points")

    def _check_signal(self, intersection: IntersectionId, cycle: SignalCycle) -> None:
        for phase in cycle.phases:
            for turn_id in phase.permitted:
                if turn_id.parent != intersection:
                    raise MapLoadError(
                        f"Signal at {intersection} permits {turn_id} from another intersection"
                    )
                if turn_id not in self._turns:
                    raise MapLoadError(f"Signal at {intersection} permits missing {turn_id}")

    def all_lanes(self) -> Iterator[Lane]:
        """Iterate every lane, ordered by id."""
        for lane_id in sorted(self._lanes):
            yield self._lanes[lane_id]

    def get_lane(self, lane: LaneId) -> Lane | None:
        return self._lanes.get(lane)

    def get_turn(self, turn: TurnId) -> Turn | None:
        return self._turns.get(turn)

    def get_turns_from_lane(self, lane: LaneId) -> list[Turn]:
        return list(self._turns_from.get(lane, ()))

    def get_turns_in_intersection(self, intersection: IntersectionId) -> list[Turn]:
        return list(self._turns_at.get(intersection, ()))

    def maybe_get_traffic_signal(self, intersection: IntersectionId) -> SignalCycle | None:
        return self._signals.get(intersection)

    def maybe_get_stop_sign(self, intersection: IntersectionId) -> StopSign | None:
        return self._stop_signs.get(intersection)
