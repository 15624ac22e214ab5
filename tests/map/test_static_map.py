"""Tests for the in-memory map.

Critical Invariants:
- Inconsistent topology fails at load time with MapLoadError
- Lookups that miss return None or empty lists
- Turn listings are ordered by turn id
"""

import pytest

from trafficreplay.core import IntersectionId, LaneId, Phase, Pt2D, SignalCycle, TurnId
from trafficreplay.map import (
    Lane,
    LaneType,
    MapLoadError,
    MapView,
    StaticMap,
    StopSign,
    Turn,
    TurnType,
)


def _lane(index: int, src: int = 0, dst: int = 1) -> Lane:
    return Lane(
        LaneId(index),
        LaneType.DRIVING,
        (Pt2D(0, index), Pt2D(10, index)),
        IntersectionId(src),
        IntersectionId(dst),
    )


def test_static_map_satisfies_protocol(junction_map):
    assert isinstance(junction_map, MapView)


def test_lane_lookup(junction, junction_map):
    lane = junction_map.get_lane(junction.l0)
    assert lane is not None
    assert lane.length == pytest.approx(90.0)
    assert junction_map.get_lane(LaneId(99)) is None


def test_all_lanes_ordered(junction_map):
    ids = [lane.id for lane in junction_map.all_lanes()]
    assert ids == sorted(ids)
    assert len(ids) == 6


def test_turns_from_lane_ordered(junction, junction_map):
    turns = junction_map.get_turns_from_lane(junction.l0)
    assert [t.id for t in turns] == [junction.straight, junction.right]
    assert junction_map.get_turns_from_lane(junction.l1) == []


def test_turns_in_intersection(junction, junction_map):
    ids = {t.id for t in junction_map.get_turns_in_intersection(junction.center)}
    assert ids == {junction.straight, junction.right, junction.left, junction.crosswalk}
    assert junction_map.get_turns_in_intersection(junction.east) == []


def test_intersection_controls(junction, junction_map):
    assert junction_map.maybe_get_traffic_signal(junction.center) is junction.signal
    assert junction_map.maybe_get_traffic_signal(junction.east) is None
    sign = junction_map.maybe_get_stop_sign(junction.east)
    assert sign is not None
    assert sign.must_stop == {junction.l1}
    assert junction_map.maybe_get_stop_sign(junction.west) is None


def test_turn_listing_is_a_copy(junction, junction_map):
    junction_map.get_turns_from_lane(junction.l0).clear()
    assert len(junction_map.get_turns_from_lane(junction.l0)) == 2


# Load-time validation


def test_duplicate_lane_rejected():
    with pytest.raises(MapLoadError, match="Duplicate lane"):
        StaticMap(lanes=[_lane(0), _lane(0)])


def test_degenerate_lane_rejected():
    lane = Lane(LaneId(0), LaneType.DRIVING, (Pt2D(0, 0),), IntersectionId(0), IntersectionId(1))
    with pytest.raises(MapLoadError, match="at least 2 center points"):
        StaticMap(lanes=[lane])


def test_turn_to_missing_lane_rejected():
    turn = Turn(
        TurnId(IntersectionId(1), LaneId(0), LaneId(5)),
        TurnType.STRAIGHT,
        (Pt2D(10, 0), Pt2D(20, 0)),
    )
    with pytest.raises(MapLoadError, match="missing"):
        StaticMap(lanes=[_lane(0)], turns=[turn])


def test_signal_with_foreign_turn_rejected():
    turn_id = TurnId(IntersectionId(1), LaneId(0), LaneId(1))
    turn = Turn(turn_id, TurnType.STRAIGHT, (Pt2D(10, 0), Pt2D(0, 1)))
    cycle = SignalCycle((Phase(10.0, {turn_id}),))
    with pytest.raises(MapLoadError, match="another intersection"):
        StaticMap(
            lanes=[_lane(0), _lane(1, src=1, dst=2)],
            turns=[turn],
            signals={IntersectionId(7): cycle},
        )


def test_signal_and_stop_sign_conflict_rejected():
    cycle = SignalCycle((Phase(10.0),))
    with pytest.raises(MapLoadError, match="both a signal and a stop sign"):
        StaticMap(
            lanes=[_lane(0)],
            signals={IntersectionId(1): cycle},
            stop_signs=[StopSign(IntersectionId(1), frozenset())],
        )


def test_map_load_error_is_value_error():
    assert issubclass(MapLoadError, ValueError)
