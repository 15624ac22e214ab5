"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from dataclasses import dataclass

from trafficreplay.core import IntersectionId, LaneId, Phase, Pt2D, SignalCycle, TurnId
from trafficreplay.map import Lane, LaneType, StaticMap, StopSign, Turn, TurnType

I0 = IntersectionId(0)  # signalized center
WEST, EAST, NORTH, SOUTH = (IntersectionId(i) for i in range(1, 5))

L0, L1, L2, L3, L4, L5 = (LaneId(i) for i in range(6))

STRAIGHT = TurnId(I0, L0, L1)
RIGHT = TurnId(I0, L0, L3)
LEFT = TurnId(I0, L2, L1)
CROSSWALK = TurnId(I0, L4, L5)


@dataclass
class Junction:
    """A four-way junction: one signalized center and four border intersections.

    Driving lanes:
        L0 west -> center (90m), L1 center -> east (90m),
        L2 north -> center (90m), L3 center -> south (90m).
    Sidewalks L4 and L5 are joined by one crosswalk across the center.
    Signal phases at the center: 30s straight + crosswalk, 20s left, 10s right.
    """

    map: StaticMap
    signal: SignalCycle
    center: IntersectionId = I0
    east: IntersectionId = EAST
    west: IntersectionId = WEST
    l0: LaneId = L0
    l1: LaneId = L1
    l2: LaneId = L2
    l3: LaneId = L3
    sidewalk: LaneId = L4
    straight: TurnId = STRAIGHT
    right: TurnId = RIGHT
    left: TurnId = LEFT
    crosswalk: TurnId = CROSSWALK


def build_junction() -> Junction:
    lanes = [
        Lane(L0, LaneType.DRIVING, (Pt2D(-100, 0), Pt2D(-10, 0)), WEST, I0),
        Lane(L1, LaneType.DRIVING, (Pt2D(10, 0), Pt2D(100, 0)), I0, EAST),
        Lane(L2, LaneType.DRIVING, (Pt2D(0, 100), Pt2D(0, 10)), NORTH, I0),
        Lane(L3, LaneType.DRIVING, (Pt2D(0, -10), Pt2D(0, -100)), I0, SOUTH),
        Lane(L4, LaneType.SIDEWALK, (Pt2D(-100, 12), Pt2D(-12, 12)), WEST, I0),
        Lane(L5, LaneType.SIDEWALK, (Pt2D(12, 12), Pt2D(100, 12)), I0, EAST),
    ]
    turns = [
        Turn(STRAIGHT, TurnType.STRAIGHT, (Pt2D(-10, 0), Pt2D(10, 0))),
        Turn(RIGHT, TurnType.RIGHT, (Pt2D(-10, 0), Pt2D(0, -10))),
        Turn(LEFT, TurnType.LEFT, (Pt2D(0, 10), Pt2D(10, 0))),
        Turn(CROSSWALK, TurnType.CROSSWALK, (Pt2D(-12, 12), Pt2D(12, 12))),
    ]
    signal = SignalCycle(
        (
            Phase(30.0, {STRAIGHT, CROSSWALK}),
            Phase(20.0, {LEFT}),
            Phase(10.0, {RIGHT}),
        )
    )
    map = StaticMap(
        lanes=lanes,
        turns=turns,
        signals={I0: signal},
        stop_signs=[StopSign(EAST, frozenset({L1}))],
    )
    return Junction(map=map, signal=signal)


@pytest.fixture
def junction() -> Junction:
    """Fresh four-way junction."""
    return build_junction()


@pytest.fixture
def junction_map(junction: Junction) -> StaticMap:
    return junction.map
