"""Core functionalities: stateless value types and pure computations.

Architecture Note:
    core/ contains pure, stateless building blocks: the replay clock, ids,
    geometry, signal timing and statistic snapshots. Stateful, per-frame
    services live in playback/ and selection/.
"""

from trafficreplay.core.clock import (
    TIMESTEP,
    Tick,
    format_duration,
    format_time,
    time_to_tick,
)
from trafficreplay.core.geometry import Pose, Pt2D, polyline_length, pose_along
from trafficreplay.core.identity import (
    BusRouteId,
    BusStopId,
    CarId,
    IntersectionId,
    LaneId,
    PedestrianId,
    Traversable,
    TurnId,
)
from trafficreplay.core.signal import (
    CountdownIndicator,
    Phase,
    SignalCycle,
    absent_crosswalks,
    countdown_fraction,
    current_phase_and_remaining,
)
from trafficreplay.core.stats import StatSnapshot, Statistic, TripMode

__all__ = [
    # Clock
    "TIMESTEP",
    "Tick",
    "time_to_tick",
    "format_time",
    "format_duration",
    # Geometry
    "Pt2D",
    "Pose",
    "polyline_length",
    "pose_along",
    # Identity
    "LaneId",
    "IntersectionId",
    "TurnId",
    "Traversable",
    "CarId",
    "PedestrianId",
    "BusRouteId",
    "BusStopId",
    # Signals
    "Phase",
    "SignalCycle",
    "current_phase_and_remaining",
    "countdown_fraction",
    "CountdownIndicator",
    "absent_crosswalks",
    # Stats
    "Statistic",
    "StatSnapshot",
    "TripMode",
]
