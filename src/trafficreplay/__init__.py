"""trafficreplay: time-indexed replay and signal-phase engine for traffic visualization.

Usage:
    from trafficreplay import (
        PlaybackAction, PlaybackController, ReplayWorld, TurnCycler, final_score,
    )

    controller = PlaybackController(ReplayWorld(map))
    update = controller.event(PlaybackAction.TOGGLE_FORWARD)
    while update.wants_redraw:
        update = controller.event(animation_pulse=True)
        cars = controller.get_all_draw_cars(map)

    cycler = TurnCycler()
    hints = cycler.ambient_event(selected, cycle_pressed, map, sim_time)

    report = final_score(current_snapshot, baseline_snapshot, now=sim_time)
"""

__version__ = "0.1.0"

# Configuration
from trafficreplay.config import ChallengeSettings, HighlightSettings, ReplaySettings

# Core primitives
from trafficreplay.core import (
    TIMESTEP,
    CarId,
    CountdownIndicator,
    IntersectionId,
    LaneId,
    PedestrianId,
    Phase,
    SignalCycle,
    StatSnapshot,
    Statistic,
    Tick,
    Traversable,
    TripMode,
    TurnId,
    current_phase_and_remaining,
    time_to_tick,
)

# Map collaborator
from trafficreplay.map import MapLoadError, MapView, StaticMap

# Playback
from trafficreplay.playback import (
    ControllerClosedError,
    EventLoopMode,
    PlaybackAction,
    PlaybackController,
    PlaybackMode,
    PlaybackUpdate,
)

# Replay
from trafficreplay.replay import DrawAgentSource, DrawCarInput, DrawPedestrianInput, ReplayWorld

# Scoring
from trafficreplay.scoring import Analytics, ScoreReport, Verdict, final_score, score_trips

# Selection
from trafficreplay.selection import SelectionState, TurnCycler, next_selection_state

__all__ = [
    # Version
    "__version__",
    # Core
    "TIMESTEP",
    "Tick",
    "time_to_tick",
    "LaneId",
    "IntersectionId",
    "TurnId",
    "Traversable",
    "CarId",
    "PedestrianId",
    "Phase",
    "SignalCycle",
    "current_phase_and_remaining",
    "CountdownIndicator",
    "Statistic",
    "StatSnapshot",
    "TripMode",
    # Map
    "MapView",
    "StaticMap",
    "MapLoadError",
    # Replay
    "ReplayWorld",
    "DrawAgentSource",
    "DrawCarInput",
    "DrawPedestrianInput",
    # Playback
    "PlaybackController",
    "PlaybackAction",
    "PlaybackMode",
    "PlaybackUpdate",
    "EventLoopMode",
    "ControllerClosedError",
    # Selection
    "TurnCycler",
    "SelectionState",
    "next_selection_state",
    # Scoring
    "Analytics",
    "ScoreReport",
    "Verdict",
    "final_score",
    "score_trips",
    # Config
    "ReplaySettings",
    "ChallengeSettings",
    "HighlightSettings",
]
