"""Selection states, highlight results and render hints.

SelectionState and Highlight are closed unions of frozen dataclasses;
consumers branch on them with isinstance and nothing else subclasses them.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from trafficreplay.core.identity import (
    BusStopId,
    CarId,
    IntersectionId,
    LaneId,
    PedestrianId,
    TurnId,
)
from trafficreplay.core.signal import CountdownIndicator, Phase
from trafficreplay.map.models import StopSign, Turn, TurnType

Selectable = LaneId | IntersectionId | TurnId | CarId | PedestrianId | BusStopId
"""Anything the UI can have under the cursor."""


# --- Selection states ---


@dataclass(frozen=True, slots=True)
class Inactive:
    """Nothing relevant selected; nothing is drawn."""

    pass


@dataclass(frozen=True, slots=True)
class ShowLane:
    """Show every turn out of a lane."""

    lane: LaneId


@dataclass(frozen=True, slots=True)
class CycleTurns:
    """Show one turn out of a lane.

    `index` is taken modulo the lane's turn count when rendering, so it stays
    valid if the turn count changes between frames.
    """

    lane: LaneId
    index: int


@dataclass(frozen=True, slots=True)
class ShowIntersection:
    """Show the current control state of an intersection."""

    intersection: IntersectionId


SelectionState = Inactive | ShowLane | CycleTurns | ShowIntersection


# --- Highlights ---

TURN_STYLES: dict[TurnType, str] = {
    TurnType.SHARED_SIDEWALK_CORNER: "shared sidewalk corner turn",
    TurnType.CROSSWALK: "crosswalk turn",
    TurnType.STRAIGHT: "straight turn",
    TurnType.RIGHT: "right turn",
    TurnType.LEFT: "left turn",
}
"""Palette key per turn type. The renderer owns the actual colors."""

SELECTED_TURN_STYLE = "current selected turn"


@dataclass(frozen=True, slots=True)
class StyledTurn:
    turn: Turn
    style: str
    alpha: float = 1.0


@dataclass(frozen=True, slots=True)
class NoHighlight:
    pass


@dataclass(frozen=True, slots=True)
class LaneTurnsHighlight:
    lane: LaneId
    turns: tuple[StyledTurn, ...]


@dataclass(frozen=True, slots=True)
class SelectedTurnHighlight:
    """The turn picked by the cycle index, or None if the lane has no turns."""

    lane: LaneId
    turn: StyledTurn | None


@dataclass(frozen=True, slots=True)
class SignalHighlight:
    intersection: IntersectionId
    phase: Phase
    remaining: float
    countdown: CountdownIndicator
    hidden_crosswalks: frozenset[TurnId]


@dataclass(frozen=True, slots=True)
class StopSignHighlight:
    intersection: IntersectionId
    sign: StopSign


Highlight = (
    NoHighlight | LaneTurnsHighlight | SelectedTurnHighlight | SignalHighlight | StopSignHighlight
)


@dataclass(frozen=True, slots=True)
class RenderHints:
    """Per-frame adjustments to how the base map is drawn.

    Attributes:
        suppress_intersection_icon: Intersection whose icon the signal view replaces.
        hide_crosswalks: Crosswalks not permitted by the active phase.
        stop_sign: Stop sign the external renderer should emphasize.
    """

    suppress_intersection_icon: IntersectionId | None = None
    hide_crosswalks: frozenset[TurnId] = field(default_factory=frozenset)
    stop_sign: StopSign | None = None
