"""Selection: per-frame highlighting of the lane or intersection under the cursor."""

from trafficreplay.selection.highlighter import (
    HighlightRenderer,
    TurnCycler,
    next_selection_state,
    pick_cycled_turn,
)
from trafficreplay.selection.models import (
    SELECTED_TURN_STYLE,
    TURN_STYLES,
    CycleTurns,
    Highlight,
    Inactive,
    LaneTurnsHighlight,
    NoHighlight,
    RenderHints,
    Selectable,
    SelectedTurnHighlight,
    SelectionState,
    ShowIntersection,
    ShowLane,
    SignalHighlight,
    StopSignHighlight,
    StyledTurn,
)

__all__ = [
    "TurnCycler",
    "HighlightRenderer",
    "next_selection_state",
    "pick_cycled_turn",
    # States
    "SelectionState",
    "Inactive",
    "ShowLane",
    "CycleTurns",
    "ShowIntersection",
    "Selectable",
    # Highlights
    "Highlight",
    "NoHighlight",
    "LaneTurnsHighlight",
    "SelectedTurnHighlight",
    "SignalHighlight",
    "StopSignHighlight",
    "StyledTurn",
    "RenderHints",
    "TURN_STYLES",
    "SELECTED_TURN_STYLE",
]
