"""Selection-driven highlighting of lanes, turns and intersections.

The ambient selection is passed in explicitly every frame; nothing is read
from shared globals. The only state that survives between frames is the
cycle index, and only while the same lane stays selected.

Usage:
    cycler = TurnCycler()
    hints = cycler.ambient_event(selected, cycle_pressed, map, sim_time)
    cycler.draw(renderer, map, sim_time)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol

from trafficreplay.config import HighlightSettings
from trafficreplay.core.identity import IntersectionId, LaneId, TurnId
from trafficreplay.core.signal import (
    CountdownIndicator,
    Phase,
    absent_crosswalks,
    current_phase_and_remaining,
)
from trafficreplay.map.models import StopSign, Turn
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

if TYPE_CHECKING:
    from trafficreplay.map.protocol import MapView

logger = logging.getLogger(__name__)


def next_selection_state(
    prev: SelectionState, selected: Selectable | None, cycle_pressed: bool
) -> SelectionState:
    """Selection state for this frame.

    Args:
        prev: State from the previous frame.
        selected: Current ambient selection.
        cycle_pressed: Whether the cycle key was pressed this frame.

    Returns:
        The new state. Switching to another lane always drops the cycle index.
    """
    if isinstance(selected, IntersectionId):
        return ShowIntersection(selected)

    if isinstance(selected, LaneId):
        if isinstance(prev, CycleTurns):
            if prev.lane != selected:
                return ShowLane(selected)
            if cycle_pressed:
                return CycleTurns(selected, prev.index + 1)
            return prev
        if cycle_pressed:
            return CycleTurns(selected, 0)
        return ShowLane(selected)

    return Inactive()


def pick_cycled_turn(turns: list[Turn], index: int) -> Turn | None:
    """Turn at `index` modulo the live turn count; None when there are no turns."""
    if not turns:
        return None
    return turns[index % len(turns)]


class HighlightRenderer(Protocol):
    """Drawing backend for highlights. Colors and polygons live behind it."""

    def draw_turn(self, turn: Turn, style: str, alpha: float) -> None:
        ...

    def draw_signal_phase(
        self, intersection: IntersectionId, phase: Phase, hidden_crosswalks: frozenset[TurnId]
    ) -> None:
        ...

    def draw_countdown(self, countdown: CountdownIndicator) -> None:
        ...

    def draw_stop_sign(self, sign: StopSign) -> None:
        ...


class TurnCycler:
    """Per-frame highlighter over the ambient selection.

    Args:
        settings: Turn opacity and countdown bar size.
    """

    def __init__(self, settings: HighlightSettings | None = None):
        self._settings = settings or HighlightSettings()
        self._state: SelectionState = Inactive()

    @property
    def state(self) -> SelectionState:
        return self._state

    def ambient_event(
        self,
        selected: Selectable | None,
        cycle_pressed: bool,
        map: MapView,
        time: float,
    ) -> RenderHints:
        """Update the state from this frame's selection and key press.

        Args:
            selected: Current ambient selection.
            cycle_pressed: Whether the cycle key was pressed this frame.
            map: Topology to look up intersection controls.
            time: Current absolute simulation time.

        Returns:
            Hints for drawing the base map this frame.
        """
        new_state = next_selection_state(self._state, selected, cycle_pressed)
        if new_state != self._state:
            logger.debug("Selection %s -> %s", self._state, new_state)
        self._state = new_state

        if not isinstance(new_state, ShowIntersection):
            return RenderHints()

        intersection = new_state.intersection
        cycle = map.maybe_get_traffic_signal(intersection)
        if cycle is not None:
            phase, _ = current_phase_and_remaining(cycle, time)
            return RenderHints(
                suppress_intersection_icon=intersection,
                hide_crosswalks=absent_crosswalks(phase, map, intersection),
            )
        sign = map.maybe_get_stop_sign(intersection)
        if sign is not None:
            return RenderHints(stop_sign=sign)
        return RenderHints()

    def highlight(self, map: MapView, time: float) -> Highlight:
        """Resolve the current state against the live map at `time`."""
        state = self._state
        if isinstance(state, Inactive):
            return NoHighlight()

        if isinstance(state, ShowLane):
            return LaneTurnsHighlight(
                lane=state.lane,
                turns=tuple(
                    StyledTurn(turn, TURN_STYLES[turn.turn_type], self._settings.turn_alpha)
                    for turn in map.get_turns_from_lane(state.lane)
                ),
            )

        if isinstance(state, CycleTurns):
            turn = pick_cycled_turn(map.get_turns_from_lane(state.lane), state.index)
            return SelectedTurnHighlight(
                lane=state.lane,
                turn=StyledTurn(turn, SELECTED_TURN_STYLE) if turn is not None else None,
            )

        if isinstance(state, ShowIntersection):
            return self._intersection_highlight(state.intersection, map, time)

        raise TypeError(f"Unknown selection state: {state!r}")

    def _intersection_highlight(
        self, intersection: IntersectionId, map: MapView, time: float
    ) -> Highlight:
        cycle = map.maybe_get_traffic_signal(intersection)
        if cycle is not None:
            phase, remaining = current_phase_and_remaining(cycle, time)
            return SignalHighlight(
                intersection=intersection,
                phase=phase,
                remaining=remaining,
                countdown=CountdownIndicator.for_phase(
                    phase,
                    remaining,
                    width=self._settings.timer_width,
                    height=self._settings.timer_height,
                ),
                hidden_crosswalks=absent_crosswalks(phase, map, intersection),
            )
        sign = map.maybe_get_stop_sign(intersection)
        if sign is not None:
            return StopSignHighlight(intersection=intersection, sign=sign)
        return NoHighlight()

    def draw(self, renderer: HighlightRenderer, map: MapView, time: float) -> None:
        """Send the current highlight to a renderer."""
        highlight = self.highlight(map, time)
        if isinstance(highlight, LaneTurnsHighlight):
            for styled in highlight.turns:
                renderer.draw_turn(styled.turn, styled.style, styled.alpha)
        elif isinstance(highlight, SelectedTurnHighlight):
            if highlight.turn is not None:
                renderer.draw_turn(highlight.turn.turn, highlight.turn.style, highlight.turn.alpha)
        elif isinstance(highlight, SignalHighlight):
            renderer.draw_signal_phase(
                highlight.intersection, highlight.phase, highlight.hidden_crosswalks
            )
            renderer.draw_countdown(highlight.countdown)
        elif isinstance(highlight, StopSignHighlight):
            renderer.draw_stop_sign(highlight.sign)
