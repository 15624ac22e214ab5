"""Tests for selection-driven highlighting.

Critical Invariants:
- The cycle index is interpreted modulo the live turn count at render time
- Selecting a different lane always forgets cycling progress
- Intersection state is recomputed fresh every frame
- Signal views always reflect the phase active at the query time
"""

import pytest

from trafficreplay.config import HighlightSettings
from trafficreplay.core import CarId, LaneId
from trafficreplay.map import Turn, TurnType
from trafficreplay.selection import (
    SELECTED_TURN_STYLE,
    CycleTurns,
    Inactive,
    LaneTurnsHighlight,
    NoHighlight,
    SelectedTurnHighlight,
    ShowIntersection,
    ShowLane,
    SignalHighlight,
    StopSignHighlight,
    TurnCycler,
    next_selection_state,
    pick_cycled_turn,
)


class RecordingRenderer:
    """HighlightRenderer that records calls instead of drawing."""

    def __init__(self) -> None:
        self.calls: list[tuple] = []

    def draw_turn(self, turn, style, alpha):
        self.calls.append(("turn", turn.id, style, alpha))

    def draw_signal_phase(self, intersection, phase, hidden_crosswalks):
        self.calls.append(("signal", intersection, phase, hidden_crosswalks))

    def draw_countdown(self, countdown):
        self.calls.append(("countdown", countdown.filled_height))

    def draw_stop_sign(self, sign):
        self.calls.append(("stop", sign.id))


@pytest.fixture
def cycler() -> TurnCycler:
    return TurnCycler()


# Pure transitions


def test_nothing_selected_is_inactive():
    assert next_selection_state(ShowLane(LaneId(1)), None, False) == Inactive()


def test_other_objects_are_inactive():
    assert next_selection_state(Inactive(), CarId(3), True) == Inactive()


def test_selecting_lane_shows_lane():
    assert next_selection_state(Inactive(), LaneId(1), False) == ShowLane(LaneId(1))


def test_cycle_press_starts_cycling():
    assert next_selection_state(ShowLane(LaneId(1)), LaneId(1), True) == CycleTurns(LaneId(1), 0)


def test_cycle_press_increments_same_lane():
    state = CycleTurns(LaneId(1), 4)
    assert next_selection_state(state, LaneId(1), True) == CycleTurns(LaneId(1), 5)
    assert next_selection_state(state, LaneId(1), False) == state


def test_switching_lane_forgets_cycle_index():
    """CRITICAL: A different lane resets to ShowLane, even with the key pressed."""
    state = CycleTurns(LaneId(1), 4)
    assert next_selection_state(state, LaneId(2), True) == ShowLane(LaneId(2))


def test_intersection_has_no_stickiness(junction):
    state = next_selection_state(CycleTurns(junction.l0, 2), junction.center, True)
    assert state == ShowIntersection(junction.center)


# Turn cycling against the live map


def test_cycle_sequence_wraps_with_turn_count(junction, cycler, junction_map):
    """CRITICAL: Lane with 2 turns, 3 presses -> indices 0, 1, 0."""
    cycler.ambient_event(junction.l0, False, junction_map, 0.0)
    assert cycler.state == ShowLane(junction.l0)

    picked = []
    for _ in range(3):
        cycler.ambient_event(junction.l0, True, junction_map, 0.0)
        highlight = cycler.highlight(junction_map, 0.0)
        assert isinstance(highlight, SelectedTurnHighlight)
        picked.append(highlight.turn.turn.id)

    assert cycler.state == CycleTurns(junction.l0, 2)
    assert picked == [junction.straight, junction.right, junction.straight]

    cycler.ambient_event(junction.l2, False, junction_map, 0.0)
    assert cycler.state == ShowLane(junction.l2)


def test_cycle_index_uses_live_turn_count(junction):
    """CRITICAL: The index is never frozen against an old turn count."""
    turns = [
        Turn(junction.straight, TurnType.STRAIGHT, ()),
        Turn(junction.right, TurnType.RIGHT, ()),
    ]
    assert pick_cycled_turn(turns, 5) is turns[1]
    assert pick_cycled_turn(turns[:1], 5) is turns[0]
    assert pick_cycled_turn([], 5) is None


def test_cycling_lane_without_turns_draws_nothing(junction, cycler, junction_map):
    cycler.ambient_event(junction.l1, True, junction_map, 0.0)
    highlight = cycler.highlight(junction_map, 0.0)
    assert highlight == SelectedTurnHighlight(lane=junction.l1, turn=None)

    renderer = RecordingRenderer()
    cycler.draw(renderer, junction_map, 0.0)
    assert renderer.calls == []


def test_show_lane_styles_every_turn(junction, cycler, junction_map):
    cycler.ambient_event(junction.l0, False, junction_map, 0.0)
    highlight = cycler.highlight(junction_map, 0.0)

    assert isinstance(highlight, LaneTurnsHighlight)
    assert [(t.turn.id, t.style, t.alpha) for t in highlight.turns] == [
        (junction.straight, "straight turn", 0.5),
        (junction.right, "right turn", 0.5),
    ]


def test_selected_turn_style(junction, cycler, junction_map):
    cycler.ambient_event(junction.l0, True, junction_map, 0.0)
    renderer = RecordingRenderer()
    cycler.draw(renderer, junction_map, 0.0)
    assert renderer.calls == [("turn", junction.straight, SELECTED_TURN_STYLE, 1.0)]


# Intersections


def test_signal_highlight_tracks_time(junction, cycler, junction_map):
    cycler.ambient_event(junction.center, False, junction_map, 35.0)
    highlight = cycler.highlight(junction_map, 35.0)

    assert isinstance(highlight, SignalHighlight)
    assert highlight.phase is junction.signal.phases[1]
    assert highlight.remaining == pytest.approx(15.0)
    assert highlight.countdown.filled_height == pytest.approx(75.0)
    assert highlight.hidden_crosswalks == {junction.crosswalk}

    later = cycler.highlight(junction_map, 65.0)
    assert later.phase is junction.signal.phases[0]
    assert later.hidden_crosswalks == frozenset()


def test_signal_render_hints(junction, cycler, junction_map):
    hints = cycler.ambient_event(junction.center, False, junction_map, 55.0)
    assert hints.suppress_intersection_icon == junction.center
    assert hints.hide_crosswalks == {junction.crosswalk}
    assert hints.stop_sign is None


def test_stop_sign_delegates_to_renderer(junction, cycler, junction_map):
    hints = cycler.ambient_event(junction.east, False, junction_map, 0.0)
    assert hints.stop_sign is not None
    assert hints.suppress_intersection_icon is None

    assert isinstance(cycler.highlight(junction_map, 0.0), StopSignHighlight)
    renderer = RecordingRenderer()
    cycler.draw(renderer, junction_map, 0.0)
    assert renderer.calls == [("stop", junction.east)]


def test_uncontrolled_intersection_draws_nothing(junction, cycler, junction_map):
    cycler.ambient_event(junction.west, False, junction_map, 0.0)
    assert cycler.state == ShowIntersection(junction.west)
    assert cycler.highlight(junction_map, 0.0) == NoHighlight()


def test_signal_draw_calls(junction, junction_map):
    cycler = TurnCycler(HighlightSettings(timer_height=200.0))
    cycler.ambient_event(junction.center, False, junction_map, 0.0)
    renderer = RecordingRenderer()
    cycler.draw(renderer, junction_map, 0.0)

    assert renderer.calls == [
        ("signal", junction.center, junction.signal.phases[0], frozenset()),
        ("countdown", pytest.approx(200.0)),
    ]


def test_deselecting_clears_state(junction, cycler, junction_map):
    cycler.ambient_event(junction.l0, True, junction_map, 0.0)
    hints = cycler.ambient_event(None, False, junction_map, 0.0)
    assert cycler.state == Inactive()
    assert hints.hide_crosswalks == frozenset()
    assert cycler.highlight(junction_map, 0.0) == NoHighlight()
