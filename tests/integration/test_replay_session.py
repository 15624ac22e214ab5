"""End-to-end replay session: playback, highlighting and scoring together."""

import pytest

from trafficreplay import (
    ChallengeSettings,
    PlaybackAction,
    PlaybackController,
    PlaybackMode,
    ReplayWorld,
    StatSnapshot,
    Tick,
    TurnCycler,
    Verdict,
    final_score,
)
from trafficreplay.selection import ShowIntersection, SignalHighlight


def test_play_inspect_rewind_and_score(junction, junction_map):
    """Play forward, watch the signal change, rewind and score the run."""
    controller = PlaybackController(ReplayWorld(junction_map))
    cycler = TurnCycler()

    update = controller.event(PlaybackAction.TOGGLE_FORWARD)
    phases = []
    while controller.tick() < Tick(350):
        assert update.wants_redraw
        update = controller.event(animation_pulse=True)
        time = controller.tick().as_time()
        cycler.ambient_event(junction.center, False, junction_map, time)
        highlight = cycler.highlight(junction_map, time)
        assert isinstance(highlight, SignalHighlight)
        if not phases or phases[-1] is not highlight.phase:
            phases.append(highlight.phase)

    assert phases == list(junction.signal.phases[:2])
    assert isinstance(cycler.state, ShowIntersection)
    assert len(controller.get_all_draw_cars(junction_map)) == 4

    controller.event(PlaybackAction.TOGGLE_FORWARD)
    snapshot = controller.get_all_draw_cars(junction_map)
    controller.event(PlaybackAction.TOGGLE_BACKWARD)
    while controller.mode is PlaybackMode.BACKWARD:
        controller.event(animation_pulse=True)
    assert controller.tick() == Tick.zero()

    for _ in range(350):
        controller.event(PlaybackAction.STEP_FORWARD)
    assert controller.get_all_draw_cars(junction_map) == snapshot

    report = final_score(
        StatSnapshot.from_samples([70.0, 80.0, 95.0]),
        StatSnapshot.from_samples([110.0, 120.0, 150.0]),
        now=controller.tick().as_time(),
        settings=ChallengeSettings(margin=30.0),
    )
    assert report.verdict is Verdict.COMPLETED
    assert report.delta == pytest.approx(40.0)
    assert report.lines[0].startswith("You have to run the simulation until the end of the day")

    controller.event(PlaybackAction.QUIT)
    assert not controller.is_open
