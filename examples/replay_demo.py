"""Headless replay session over a tiny signalized junction.

Demonstrates:
- Building a StaticMap with a signal cycle and a stop sign
- Driving PlaybackController with actions and animation frames
- Highlighting turns and intersections with TurnCycler
- Scoring a run against a baseline
"""

from trafficreplay import (
    IntersectionId,
    LaneId,
    Phase,
    PlaybackAction,
    PlaybackController,
    ReplayWorld,
    SignalCycle,
    StatSnapshot,
    StaticMap,
    TurnCycler,
    TurnId,
    final_score,
)
from trafficreplay.core import Pt2D
from trafficreplay.map import Lane, LaneType, StopSign, Turn, TurnType

CENTER = IntersectionId(0)
WEST, EAST, NORTH = IntersectionId(1), IntersectionId(2), IntersectionId(3)


def build_map() -> StaticMap:
    """Two approaches into a signalized center, leaving east to a stop sign."""
    lanes = [
        Lane(LaneId(0), LaneType.DRIVING, (Pt2D(-100, 0), Pt2D(-10, 0)), WEST, CENTER),
        Lane(LaneId(1), LaneType.DRIVING, (Pt2D(10, 0), Pt2D(100, 0)), CENTER, EAST),
        Lane(LaneId(2), LaneType.DRIVING, (Pt2D(0, 100), Pt2D(0, 10)), NORTH, CENTER),
    ]
    straight = TurnId(CENTER, LaneId(0), LaneId(1))
    left = TurnId(CENTER, LaneId(2), LaneId(1))
    turns = [
        Turn(straight, TurnType.STRAIGHT, (Pt2D(-10, 0), Pt2D(10, 0))),
        Turn(left, TurnType.LEFT, (Pt2D(0, 10), Pt2D(10, 0))),
    ]
    signal = SignalCycle((Phase(30.0, {straight}), Phase(20.0, {left})))
    return StaticMap(
        lanes=lanes,
        turns=turns,
        signals={CENTER: signal},
        stop_signs=[StopSign(EAST, frozenset({LaneId(1)}))],
    )


class PrintingRenderer:
    """Prints highlight draw calls instead of drawing them."""

    def draw_turn(self, turn, style, alpha):
        print(f"  draw {turn.id} as '{style}' (alpha {alpha})")

    def draw_signal_phase(self, intersection, phase, hidden_crosswalks):
        permitted = ", ".join(str(t) for t in sorted(phase.permitted))
        print(f"  {intersection}: phase of {phase.duration}s permits {permitted}")

    def draw_countdown(self, countdown):
        print(f"  countdown {countdown.filled_height:.0f}/{countdown.height:.0f}")

    def draw_stop_sign(self, sign):
        print(f"  {sign.id}: stop sign")


def main():
    map = build_map()
    controller = PlaybackController(ReplayWorld(map))
    cycler = TurnCycler()
    renderer = PrintingRenderer()

    # Play forward for 40 simulated seconds
    update = controller.event(PlaybackAction.TOGGLE_FORWARD)
    for _ in range(400):
        update = controller.event(animation_pulse=True)
    controller.event(PlaybackAction.TOGGLE_FORWARD)
    print(update.prompt)

    controller.event(PlaybackAction.TOGGLE_TOOLTIPS)
    for tooltip in controller.tooltips(map):
        print(" | ".join(tooltip.lines))

    now = controller.tick().as_time()

    print("\nLane 0, all turns:")
    cycler.ambient_event(LaneId(0), False, map, now)
    cycler.draw(renderer, map, now)

    print("\nLane 2, cycling:")
    for _ in range(2):
        cycler.ambient_event(LaneId(2), True, map, now)
        cycler.draw(renderer, map, now)

    print("\nCenter intersection:")
    hints = cycler.ambient_event(CENTER, False, map, now)
    print(f"  icon suppressed for {hints.suppress_intersection_icon}")
    cycler.draw(renderer, map, now)

    print("\nEast intersection:")
    cycler.ambient_event(EAST, False, map, now)
    cycler.draw(renderer, map, now)

    # Rewind and quit
    controller.event(PlaybackAction.TOGGLE_BACKWARD)
    while controller.event(animation_pulse=True).wants_redraw:
        pass
    print(f"\nRewound to {controller.tick()}")
    controller.event(PlaybackAction.QUIT)

    print("\nScore:")
    report = final_score(
        StatSnapshot.from_samples([70.0, 82.0, 95.0]),
        StatSnapshot.from_samples([105.0, 120.0, 140.0]),
        now=now,
    )
    for line in report.lines:
        print(f"  {line}")


if __name__ == "__main__":
    main()
