"""Challenge scoring: compare a live statistic with a recorded baseline.

Everything here is deterministic and side-effect free given its inputs.

Usage:
    report = final_score(current, baseline, now=sim_time)
    for line in report.lines:
        print(line)

    # Or straight from the analytics collaborators
    report = score_trips(live_analytics, prebaked, now=sim_time, mode=TripMode.DRIVE)
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from trafficreplay.config import ChallengeSettings
from trafficreplay.core.clock import format_duration
from trafficreplay.core.identity import BusRouteId, BusStopId
from trafficreplay.core.stats import StatSnapshot, Statistic, TripMode
from trafficreplay.scoring.models import ScoreReport, Verdict
from trafficreplay.scoring.protocol import Analytics

INSUFFICIENT_DATA_LINE = "No data yet, run the simulation for longer"


def final_score(
    current: StatSnapshot,
    baseline: StatSnapshot,
    now: float,
    settings: ChallengeSettings | None = None,
) -> ScoreReport:
    """Score the current run against the baseline.

    Args:
        current: Snapshot from the live run.
        baseline: Snapshot from the recorded baseline run, same query.
        now: Current simulated time in seconds.
        settings: Margin, statistic, end of day and tie tolerance.

    Returns:
        Report whose lines start with an end-of-day advisory when `now` is
        before the deadline.
    """
    settings = settings or ChallengeSettings()
    if current.count == 0 or baseline.count == 0:
        return ScoreReport(verdict=Verdict.INSUFFICIENT_DATA, lines=(INSUFFICIENT_DATA_LINE,))

    lines: list[str] = []
    if now < settings.end_of_day:
        lines.append(
            "You have to run the simulation until the end of the day to get final "
            f"results; {format_duration(settings.end_of_day - now)} to go"
        )

    stat = settings.statistic
    now_value = current.select(stat)
    base_value = baseline.select(stat)
    delta = base_value - now_value

    if delta > settings.margin:
        verdict = Verdict.COMPLETED
        lines.append(
            f"COMPLETED! {stat} trip times are now {format_duration(now_value)}, which is "
            f"{format_duration(delta)} faster than the baseline {format_duration(base_value)}"
        )
    elif abs(delta) <= settings.tie_tolerance:
        verdict = Verdict.TIED
        lines.append(
            f"... Did you change anything? {stat} trip times are "
            f"{format_duration(now_value)}, same as the baseline"
        )
    elif delta > 0:
        verdict = Verdict.ALMOST_THERE
        lines.append(
            f"Almost there! {stat} trip times are now {format_duration(now_value)}, which is "
            f"{format_duration(delta)} faster than the baseline {format_duration(base_value)}. "
            f"Can you reduce the times by {format_duration(settings.margin)}?"
        )
    else:
        verdict = Verdict.REGRESSED
        lines.append(
            f"Err... how did you make things WORSE?! {stat} trip times are "
            f"{format_duration(now_value)}, which is {format_duration(-delta)} slower than "
            f"the baseline {format_duration(base_value)}"
        )

    return ScoreReport(verdict=verdict, lines=tuple(lines), delta=delta)


def score_trips(
    analytics: Analytics,
    baseline: Analytics,
    now: float,
    mode: TripMode = TripMode.DRIVE,
    settings: ChallengeSettings | None = None,
) -> ScoreReport:
    """Query finished trips of `mode` from both runs and score them."""
    return final_score(
        analytics.finished_trips(now, mode),
        baseline.finished_trips(now, mode),
        now,
        settings,
    )


def day_complete(now: float, settings: ChallengeSettings | None = None) -> bool:
    """True once the final score is due."""
    settings = settings or ChallengeSettings()
    return now >= settings.end_of_day


def compare_duration_shorter(now: float, baseline: float, tolerance: float = 1e-6) -> str:
    """Describe `now` relative to `baseline` where shorter is better."""
    if abs(now - baseline) <= tolerance:
        return "(same as baseline)"
    if now < baseline:
        return f"({format_duration(baseline - now)} faster)"
    return f"({format_duration(now - baseline)} slower)"


def bus_route_lines(
    stops: Sequence[BusStopId],
    current: Mapping[BusStopId, StatSnapshot],
    baseline: Mapping[BusStopId, StatSnapshot],
    stat: Statistic,
) -> list[str]:
    """Per-stop arrival delays on a looping route, compared with the baseline.

    The delay for stop pair i->i+1 is measured at the second stop; the last
    stop wraps around to the first.
    """
    lines = [f"{stat} delay between stops"]
    for idx1 in range(len(stops)):
        idx2 = (idx1 + 1) % len(stops)
        line = f"Stop {idx1 + 1}->{idx2 + 1}: "
        now_stats = current.get(stops[idx2])
        if now_stats is None or now_stats.count == 0:
            lines.append(line + "no arrivals yet")
            continue
        value = now_stats.select(stat)
        line += format_duration(value)
        base_stats = baseline.get(stops[idx2])
        if base_stats is not None and base_stats.count > 0:
            line += " " + compare_duration_shorter(value, base_stats.select(stat))
        lines.append(line)
    return lines


def bus_route_report(
    analytics: Analytics,
    baseline: Analytics,
    now: float,
    route: BusRouteId,
    stops: Sequence[BusStopId],
    stat: Statistic = Statistic.MAX,
) -> list[str]:
    """Query arrivals for `route` from both runs and describe every stop pair."""
    return bus_route_lines(
        stops,
        analytics.bus_arrivals(now, route),
        baseline.bus_arrivals(now, route),
        stat,
    )
