"""Scoring: compare live analytics against a prebaked baseline."""

from trafficreplay.scoring.models import ScoreReport, Verdict
from trafficreplay.scoring.protocol import Analytics
from trafficreplay.scoring.scorer import (
    INSUFFICIENT_DATA_LINE,
    bus_route_lines,
    bus_route_report,
    compare_duration_shorter,
    day_complete,
    final_score,
    score_trips,
)

__all__ = [
    "Analytics",
    "ScoreReport",
    "Verdict",
    "final_score",
    "score_trips",
    "day_complete",
    "compare_duration_shorter",
    "bus_route_lines",
    "bus_route_report",
    "INSUFFICIENT_DATA_LINE",
]
