"""Statistic snapshots and trip categories."""

from trafficreplay.core.stats.models import StatSnapshot, Statistic, TripMode

__all__ = [
    "Statistic",
    "StatSnapshot",
    "TripMode",
]
