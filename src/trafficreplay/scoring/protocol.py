"""Analytics protocol shared by the live simulation and the prebaked baseline.

Both expose an identical query shape, so the scorer can compare them
without knowing which is which.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol, runtime_checkable

from trafficreplay.core.identity import BusRouteId, BusStopId
from trafficreplay.core.stats import StatSnapshot, TripMode


@runtime_checkable
class Analytics(Protocol):
    """Statistic queries over a run, up to a point in simulated time."""

    def finished_trips(self, time: float, mode: TripMode) -> StatSnapshot:
        """Durations of trips of `mode` finished by `time`."""
        ...

    def bus_arrivals(self, time: float, route: BusRouteId) -> Mapping[BusStopId, StatSnapshot]:
        """Delays between consecutive arrivals at each stop of `route`, up to `time`."""
        ...
