"""Statistic snapshots consumed by challenge scoring.

A snapshot is captured by the analytics collaborator at one simulated time
and is never mutated afterwards.

Usage:
    snapshot = StatSnapshot.from_samples([62.0, 75.5, 120.0])
    snapshot.select(Statistic.P50)
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum

import numpy as np


class Statistic(Enum):
    """Summary statistic selectable over a set of durations."""

    MIN = "min"
    MEAN = "mean"
    P50 = "p50"
    P90 = "p90"
    P99 = "p99"
    MAX = "max"

    @classmethod
    def all(cls) -> list[Statistic]:
        return list(cls)

    def __str__(self) -> str:
        return _LABELS[self]


_LABELS = {
    Statistic.MIN: "minimum",
    Statistic.MEAN: "mean",
    Statistic.P50: "50%ile",
    Statistic.P90: "90%ile",
    Statistic.P99: "99%ile",
    Statistic.MAX: "maximum",
}

_PERCENTILES = {
    Statistic.MIN: 0.0,
    Statistic.P50: 50.0,
    Statistic.P90: 90.0,
    Statistic.P99: 99.0,
    Statistic.MAX: 100.0,
}


class TripMode(Enum):
    """Category of trip that analytics can be filtered by."""

    WALK = "walk"
    BIKE = "bike"
    TRANSIT = "transit"
    DRIVE = "drive"


@dataclass(frozen=True, slots=True)
class StatSnapshot:
    """Immutable sample count plus a statistic query over those samples.

    Attributes:
        count: Number of samples the snapshot summarizes.
        query: Returns the value of a statistic, in seconds. Only meaningful
            when `count` is positive.
    """

    count: int
    query: Callable[[Statistic], float]

    def select(self, stat: Statistic) -> float:
        """Value of `stat` over the snapshot's samples.

        Raises:
            ValueError: If the snapshot has no samples.
        """
        if self.count == 0:
            raise ValueError(f"Cannot select {stat} from an empty snapshot")
        return self.query(stat)

    @classmethod
    def empty(cls) -> StatSnapshot:
        return cls(count=0, query=_no_samples)

    @classmethod
    def from_samples(cls, samples: Iterable[float]) -> StatSnapshot:
        """Build a snapshot from raw durations (seconds)."""
        values = np.array(list(samples), dtype=float)
        if values.size == 0:
            return cls.empty()
        values.setflags(write=False)

        def query(stat: Statistic) -> float:
            if stat is Statistic.MEAN:
                return float(np.mean(values))
            return float(np.percentile(values, _PERCENTILES[stat]))

        return cls(count=int(values.size), query=query)


def _no_samples(stat: Statistic) -> float:
    raise ValueError(f"No samples to compute {stat}")
