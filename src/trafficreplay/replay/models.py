"""Draw snapshots handed to the renderer.

Each query produces fresh instances; nothing here is mutated after creation.
"""

from __future__ import annotations

from dataclasses import dataclass

from trafficreplay.core.geometry import Pose, Pt2D
from trafficreplay.core.identity import CarId, PedestrianId, Traversable


@dataclass(frozen=True, slots=True)
class DrawCarInput:
    """Where one car is at one tick.

    Attributes:
        id: The car.
        on: Lane or turn the car occupies.
        pose: Front of the car and its heading.
        dist_along: Meters from the start of `on`.
    """

    id: CarId
    on: Traversable
    pose: Pose
    dist_along: float


@dataclass(frozen=True, slots=True)
class DrawPedestrianInput:
    id: PedestrianId
    on: Traversable
    pose: Pose
    dist_along: float


@dataclass(frozen=True, slots=True)
class Tooltip:
    """Debug text anchored at a point in map space."""

    pt: Pt2D
    lines: tuple[str, ...]
