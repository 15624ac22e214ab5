"""Minimal planar geometry for placing agents along lanes and turns."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Pt2D:
    x: float
    y: float

    def dist_to(self, other: Pt2D) -> float:
        return math.hypot(other.x - self.x, other.y - self.y)

    def __str__(self) -> str:
        return f"({self.x:.2f}, {self.y:.2f})"


@dataclass(frozen=True, slots=True)
class Pose:
    """Position plus heading in degrees, counter-clockwise from +x."""

    pt: Pt2D
    angle: float


def polyline_length(points: Sequence[Pt2D]) -> float:
    return sum(a.dist_to(b) for a, b in zip(points, points[1:], strict=False))


def pose_along(points: Sequence[Pt2D], dist: float) -> Pose:
    """Pose at `dist` along a polyline.

    Distances outside [0, length] clamp to the endpoints. Heading follows
    the segment the point lies on.

    Raises:
        ValueError: If fewer than two points are given.
    """
    if len(points) < 2:
        raise ValueError(f"Polyline needs at least 2 points, got {len(points)}")

    remaining = max(dist, 0.0)
    last = len(points) - 2
    for i in range(last + 1):
        a, b = points[i], points[i + 1]
        seg = a.dist_to(b)
        if remaining > seg and i != last:
            remaining -= seg
            continue
        ratio = 1.0 if seg == 0 else min(remaining / seg, 1.0)
        return Pose(
            pt=Pt2D(a.x + (b.x - a.x) * ratio, a.y + (b.y - a.y) * ratio),
            angle=math.degrees(math.atan2(b.y - a.y, b.x - a.x)),
        )
    raise AssertionError("pose_along fell off the polyline")
