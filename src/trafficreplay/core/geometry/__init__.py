"""Planar points, poses and polyline measurement."""

from trafficreplay.core.geometry.models import Pose, Pt2D, polyline_length, pose_along

__all__ = [
    "Pt2D",
    "Pose",
    "polyline_length",
    "pose_along",
]
