"""Playback: the user-facing state machine that drives the replay clock.

Architecture Note:
    playback/ is a stateful, per-view service. It owns the replay tick and
    mode; everything it draws comes from the pure ReplayWorld.
"""

from trafficreplay.playback.controller import ControllerClosedError, PlaybackController
from trafficreplay.playback.models import (
    EventLoopMode,
    PlaybackAction,
    PlaybackMode,
    PlaybackUpdate,
)

__all__ = [
    "PlaybackController",
    "ControllerClosedError",
    "PlaybackMode",
    "PlaybackAction",
    "PlaybackUpdate",
    "EventLoopMode",
]
