"""Replay: deterministic agent snapshots and the draw-agent-source contract."""

from trafficreplay.replay.models import DrawCarInput, DrawPedestrianInput, Tooltip
from trafficreplay.replay.protocol import DrawAgentSource
from trafficreplay.replay.world import ReplayWorld, Route

__all__ = [
    "DrawAgentSource",
    "DrawCarInput",
    "DrawPedestrianInput",
    "Tooltip",
    "ReplayWorld",
    "Route",
]
