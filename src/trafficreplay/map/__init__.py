"""Map collaborator: topology protocol and an in-memory implementation.

Architecture Note:
    The real map (parsing, topology construction) lives outside this
    package. map/ only defines the read-only view the replay core needs,
    plus StaticMap for tests and small synthetic maps.
"""

from trafficreplay.map.local import MapLoadError, StaticMap
from trafficreplay.map.models import Lane, LaneType, StopSign, Turn, TurnType
from trafficreplay.map.protocol import MapView

__all__ = [
    "MapView",
    "StaticMap",
    "MapLoadError",
    "Lane",
    "LaneType",
    "Turn",
    "TurnType",
    "StopSign",
]
