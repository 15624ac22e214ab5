"""Draw-agent-source protocol.

The renderer asks a source where agents are, without knowing whether the
answers come from the live simulation or from a replay. Both implement
this protocol, so they are interchangeable.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from trafficreplay.core.clock import Tick
from trafficreplay.core.identity import CarId, PedestrianId, Traversable
from trafficreplay.replay.models import DrawCarInput, DrawPedestrianInput

if TYPE_CHECKING:
    from trafficreplay.map.protocol import MapView


@runtime_checkable
class DrawAgentSource(Protocol):
    """Uniform query surface for agents to draw at the source's current tick.

    Misses return None or an empty list; no query raises for unknown ids.
    """

    def tick(self) -> Tick:
        """Tick currently displayed."""
        ...

    def get_draw_car(self, id: CarId, map: MapView) -> DrawCarInput | None:
        ...

    def get_draw_ped(self, id: PedestrianId, map: MapView) -> DrawPedestrianInput | None:
        ...

    def get_draw_cars(self, on: Traversable, map: MapView) -> list[DrawCarInput]:
        """Cars occupying one lane or turn."""
        ...

    def get_draw_peds(self, on: Traversable, map: MapView) -> list[DrawPedestrianInput]:
        """Pedestrians occupying one lane or turn."""
        ...

    def get_all_draw_cars(self, map: MapView) -> list[DrawCarInput]:
        ...

    def get_all_draw_peds(self, map: MapView) -> list[DrawPedestrianInput]:
        ...
