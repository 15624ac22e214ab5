"""Playback controller: drives the replay clock from user input and frames.

Usage:
    controller = PlaybackController(ReplayWorld(map))
    update = controller.event(PlaybackAction.TOGGLE_FORWARD)
    while update.wants_redraw:
        update = controller.event(animation_pulse=True)
        draw(controller.get_all_draw_cars(map))
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from trafficreplay.core.clock import Tick
from trafficreplay.core.identity import CarId, PedestrianId, Traversable
from trafficreplay.playback.models import (
    EventLoopMode,
    PlaybackAction,
    PlaybackMode,
    PlaybackUpdate,
)
from trafficreplay.replay.models import DrawCarInput, DrawPedestrianInput, Tooltip
from trafficreplay.replay.world import ReplayWorld

if TYPE_CHECKING:
    from trafficreplay.map.protocol import MapView

logger = logging.getLogger(__name__)


class ControllerClosedError(RuntimeError):
    """Raised when a controller receives events after quitting."""

    pass


class PlaybackController:
    """Off/Forward/Backward state machine over a replay clock.

    Created when the replay view opens (tick zero, mode Off). Each call to
    `event` handles at most one user action plus the implicit animation
    pulse, and returns an explicit scheduling request instead of sleeping.

    Implements the DrawAgentSource protocol, so the renderer can treat it
    like the live simulation.

    Args:
        world: Replay world to query at the current tick.
    """

    def __init__(self, world: ReplayWorld):
        self._world = world
        self._tick = Tick.zero()
        self._mode = PlaybackMode.OFF
        self._show_tooltips = False
        self._open = True

    @property
    def mode(self) -> PlaybackMode:
        return self._mode

    @property
    def show_tooltips(self) -> bool:
        return self._show_tooltips

    @property
    def is_open(self) -> bool:
        return self._open

    def event(
        self, action: PlaybackAction | None = None, animation_pulse: bool = False
    ) -> PlaybackUpdate:
        """Process one input event.

        Args:
            action: User action for this event, if any.
            animation_pulse: True when this event is an animation frame.

        Returns:
            Scheduling request, open flag and prompt after the event.

        Raises:
            ControllerClosedError: If the controller already quit.
        """
        if not self._open:
            raise ControllerClosedError("Playback controller already quit")

        previous = self._mode
        if self._mode is PlaybackMode.OFF:
            if action is PlaybackAction.REWIND and not self._tick.is_zero():
                self._tick = self._tick.prev()
            elif action is PlaybackAction.STEP_FORWARD:
                self._tick = self._tick.next()
            elif action is PlaybackAction.TOGGLE_FORWARD:
                self._mode = PlaybackMode.FORWARD
            elif action is PlaybackAction.TOGGLE_BACKWARD:
                self._mode = PlaybackMode.BACKWARD
        elif self._mode is PlaybackMode.FORWARD:
            if action is PlaybackAction.TOGGLE_FORWARD:
                self._mode = PlaybackMode.OFF
            elif animation_pulse:
                self._tick = self._tick.next()
        elif self._mode is PlaybackMode.BACKWARD:
            if self._tick.is_zero() or action is PlaybackAction.TOGGLE_BACKWARD:
                self._mode = PlaybackMode.OFF
            elif animation_pulse:
                self._tick = self._tick.prev()
                if self._tick.is_zero():
                    self._mode = PlaybackMode.OFF

        if self._mode is not previous:
            logger.debug("Playback %s -> %s at %s", previous.name, self._mode.name, self._tick)

        if action is PlaybackAction.QUIT:
            self._open = False
            self._mode = PlaybackMode.OFF
        elif action is PlaybackAction.TOGGLE_TOOLTIPS:
            self._show_tooltips = not self._show_tooltips

        return PlaybackUpdate(
            schedule=(
                EventLoopMode.IDLE if self._mode is PlaybackMode.OFF else EventLoopMode.ANIMATION
            ),
            still_open=self._open,
            prompt=f"Replay at {self._tick}",
        )

    def tooltips(self, map: MapView) -> list[Tooltip]:
        """Car tooltips at the current tick, or nothing when tooltips are off."""
        if not self._show_tooltips:
            return []
        return self._world.tooltips(self._tick, map)

    # DrawAgentSource

    def tick(self) -> Tick:
        return self._tick

    def get_draw_car(self, id: CarId, map: MapView) -> DrawCarInput | None:
        return self._world.get_draw_car(id, self._tick, map)

    def get_draw_ped(self, id: PedestrianId, map: MapView) -> DrawPedestrianInput | None:
        return self._world.get_draw_ped(id, self._tick, map)

    def get_draw_cars(self, on: Traversable, map: MapView) -> list[DrawCarInput]:
        return [car for car in self._world.get_draw_cars(self._tick, map) if car.on == on]

    def get_draw_peds(self, on: Traversable, map: MapView) -> list[DrawPedestrianInput]:
        return [ped for ped in self._world.get_draw_peds(self._tick, map) if ped.on == on]

    def get_all_draw_cars(self, map: MapView) -> list[DrawCarInput]:
        return self._world.get_draw_cars(self._tick, map)

    def get_all_draw_peds(self, map: MapView) -> list[DrawPedestrianInput]:
        return self._world.get_draw_peds(self._tick, map)
