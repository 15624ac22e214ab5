"""ReplayWorld: deterministic stand-in for live simulation queries.

A small synthetic population is derived once from static topology. After
that, agent positions are a pure function of time: any tick can be queried
in any order, any number of times, with identical results. This is what
makes rewinding possible without re-running a simulation.

Usage:
    world = ReplayWorld(map)
    cars = world.get_draw_cars(Tick(120), map)
    same = world.get_draw_cars(Tick(120), map)  # == cars
"""

from __future__ import annotations

import bisect
import logging
import warnings
from dataclasses import dataclass
from typing import TYPE_CHECKING

from trafficreplay.config import ReplaySettings
from trafficreplay.core.clock import Tick
from trafficreplay.core.geometry import Pt2D, pose_along
from trafficreplay.core.identity import CarId, LaneId, PedestrianId, Traversable
from trafficreplay.replay.models import DrawCarInput, DrawPedestrianInput, Tooltip

if TYPE_CHECKING:
    from trafficreplay.map.protocol import MapView

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Route:
    """Looping path of one synthetic car.

    Attributes:
        car: The car driving the route.
        depart: Simulated time the car first appears.
        legs: Lanes and turns in driving order.
        starts: Distance from route start at which each leg begins.
        length: Total route length in meters.
    """

    car: CarId
    depart: float
    legs: tuple[Traversable, ...]
    starts: tuple[float, ...]
    length: float

    def locate(self, dist: float) -> tuple[Traversable, float]:
        """Leg containing `dist` and the distance along that leg."""
        idx = bisect.bisect_right(self.starts, dist) - 1
        return self.legs[idx], dist - self.starts[idx]


class ReplayWorld:
    """Synthetic population replayed as a pure function of time.

    One car per driving lane, ordered by lane id and capped by
    `settings.max_cars`. Each car follows the first vehicle turn out of
    every lane until a lane has none, a lane repeats, or the hop cap is hit,
    then loops that route at constant speed forever.

    Pedestrians are not modelled: pedestrian queries always come back empty.

    Args:
        map: Static topology to derive routes from.
        settings: Population and speed tunables.
    """

    def __init__(self, map: MapView, settings: ReplaySettings | None = None):
        self._settings = settings or ReplaySettings()
        self._routes: list[Route] = []

        driving = [lane for lane in map.all_lanes() if lane.is_for_driving()]
        if len(driving) > self._settings.max_cars:
            warnings.warn(
                f"ReplayWorld only populates {self._settings.max_cars} of "
                f"{len(driving)} driving lanes.",
                stacklevel=2,
            )
        for lane in driving[: self._settings.max_cars]:
            route = self._build_route(map, lane.id, CarId(len(self._routes)))
            if route is not None:
                self._routes.append(route)

        logger.debug("ReplayWorld built %d routes", len(self._routes))

    def _build_route(self, map: MapView, start: LaneId, car: CarId) -> Route | None:
        legs: list[Traversable] = []
        lengths: list[float] = []
        visited = {start}
        current = start
        for _ in range(self._settings.max_route_hops):
            lane = map.get_lane(current)
            if lane is None:
                break
            legs.append(current)
            lengths.append(lane.length)

            turn = next(
                (t for t in map.get_turns_from_lane(current) if t.turn_type.is_for_vehicles()),
                None,
            )
            if turn is None or turn.id.dst in visited:
                break
            legs.append(turn.id)
            lengths.append(turn.length)
            visited.add(turn.id.dst)
            current = turn.id.dst

        total = sum(lengths)
        if total <= 0:
            return None

        starts: list[float] = []
        acc = 0.0
        for length in lengths:
            starts.append(acc)
            acc += length
        return Route(
            car=car,
            depart=car.index * self._settings.spawn_interval,
            legs=tuple(legs),
            starts=tuple(starts),
            length=total,
        )

    @property
    def routes(self) -> list[Route]:
        return list(self._routes)

    def get_draw_cars(self, tick: Tick, map: MapView) -> list[DrawCarInput]:
        """All cars visible at `tick`, ordered by car id."""
        time = tick.as_time()
        cars: list[DrawCarInput] = []
        for route in self._routes:
            if time < route.depart:
                continue
            dist = (self._settings.car_speed * (time - route.depart)) % route.length
            on, dist_along = route.locate(dist)
            geom = _geometry(map, on)
            if geom is None:
                continue
            cars.append(
                DrawCarInput(
                    id=route.car,
                    on=on,
                    pose=pose_along(geom, dist_along),
                    dist_along=dist_along,
                )
            )
        return cars

    def get_draw_car(self, id: CarId, tick: Tick, map: MapView) -> DrawCarInput | None:
        """Linear search of `get_draw_cars`; None if the car is not visible."""
        return next((car for car in self.get_draw_cars(tick, map) if car.id == id), None)

    def get_draw_peds(self, tick: Tick, map: MapView) -> list[DrawPedestrianInput]:
        return []

    def get_draw_ped(
        self, id: PedestrianId, tick: Tick, map: MapView
    ) -> DrawPedestrianInput | None:
        return None

    def tooltips(self, tick: Tick, map: MapView) -> list[Tooltip]:
        """Debug text for every visible car."""
        return [
            Tooltip(
                pt=car.pose.pt,
                lines=(str(car.id), f"on {car.on}", f"{car.dist_along:.1f}m along"),
            )
            for car in self.get_draw_cars(tick, map)
        ]


def _geometry(map: MapView, on: Traversable) -> tuple[Pt2D, ...] | None:
    if isinstance(on, LaneId):
        lane = map.get_lane(on)
        return lane.center if lane is not None else None
    turn = map.get_turn(on)
    return turn.geom if turn is not None else None
