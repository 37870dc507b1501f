"""Greedy nearest-neighbour route construction with capacity-aware splitting.

Stops are visited in order of ``distance - priority credit`` from the current
position. When the chosen stop would overflow the vehicle (load or stop
count), the active route is closed and a new one is seeded from the stop
nearest to where the previous route ended. Every scan keeps the remaining
stops in input order and only replaces the incumbent on a strictly better
cost, so ties always resolve to the earliest input position.
"""

from __future__ import annotations

import logging
import math
from typing import Sequence

from ...errors import InvalidParameters
from ...models.domain import Location, Stop
from ..geospatial import distance_km
from . import prioritizer
from .models import OptimizationParameters

logger = logging.getLogger(__name__)


def validate_parameters(parameters: OptimizationParameters) -> None:
    capacity = parameters.vehicle_capacity
    max_stops = parameters.max_stops
    if not isinstance(capacity, (int, float)) or not math.isfinite(capacity) or capacity <= 0:
        raise InvalidParameters(f"vehicle_capacity must be a positive finite number, got {capacity!r}.")
    if not isinstance(max_stops, (int, float)) or not math.isfinite(max_stops) or max_stops <= 0:
        raise InvalidParameters(f"max_stops must be a positive finite number, got {max_stops!r}.")


def _best_next(
    position: Location,
    stops: Sequence[Stop],
    remaining: list[int],
    parameters: OptimizationParameters,
) -> int:
    best_index = remaining[0]
    best_cost = math.inf
    for index in remaining:
        stop = stops[index]
        cost = distance_km(position, stop.location) - prioritizer.score(stop, parameters)
        if cost < best_cost:
            best_index, best_cost = index, cost
    return best_index


def _nearest(position: Location, stops: Sequence[Stop], remaining: list[int]) -> int:
    best_index = remaining[0]
    best_distance = math.inf
    for index in remaining:
        distance = distance_km(position, stops[index].location)
        if distance < best_distance:
            best_index, best_distance = index, distance
    return best_index


def _warn_if_oversized(stop: Stop, capacity: float) -> None:
    if stop.load > capacity:
        logger.warning(
            f"Stop {stop.stop_id} load {stop.load} exceeds vehicle capacity {capacity}; "
            f"placing it alone on its own route."
        )


def build_routes(stops: Sequence[Stop], parameters: OptimizationParameters) -> list[list[Stop]]:
    """Split ``stops`` into ordered routes honouring capacity and stop limits.

    A stop heavier than the vehicle capacity is never dropped: it gets a route
    of its own, which is the only way a route may exceed ``vehicle_capacity``.
    """

    validate_parameters(parameters)
    if not stops:
        return []

    remaining = list(range(len(stops)))
    seed = prioritizer.seed_index(stops, parameters)
    remaining.remove(seed)
    _warn_if_oversized(stops[seed], parameters.vehicle_capacity)

    routes: list[list[Stop]] = []
    active: list[Stop] = [stops[seed]]
    load = stops[seed].load
    position = stops[seed].location

    while remaining:
        index = _best_next(position, stops, remaining, parameters)
        candidate = stops[index]
        over_capacity = load + candidate.load > parameters.vehicle_capacity
        over_stops = len(active) + 1 > parameters.max_stops
        if over_capacity or over_stops:
            logger.debug(
                f"Closing route {len(routes) + 1} with {len(active)} stops and load {load} "
                f"(capacity exceeded={over_capacity}, stop limit reached={over_stops})"
            )
            routes.append(active)
            index = _nearest(position, stops, remaining)
            candidate = stops[index]
            _warn_if_oversized(candidate, parameters.vehicle_capacity)
            active = [candidate]
            load = candidate.load
        else:
            active.append(candidate)
            load += candidate.load
        remaining.remove(index)
        position = candidate.location

    routes.append(active)
    return routes
