"""Routing orchestration service."""

from __future__ import annotations

import logging
import math
from typing import Sequence

from ...errors import InvalidInput
from ...models.domain import Location, Stop
from ..geospatial import distance_km, duration_min, ensure_finite
from ..impact import estimate_co2_saved, estimate_emissions_kg, estimate_fuel_litres
from .builder import build_routes, validate_parameters
from .models import OptimizationParameters, RoutePlan, RouteStop, RoutingResult, Summary

logger = logging.getLogger(__name__)

ALGORITHM = "greedy_nearest_neighbor"


def _validate_stop(stop: Stop) -> None:
    ensure_finite(stop.location)
    if not math.isfinite(stop.load) or stop.load < 0:
        raise InvalidInput(f"Stop {stop.stop_id} load must be a non-negative finite number, got {stop.load!r}.")
    if not math.isfinite(stop.service_duration_min) or stop.service_duration_min < 0:
        raise InvalidInput(
            f"Stop {stop.stop_id} service duration must be a non-negative finite number, "
            f"got {stop.service_duration_min!r}."
        )
    if stop.priority is not None and not math.isfinite(stop.priority):
        raise InvalidInput(f"Stop {stop.stop_id} priority must be finite, got {stop.priority!r}.")


def _measure_route(
    route_number: int,
    stops: Sequence[Stop],
    parameters: OptimizationParameters,
) -> RoutePlan:
    route_stops: list[RouteStop] = []
    total_distance = 0.0
    travel_duration = 0.0
    service_duration = 0.0
    load = 0.0
    previous: Location | None = parameters.start_location
    for sequence, stop in enumerate(stops, start=1):
        step_distance = distance_km(previous, stop.location) if previous is not None else 0.0
        step_duration = duration_min(step_distance, parameters.consider_traffic)
        total_distance += step_distance
        travel_duration += step_duration
        arrival = travel_duration + service_duration
        service_duration += stop.service_duration_min
        load += stop.load
        route_stops.append(
            RouteStop(
                stop=stop,
                sequence=sequence,
                distance_from_prev_km=step_distance,
                duration_from_prev_min=step_duration,
                cumulative_load=load,
                arrival_min=arrival,
            )
        )
        previous = stop.location

    return_distance = 0.0
    return_duration = 0.0
    if parameters.end_location is not None and previous is not None:
        return_distance = distance_km(previous, parameters.end_location)
        return_duration = duration_min(return_distance, parameters.consider_traffic)
        total_distance += return_distance

    return RoutePlan(
        route_id=f"R{route_number:02d}",
        stops=route_stops,
        total_distance_km=total_distance,
        total_duration_min=travel_duration + return_duration + service_duration,
        total_load=load,
        capacity_utilization=load / parameters.vehicle_capacity * 100,
        fuel_litres=estimate_fuel_litres(total_distance),
        co2_emissions_kg=estimate_emissions_kg(total_distance),
        oversized=len(stops) == 1 and stops[0].load > parameters.vehicle_capacity,
        return_distance_km=return_distance,
        return_duration_min=return_duration,
        service_duration_min=service_duration,
    )


def _coordinates(location: Location | None) -> list[float] | None:
    if location is None:
        return None
    return [location.latitude, location.longitude]


def optimize_routes(
    stops: Sequence[Stop],
    parameters: OptimizationParameters | None = None,
) -> RoutingResult:
    """Order ``stops`` into capacity-bounded routes and summarise them.

    Parameters and every stop coordinate are validated before any route is
    built, so a failure never yields a partial result. The call is pure:
    identical input always produces identical routes and totals.

    Raises:
        InvalidParameters: capacity or stop limit is not a positive finite number.
        InvalidInput: a stop or depot location has a NaN or infinite coordinate,
            or a stop load, service duration or priority is not a valid number.
    """
    parameters = parameters or OptimizationParameters()
    validate_parameters(parameters)
    for depot in (parameters.start_location, parameters.end_location):
        if depot is not None:
            ensure_finite(depot)
    for stop in stops:
        _validate_stop(stop)

    groups = build_routes(stops, parameters)
    plans = [_measure_route(number, group, parameters) for number, group in enumerate(groups, start=1)]

    total_distance = sum(plan.total_distance_km for plan in plans)
    summary = Summary(
        total_distance=total_distance,
        total_duration=sum(plan.total_duration_min for plan in plans),
        co2_saved_kg=estimate_co2_saved(total_distance),
        route_count=len(plans),
        stop_count=sum(plan.stop_count for plan in plans),
    )
    logger.info(
        f"Optimized {len(stops)} stops into {summary.route_count} routes "
        f"({summary.total_distance:.2f} km, {summary.total_duration:.1f} min)"
    )

    metadata = {
        "algorithm": ALGORITHM,
        "parameters": {
            "vehicle_capacity": parameters.vehicle_capacity,
            "max_stops": parameters.max_stops,
            "prioritize_plastic_pickups": parameters.prioritize_plastic_pickups,
            "consider_traffic": parameters.consider_traffic,
            "start_location": _coordinates(parameters.start_location),
            "end_location": _coordinates(parameters.end_location),
        },
    }
    return RoutingResult(routes=plans, summary=summary, metadata=metadata)


async def optimize_routes_async(
    stops: Sequence[Stop],
    parameters: OptimizationParameters | None = None,
) -> RoutingResult:
    """Awaitable form of :func:`optimize_routes` for event-loop callers."""
    return optimize_routes(stops, parameters)


def validate_route(route: RoutePlan, parameters: OptimizationParameters) -> list[str]:
    """Return the names of the constraints ``route`` breaks (empty when feasible)."""
    violations: list[str] = []
    if route.stop_count > parameters.max_stops:
        violations.append("max_stops")
    if route.total_load > parameters.vehicle_capacity:
        violations.append("vehicle_capacity")
    return violations
