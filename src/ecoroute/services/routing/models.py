"""Routing domain models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from ...config import settings
from ...models.domain import Location, Stop


@dataclass(slots=True)
class OptimizationParameters:
    vehicle_capacity: float = field(default_factory=lambda: settings.default_vehicle_capacity)
    max_stops: int = field(default_factory=lambda: settings.default_max_stops)
    prioritize_plastic_pickups: bool = True
    consider_traffic: bool = False
    # Depot legs are measured but never change the visiting order.
    start_location: Optional[Location] = None
    end_location: Optional[Location] = None


@dataclass(slots=True)
class RouteStop:
    stop: Stop
    sequence: int
    distance_from_prev_km: float
    duration_from_prev_min: float
    cumulative_load: float
    arrival_min: float = 0.0


@dataclass(slots=True)
class RoutePlan:
    route_id: str
    stops: List[RouteStop]
    total_distance_km: float
    total_duration_min: float
    total_load: float
    capacity_utilization: float
    fuel_litres: float
    co2_emissions_kg: float
    oversized: bool = False
    return_distance_km: float = 0.0
    return_duration_min: float = 0.0
    service_duration_min: float = 0.0

    @property
    def stop_count(self) -> int:
        return len(self.stops)

    @property
    def stop_ids(self) -> list[str]:
        return [route_stop.stop.stop_id for route_stop in self.stops]


@dataclass(slots=True)
class Summary:
    total_distance: float = 0.0
    total_duration: float = 0.0
    co2_saved_kg: float = 0.0
    route_count: int = 0
    stop_count: int = 0


@dataclass(slots=True)
class RoutingResult:
    routes: List[RoutePlan]
    summary: Summary
    metadata: dict = field(default_factory=dict)
