"""Routing request/response schemas."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..config import settings
from ..models.domain import Location, Stop
from ..services.routing.models import OptimizationParameters, RoutingResult


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class LocationModel(_CamelModel):
    latitude: float
    longitude: float
    altitude: Optional[float] = None
    heading: Optional[float] = None
    accuracy: Optional[float] = None
    address: Optional[str] = None


class StopModel(_CamelModel):
    stop_id: str = Field(..., alias="id")
    location: LocationModel
    is_plastic: bool = Field(default=False, alias="isPlastic")
    load: float = Field(default=1.0, ge=0, description="Load units consumed by this pickup.")
    material_types: List[str] = Field(default_factory=list, alias="materialTypes")
    priority: Optional[float] = Field(default=None, ge=1, le=5, description="1-5, with 5 the most urgent.")
    service_duration_min: float = Field(default=0.0, ge=0, alias="serviceDuration")

    def to_domain(self) -> Stop:
        return Stop(
            stop_id=self.stop_id,
            location=Location(**self.location.model_dump()),
            is_plastic=self.is_plastic,
            load=self.load,
            material_types=tuple(self.material_types),
            priority=self.priority,
            service_duration_min=self.service_duration_min,
        )


class OptimizationParametersModel(_CamelModel):
    vehicle_capacity: float = Field(
        default_factory=lambda: settings.default_vehicle_capacity, alias="vehicleCapacity"
    )
    max_stops: int = Field(default_factory=lambda: settings.default_max_stops, alias="maxStops")
    prioritize_plastic_pickups: bool = Field(default=True, alias="prioritizePlasticPickups")
    consider_traffic: bool = Field(default=False, alias="considerTraffic")
    start_location: Optional[LocationModel] = Field(default=None, alias="startLocation")
    end_location: Optional[LocationModel] = Field(default=None, alias="endLocation")

    def to_domain(self) -> OptimizationParameters:
        return OptimizationParameters(
            vehicle_capacity=self.vehicle_capacity,
            max_stops=self.max_stops,
            prioritize_plastic_pickups=self.prioritize_plastic_pickups,
            consider_traffic=self.consider_traffic,
            start_location=Location(**self.start_location.model_dump()) if self.start_location else None,
            end_location=Location(**self.end_location.model_dump()) if self.end_location else None,
        )


class OptimizationRequest(_CamelModel):
    stops: List[StopModel] = Field(default_factory=list)
    parameters: OptimizationParametersModel = Field(default_factory=OptimizationParametersModel)


class RouteStopModel(BaseModel):
    stop_id: str
    sequence: int
    latitude: float
    longitude: float
    is_plastic: bool
    load: float
    cumulative_load: float
    distance_from_prev_km: float
    duration_from_prev_min: float
    arrival_min: float


class RoutePlanModel(BaseModel):
    route_id: str
    stop_count: int
    total_distance_km: float
    total_duration_min: float
    total_load: float
    capacity_utilization: float
    fuel_litres: float
    co2_emissions_kg: float
    oversized: bool
    return_distance_km: float
    service_duration_min: float
    stops: List[RouteStopModel]


class SummaryModel(BaseModel):
    total_distance: float
    total_duration: float
    co2_saved_kg: float
    route_count: int
    stop_count: int


class OptimizationResponse(BaseModel):
    routes: List[RoutePlanModel]
    summary: SummaryModel
    metadata: dict

    @classmethod
    def from_result(cls, result: RoutingResult) -> "OptimizationResponse":
        routes = [
            RoutePlanModel(
                route_id=plan.route_id,
                stop_count=plan.stop_count,
                total_distance_km=plan.total_distance_km,
                total_duration_min=plan.total_duration_min,
                total_load=plan.total_load,
                capacity_utilization=plan.capacity_utilization,
                fuel_litres=plan.fuel_litres,
                co2_emissions_kg=plan.co2_emissions_kg,
                oversized=plan.oversized,
                return_distance_km=plan.return_distance_km,
                service_duration_min=plan.service_duration_min,
                stops=[
                    RouteStopModel(
                        stop_id=route_stop.stop.stop_id,
                        sequence=route_stop.sequence,
                        latitude=route_stop.stop.latitude,
                        longitude=route_stop.stop.longitude,
                        is_plastic=route_stop.stop.carries_plastic,
                        load=route_stop.stop.load,
                        cumulative_load=route_stop.cumulative_load,
                        distance_from_prev_km=route_stop.distance_from_prev_km,
                        duration_from_prev_min=route_stop.duration_from_prev_min,
                        arrival_min=route_stop.arrival_min,
                    )
                    for route_stop in plan.stops
                ],
            )
            for plan in result.routes
        ]
        summary = result.summary
        return cls(
            routes=routes,
            summary=SummaryModel(
                total_distance=summary.total_distance,
                total_duration=summary.total_duration,
                co2_saved_kg=summary.co2_saved_kg,
                route_count=summary.route_count,
                stop_count=summary.stop_count,
            ),
            metadata=result.metadata,
        )
