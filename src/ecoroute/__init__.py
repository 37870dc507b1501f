"""EcoRoute collection-route optimization engine."""

from .errors import InvalidInput, InvalidParameters, RouteOptimizationError
from .models.domain import Location, Stop
from .services.routing.models import OptimizationParameters, RoutePlan, RouteStop, RoutingResult, Summary
from .services.routing.service import optimize_routes, optimize_routes_async, validate_route

__all__ = [
    "InvalidInput",
    "InvalidParameters",
    "Location",
    "OptimizationParameters",
    "RouteOptimizationError",
    "RoutePlan",
    "RouteStop",
    "RoutingResult",
    "Stop",
    "Summary",
    "optimize_routes",
    "optimize_routes_async",
    "validate_route",
]
