"""Geospatial helper functions."""

from __future__ import annotations

import math

from ..config import settings
from ..errors import InvalidInput
from ..models.domain import Location

EARTH_RADIUS_KM = 6371.0


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Compute distance between two coordinates using the Haversine formula."""

    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lon2 - lon1)

    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def ensure_finite(location: Location) -> None:
    """Raise InvalidInput when either coordinate is NaN or infinite."""

    if not (math.isfinite(location.latitude) and math.isfinite(location.longitude)):
        raise InvalidInput(
            f"Location ({location.latitude}, {location.longitude}) has a non-finite coordinate."
        )


def distance_km(a: Location, b: Location) -> float:
    """Great-circle distance between two locations in kilometres."""

    ensure_finite(a)
    ensure_finite(b)
    return haversine_km(a.latitude, a.longitude, b.latitude, b.longitude)


def duration_min(distance: float, consider_traffic: bool = False) -> float:
    """Estimated driving time in minutes for ``distance`` km.

    Uses a fixed free-flow speed; with ``consider_traffic`` the travel time is
    stretched by the static congestion factor. No live traffic data is used.
    """

    minutes = distance / settings.average_speed_kmh * 60
    if consider_traffic:
        minutes *= settings.traffic_congestion_factor
    return minutes
