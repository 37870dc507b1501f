"""Environmental impact estimates derived from route distance."""

from __future__ import annotations

import math

from ..config import settings


def _clamp_distance(distance_km: float) -> float:
    if math.isnan(distance_km) or distance_km < 0:
        return 0.0
    return distance_km


def estimate_co2_saved(total_distance_km: float) -> float:
    """Kilograms of CO2 avoided by consolidating pickups versus single-stop trips."""

    return _clamp_distance(total_distance_km) * settings.co2_saved_per_km


def estimate_fuel_litres(distance_km: float) -> float:
    return _clamp_distance(distance_km) * settings.fuel_litres_per_km


def estimate_emissions_kg(distance_km: float) -> float:
    """Tailpipe CO2 for driving ``distance_km`` with a diesel collection vehicle."""

    return estimate_fuel_litres(distance_km) * settings.co2_per_litre_fuel
