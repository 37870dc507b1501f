"""Application configuration and settings management."""

from typing import Any

import json
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="ECOROUTE_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    app_name: str = "EcoRoute Collection Optimizer API"
    api_prefix: str = "/api"
    log_level: str = Field(default="INFO", description="Root logging level for the API process.")
    average_speed_kmh: float = Field(
        default=40.0,
        gt=0.0,
        description="Free-flow urban driving speed used for duration estimates.",
    )
    traffic_congestion_factor: float = Field(
        default=1.4,
        ge=1.0,
        description="Travel-time multiplier applied when traffic consideration is enabled.",
    )
    plastic_priority_bonus_km: float = Field(
        default=0.5,
        ge=0.0,
        description="Distance credit (km) granted to plastic pickups when they are prioritized.",
    )
    priority_level_bonus_km: float = Field(
        default=0.1,
        ge=0.0,
        description="Distance credit (km) per declared priority level above 1.",
    )
    co2_saved_per_km: float = Field(
        default=0.2,
        ge=0.0,
        description="Kilograms of CO2 avoided per kilometre of consolidated collection driving.",
    )
    fuel_litres_per_km: float = Field(default=0.1, ge=0.0)
    co2_per_litre_fuel: float = Field(default=2.31, ge=0.0, description="Diesel tailpipe CO2 (kg/l).")
    default_vehicle_capacity: float = Field(default=10.0, gt=0.0)
    default_max_stops: int = Field(default=15, ge=1)
    frontend_allowed_origins: tuple[str, ...] = Field(
        default=(
            "http://localhost:8081",
            "http://127.0.0.1:8081",
            "http://localhost:19006",
        ),
        description="Permitted web origins for browser clients (CORS).",
    )

    @field_validator("frontend_allowed_origins", mode="before")
    @classmethod
    def _parse_str_tuple_from_env(cls, value: Any) -> tuple[str, ...]:
        """Parse string tuple from environment variable (comma-separated or JSON array)."""
        if isinstance(value, tuple):
            return value
        if isinstance(value, list):
            return tuple(str(item) for item in value)
        if isinstance(value, str):
            try:
                parsed = json.loads(value)
                if isinstance(parsed, list):
                    return tuple(str(item) for item in parsed)
            except (json.JSONDecodeError, TypeError):
                pass
            if "," in value:
                return tuple(item.strip() for item in value.split(",") if item.strip())
            if value.strip():
                return (value.strip(),)
        return tuple()


settings = Settings()
