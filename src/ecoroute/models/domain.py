"""Domain models for pickup locations and collection stops."""

from dataclasses import dataclass
from typing import Optional

PLASTIC_MATERIAL = "plastic"


@dataclass(frozen=True, slots=True)
class Location:
    """A captured geographic point. Altitude, heading and accuracy ride along unused."""

    latitude: float
    longitude: float
    altitude: Optional[float] = None
    heading: Optional[float] = None
    accuracy: Optional[float] = None
    address: Optional[str] = None


@dataclass(frozen=True, slots=True)
class Stop:
    """Represents a pickup point supplied by the scheduling layer.

    ``priority`` follows the scheduling app's 1-5 scale (5 is most urgent);
    ``service_duration_min`` is the time spent loading at the stop.
    """

    stop_id: str
    location: Location
    is_plastic: bool = False
    load: float = 1.0
    material_types: tuple[str, ...] = ()
    priority: Optional[float] = None
    service_duration_min: float = 0.0

    @property
    def latitude(self) -> float:
        return self.location.latitude

    @property
    def longitude(self) -> float:
        return self.location.longitude

    @property
    def carries_plastic(self) -> bool:
        if self.is_plastic:
            return True
        return any(material.strip().lower() == PLASTIC_MATERIAL for material in self.material_types)
