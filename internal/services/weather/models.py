"""
Weather Service: value objects shared by resolver, fetcher and orchestrator
"""

from dataclasses import dataclass
from typing import Optional

from internal.location.models import Coordinate, PermissionStatus

__all__ = [
    "FALLBACK_PLACE_NAME",
    "Coordinate",
    "PermissionStatus",
    "ResolvedPlace",
    "PlaceNameResult",
    "WeatherSnapshot",
]

FALLBACK_PLACE_NAME = "Your Location"
"""Label used when reverse geocoding gives nothing usable"""


@dataclass(frozen=True)
class ResolvedPlace:
    """Result of forward geocoding: first candidate's name and position"""

    name: str
    coordinate: Coordinate


@dataclass(frozen=True)
class PlaceNameResult:
    """Result of reverse geocoding.

    Always carries usable name. If lookup failed or found nothing,
    name is FALLBACK_PLACE_NAME, isFallback is set and error keeps
    the failure (if there was one).
    """

    name: str
    isFallback: bool = False
    error: Optional[Exception] = None

    @classmethod
    def fallback(cls, error: Optional[Exception] = None) -> "PlaceNameResult":
        return cls(name=FALLBACK_PLACE_NAME, isFallback=True, error=error)


@dataclass(frozen=True)
class WeatherSnapshot:
    """Current conditions at a coordinate"""

    temperature: float
    """Celsius"""
    windspeed: float
    """km/h"""
    latitude: float
    longitude: float
