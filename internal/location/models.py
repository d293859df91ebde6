"""
Location: models for device location access
"""

from dataclasses import dataclass
from enum import StrEnum

from lib.geocode_maps import PlaceRecord

__all__ = ["Coordinate", "PermissionStatus", "PlaceRecord"]


@dataclass(frozen=True)
class Coordinate:
    """Latitude/longitude pair in decimal degrees"""

    latitude: float
    longitude: float


class PermissionStatus(StrEnum):
    GRANTED = "granted"
    """Foreground location access allowed"""
    DENIED = "denied"
    """Location access refused"""
