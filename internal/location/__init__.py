"""
Device location access: provider contract and config-driven implementation.
"""

from .configured import ConfiguredLocationProvider, LocationUnavailableError
from .models import Coordinate, PermissionStatus, PlaceRecord
from .provider import LocationProvider

__all__ = [
    "Coordinate",
    "PermissionStatus",
    "PlaceRecord",
    "LocationProvider",
    "ConfiguredLocationProvider",
    "LocationUnavailableError",
]
