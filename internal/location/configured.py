"""
Config-driven location provider

Stands in for device location on hosts without positioning hardware:
permission and position come from the [location] config section,
reverse geocoding goes to Geocode Maps if it is configured.
"""

import logging
from typing import Any, Dict, List, Optional

import lib.utils as utils
from lib.geocode_maps import GeocodeMapsClient

from .models import Coordinate, PermissionStatus, PlaceRecord
from .provider import LocationProvider

logger = logging.getLogger(__name__)


class LocationUnavailableError(Exception):
    """Raised when no device position is configured."""

    pass


class ConfiguredLocationProvider(LocationProvider):
    """
    LocationProvider backed by static configuration.

    Attributes:
        permission: Answer given to every permission request
        position: Device position or None if unknown
        geocodeMapsClient: Client used for reverse geocoding (optional)
    """

    def __init__(
        self,
        permission: PermissionStatus = PermissionStatus.DENIED,
        position: Optional[Coordinate] = None,
        geocodeMapsClient: Optional[GeocodeMapsClient] = None,
    ):
        self.permission = permission
        self.position = position
        self.geocodeMapsClient = geocodeMapsClient

    @classmethod
    def fromConfig(
        cls, locationConfig: Dict[str, Any], geocodeMapsConfig: Optional[Dict[str, Any]] = None
    ) -> "ConfiguredLocationProvider":
        """
        Build provider from [location] and [geocode-maps] config sections.

        Permission is denied unless explicitly granted. Geocode Maps client
        is created only when the section is enabled and has an api-key.
        """
        permission = PermissionStatus(locationConfig.get("permission", PermissionStatus.DENIED))

        position: Optional[Coordinate] = None
        latitude = utils.parseFloat(locationConfig.get("latitude"))
        longitude = utils.parseFloat(locationConfig.get("longitude"))
        if latitude is not None and longitude is not None:
            position = Coordinate(latitude=latitude, longitude=longitude)

        geocodeMapsClient: Optional[GeocodeMapsClient] = None
        geocodeMapsConfig = geocodeMapsConfig or {}
        if geocodeMapsConfig.get("enabled", False):
            apiKey = geocodeMapsConfig.get("api-key", "")
            if apiKey:
                geocodeMapsClient = GeocodeMapsClient(
                    apiKey=apiKey,
                    requestTimeout=geocodeMapsConfig.get("request-timeout", 10),
                    acceptLanguage=geocodeMapsConfig.get("accept-language", None),
                )
            else:
                logger.warning("Geocode Maps is enabled but api-key is not set, reverse geocoding disabled")

        return cls(permission=permission, position=position, geocodeMapsClient=geocodeMapsClient)

    async def requestForegroundPermission(self) -> PermissionStatus:
        logger.debug(f"Location permission: {self.permission}")
        return self.permission

    async def getCurrentPosition(self) -> Coordinate:
        if self.position is None:
            raise LocationUnavailableError("Device position is not configured")
        return self.position

    async def reverseGeocode(self, coordinate: Coordinate) -> List[PlaceRecord]:
        if self.geocodeMapsClient is None:
            return []
        return await self.geocodeMapsClient.reversePlaces(coordinate.latitude, coordinate.longitude)
