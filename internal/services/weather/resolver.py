"""
Coordinate resolver: place name to coordinates and back
"""

import logging

from internal.location import LocationProvider
from lib.open_meteo import OpenMeteoClient, OpenMeteoError

from .exceptions import FETCH_COORDINATES_FAILED_MESSAGE, NetworkError, NotFoundError
from .models import Coordinate, PlaceNameResult, ResolvedPlace

logger = logging.getLogger(__name__)


class CoordinateResolver:
    """
    Resolves place names to coordinates (forward) and device
    coordinates to human-readable labels (reverse).

    Forward resolution does not rank candidates: the first one
    returned by the geocoding API is used.
    """

    def __init__(self, openMeteoClient: OpenMeteoClient, locationProvider: LocationProvider):
        self.openMeteoClient = openMeteoClient
        self.locationProvider = locationProvider

    async def forward(self, placeName: str) -> ResolvedPlace:
        """
        Resolve place name to coordinates.

        Args:
            placeName: Non-empty trimmed name, callers reject empty input

        Returns:
            Name and coordinate of the first candidate

        Raises:
            NetworkError: Geocoding request failed
            NotFoundError: Nothing matched the name
        """
        try:
            candidates = await self.openMeteoClient.searchLocations(placeName, count=1)
        except OpenMeteoError as e:
            logger.error(f"Geocoding of {placeName!r} failed: {e}")
            raise NetworkError(FETCH_COORDINATES_FAILED_MESSAGE, originalError=e)

        if not candidates:
            raise NotFoundError()

        first = candidates[0]
        resolved = ResolvedPlace(
            name=first["name"],
            coordinate=Coordinate(latitude=first["latitude"], longitude=first["longitude"]),
        )
        logger.debug(f"Resolved {placeName!r} to {resolved}")
        return resolved

    async def reverse(self, coordinate: Coordinate) -> PlaceNameResult:
        """
        Best-effort label for coordinate, never raises.

        First place record wins, label priority is city, region, country.
        Anything else ends up as the fallback label.
        """
        try:
            places = await self.locationProvider.reverseGeocode(coordinate)
            if not places:
                logger.debug(f"Nothing found at {coordinate}, using fallback label")
                return PlaceNameResult.fallback()

            place = places[0]
            logger.debug(f"Reverse geocoded place: {place}")
            name = place.get("city") or place.get("region") or place.get("country")
        except Exception as e:
            logger.warning(f"Reverse geocoding of {coordinate} failed, using fallback label: {e}")
            return PlaceNameResult.fallback(error=e)

        if not name or not isinstance(name, str):
            return PlaceNameResult.fallback()
        return PlaceNameResult(name=name)
