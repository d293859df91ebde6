"""
Device position pipeline

Locating the device takes three awaited stages, each producing a named
result the next one consumes:

    permission (PermissionStatus) -> position (Coordinate) -> place (PlaceNameResult)
"""

import logging
from dataclasses import dataclass

from internal.location import LocationProvider

from .exceptions import LOCATION_ERROR_MESSAGE, PermissionDeniedError, UnknownError, WeatherFlowError
from .models import Coordinate, PermissionStatus, PlaceNameResult
from .resolver import CoordinateResolver

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeviceFix:
    """Outcome of a successful pipeline run"""

    permission: PermissionStatus
    coordinate: Coordinate
    place: PlaceNameResult


class DevicePositionPipeline:
    """
    Runs permission -> position -> reverse geocoding.

    Permission denial and position failures abort the pipeline,
    reverse geocoding can't fail (fallback label is used instead).
    """

    def __init__(self, locationProvider: LocationProvider, resolver: CoordinateResolver):
        self.locationProvider = locationProvider
        self.resolver = resolver

    async def requestPermission(self) -> PermissionStatus:
        """
        Raises:
            PermissionDeniedError: Access refused
            UnknownError: Provider failed to answer
        """
        try:
            permission = await self.locationProvider.requestForegroundPermission()
        except WeatherFlowError:
            raise
        except Exception as e:
            raise UnknownError.wrap(e, LOCATION_ERROR_MESSAGE)

        if permission != PermissionStatus.GRANTED:
            raise PermissionDeniedError()
        return permission

    async def readPosition(self) -> Coordinate:
        """
        Raises:
            UnknownError: Position can't be obtained
        """
        try:
            coordinate = await self.locationProvider.getCurrentPosition()
        except WeatherFlowError:
            raise
        except Exception as e:
            raise UnknownError.wrap(e, LOCATION_ERROR_MESSAGE)

        logger.debug(f"Device coordinates: {coordinate}")
        return coordinate

    async def resolvePlace(self, coordinate: Coordinate) -> PlaceNameResult:
        return await self.resolver.reverse(coordinate)

    async def run(self) -> DeviceFix:
        permission = await self.requestPermission()
        coordinate = await self.readPosition()
        place = await self.resolvePlace(coordinate)
        return DeviceFix(permission=permission, coordinate=coordinate, place=place)
