"""
Abstract location provider

Device-side collaborator: tells whether location may be used, where the
device is, and what is there. Weather flows only consume this contract.
"""

from abc import ABC, abstractmethod
from typing import List

from .models import Coordinate, PermissionStatus, PlaceRecord


class LocationProvider(ABC):
    """
    Contract for device location access.

    Every method is a suspension point: implementations may prompt the
    user, read hardware or call remote services.
    """

    @abstractmethod
    async def requestForegroundPermission(self) -> PermissionStatus:
        """
        Ask for permission to read device location.

        Returns:
            PermissionStatus.GRANTED or PermissionStatus.DENIED
        """
        pass

    @abstractmethod
    async def getCurrentPosition(self) -> Coordinate:
        """
        Read current device position.

        Returns:
            Device coordinate

        Raises:
            Exception: Any failure to obtain position
        """
        pass

    @abstractmethod
    async def reverseGeocode(self, coordinate: Coordinate) -> List[PlaceRecord]:
        """
        Describe what is located at coordinate.

        Args:
            coordinate: Position to describe

        Returns:
            Place records, best first; empty if nothing is known

        Raises:
            Exception: Lookup failure (callers treat it as best effort)
        """
        pass
