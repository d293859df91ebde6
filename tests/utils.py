"""
Test utility functions and helpers.

This module provides fake collaborators for weather flows: Open-Meteo
client and location provider with scripted answers, plus gates that
hold a call until the test releases it (for overlapping flows).
"""

import asyncio
from typing import Any, Callable, Dict, List, Optional, Tuple
from unittest.mock import AsyncMock

from internal.location import Coordinate, LocationProvider, PermissionStatus, PlaceRecord
from lib.open_meteo import CurrentWeather, GeocodingResult

# ============================================================================
# Data Builders
# ============================================================================


def createGeocodingResult(name: str, latitude: float, longitude: float, **extra: Any) -> GeocodingResult:
    """
    Create single geocoding search candidate.

    Example:
        paris = createGeocodingResult("Paris", 48.8566, 2.3522, country="France")
    """
    result: Dict[str, Any] = {"name": name, "latitude": latitude, "longitude": longitude}
    result.update(extra)
    return result  # type: ignore[return-value]


def createCurrentWeather(temperature: float, windspeed: float, **extra: Any) -> CurrentWeather:
    """Create current_weather block of forecast response"""
    result: Dict[str, Any] = {
        "temperature": temperature,
        "windspeed": windspeed,
        "winddirection": 270,
        "weathercode": 1,
        "time": "2024-05-01T12:00",
    }
    result.update(extra)
    return result  # type: ignore[return-value]


# ============================================================================
# Async Mock Utilities
# ============================================================================


def createAsyncMock(
    returnValue: Any = None,
    sideEffect: Optional[Callable] = None,
    spec: Optional[type] = None,
) -> AsyncMock:
    """
    Create an AsyncMock with optional return value or side effect.

    Example:
        mockFunc = createAsyncMock(returnValue="result")
        result = await mockFunc()
        assert result == "result"
    """
    mock = AsyncMock(spec=spec)

    if sideEffect is not None:
        mock.side_effect = sideEffect
    else:
        mock.return_value = returnValue

    return mock


class Gates:
    """
    Named asyncio events holding fake calls until released.

    Example:
        gates = Gates()
        gates.hold("Paris")
        ...  # call for "Paris" now waits
        gates.release("Paris")
    """

    def __init__(self):
        self._events: Dict[Any, asyncio.Event] = {}

    def hold(self, key: Any) -> None:
        self._events[key] = asyncio.Event()

    def release(self, key: Any) -> None:
        self._events[key].set()

    async def passThrough(self, key: Any) -> None:
        event = self._events.get(key)
        if event is not None:
            await event.wait()


async def settle(times: int = 5) -> None:
    """Let pending tasks run until they block or finish"""
    for _ in range(times):
        await asyncio.sleep(0)


# ============================================================================
# Fake Collaborators
# ============================================================================


class FakeOpenMeteoClient:
    """
    Stand-in for OpenMeteoClient with scripted answers.

    Attributes:
        places: Place name -> candidates returned by searchLocations()
        weather: (latitude, longitude) -> current weather
        searchError: Raised by searchLocations() if set
        weatherError: Raised by getCurrentWeather() if set
        searchGates: Holds searchLocations() per place name
        weatherGates: Holds getCurrentWeather() per (latitude, longitude)
        searchCalls: Names searched so far
        weatherCalls: Coordinates fetched so far
    """

    def __init__(
        self,
        places: Optional[Dict[str, List[GeocodingResult]]] = None,
        weather: Optional[Dict[Tuple[float, float], CurrentWeather]] = None,
    ):
        self.places = places or {}
        self.weather = weather or {}
        self.searchError: Optional[Exception] = None
        self.weatherError: Optional[Exception] = None
        self.searchGates = Gates()
        self.weatherGates = Gates()
        self.searchCalls: List[str] = []
        self.weatherCalls: List[Tuple[float, float]] = []

    async def searchLocations(self, name: str, count: int = 1) -> List[GeocodingResult]:
        self.searchCalls.append(name)
        await self.searchGates.passThrough(name)
        if self.searchError is not None:
            raise self.searchError
        return self.places.get(name, [])[:count]

    async def getCurrentWeather(self, latitude: float, longitude: float) -> CurrentWeather:
        self.weatherCalls.append((latitude, longitude))
        await self.weatherGates.passThrough((latitude, longitude))
        if self.weatherError is not None:
            raise self.weatherError
        return self.weather.get((latitude, longitude), createCurrentWeather(20.0, 5.0))


class FakeLocationProvider(LocationProvider):
    """
    LocationProvider with scripted answers.

    Attributes:
        permission: Answer to permission request
        position: Device position
        places: Reverse geocoding answer
        permissionError: Raised by requestForegroundPermission() if set
        positionError: Raised by getCurrentPosition() if set
        reverseError: Raised by reverseGeocode() if set
        calls: Names of called methods, in order
    """

    def __init__(
        self,
        permission: PermissionStatus = PermissionStatus.GRANTED,
        position: Coordinate = Coordinate(latitude=48.1351, longitude=11.582),
        places: Optional[List[PlaceRecord]] = None,
    ):
        self.permission = permission
        self.position = position
        self.places: List[PlaceRecord] = places if places is not None else [{"city": "Munich"}]
        self.permissionError: Optional[Exception] = None
        self.positionError: Optional[Exception] = None
        self.reverseError: Optional[Exception] = None
        self.calls: List[str] = []

    async def requestForegroundPermission(self) -> PermissionStatus:
        self.calls.append("requestForegroundPermission")
        if self.permissionError is not None:
            raise self.permissionError
        return self.permission

    async def getCurrentPosition(self) -> Coordinate:
        self.calls.append("getCurrentPosition")
        if self.positionError is not None:
            raise self.positionError
        return self.position

    async def reverseGeocode(self, coordinate: Coordinate) -> List[PlaceRecord]:
        self.calls.append("reverseGeocode")
        if self.reverseError is not None:
            raise self.reverseError
        return self.places


class StateRecorder:
    """Listener collecting every state the orchestrator publishes"""

    def __init__(self):
        self.states: List[Any] = []

    def __call__(self, state: Any) -> None:
        self.states.append(state)
