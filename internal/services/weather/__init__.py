"""
Weather service: resolves places and shows their current weather

Example:
    >>> from internal.services.weather import WeatherOrchestrator
    >>> orchestrator = WeatherOrchestrator.fromConfig(configManager)
    >>> await orchestrator.searchByName("Paris")
    >>> orchestrator.state.weather
"""

from .device import DeviceFix, DevicePositionPipeline
from .exceptions import (
    CITY_NOT_FOUND_MESSAGE,
    FETCH_COORDINATES_FAILED_MESSAGE,
    FETCH_WEATHER_FAILED_MESSAGE,
    LOCATION_ERROR_MESSAGE,
    PERMISSION_DENIED_MESSAGE,
    UNKNOWN_ERROR_MESSAGE,
    NetworkError,
    NotFoundError,
    PermissionDeniedError,
    UnknownError,
    WeatherFlowError,
)
from .fetcher import WeatherFetcher
from .models import FALLBACK_PLACE_NAME, Coordinate, PermissionStatus, PlaceNameResult, ResolvedPlace, WeatherSnapshot
from .orchestrator import WeatherOrchestrator
from .resolver import CoordinateResolver
from .state import (
    CityResolved,
    FlowFailed,
    FlowStarted,
    FlowSucceeded,
    InputChanged,
    PresentationState,
    StateEvent,
    reduceState,
)

__all__ = [
    # Orchestration
    "WeatherOrchestrator",
    "CoordinateResolver",
    "WeatherFetcher",
    "DevicePositionPipeline",
    "DeviceFix",
    # State
    "PresentationState",
    "StateEvent",
    "InputChanged",
    "FlowStarted",
    "CityResolved",
    "FlowSucceeded",
    "FlowFailed",
    "reduceState",
    # Models
    "Coordinate",
    "PermissionStatus",
    "ResolvedPlace",
    "PlaceNameResult",
    "WeatherSnapshot",
    "FALLBACK_PLACE_NAME",
    # Errors
    "WeatherFlowError",
    "NetworkError",
    "NotFoundError",
    "PermissionDeniedError",
    "UnknownError",
    "CITY_NOT_FOUND_MESSAGE",
    "FETCH_COORDINATES_FAILED_MESSAGE",
    "FETCH_WEATHER_FAILED_MESSAGE",
    "LOCATION_ERROR_MESSAGE",
    "PERMISSION_DENIED_MESSAGE",
    "UNKNOWN_ERROR_MESSAGE",
]
