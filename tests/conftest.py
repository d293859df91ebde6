"""
Pytest configuration and common fixtures for weather locator tests.

This module provides shared fixtures for weather flows: fake Open-Meteo
client, fake location provider and an orchestrator wired to them.
All fixtures follow camelCase naming convention.
"""

import pytest

from internal.location import PermissionStatus
from internal.services.weather import (
    CoordinateResolver,
    DevicePositionPipeline,
    WeatherFetcher,
    WeatherOrchestrator,
)
from tests.utils import (
    FakeLocationProvider,
    FakeOpenMeteoClient,
    StateRecorder,
    createCurrentWeather,
    createGeocodingResult,
)

# ============================================================================
# Collaborators
# ============================================================================


@pytest.fixture
def fakeOpenMeteo() -> FakeOpenMeteoClient:
    """
    Fake Open-Meteo client knowing Paris, London and default Berlin.

    Example:
        def testSomething(fakeOpenMeteo):
            fakeOpenMeteo.searchError = OpenMeteoNetworkError("down")
    """
    return FakeOpenMeteoClient(
        places={
            "Paris": [
                createGeocodingResult("Paris", 48.8566, 2.3522, country="France"),
                createGeocodingResult("Paris", 33.6609, -95.5555, country="United States"),
            ],
            "London": [createGeocodingResult("London", 51.5085, -0.1257, country="United Kingdom")],
        },
        weather={
            (48.8566, 2.3522): createCurrentWeather(18.2, 9.4),
            (51.5085, -0.1257): createCurrentWeather(12.5, 20.1),
            (52.52, 13.41): createCurrentWeather(15.3, 11.2),
            (48.1351, 11.582): createCurrentWeather(16.0, 7.5),
        },
    )


@pytest.fixture
def fakeLocationProvider() -> FakeLocationProvider:
    """Provider granting permission, placed in Munich"""
    return FakeLocationProvider(permission=PermissionStatus.GRANTED)


@pytest.fixture
def resolver(fakeOpenMeteo, fakeLocationProvider) -> CoordinateResolver:
    return CoordinateResolver(fakeOpenMeteo, fakeLocationProvider)  # type: ignore[arg-type]


@pytest.fixture
def fetcher(fakeOpenMeteo) -> WeatherFetcher:
    return WeatherFetcher(fakeOpenMeteo)  # type: ignore[arg-type]


@pytest.fixture
def devicePipeline(fakeLocationProvider, resolver) -> DevicePositionPipeline:
    return DevicePositionPipeline(fakeLocationProvider, resolver)


# ============================================================================
# Orchestrator
# ============================================================================


@pytest.fixture
def stateRecorder() -> StateRecorder:
    return StateRecorder()


@pytest.fixture
def orchestrator(resolver, fetcher, devicePipeline, stateRecorder) -> WeatherOrchestrator:
    """Orchestrator with stale results guard enabled, recording every state"""
    result = WeatherOrchestrator(resolver, fetcher, devicePipeline)
    result.addListener(stateRecorder)
    return result


@pytest.fixture
def unguardedOrchestrator(resolver, fetcher, devicePipeline) -> WeatherOrchestrator:
    """Orchestrator where the last flow to settle wins"""
    return WeatherOrchestrator(resolver, fetcher, devicePipeline, discardStaleResults=False)
