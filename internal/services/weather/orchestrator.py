"""
Weather flows orchestration

WeatherOrchestrator owns the presentation state of one UI session and
runs the three flows that fill it:

    searchByName     - user typed a place name
    locateDevice     - user asked for weather where the device is
    initializeDefault - session start, shows default city

Each flow goes Start -> Resolve -> Fetch -> Settle. Flows may overlap:
nothing is cancelled, every flow just tags its state changes with the
generation it got at Start. By default changes of superseded flows are
discarded, so the most recently started flow owns the screen.
"""

import logging
from typing import Awaitable, Callable, List, Optional

from internal.config.manager import ConfigManager
from internal.location import ConfiguredLocationProvider, LocationProvider
from lib.open_meteo import OpenMeteoClient

from .device import DevicePositionPipeline
from .exceptions import LOCATION_ERROR_MESSAGE, UNKNOWN_ERROR_MESSAGE
from .fetcher import WeatherFetcher
from .models import Coordinate
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

logger = logging.getLogger(__name__)

StateListener = Callable[[PresentationState], None]
CoordinateSource = Callable[[int], Awaitable[Coordinate]]


class WeatherOrchestrator:
    """
    Coordinator of weather flows for one UI session.

    State is replaced wholesale on every applied event and listeners are
    called synchronously right after. Everything runs on one event loop,
    so no locking is needed: each step of a flow is applied atomically
    between suspension points.

    Attributes:
        resolver: Place name <-> coordinate resolution
        fetcher: Current weather retrieval
        devicePipeline: Permission -> position -> place stages
        defaultCity: Label shown by initializeDefault()
        defaultCoordinate: Where initializeDefault() fetches weather
        discardStaleResults: Drop results of superseded flows

    Example:
        >>> orchestrator = WeatherOrchestrator.fromConfig(configManager)
        >>> orchestrator.addListener(render)
        >>> await orchestrator.initializeDefault()
        >>> await orchestrator.searchByName("Paris")
    """

    def __init__(
        self,
        resolver: CoordinateResolver,
        fetcher: WeatherFetcher,
        devicePipeline: DevicePositionPipeline,
        *,
        defaultCity: str = "Berlin",
        defaultCoordinate: Coordinate = Coordinate(latitude=52.52, longitude=13.41),
        discardStaleResults: bool = True,
    ):
        self.resolver = resolver
        self.fetcher = fetcher
        self.devicePipeline = devicePipeline
        self.defaultCity = defaultCity
        self.defaultCoordinate = defaultCoordinate
        self.discardStaleResults = discardStaleResults

        self._state = PresentationState()
        self._listeners: List[StateListener] = []

    @classmethod
    def fromConfig(
        cls, configManager: ConfigManager, locationProvider: Optional[LocationProvider] = None
    ) -> "WeatherOrchestrator":
        """
        Wire orchestrator with Open-Meteo client and location provider from config.

        Args:
            configManager: Loaded configuration
            locationProvider: Provider to use instead of the config-driven one
        """
        openMeteoConfig = configManager.getOpenMeteoConfig()
        openMeteoClient = OpenMeteoClient(
            geocodingUrl=openMeteoConfig.get("geocoding-url", None),
            forecastUrl=openMeteoConfig.get("forecast-url", None),
            requestTimeout=openMeteoConfig.get("request-timeout", 10),
            language=openMeteoConfig.get("language", None),
        )

        if locationProvider is None:
            locationProvider = ConfiguredLocationProvider.fromConfig(
                configManager.getLocationConfig(), configManager.getGeocodeMapsConfig()
            )

        resolver = CoordinateResolver(openMeteoClient, locationProvider)
        weatherConfig = configManager.getWeatherConfig()

        return cls(
            resolver=resolver,
            fetcher=WeatherFetcher(openMeteoClient),
            devicePipeline=DevicePositionPipeline(locationProvider, resolver),
            defaultCity=weatherConfig["default-city"],
            defaultCoordinate=Coordinate(
                latitude=weatherConfig["default-latitude"],
                longitude=weatherConfig["default-longitude"],
            ),
            discardStaleResults=weatherConfig["discard-stale-results"],
        )

    @property
    def state(self) -> PresentationState:
        return self._state

    def addListener(self, listener: StateListener) -> None:
        self._listeners.append(listener)

    def removeListener(self, listener: StateListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _dispatch(self, event: StateEvent) -> bool:
        """Apply event and notify listeners. Returns False if event was discarded."""
        newState = reduceState(self._state, event, discardStale=self.discardStaleResults)
        if newState is self._state:
            logger.debug(f"Discarded stale {event!r}, current generation is {self._state.generation}")
            return False

        self._state = newState
        logger.debug(f"Applied {type(event).__name__}: {newState}")

        for listener in list(self._listeners):
            try:
                listener(newState)
            except Exception as e:
                logger.error(f"State listener {listener!r} failed: {e}")
                logger.exception(e)
        return True

    def _start(self, city: Optional[str] = None) -> int:
        """Start step: returns generation owned by the new flow"""
        self._dispatch(FlowStarted(city=city))
        return self._state.generation

    async def _runFlow(self, generation: int, resolveCoordinate: CoordinateSource, fallbackMessage: str) -> None:
        """Resolve, Fetch and Settle steps shared by all flows"""
        try:
            coordinate = await resolveCoordinate(generation)
            snapshot = await self.fetcher.fetch(coordinate)
        except Exception as e:
            message = str(e) or fallbackMessage
            logger.warning(f"Weather flow #{generation} failed: {type(e).__name__}: {message}")
            self._dispatch(FlowFailed(generation=generation, message=message))
            return

        logger.info(f"Weather flow #{generation} done: {snapshot}")
        self._dispatch(FlowSucceeded(generation=generation, weather=snapshot))

    def setInputCity(self, text: str) -> None:
        """Update search field content"""
        self._dispatch(InputChanged(text=text))

    async def searchByName(self, text: str) -> None:
        """
        Show weather for place name.

        Empty or whitespace-only text is ignored without touching state.
        City label changes only if the name was resolved.
        """
        placeName = text.strip()
        if not placeName:
            logger.debug("Ignoring empty search")
            return

        async def resolveByName(generation: int) -> Coordinate:
            place = await self.resolver.forward(placeName)
            self._dispatch(CityResolved(generation=generation, city=place.name))
            return place.coordinate

        generation = self._start()
        logger.info(f"Weather flow #{generation}: search {placeName!r}")
        await self._runFlow(generation, resolveByName, UNKNOWN_ERROR_MESSAGE)

    async def submitSearch(self) -> None:
        """Search for current search field content"""
        await self.searchByName(self._state.inputCity)

    async def locateDevice(self) -> None:
        """
        Show weather at device position.

        Denied permission or unreadable position ends the flow with error,
        failed reverse geocoding only results in fallback city label.
        """

        async def resolveByDevice(generation: int) -> Coordinate:
            fix = await self.devicePipeline.run()
            self._dispatch(CityResolved(generation=generation, city=fix.place.name))
            return fix.coordinate

        generation = self._start()
        logger.info(f"Weather flow #{generation}: locate device")
        await self._runFlow(generation, resolveByDevice, LOCATION_ERROR_MESSAGE)

    async def initializeDefault(self) -> None:
        """
        Show weather for default city, meant to run once at session start.

        City label is set immediately, coordinate is known upfront.
        """

        async def resolveDefault(generation: int) -> Coordinate:
            return self.defaultCoordinate

        generation = self._start(city=self.defaultCity)
        logger.info(f"Weather flow #{generation}: default city {self.defaultCity!r}")
        await self._runFlow(generation, resolveDefault, UNKNOWN_ERROR_MESSAGE)
