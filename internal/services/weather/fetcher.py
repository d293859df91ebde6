"""
Weather fetcher: current conditions for a coordinate
"""

import logging

from lib.open_meteo import OpenMeteoClient, OpenMeteoError

from .exceptions import FETCH_WEATHER_FAILED_MESSAGE, NetworkError
from .models import Coordinate, WeatherSnapshot

logger = logging.getLogger(__name__)


class WeatherFetcher:
    """Fetches current weather, one request per call, no retries."""

    def __init__(self, openMeteoClient: OpenMeteoClient):
        self.openMeteoClient = openMeteoClient

    async def fetch(self, coordinate: Coordinate) -> WeatherSnapshot:
        """
        Get current conditions at coordinate.

        Coordinates are passed through unchecked. The snapshot is stamped
        with the requested coordinate, not the grid cell the API answers for.

        Raises:
            NetworkError: Forecast request failed or had no current conditions
        """
        try:
            current = await self.openMeteoClient.getCurrentWeather(coordinate.latitude, coordinate.longitude)
        except OpenMeteoError as e:
            logger.error(f"Forecast for {coordinate} failed: {e}")
            raise NetworkError(FETCH_WEATHER_FAILED_MESSAGE, originalError=e)

        return WeatherSnapshot(
            temperature=current["temperature"],
            windspeed=current["windspeed"],
            latitude=coordinate.latitude,
            longitude=coordinate.longitude,
        )
