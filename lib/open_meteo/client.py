"""
Open-Meteo Async Client

This module provides the OpenMeteoClient class for interacting with
the Open-Meteo geocoding and forecast APIs. Neither API requires a key.
"""

import json
import logging
from typing import Any, Dict, List, Optional

import httpx

from .exceptions import OpenMeteoApiError, OpenMeteoNetworkError, OpenMeteoResponseError
from .models import CurrentWeather, ForecastResponse, GeocodingResponse, GeocodingResult

logger = logging.getLogger(__name__)


class OpenMeteoClient:
    """
    Async client for Open-Meteo API

    Creates a new HTTP session for each request to support proper concurrent requests.
    Unlike a caching client, every call goes to the network: there is no
    cache and no retry, a failed request raises immediately.

    Example usage:
        client = OpenMeteoClient(requestTimeout=10)

        # Find coordinates of a place
        candidates = await client.searchLocations("Paris", count=1)

        # Current conditions for coordinates
        current = await client.getCurrentWeather(48.8566, 2.3522)
        print(f"{current['temperature']}°C, wind {current['windspeed']} km/h")
    """

    GEOCODING_API = "https://geocoding-api.open-meteo.com/v1/search"
    FORECAST_API = "https://api.open-meteo.com/v1/forecast"

    def __init__(
        self,
        geocodingUrl: Optional[str] = None,
        forecastUrl: Optional[str] = None,
        requestTimeout: float = 10,
        language: Optional[str] = None,
    ):
        """
        Initialize Open-Meteo client

        Args:
            geocodingUrl: Override for the geocoding search endpoint
            forecastUrl: Override for the forecast endpoint
            requestTimeout: HTTP request timeout (seconds)
            language: Optional language for place names (e.g., "en", "de")
        """
        self.geocodingUrl = geocodingUrl or self.GEOCODING_API
        self.forecastUrl = forecastUrl or self.FORECAST_API
        self.requestTimeout = requestTimeout
        self.language = language

    async def searchLocations(self, name: str, count: int = 1) -> List[GeocodingResult]:
        """
        Search places by name

        Uses: https://geocoding-api.open-meteo.com/v1/search

        Args:
            name: Place name (e.g., "Berlin", "Paris")
            count: Max candidates to request (default 1)

        Returns:
            List of candidates in API order, empty if nothing matched

        Raises:
            OpenMeteoApiError: On non-success HTTP status
            OpenMeteoNetworkError: On transport failure
            OpenMeteoResponseError: On undecodable response
        """
        params: Dict[str, Any] = {"name": name, "count": count, "format": "json"}
        if self.language:
            params["language"] = self.language

        responseData: GeocodingResponse = await self._makeRequest(self.geocodingUrl, params)
        if not isinstance(responseData, dict):
            raise OpenMeteoResponseError("Unexpected geocoding response format")

        results = responseData.get("results") or []
        if not results:
            logger.warning(f"No geocoding results for: {name}")
            return []

        candidates: List[GeocodingResult] = []
        for item in results:
            try:
                candidate: GeocodingResult = {
                    "name": item.get("name", ""),
                    "latitude": float(item["latitude"]),
                    "longitude": float(item["longitude"]),
                }
            except (KeyError, TypeError, ValueError) as e:
                logger.warning(f"Skipping malformed geocoding candidate {item}: {e}")
                continue

            for key in ("id", "elevation", "country", "country_code", "admin1", "timezone"):
                if key in item:
                    candidate[key] = item[key]  # type: ignore[literal-required]
            candidates.append(candidate)

        return candidates

    async def getCurrentWeather(self, latitude: float, longitude: float) -> CurrentWeather:
        """
        Get current conditions by coordinates

        Uses: https://api.open-meteo.com/v1/forecast?current_weather=true

        Args:
            latitude: Latitude
            longitude: Longitude

        Returns:
            CurrentWeather block (temperature in Celsius, wind speed in km/h)

        Raises:
            OpenMeteoApiError: On non-success HTTP status
            OpenMeteoNetworkError: On transport failure
            OpenMeteoResponseError: If the response has no current conditions
        """
        params = {
            "latitude": latitude,
            "longitude": longitude,
            "current_weather": "true",
        }

        responseData: ForecastResponse = await self._makeRequest(self.forecastUrl, params)
        currentData = responseData.get("current_weather") if isinstance(responseData, dict) else None
        if not currentData:
            logger.warning(f"No current weather for: {latitude}, {longitude}")
            raise OpenMeteoResponseError("Response has no current weather")

        try:
            current: CurrentWeather = {
                "time": currentData.get("time", ""),
                "temperature": float(currentData["temperature"]),
                "windspeed": float(currentData["windspeed"]),
                "winddirection": float(currentData.get("winddirection", 0)),
                "weathercode": int(currentData.get("weathercode", 0)),
            }
        except (KeyError, TypeError, ValueError) as e:
            raise OpenMeteoResponseError(f"Malformed current weather: {e}")

        if "is_day" in currentData:
            current["is_day"] = int(currentData["is_day"])

        return current

    async def _makeRequest(self, url: str, params: Dict[str, Any]) -> Any:
        """
        Make HTTP GET request to Open-Meteo API

        Creates a new session for each request to support proper concurrent requests.

        Args:
            url: API endpoint URL
            params: Query parameters

        Returns:
            Parsed JSON response

        Raises:
            OpenMeteoApiError: On non-success HTTP status
            OpenMeteoNetworkError: On timeout or connection error
            OpenMeteoResponseError: On invalid JSON
        """
        logger.debug(f"Making request to {url} with params: {params}")

        try:
            async with httpx.AsyncClient(timeout=self.requestTimeout) as session:
                response = await session.get(url, params=params)
        except httpx.TimeoutException as e:
            logger.error(f"Request timeout: {url}")
            raise OpenMeteoNetworkError(f"Request timeout: {e}")
        except httpx.RequestError as e:
            logger.error(f"Network error: {e}")
            raise OpenMeteoNetworkError(f"Network error: {e}")

        if response.status_code != 200:
            reason: Optional[str] = None
            try:
                errorData = response.json()
                if isinstance(errorData, dict):
                    reason = errorData.get("reason")
            except ValueError:
                pass
            logger.error(f"API request failed: {response.status_code}, reason: {reason}")
            raise OpenMeteoApiError(response.status_code, reason)

        try:
            data = response.json()
        except (json.JSONDecodeError, ValueError) as e:
            logger.error(f"Failed to parse JSON response: {e}")
            raise OpenMeteoResponseError(f"Invalid JSON response: {e}")

        logger.debug(f"API request successful: {response.status_code}")
        logger.debug(f"API response: {data}")
        return data
