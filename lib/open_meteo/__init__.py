"""
Open-Meteo Async Client Library

This module provides an async client for the Open-Meteo API.
Supports geocoding search (place name → coordinates) and current weather retrieval.

Example usage:
    from lib.open_meteo import OpenMeteoClient

    client = OpenMeteoClient(requestTimeout=10)

    candidates = await client.searchLocations("Berlin")
    if candidates:
        current = await client.getCurrentWeather(candidates[0]["latitude"], candidates[0]["longitude"])
        print(f"Temperature: {current['temperature']}°C")
"""

from .client import OpenMeteoClient
from .exceptions import OpenMeteoApiError, OpenMeteoError, OpenMeteoNetworkError, OpenMeteoResponseError
from .models import CurrentWeather, ForecastResponse, GeocodingResponse, GeocodingResult

__all__ = [
    "OpenMeteoClient",
    "OpenMeteoError",
    "OpenMeteoApiError",
    "OpenMeteoNetworkError",
    "OpenMeteoResponseError",
    "GeocodingResult",
    "GeocodingResponse",
    "CurrentWeather",
    "ForecastResponse",
]
