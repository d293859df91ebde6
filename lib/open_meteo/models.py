"""
Data models for Open-Meteo API client

This module defines TypedDict classes for the geocoding and forecast API responses.
Only the fields the client relies on are declared as required.
"""

from typing import List, NotRequired, TypedDict


class GeocodingResult(TypedDict):
    """Single candidate from the geocoding search API"""

    # https://open-meteo.com/en/docs/geocoding-api

    id: NotRequired[int]  # Geonames ID
    name: str  # Place name (localized if language was requested)
    latitude: float  # Latitude (WGS84)
    longitude: float  # Longitude (WGS84)
    elevation: NotRequired[float]  # Elevation above sea level (meters)
    country: NotRequired[str]  # Country name
    country_code: NotRequired[str]  # ISO-3166-1 alpha2 country code
    admin1: NotRequired[str]  # First administrative level (state/region)
    timezone: NotRequired[str]  # Timezone name (e.g., "Europe/Berlin")


class GeocodingResponse(TypedDict):
    """Response from the geocoding search API"""

    # Key is absent if nothing matched
    results: NotRequired[List[GeocodingResult]]
    generationtime_ms: NotRequired[float]


class CurrentWeather(TypedDict):
    """Current conditions block of the forecast API"""

    # https://open-meteo.com/en/docs#current_weather

    time: str  # ISO8601 timestamp, e.g. "2024-05-01T12:00"
    temperature: float  # Air temperature at 2m (Celsius)
    windspeed: float  # Wind speed at 10m (km/h)
    winddirection: float  # Wind direction (degrees)
    weathercode: int  # WMO weather interpretation code
    is_day: NotRequired[int]  # 1 during daylight, 0 at night


class ForecastResponse(TypedDict):
    """Response from the forecast API when only current conditions are requested"""

    latitude: float  # Grid cell latitude (may differ from requested)
    longitude: float  # Grid cell longitude (may differ from requested)
    timezone: NotRequired[str]
    current_weather: CurrentWeather
