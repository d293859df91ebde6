"""
Geocode Maps API Async Client

This module provides the GeocodeMapsClient class for reverse geocoding
through the Geocode Maps API (geocode.maps.co).
"""

import json
import logging
from typing import Any, Dict, List, Optional, cast

import httpx

from .models import Address, PlaceRecord, ReverseResponse

logger = logging.getLogger(__name__)

# Address keys holding a settlement name, most significant first
CITY_KEYS = ("city", "town", "village", "hamlet", "municipality")
REGION_KEYS = ("state", "region", "county")


def addressToPlaceRecord(address: Address) -> PlaceRecord:
    """Reduce structured address to city/region/country record, dood!

    Args:
        address: Address block of reverse geocoding result

    Returns:
        PlaceRecord with only the fields present in the address
    """
    record: PlaceRecord = {}
    for key in CITY_KEYS:
        value = address.get(key)
        if value:
            record["city"] = value
            break
    for key in REGION_KEYS:
        value = address.get(key)
        if value:
            record["region"] = value
            break
    country = address.get("country")
    if country:
        record["country"] = country
    return record


class GeocodeMapsClient:
    """Async client for Geocode Maps reverse geocoding, dood!

    Creates new HTTP session for each request to support proper concurrent
    operations. Errors are logged and reported as None, never raised.

    Example:
        >>> from lib.geocode_maps import GeocodeMapsClient
        >>>
        >>> client = GeocodeMapsClient(apiKey="your_api_key", acceptLanguage="en")
        >>>
        >>> location = await client.reverse(52.5443, 103.8882)
        >>> places = await client.reversePlaces(52.5443, 103.8882)
    """

    API_BASE_URL = "https://geocode.maps.co"

    def __init__(
        self,
        apiKey: str,
        requestTimeout: float = 10,
        acceptLanguage: Optional[str] = None,
        baseUrl: Optional[str] = None,
    ):
        """Initialize Geocode Maps client, dood!

        Args:
            apiKey: Geocode Maps API key (required)
            requestTimeout: HTTP request timeout in seconds (default: 10)
            acceptLanguage: Optional language for results (e.g., "en", "ru", "fr") (default: None)
            baseUrl: Override for API base URL (default: API_BASE_URL)
        """
        self.apiKey = apiKey
        self.requestTimeout = requestTimeout
        self.acceptLanguage = acceptLanguage
        self.baseUrl = (baseUrl or self.API_BASE_URL).rstrip("/")

    async def reverse(
        self,
        lat: float,
        lon: float,
        *,
        zoom: Optional[int] = None,
        acceptLanguage: Optional[str] = None,
    ) -> Optional[ReverseResponse]:
        """Reverse geocoding: convert coordinates to address, dood!

        Finds the nearest OSM object to the given coordinates and returns
        its address and metadata.

        Args:
            lat: Latitude (-90 to 90)
            lon: Longitude (-180 to 180)
            zoom: Detail level (3-18, higher = more detailed)
            acceptLanguage: Optional language for results (default: client setting)

        Returns:
            Reverse geocoding result or None if error occurs or nothing is there

        Example:
            >>> location = await client.reverse(52.5443, 103.8882)
            >>> if location:
            ...     print(f"City: {location['address'].get('city', 'N/A')}")
        """
        params: Dict[str, Any] = {
            "lat": lat,
            "lon": lon,
            "addressdetails": 1,
        }
        if zoom is not None:
            params["zoom"] = zoom
        if acceptLanguage:
            params["accept-language"] = acceptLanguage

        result = await self._makeRequest("reverse", params)
        if result is None:
            return None

        # Nothing found is reported as {"error": "Unable to geocode"}
        if not isinstance(result, dict) or "error" in result:
            logger.warning(f"Reverse geocoding found nothing at {lat}, {lon}: {result}")
            return None

        return cast(ReverseResponse, result)

    async def reversePlaces(self, lat: float, lon: float) -> List[PlaceRecord]:
        """Reverse geocode into list of coarse place records, dood!

        Args:
            lat: Latitude
            lon: Longitude

        Returns:
            List with single PlaceRecord, or empty list if nothing was found
        """
        location = await self.reverse(lat, lon)
        if location is None:
            return []
        return [addressToPlaceRecord(location.get("address") or {})]

    async def _makeRequest(
        self,
        endpoint: str,
        params: Dict[str, Any],
    ) -> Optional[Any]:
        """Make HTTP request to Geocode Maps API, dood!

        Single point for all HTTP requests with error handling and
        authentication. Creates new session per request.

        Args:
            endpoint: API endpoint path (e.g., "reverse")
            params: Query parameters (format added automatically)

        Returns:
            Parsed JSON response or None on error

        Error Handling:
            - 401: Invalid API key (logs error, returns None)
            - 404: Location not found (logs warning, returns None)
            - 429: Rate limit exceeded (logs error, returns None)
            - 5xx: Server error (logs error, returns None)
            - Timeout: Request timeout (logs error, returns None)
            - Network: Connection error (logs error, returns None)
        """
        url = f"{self.baseUrl}/{endpoint}"

        params["format"] = "jsonv2"
        if self.acceptLanguage and "accept-language" not in params:
            params["accept-language"] = self.acceptLanguage

        headers = {"Authorization": f"Bearer {self.apiKey}"}

        logger.debug(f"Making request to {url} with params: {params}")

        try:
            async with httpx.AsyncClient(timeout=self.requestTimeout) as session:
                response = await session.get(url, params=params, headers=headers)

                if response.status_code == 200:
                    data = response.json()
                    logger.debug(f"API request successful: {response.status_code}")
                    return data

                elif response.status_code == 401:
                    logger.error("Invalid API key")
                    return None

                elif response.status_code == 404:
                    logger.warning("Location not found")
                    return None

                elif response.status_code == 429:
                    logger.error("Rate limit exceeded")
                    return None

                elif response.status_code >= 500:
                    logger.error(f"Server error: {response.status_code}")
                    return None

                else:
                    logger.error(f"API request failed: {response.status_code}")
                    logger.error(f"Response text: {response.text}")
                    return None

        except httpx.TimeoutException:
            logger.error("Request timeout")
            return None

        except httpx.RequestError as e:
            logger.error(f"Network error: {e}")
            return None

        except json.JSONDecodeError as e:
            logger.error(f"Failed to parse JSON response: {e}")
            return None
