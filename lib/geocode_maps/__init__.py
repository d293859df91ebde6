"""
Geocode Maps API Client Library

This module provides a Python async client for reverse geocoding through
the Geocode Maps API (geocode.maps.co).

Example usage:
    from lib.geocode_maps import GeocodeMapsClient

    client = GeocodeMapsClient(apiKey="your_api_key")

    # Full reverse geocoding result
    location = await client.reverse(52.5443, 103.8882)

    # Reduced to city/region/country
    places = await client.reversePlaces(52.5443, 103.8882)
"""

from lib.geocode_maps.client import GeocodeMapsClient, addressToPlaceRecord
from lib.geocode_maps.models import (
    Address,
    PlaceRecord,
    ReverseResponse,
    ReverseResult,
)

__all__ = [
    "GeocodeMapsClient",
    "addressToPlaceRecord",
    "Address",
    "PlaceRecord",
    "ReverseResult",
    "ReverseResponse",
]
