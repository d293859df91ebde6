"""
Geocode Maps API Data Models

This module defines TypedDict data models for the Geocode Maps reverse geocoding responses.
"""

import sys
from typing import List, NotRequired

if sys.version_info >= (3, 14):
    from typing import TypedDict
else:
    from typing_extensions import TypedDict


class Address(TypedDict, total=False, closed=False):
    """Structured address components from reverse geocoding response, dood!

    All fields are optional as different locations have different address structures.
    Small settlements come as town/village/hamlet instead of city.
    """

    road: str  # Street name
    suburb: str  # Suburb name
    city: str  # City name
    town: str  # Town name (smaller than city)
    village: str  # Village name
    hamlet: str  # Hamlet name
    municipality: str  # Municipality name
    county: str  # County/district name
    state: str  # State name
    region: str  # Region name
    postcode: str  # Postal code
    country: str  # Country name
    country_code: str  # ISO country code (e.g., "de")


class ReverseResult(TypedDict):
    """Result from /reverse endpoint, dood!"""

    place_id: int  # Unique place identifier
    lat: str  # Latitude (string in API response)
    lon: str  # Longitude (string in API response)
    name: str  # Place name
    display_name: str  # Full display name
    address: Address  # Structured address components
    boundingbox: NotRequired[List[str]]  # Bounding box


ReverseResponse = ReverseResult  # /reverse returns single object


class PlaceRecord(TypedDict, total=False):
    """Coarse place description derived from an address, dood!

    Any field may be missing when the location has no such feature
    (open sea, unnamed terrain).
    """

    city: str
    region: str
    country: str
