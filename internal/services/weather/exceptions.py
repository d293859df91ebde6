"""
Weather service exceptions

This module defines the errors a weather flow can end with.
All of them inherit from WeatherFlowError, their message is what gets
shown to the user.
"""

PERMISSION_DENIED_MESSAGE = "Permission to access location was denied"
CITY_NOT_FOUND_MESSAGE = "City not found"
FETCH_COORDINATES_FAILED_MESSAGE = "Failed to fetch city coordinates"
FETCH_WEATHER_FAILED_MESSAGE = "Failed to fetch weather"
UNKNOWN_ERROR_MESSAGE = "Unknown error"
LOCATION_ERROR_MESSAGE = "Could not get location"


class WeatherFlowError(Exception):
    """
    Base exception for all weather flow errors.

    Args:
        message: User-facing description of the failure
        originalError: The exception that caused this error (optional)
    """

    def __init__(self, message: str, originalError: Exception | None = None):
        super().__init__(message)
        self.originalError = originalError


class NetworkError(WeatherFlowError):
    """
    Raised when geocoding or forecast API can't be reached
    or answers with non-success status.
    """

    pass


class NotFoundError(WeatherFlowError):
    """Raised when geocoding search returns no candidates."""

    def __init__(self, message: str = CITY_NOT_FOUND_MESSAGE, originalError: Exception | None = None):
        super().__init__(message, originalError)


class PermissionDeniedError(WeatherFlowError):
    """Raised when device location access is denied."""

    def __init__(self, message: str = PERMISSION_DENIED_MESSAGE, originalError: Exception | None = None):
        super().__init__(message, originalError)


class UnknownError(WeatherFlowError):
    """
    Wraps any other failure of a collaborator,
    e.g. position read failing for reasons other than permission.
    """

    @classmethod
    def wrap(cls, error: Exception, fallbackMessage: str = UNKNOWN_ERROR_MESSAGE) -> "UnknownError":
        return cls(str(error) or fallbackMessage, originalError=error)
