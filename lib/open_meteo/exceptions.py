"""
Open-Meteo API Exceptions

This module contains the exception hierarchy raised by OpenMeteoClient.
All client errors inherit from OpenMeteoError.
"""

from typing import Optional


class OpenMeteoError(Exception):
    """Base exception for all Open-Meteo client errors.

    Attributes:
        message: Human-readable error message
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class OpenMeteoApiError(OpenMeteoError):
    """Raised when the API answers with a non-success HTTP status.

    Attributes:
        statusCode: HTTP status code returned by the API
        reason: Error reason reported by the API body (if any)
    """

    def __init__(self, statusCode: int, reason: Optional[str] = None) -> None:
        message = f"API request failed with status {statusCode}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.statusCode = statusCode
        self.reason = reason


class OpenMeteoNetworkError(OpenMeteoError):
    """Raised on transport failures: timeouts, DNS errors, refused connections."""

    pass


class OpenMeteoResponseError(OpenMeteoError):
    """Raised when a successful response can't be decoded or misses required data."""

    pass
