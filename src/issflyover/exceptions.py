"""Custom exceptions for the ISS fly-over client."""

from __future__ import annotations


class ISSFlyoverError(Exception):
    """Base exception for all ISS fly-over client errors."""


class ISSTransportError(ISSFlyoverError):
    """Raised when a request fails before a usable HTTP response is read."""


class ISSConnectionError(ISSTransportError):
    """Raised when the client cannot connect to a service."""


class ISSTimeoutError(ISSTransportError):
    """Raised when a request to a service times out."""


class ISSAPIError(ISSFlyoverError):
    """Raised when a service answers with anything other than HTTP 200."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(message)


class ISSValidationError(ISSFlyoverError):
    """Raised when response data is missing required fields or fails validation."""


class MissingCoordinatesError(ISSValidationError):
    """Raised when the geolocation response lacks a usable latitude or longitude."""


class UnsuccessfulFetchError(ISSValidationError):
    """Raised when the fly-over service reports a non-success message."""
