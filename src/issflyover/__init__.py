"""ISS fly-over — next visible ISS passes over the caller's location."""

from issflyover.client import AsyncISSFlyoverClient, ISSFlyoverClient
from issflyover.exceptions import (
    ISSAPIError,
    ISSConnectionError,
    ISSFlyoverError,
    ISSTimeoutError,
    ISSTransportError,
    ISSValidationError,
    MissingCoordinatesError,
    UnsuccessfulFetchError,
)
from issflyover.formatters import format_pass, format_passes
from issflyover.models import Coordinates, PassRecord

__all__ = [
    "AsyncISSFlyoverClient",
    "Coordinates",
    "ISSAPIError",
    "ISSConnectionError",
    "ISSFlyoverClient",
    "ISSFlyoverError",
    "ISSTimeoutError",
    "ISSTransportError",
    "ISSValidationError",
    "MissingCoordinatesError",
    "PassRecord",
    "UnsuccessfulFetchError",
    "format_pass",
    "format_passes",
]

__version__ = "0.1.0"
