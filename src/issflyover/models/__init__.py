"""ISS fly-over data models."""

from issflyover.models.coordinates import Coordinates
from issflyover.models.flyover import PassRecord

__all__ = [
    "Coordinates",
    "PassRecord",
]
