"""Geographic coordinates model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Coordinates(BaseModel):
    """Latitude/longitude pair resolved from an IP address."""

    model_config = ConfigDict(frozen=True)

    latitude: float
    longitude: float
