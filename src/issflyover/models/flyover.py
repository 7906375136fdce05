"""Predicted ISS pass model."""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict


class PassRecord(BaseModel):
    """A single predicted pass: when it rises and how long it stays visible."""

    model_config = ConfigDict(frozen=True)

    risetime: int
    duration: int

    @property
    def rise_datetime(self) -> datetime:
        """Rise time as an aware UTC datetime."""
        return datetime.fromtimestamp(self.risetime, tz=timezone.utc)
