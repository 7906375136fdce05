"""Formatting helpers for predicted passes."""

from __future__ import annotations

from collections.abc import Iterable

from issflyover.models.flyover import PassRecord


def format_rise_time(record: PassRecord) -> str:
    """Local date/time of the rise in the locale's representation."""
    return record.rise_datetime.astimezone().strftime("%c")


def format_pass(record: PassRecord) -> str:
    """Single display line for one pass."""
    return f"Next pass at {format_rise_time(record)} for {record.duration} seconds"


def format_passes(records: Iterable[PassRecord]) -> str:
    """One line per pass, in the order given."""
    return "\n".join(format_pass(record) for record in records)
