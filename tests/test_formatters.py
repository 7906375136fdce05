"""Tests for pass formatting."""

from __future__ import annotations

from datetime import datetime, timezone

from issflyover.formatters import format_pass, format_passes, format_rise_time
from issflyover.models import PassRecord


def _local(ts: int) -> str:
    return datetime.fromtimestamp(ts, tz=timezone.utc).astimezone().strftime("%c")


class TestFormatRiseTime:
    def test_seconds_in_local_time(self) -> None:
        record = PassRecord(risetime=134564234, duration=600)
        assert format_rise_time(record) == _local(134564234)


class TestFormatPass:
    def test_line(self) -> None:
        record = PassRecord(risetime=134564234, duration=600)
        assert format_pass(record) == f"Next pass at {_local(134564234)} for 600 seconds"


class TestFormatPasses:
    def test_joined_in_order(self) -> None:
        records = [
            PassRecord(risetime=1700003600, duration=420),
            PassRecord(risetime=1700000000, duration=300),
        ]
        lines = format_passes(records).split("\n")
        assert lines == [
            f"Next pass at {_local(1700003600)} for 420 seconds",
            f"Next pass at {_local(1700000000)} for 300 seconds",
        ]

    def test_empty(self) -> None:
        assert format_passes([]) == ""
