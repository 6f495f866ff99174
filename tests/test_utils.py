from datetime import date, datetime, timezone

import pytest

from app.filing.utils import format_timestamp, parse_iso_date, parse_timestamp


def test_parse_iso_date_accepts_only_yyyy_mm_dd():
    assert parse_iso_date("2024-01-15") == date(2024, 1, 15)
    assert parse_iso_date(" 2024-01-15 ") == date(2024, 1, 15)


@pytest.mark.parametrize(
    "value",
    ["", None, "20240115", "2024-01-15junk", "2024-1-15", "2024-02-30", "15/01/2024", "2024-01-15T00:00:00Z"],
)
def test_parse_iso_date_rejects_everything_else(value):
    assert parse_iso_date(value) is None


def test_timestamps_use_millis_and_z():
    stamp = format_timestamp(datetime(2024, 1, 15, 10, 0, 0, 123456, tzinfo=timezone.utc))
    assert stamp == "2024-01-15T10:00:00.123Z"
    assert parse_timestamp(stamp) == datetime(2024, 1, 15, 10, 0, 0, 123000, tzinfo=timezone.utc)
    assert parse_timestamp("garbage") is None
