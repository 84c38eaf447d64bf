"""Wire Format: parsing instants/dates and fixed-width rendering, no IO."""

import datetime
from zoneinfo import ZoneInfo

import pytest

from daily_tracker.core.errors import InvalidDateFormatError
from daily_tracker.core.wire_format import (
    format_wire_date,
    format_wire_datetime,
    parse_calendar_date,
    parse_instant,
    to_storage_datetime,
)

UTC = ZoneInfo("UTC")


def test_parse_instant_accepts_zulu_suffix():
    instant = parse_instant("2025-03-21T10:00:00Z", "startTime")
    assert instant == datetime.datetime(
        2025, 3, 21, 10, 0, tzinfo=datetime.timezone.utc,
    )


def test_parse_instant_accepts_epoch_milliseconds():
    instant = parse_instant(1742551200000, "startTime")
    assert instant == datetime.datetime(
        2025, 3, 21, 10, 0, tzinfo=datetime.timezone.utc,
    )


@pytest.mark.parametrize("value", ["not-a-date", "", "2025-02-30", True])
def test_parse_instant_rejects_garbage(value):
    with pytest.raises(InvalidDateFormatError) as info:
        parse_instant(value, "startTime")
    assert info.value.field == "startTime"
    assert info.value.http_status == 400


def test_storage_datetime_converts_aware_instant_into_zone():
    instant = datetime.datetime(
        2025, 3, 21, 10, 0, tzinfo=datetime.timezone.utc,
    )
    stored = to_storage_datetime(instant, ZoneInfo("Asia/Tokyo"), "startTime")
    assert stored == datetime.datetime(2025, 3, 21, 19, 0)
    assert stored.tzinfo is None


def test_storage_datetime_keeps_naive_clock_and_truncates_seconds():
    instant = datetime.datetime(2025, 3, 21, 10, 0, 5, 987654)
    assert to_storage_datetime(instant, UTC, "startTime") == datetime.datetime(
        2025, 3, 21, 10, 0, 5,
    )


def test_format_wire_datetime_is_zero_padded():
    moment = datetime.datetime(987, 1, 2, 3, 4, 5)
    assert format_wire_datetime(moment) == "0987-01-02 03:04:05"


def test_format_wire_date_is_zero_padded():
    assert format_wire_date(datetime.date(2025, 3, 1)) == "2025-03-01"


def test_parse_calendar_date_takes_date_part_of_datetime():
    assert parse_calendar_date("2025-03-21T23:30:00") == datetime.date(2025, 3, 21)


def test_parse_calendar_date_rejects_garbage():
    with pytest.raises(InvalidDateFormatError) as info:
        parse_calendar_date("yesterday")
    assert info.value.field == "date"


def test_parse_instant_accepts_rfc_2822():
    instant = parse_instant("Fri, 21 Mar 2025 10:00:00 GMT", "startTime")
    assert instant.utcoffset() == datetime.timedelta(0)
    assert instant.replace(tzinfo=None) == datetime.datetime(2025, 3, 21, 10, 0)


def test_parse_instant_accepts_long_form_date():
    instant = parse_instant("March 21, 2025 10:00:00", "endTime")
    assert instant == datetime.datetime(2025, 3, 21, 10, 0)


def test_storage_conversion_past_year_one_is_invalid_date():
    instant = parse_instant("0001-01-01T00:00:00+01:00", "startTime")
    with pytest.raises(InvalidDateFormatError) as info:
        to_storage_datetime(instant, UTC, "startTime")
    assert info.value.field == "startTime"


def test_parse_calendar_date_accepts_long_form():
    assert parse_calendar_date("March 21, 2025") == datetime.date(2025, 3, 21)
