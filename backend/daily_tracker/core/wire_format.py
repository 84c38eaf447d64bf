"""Wire Format: parsing and rendering of instants and calendar dates.

Invariants:
    - Instants render as YYYY-MM-DD HH:MM:SS, dates as YYYY-MM-DD, every field
      zero-padded to fixed width
    - Stored instants are zone-naive, whole seconds, in the storage zone
    - Parse failures raise InvalidDateFormatError naming the offending field
    - Pure functions: no IO, no ambient process time zone

Design Decisions:
    - Naive input instants are read as storage-zone local time; aware ones are
      converted into it
    - Numbers are epoch milliseconds, the only non-text form clients send
    - Text that is not ISO-8601 goes through dateutil, so RFC 2822 and
      long-form dates ("March 21, 2025 10:00:00") are accepted too
"""

import datetime
from zoneinfo import ZoneInfo

from dateutil import parser as date_parser

from daily_tracker.core.errors import InvalidDateFormatError


def _parse_text(text: str) -> datetime.datetime:
    """ISO-8601 first, then free-form text (RFC 2822, "March 21, 2025 10:00")."""
    try:
        return datetime.datetime.fromisoformat(text)
    except ValueError:
        return date_parser.parse(text)


def parse_instant(value: str | int | float, field: str) -> datetime.datetime:
    """Parse a date-time string or epoch milliseconds into a datetime."""
    if isinstance(value, bool):
        raise InvalidDateFormatError(field, value)
    if isinstance(value, (int, float)):
        try:
            return datetime.datetime.fromtimestamp(
                value / 1000, tz=datetime.timezone.utc,
            )
        except (OverflowError, OSError, ValueError) as e:
            raise InvalidDateFormatError(field, value) from e
    try:
        return _parse_text(str(value).strip())
    except (OverflowError, ValueError) as e:
        raise InvalidDateFormatError(field, value) from e


def to_storage_datetime(
    instant: datetime.datetime, zone: ZoneInfo, field: str,
) -> datetime.datetime:
    """Local clock fields of `instant` in `zone`, truncated to seconds.

    An aware instant whose local time falls outside year 1..9999 in `zone`
    is reported as an invalid date for `field`.
    """
    if instant.tzinfo is not None:
        try:
            instant = instant.astimezone(zone).replace(tzinfo=None)
        except (OverflowError, ValueError) as e:
            raise InvalidDateFormatError(field, instant.isoformat()) from e
    return instant.replace(microsecond=0)


def parse_calendar_date(value: str, field: str = "date") -> datetime.date:
    """Parse YYYY-MM-DD, or the date part of any parseable date-time."""
    text = str(value).strip()
    try:
        return datetime.date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return _parse_text(text).date()
    except (OverflowError, ValueError) as e:
        raise InvalidDateFormatError(field, value) from e


def format_wire_datetime(moment: datetime.datetime) -> str:
    return (
        f"{moment.year:04d}-{moment.month:02d}-{moment.day:02d} "
        f"{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"
    )


def format_wire_date(day: datetime.date) -> str:
    return f"{day.year:04d}-{day.month:02d}-{day.day:02d}"
