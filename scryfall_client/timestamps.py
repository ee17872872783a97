"""
Scryfall date and timestamp wire formats.

Two conventions appear in API responses:
- Dates ("2018-04-27"): calendar days in Wizards of the Coast's office
  timezone, decoded at a fixed UTC-8 offset.
- Timestamps ("2018-05-04T09:05:21.098+00:00"): RFC 3339 with optional
  fractional seconds, decoded with their own offset.

A JSON null decodes to ZERO_TIME for both and ZERO_TIME encodes back to null.
"""

import re
from datetime import UTC, datetime, timedelta, timezone
from typing import Annotated, Any

from pydantic import BeforeValidator, PlainSerializer

# Scryfall dates use the timezone of Renton, Washington (no DST applied)
SCRYFALL_TIMEZONE = timezone(timedelta(hours=-8), "UTC-8")

ZERO_TIME = datetime.min.replace(tzinfo=UTC)

_DATE_PATTERN = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")
_TIMESTAMP_PATTERN = re.compile(
    r"^(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2}):(\d{2})"
    r"(?:\.(\d+))?"
    r"(Z|[+-]\d{2}:\d{2})$"
)


def parse_date(value: Any) -> datetime:
    """
    Decode a Scryfall date.

    Args:
        value: Wire value, a "YYYY-MM-DD" string or None. datetime values
               pass through unchanged.

    Returns:
        Midnight of that day at UTC-8, or ZERO_TIME for None

    Raises:
        ValueError: If the string is not a valid date
    """
    if value is None or value == "null":
        return ZERO_TIME
    if isinstance(value, datetime):
        return value

    match = _DATE_PATTERN.match(str(value))
    if match is None:
        raise ValueError(f"Invalid Scryfall date: {value!r}")

    year, month, day = (int(part) for part in match.groups())
    return datetime(year, month, day, tzinfo=SCRYFALL_TIMEZONE)


def format_date(value: datetime) -> str | None:
    """Encode a date as "YYYY-MM-DD" in UTC-8, or None for ZERO_TIME."""
    if value == ZERO_TIME:
        return None
    if value.tzinfo is not None:
        value = value.astimezone(SCRYFALL_TIMEZONE)
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def parse_timestamp(value: Any) -> datetime:
    """
    Decode a Scryfall timestamp.

    Fractional seconds of any length are accepted and truncated to
    microseconds.

    Args:
        value: Wire value, an RFC 3339 string or None. datetime values
               pass through unchanged.

    Returns:
        Timezone-aware datetime, or ZERO_TIME for None

    Raises:
        ValueError: If the string is not a valid timestamp
    """
    if value is None or value == "null":
        return ZERO_TIME
    if isinstance(value, datetime):
        return value

    match = _TIMESTAMP_PATTERN.match(str(value))
    if match is None:
        raise ValueError(f"Invalid Scryfall timestamp: {value!r}")

    year, month, day, hour, minute, second, fraction, offset = match.groups()
    microsecond = int((fraction or "0")[:6].ljust(6, "0"))

    if offset == "Z":
        tzinfo = UTC
    else:
        sign = -1 if offset[0] == "-" else 1
        offset_hours, offset_minutes = int(offset[1:3]), int(offset[4:6])
        tzinfo = timezone(sign * timedelta(hours=offset_hours, minutes=offset_minutes))

    return datetime(
        int(year),
        int(month),
        int(day),
        int(hour),
        int(minute),
        int(second),
        microsecond,
        tzinfo=tzinfo,
    )


def format_timestamp(value: datetime) -> str | None:
    """
    Encode a timestamp as RFC 3339, or None for ZERO_TIME.

    A zero UTC offset is written as "Z". Trailing zeros of the fractional
    seconds are dropped, and the fraction is omitted when it is zero.
    """
    if value == ZERO_TIME:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)

    text = (
        f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
        f"T{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
    )
    if value.microsecond:
        text += "." + f"{value.microsecond:06d}".rstrip("0")

    offset = value.utcoffset() or timedelta(0)
    if offset == timedelta(0):
        return text + "Z"

    total_minutes = int(offset.total_seconds()) // 60
    sign = "-" if total_minutes < 0 else "+"
    hours, minutes = divmod(abs(total_minutes), 60)
    return f"{text}{sign}{hours:02d}:{minutes:02d}"


Date = Annotated[
    datetime,
    BeforeValidator(parse_date),
    PlainSerializer(format_date, return_type=str | None, when_used="json"),
]

Timestamp = Annotated[
    datetime,
    BeforeValidator(parse_timestamp),
    PlainSerializer(format_timestamp, return_type=str | None, when_used="json"),
]
