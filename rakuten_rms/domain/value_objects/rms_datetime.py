"""
Date/time codecs for the RMS WEB SERVICE wire formats.

RMS exchanges timestamps as ``YYYY-MM-DDThh:mm:ss+0900`` and dates as
``YYYY-MM-DD``; the shop calendar additionally uses ``YYYYMMDD``. The offset is
a fixed literal, not a negotiated zone: encoders emit the wall-clock fields of
the given value followed by ``+0900`` and never convert between zones.

Example:
    >>> encode_datetime(datetime(2020, 5, 15, 10, 30))
    '2020-05-15T10:30:00+0900'
    >>> decode_date("2020-05-15")
    datetime.date(2020, 5, 15)
"""

import re
from datetime import date, datetime, timedelta, timezone
from typing import Annotated, Any

from pydantic import BeforeValidator, PlainSerializer

from rakuten_rms.utils.error_handler import FormatException

JST = timezone(timedelta(hours=9), "JST")

DATETIME_SUFFIX = "+0900"
DATETIME_FORMAT = "YYYY-MM-DDThh:mm:ss+0900"
DATE_FORMAT = "YYYY-MM-DD"
COMPACT_DATE_FORMAT = "YYYYMMDD"

_DATETIME_RE = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\+0900$")
_RESPONSE_DATETIME_RE = re.compile(r"^(\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2})(?:(Z)|([+-])(\d{2}):?(\d{2}))$")
_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_COMPACT_DATE_RE = re.compile(r"^\d{8}$")


def encode_datetime(value: datetime) -> str:
    """Format ``value`` as ``YYYY-MM-DDThh:mm:ss+0900`` without zone conversion."""
    # Year is always four digits, including years below 1000
    return (
        f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
        f"T{value.hour:02d}:{value.minute:02d}:{value.second:02d}{DATETIME_SUFFIX}"
    )


def decode_datetime(value: str) -> datetime:
    """
    Parse a strict ``YYYY-MM-DDThh:mm:ss+0900`` string.

    Returns:
        datetime: Aware datetime in the fixed +09:00 zone

    Raises:
        FormatException: If the string does not match the exact pattern
    """
    if not isinstance(value, str) or not _DATETIME_RE.match(value):
        raise FormatException(value, DATETIME_FORMAT)
    return _parse_wall_clock(value[: -len(DATETIME_SUFFIX)], value, DATETIME_FORMAT)


def encode_date(value: date) -> str:
    """Format ``value`` as ``YYYY-MM-DD``; any time-of-day is discarded."""
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def decode_date(value: str) -> date:
    """
    Parse a ``YYYY-MM-DD`` string.

    Raises:
        FormatException: If the string is not a valid calendar date in that layout
    """
    if not isinstance(value, str) or not _DATE_RE.match(value):
        raise FormatException(value, DATE_FORMAT, field="date")
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError as e:
        raise FormatException(value, DATE_FORMAT, field="date") from e


def decode_compact_date(value: str) -> date:
    """
    Parse a shop calendar ``YYYYMMDD`` string.

    Raises:
        FormatException: If the string is not a valid calendar date in that layout
    """
    if not isinstance(value, str) or not _COMPACT_DATE_RE.match(value):
        raise FormatException(value, COMPACT_DATE_FORMAT, field="eventDates")
    try:
        return datetime.strptime(value, "%Y%m%d").date()
    except ValueError as e:
        raise FormatException(value, COMPACT_DATE_FORMAT, field="eventDates") from e


def is_valid_date_string(value: str) -> bool:
    """Check whether ``value`` decodes as ``YYYY-MM-DD``."""
    try:
        decode_date(value)
    except FormatException:
        return False
    return True


def decode_response_datetime(value: str) -> datetime:
    """
    Parse a response timestamp.

    Order records carry ``+09:00`` and request echoes ``+0900``; ``Z`` and any
    other numeric offset are accepted too and converted to JST.

    Returns:
        datetime: Aware datetime in the fixed +09:00 zone

    Raises:
        FormatException: If the string is not a second-precision timestamp with offset
    """
    match = _RESPONSE_DATETIME_RE.match(value) if isinstance(value, str) else None
    if not match:
        raise FormatException(value, DATETIME_FORMAT)

    wall_clock, zulu, sign, hours, minutes = match.groups()
    if zulu:
        offset = timezone.utc
    else:
        delta = timedelta(hours=int(hours), minutes=int(minutes))
        if delta >= timedelta(hours=24):
            raise FormatException(value, DATETIME_FORMAT)
        if sign == "+" and delta == timedelta(hours=9):
            offset = JST
        else:
            offset = timezone(-delta if sign == "-" else delta)

    try:
        parsed = datetime.strptime(wall_clock, "%Y-%m-%dT%H:%M:%S")
        return parsed.replace(tzinfo=offset).astimezone(JST)
    except (ValueError, OverflowError) as e:
        raise FormatException(value, DATETIME_FORMAT) from e


def _parse_wall_clock(wall_clock: str, original: str, expected_format: str) -> datetime:
    try:
        parsed = datetime.strptime(wall_clock, "%Y-%m-%dT%H:%M:%S")
    except ValueError as e:
        raise FormatException(original, expected_format) from e
    return parsed.replace(tzinfo=JST)


# =============================================================================
# PYDANTIC FIELD TYPES
# =============================================================================


def _coerce_response_datetime(value: Any) -> Any:
    # Any offset is accepted here; values are normalized to JST
    if isinstance(value, str):
        try:
            return decode_response_datetime(value)
        except FormatException as e:
            raise ValueError(e.message) from e
    return value


def _coerce_response_date(value: Any) -> Any:
    if isinstance(value, str):
        try:
            return decode_date(value)
        except FormatException as e:
            raise ValueError(e.message) from e
    if isinstance(value, datetime):
        return value.date()
    return value


RMSDateTime = Annotated[
    datetime,
    BeforeValidator(_coerce_response_datetime),
    PlainSerializer(encode_datetime, return_type=str, when_used="always"),
]
"""A ``datetime`` that travels as ``YYYY-MM-DDThh:mm:ss+0900``."""

RMSDate = Annotated[
    date,
    BeforeValidator(_coerce_response_date),
    PlainSerializer(encode_date, return_type=str, when_used="always"),
]
"""A ``date`` that travels as ``YYYY-MM-DD``."""
