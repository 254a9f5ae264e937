"""Utility functions for date operations."""

from datetime import datetime, timezone

import dateutil.parser


def parse_date(date_str: str | int | datetime | None) -> datetime | None:
    """
    Parse a date value from a SOAP response into a datetime.

    The input accepts:
    - None or an empty string
    - Epoch timestamp in milliseconds (int or digit-only string)
    - Anything `dateutil.parser` understands (xsd:dateTime, ISO 8601, ...)

    Args:
        date_str: Date value

    Returns:
        Parsed datetime or None if date_str is None / empty string

    Raises:
        ValueError: If the value is not a recognizable date
    """
    if date_str is None or date_str == "":
        return None
    if isinstance(date_str, datetime):
        return date_str
    if isinstance(date_str, int) or date_str.isdigit():
        return datetime.fromtimestamp(int(date_str) / 1000, tz=timezone.utc)
    return dateutil.parser.parse(date_str)
