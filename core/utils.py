# core/utils.py

"""
Repository for program-wide utilities.

Instants are always handled as timezone-aware `datetime` objects. Values without an
offset are taken to be UTC so that every stored date can be compared with every other.
"""

import datetime
from typing import Any

EARLIEST_INSTANT = datetime.datetime.min.replace(tzinfo=datetime.timezone.utc)


def parse_instant(value: Any) -> datetime.datetime:
    """
    Converts a serialized instant into an aware `datetime`.

    Args:
        value (Any): An ISO-8601 string (a trailing "Z" is accepted), a `date` or `datetime`,
            or a number of milliseconds since the Unix epoch.

    Returns:
        The parsed instant, in UTC when no offset was given.

    Raises:
        TypeError: If the value is of an unsupported type.
        ValueError: If a string cannot be parsed as an ISO-8601 date or datetime.
    """
    if isinstance(value, datetime.datetime):
        instant = value

    elif isinstance(value, datetime.date):
        instant = datetime.datetime.combine(value, datetime.time())

    elif isinstance(value, str):
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        instant = datetime.datetime.fromisoformat(text)

    elif isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            return datetime.datetime.fromtimestamp(
                value / 1000, tz=datetime.timezone.utc
            )
        except (OverflowError, OSError):
            raise ValueError(f"Timestamp out of range: {value!r}") from None

    else:
        raise TypeError(f"Unsupported date value: {value!r}")

    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=datetime.timezone.utc)

    return instant


def format_instant(instant: datetime.datetime | None) -> str | None:
    return instant.isoformat() if instant else None
