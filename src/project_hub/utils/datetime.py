"""Datetime utilities with consistent local-time handling.

Due dates are compared by local calendar day, so every helper here hands
back naive datetimes in the machine's local timezone. Aware values coming
in from storage are converted before they are stripped of tzinfo.
"""

import logging
from datetime import date, datetime, time
from typing import Optional, Union

logger = logging.getLogger(__name__)

DateLike = Union[datetime, date, str, None]


def now_local() -> datetime:
    """Return the current local time as a naive datetime."""
    return datetime.now()


def to_local_naive(dt: Optional[datetime]) -> Optional[datetime]:
    """Convert an aware datetime to naive local time.

    Args:
        dt: Datetime to convert, or None

    Returns:
        Naive datetime in local time, or None if input was None
    """
    if dt is None:
        return None

    if dt.tzinfo is None:
        return dt

    return dt.astimezone().replace(tzinfo=None)


def parse_iso(value: Optional[str]) -> Optional[datetime]:
    """Parse an ISO-8601 string into a naive local datetime.

    A trailing ``Z`` is accepted for UTC. Strings that cannot be parsed
    return None rather than raising.
    """
    if not value:
        return None

    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"

    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        logger.warning(f"Ignoring unparseable date value: {value!r}")
        return None

    return to_local_naive(parsed)


def to_iso_string(dt: Optional[datetime]) -> Optional[str]:
    """Convert datetime to an ISO string, or None if input was None."""
    if dt is None:
        return None

    return to_local_naive(dt).isoformat()


def coerce_datetime(value: DateLike) -> Optional[datetime]:
    """Turn a stored or resolved date into a naive local datetime.

    Accepts datetimes, plain dates (taken as midnight) and ISO strings.
    Anything unresolvable comes back as None.
    """
    if value is None:
        return None

    if isinstance(value, datetime):
        return to_local_naive(value)

    if isinstance(value, date):
        return datetime.combine(value, time.min)

    if isinstance(value, str):
        return parse_iso(value)

    logger.warning(f"Unsupported date value of type {type(value).__name__}")
    return None


def days_between(start: datetime, end: datetime) -> int:
    """Number of local calendar days from ``start`` to ``end``."""
    return (end.date() - start.date()).days
