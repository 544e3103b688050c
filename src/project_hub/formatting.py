"""Human-friendly rendering of due dates."""

from datetime import datetime
from typing import Optional

from .utils.datetime import DateLike, coerce_datetime, days_between, now_local


def format_smart_date(value: DateLike, now: Optional[datetime] = None) -> str:
    """Format a date relative to ``now``.

    Nearby dates get relative labels ("Today", "Tomorrow", "Friday",
    "Next Friday"); anything else is shown as "Dec 15", with the year
    added outside the current year. Missing or unreadable values render as
    an empty string.
    """
    dt = coerce_datetime(value)
    if dt is None:
        return ""

    now = now or now_local()
    days_away = days_between(now, dt)

    if days_away == 0:
        return "Today"
    if days_away == 1:
        return "Tomorrow"
    if days_away == -1:
        return "Yesterday"

    weekday = dt.strftime("%A")
    if 1 < days_away <= 7:
        return weekday
    if 7 < days_away <= 14:
        return f"Next {weekday}"

    if dt.year == now.year:
        return f"{dt.strftime('%b')} {dt.day}"

    return f"{dt.strftime('%b')} {dt.day}, {dt.year}"


def format_time(dt: datetime) -> str:
    """12-hour clock time, e.g. "3:00 PM"."""
    hour = dt.hour % 12 or 12
    return f"{hour}:{dt.minute:02d} {'AM' if dt.hour < 12 else 'PM'}"


def format_smart_date_time(value: DateLike, now: Optional[datetime] = None) -> str:
    """Like :func:`format_smart_date`, plus the time when one was set.

    A time of exactly midnight means "no specific time".
    """
    dt = coerce_datetime(value)
    if dt is None:
        return ""

    label = format_smart_date(dt, now)
    if dt.hour or dt.minute:
        return f"{label} at {format_time(dt)}"

    return label
