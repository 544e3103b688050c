"""Urgency tiers for due dates."""

from datetime import datetime
from enum import Enum
from typing import Optional

from .utils.datetime import DateLike, coerce_datetime, days_between, now_local

SOON_WINDOW_DAYS = 3


class Urgency(Enum):
    """Display urgency of a due date, derived at render time."""
    OVERDUE = "overdue"
    TODAY = "today"
    SOON = "soon"
    LATER = "later"
    NONE = "none"


def is_overdue(value: DateLike, now: Optional[datetime] = None) -> bool:
    """True when the date is in the past and not on today's calendar day."""
    dt = coerce_datetime(value)
    if dt is None:
        return False

    now = now or now_local()
    return dt < now and dt.date() != now.date()


def classify_urgency(value: DateLike, now: Optional[datetime] = None) -> Urgency:
    """Bucket a due date into an urgency tier.

    Overdue and today are decided before the day-distance window, so a date
    later today is TODAY rather than SOON, and an earlier time today is
    still TODAY rather than OVERDUE.
    """
    dt = coerce_datetime(value)
    if dt is None:
        return Urgency.NONE

    now = now or now_local()

    if is_overdue(dt, now):
        return Urgency.OVERDUE
    if dt.date() == now.date():
        return Urgency.TODAY
    if days_between(now, dt) <= SOON_WINDOW_DAYS:
        return Urgency.SOON

    return Urgency.LATER
