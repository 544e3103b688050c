"""Tests for urgency classification."""

from datetime import date, timedelta

import pytest

from project_hub.urgency import Urgency, classify_urgency, is_overdue


class TestClassifyUrgency:
    """Test urgency tiers relative to a fixed 'now'."""

    def test_no_due_date(self, now):
        assert classify_urgency(None, now) == Urgency.NONE

    def test_unparseable_string_counts_as_no_date(self, now):
        assert classify_urgency("someday maybe", now) == Urgency.NONE

    def test_earlier_today_is_not_overdue(self, now):
        """A time that has already passed today is still 'today'."""
        assert classify_urgency(now.replace(hour=8, minute=0), now) == Urgency.TODAY

    def test_later_today(self, now):
        assert classify_urgency(now.replace(hour=18), now) == Urgency.TODAY

    def test_date_only_today(self, now):
        assert classify_urgency(date(2026, 10, 19), now) == Urgency.TODAY

    def test_yesterday_is_overdue(self, now):
        assert classify_urgency(now - timedelta(days=1), now) == Urgency.OVERDUE

    def test_last_minute_of_yesterday(self, now):
        assert classify_urgency(now.replace(day=18, hour=23, minute=59), now) == Urgency.OVERDUE

    @pytest.mark.parametrize("days", [1, 2, 3])
    def test_soon_window(self, now, days):
        assert classify_urgency(now + timedelta(days=days), now) == Urgency.SOON

    def test_day_three_boundary_by_calendar_day(self, now):
        """Late on day three is still soon; the window counts days, not hours."""
        due = (now + timedelta(days=3)).replace(hour=23, minute=59)
        assert classify_urgency(due, now) == Urgency.SOON

    @pytest.mark.parametrize("days", [4, 10, 60])
    def test_later(self, now, days):
        assert classify_urgency(now + timedelta(days=days), now) == Urgency.LATER

    def test_iso_string(self, now):
        assert classify_urgency("2026-10-21T09:00:00", now) == Urgency.SOON


class TestIsOverdue:
    """Test the overdue check used by filters and counters."""

    def test_past_day(self, now):
        assert is_overdue(now - timedelta(days=2), now)

    def test_same_day_never_overdue(self, now):
        assert not is_overdue(now - timedelta(hours=2), now)

    def test_future(self, now):
        assert not is_overdue(now + timedelta(days=1), now)

    def test_missing(self, now):
        assert not is_overdue(None, now)
        assert not is_overdue("bogus", now)
