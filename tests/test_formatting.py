"""Tests for smart date labels."""

from datetime import date, datetime, timedelta

import pytest

from project_hub.formatting import format_smart_date, format_smart_date_time, format_time


class TestFormatSmartDate:
    """Test relative date labels around Monday 2026-10-19."""

    def test_today(self, now):
        assert format_smart_date(now, now) == "Today"
        assert format_smart_date(now.replace(hour=0, minute=0), now) == "Today"
        assert format_smart_date(now.replace(hour=23, minute=59), now) == "Today"

    def test_tomorrow(self, now):
        assert format_smart_date(now + timedelta(days=1), now) == "Tomorrow"

    def test_tomorrow_uses_calendar_day(self, now):
        """Just after midnight tomorrow is still 'Tomorrow', not 'Today'."""
        late = now.replace(hour=23, minute=50)
        assert format_smart_date(datetime(2026, 10, 20, 0, 5), late) == "Tomorrow"

    def test_yesterday(self, now):
        assert format_smart_date(now - timedelta(days=1), now) == "Yesterday"

    @pytest.mark.parametrize("days, expected", [
        (2, "Wednesday"),
        (5, "Saturday"),
        (7, "Monday"),
    ])
    def test_this_week_shows_weekday(self, now, days, expected):
        assert format_smart_date(now + timedelta(days=days), now) == expected

    @pytest.mark.parametrize("days, expected", [
        (8, "Next Tuesday"),
        (10, "Next Thursday"),
        (14, "Next Monday"),
    ])
    def test_next_week_prefix(self, now, days, expected):
        assert format_smart_date(now + timedelta(days=days), now) == expected

    def test_later_this_year(self, now):
        assert format_smart_date(datetime(2026, 11, 3, 9, 0), now) == "Nov 3"

    def test_past_this_year(self, now):
        assert format_smart_date(datetime(2026, 10, 14), now) == "Oct 14"

    def test_other_year(self, now):
        assert format_smart_date(datetime(2025, 12, 15), now) == "Dec 15, 2025"
        assert format_smart_date(datetime(2027, 2, 1), now) == "Feb 1, 2027"

    def test_accepts_plain_date(self, now):
        assert format_smart_date(date(2026, 10, 20), now) == "Tomorrow"

    def test_accepts_iso_string(self, now):
        assert format_smart_date("2026-10-18T12:00:00", now) == "Yesterday"

    def test_aware_datetime_is_converted_to_local(self, now):
        assert format_smart_date(now.astimezone(), now) == "Today"

    def test_missing_or_invalid(self, now):
        assert format_smart_date(None, now) == ""
        assert format_smart_date("", now) == ""
        assert format_smart_date("not a date", now) == ""


class TestFormatSmartDateTime:
    """Test labels with a time of day."""

    def test_midnight_has_no_time(self, now):
        assert format_smart_date_time(datetime(2026, 10, 20), now) == "Tomorrow"

    def test_afternoon(self, now):
        assert format_smart_date_time(datetime(2026, 10, 20, 15, 0), now) == "Tomorrow at 3:00 PM"

    def test_iso_string(self, now):
        assert format_smart_date_time("2026-10-19T09:05:00", now) == "Today at 9:05 AM"

    def test_invalid(self, now):
        assert format_smart_date_time("garbage", now) == ""

    @pytest.mark.parametrize("hour, minute, expected", [
        (0, 30, "12:30 AM"),
        (11, 59, "11:59 AM"),
        (12, 5, "12:05 PM"),
        (23, 0, "11:00 PM"),
    ])
    def test_twelve_hour_clock(self, hour, minute, expected):
        assert format_time(datetime(2026, 1, 1, hour, minute)) == expected
