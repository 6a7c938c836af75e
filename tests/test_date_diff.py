"""Tests for calendar day arithmetic."""

import pytest
from datetime import datetime, timedelta, timezone

from core.date_diff import (
    EPOCH_ZERO,
    day_count,
    days_between,
    get_difference,
    leap_years,
)


class TestLeapYears:
    """Tests for leap_years."""

    def test_january_uses_previous_year(self):
        """Test January and February count leap days up to the previous year."""
        assert leap_years(datetime(2024, 1, 15)) == 490
        assert leap_years(datetime(2024, 2, 29)) == 490

    def test_march_includes_current_year(self):
        """Test March onwards counts the current year's leap day."""
        assert leap_years(datetime(2024, 3, 1)) == 491

    def test_century_rules(self):
        """Test years divisible by 100 are not leap unless divisible by 400."""
        assert leap_years(datetime(1900, 3, 1)) - leap_years(datetime(1900, 1, 1)) == 0
        assert leap_years(datetime(2000, 3, 1)) - leap_years(datetime(2000, 1, 1)) == 1

    def test_year_one_january(self):
        """Test year 1 January has no leap days."""
        assert leap_years(EPOCH_ZERO) == 0


class TestDayCount:
    """Tests for day_count."""

    def test_epoch_zero(self):
        """Test day count of the zero timestamp."""
        assert day_count(EPOCH_ZERO) == 366

    def test_new_year_2024(self):
        """Test day count of 2024-01-01."""
        assert day_count(datetime(2024, 1, 1)) == 739251

    def test_ignores_time_of_day(self):
        """Test that hours, minutes and seconds do not affect the count."""
        assert day_count(datetime(2024, 5, 5, 0, 0, 0)) == day_count(datetime(2024, 5, 5, 23, 59, 59))


class TestDaysBetween:
    """Tests for days_between."""

    def test_epoch_zero_regression(self):
        """Test the never-scanned timestamp against a fixed reference date."""
        result = days_between(EPOCH_ZERO, datetime(2024, 1, 1))
        assert result == 738885
        assert result > 700000

    def test_epoch_zero_to_aware_now(self):
        """Test mixing the naive zero timestamp with an aware 'now'."""
        now = datetime(2024, 1, 1, 8, 30, tzinfo=timezone.utc)
        assert days_between(EPOCH_ZERO, now) == 738885

    def test_same_day(self):
        """Test timestamps on the same calendar day are 0 days apart."""
        a = datetime(2024, 6, 15, 0, 0, 1)
        b = datetime(2024, 6, 15, 23, 59, 59)
        assert days_between(a, b) == 0

    def test_midnight_crossing_counts_one_day(self):
        """Test late evening to early morning counts as one calendar day."""
        a = datetime(2024, 6, 15, 23, 59)
        b = datetime(2024, 6, 16, 0, 1)
        assert days_between(a, b) == 1

    def test_leap_february(self):
        """Test February 28 to March 1 in a leap year."""
        assert days_between(datetime(2024, 2, 28), datetime(2024, 3, 1)) == 2

    def test_non_leap_february(self):
        """Test February 28 to March 1 in a common year."""
        assert days_between(datetime(2023, 2, 28), datetime(2023, 3, 1)) == 1

    def test_year_boundary(self):
        """Test December 31 to January 1."""
        assert days_between(datetime(2023, 12, 31), datetime(2024, 1, 1)) == 1

    def test_full_years(self):
        """Test whole-year spans including a leap year."""
        assert days_between(datetime(2023, 1, 1), datetime(2024, 1, 1)) == 365
        assert days_between(datetime(2024, 1, 1), datetime(2025, 1, 1)) == 366

    def test_reversed_order_is_negative(self):
        """Test a later first argument yields a negative difference."""
        assert days_between(datetime(2024, 1, 11), datetime(2024, 1, 1)) == -10

    @pytest.mark.parametrize(
        "start",
        [
            datetime(2019, 12, 25),
            datetime(2020, 2, 27),
            datetime(2023, 7, 31),
            datetime(2024, 2, 29),
            datetime(1999, 12, 31),
        ],
    )
    def test_matches_elapsed_days_for_recent_dates(self, start):
        """Test agreement with real elapsed days over a few months."""
        for offset in (0, 1, 29, 60, 400):
            end = start + timedelta(days=offset)
            assert days_between(start, end) == offset

    def test_non_negative_when_ordered(self):
        """Test a <= b always gives a non-negative difference."""
        start = datetime(2023, 12, 1)
        for offset in range(0, 120, 7):
            end = start + timedelta(days=offset, hours=5)
            assert days_between(start, end) >= 0


class TestGetDifference:
    """Tests for get_difference."""

    def test_no_borrow(self):
        """Test a difference where every clock field increases."""
        a = datetime(2024, 1, 1, 10, 20, 30)
        b = datetime(2024, 1, 3, 12, 25, 40)
        assert get_difference(a, b) == (2, 2, 5, 10)

    def test_seconds_borrow_from_minutes(self):
        """Test negative seconds borrow a minute."""
        a = datetime(2024, 1, 1, 10, 20, 50)
        b = datetime(2024, 1, 1, 10, 22, 10)
        assert get_difference(a, b) == (0, 0, 1, 20)

    def test_minutes_borrow_from_hours(self):
        """Test negative minutes borrow an hour."""
        a = datetime(2024, 1, 1, 10, 50, 0)
        b = datetime(2024, 1, 1, 12, 10, 0)
        assert get_difference(a, b) == (0, 1, 20, 0)

    def test_hours_borrow_from_days(self):
        """Test negative hours borrow a day."""
        a = datetime(2024, 1, 1, 22, 0, 0)
        b = datetime(2024, 1, 3, 6, 0, 0)
        assert get_difference(a, b) == (1, 8, 0, 0)

    def test_chained_borrow(self):
        """Test a borrow that cascades from seconds to days."""
        a = datetime(2024, 1, 1, 23, 59, 59)
        b = datetime(2024, 1, 2, 0, 0, 0)
        assert get_difference(a, b) == (0, 0, 0, 1)

    def test_days_between_ignores_borrow(self):
        """Test days_between counts calendar days even when the clock borrows."""
        a = datetime(2024, 1, 1, 23, 0, 0)
        b = datetime(2024, 1, 2, 1, 0, 0)
        assert days_between(a, b) == 1
        assert get_difference(a, b)[0] == 0
