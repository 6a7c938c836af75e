"""Tests for registry timestamp parsing."""

import pytest
from datetime import datetime, timedelta, timezone

from utils.timestamps import is_zero_timestamp, parse_timestamp


class TestParseTimestamp:
    """Tests for parse_timestamp."""

    def test_utc_z_suffix(self):
        """Test a UTC timestamp with Z suffix."""
        assert parse_timestamp("2024-03-01T12:30:00Z") == datetime(
            2024, 3, 1, 12, 30, tzinfo=timezone.utc
        )

    def test_nanosecond_fraction(self):
        """Test fractions longer than microseconds are truncated."""
        parsed = parse_timestamp("2024-03-01T12:30:00.123456789Z")
        assert parsed.microsecond == 123456

    def test_short_fraction(self):
        """Test fractions shorter than microseconds are padded."""
        assert parse_timestamp("2024-03-01T12:30:00.5Z").microsecond == 500000

    def test_offset_is_kept(self):
        """Test explicit offsets are preserved, not converted."""
        parsed = parse_timestamp("2024-03-01T01:00:00+02:00")
        assert parsed.hour == 1
        assert parsed.utcoffset() == timedelta(hours=2)

    def test_naive_is_assumed_utc(self):
        """Test timestamps without offset are treated as UTC."""
        assert parse_timestamp("2024-03-01T12:30:00").tzinfo == timezone.utc

    @pytest.mark.parametrize("value", ["0001-01-01T00:00:00Z", "0001-01-01T00:00:00.000Z"])
    def test_zero_timestamp_is_none(self, value):
        """Test the registry's never-scanned value parses to None."""
        assert parse_timestamp(value) is None

    @pytest.mark.parametrize("value", [None, ""])
    def test_empty_is_none(self, value):
        """Test missing values parse to None."""
        assert parse_timestamp(value) is None

    def test_invalid_raises(self):
        """Test garbage raises ValueError."""
        with pytest.raises(ValueError):
            parse_timestamp("yesterday")


class TestIsZeroTimestamp:
    """Tests for is_zero_timestamp."""

    def test_zero(self):
        assert is_zero_timestamp(datetime(1, 1, 1))

    def test_not_zero(self):
        assert not is_zero_timestamp(datetime(1, 1, 1, 0, 0, 1))
        assert not is_zero_timestamp(datetime(2024, 1, 1))
