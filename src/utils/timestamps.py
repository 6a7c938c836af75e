"""
Timestamp parsing for registry API responses.

The registry returns RFC 3339 timestamps, sometimes with nanosecond
fractions, and reports "never scanned" as the zero timestamp
0001-01-01T00:00:00Z.
"""

import re
from datetime import datetime, timezone
from typing import Optional

_FRACTION_PATTERN = re.compile(r"\.(\d+)")


def is_zero_timestamp(value: datetime) -> bool:
    """Check whether a timestamp is the year-1 zero value."""
    return (
        value.year == 1
        and value.month == 1
        and value.day == 1
        and value.hour == 0
        and value.minute == 0
        and value.second == 0
        and value.microsecond == 0
    )


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    """
    Parse a registry timestamp.

    Args:
        value: RFC 3339 string, e.g. "2024-03-01T12:30:00.123456789Z"

    Returns:
        Timezone-aware datetime, or None for empty and zero timestamps

    Raises:
        ValueError: If the value is not a valid timestamp

    Examples:
        >>> parse_timestamp("2024-03-01T12:30:00Z")
        datetime.datetime(2024, 3, 1, 12, 30, tzinfo=datetime.timezone.utc)
        >>> parse_timestamp("0001-01-01T00:00:00Z") is None
        True
    """
    if not value:
        return None

    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"

    # fromisoformat accepts at most microsecond precision
    text = _FRACTION_PATTERN.sub(lambda m: "." + m.group(1)[:6].ljust(6, "0"), text, count=1)

    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)

    if is_zero_timestamp(parsed):
        return None

    return parsed


__all__ = ["is_zero_timestamp", "parse_timestamp"]
