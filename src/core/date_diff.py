"""
Calendar day arithmetic used to measure scan staleness.

Day counts are accumulated with a fixed 365-day year, a fixed 28-day
February and a separate leap-year correction. This is not exact Gregorian
elapsed-day arithmetic; the staleness threshold depends on its results,
including the very large count produced for the year-1 "never scanned"
timestamp, so it must stay as is.

Only the calendar fields of each timestamp are read. No timezone
conversion is performed.
"""

from datetime import datetime

MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

EPOCH_ZERO = datetime(1, 1, 1)
"""Zero timestamp the registry reports for tags that were never scanned."""


def leap_years(date: datetime) -> int:
    """
    Count leap days up to the given date.

    January and February do not yet include the current year's leap day,
    so the year is decremented first for those months.
    """
    year = date.year
    if date.month <= 2:
        year -= 1
    return year // 4 + year // 400 - year // 100


def day_count(date: datetime) -> int:
    """
    Number of days since the start of the fixed-point calendar.

    Args:
        date: Timestamp to convert

    Returns:
        Day count; only differences between two counts are meaningful

    Examples:
        >>> day_count(datetime(1, 1, 1))
        366
        >>> day_count(datetime(2024, 1, 1))
        739251
    """
    total = date.year * 365 + date.day
    total += sum(MONTH_DAYS[: date.month - 1])
    total += leap_years(date)
    return total


def days_between(a: datetime, b: datetime) -> int:
    """
    Whole calendar days from a to b.

    The time of day is ignored: two timestamps on the same calendar day are
    0 days apart, and 23:59 to 00:01 on the next day is 1 day.

    Args:
        a: Earlier timestamp (e.g. last scan completion)
        b: Later timestamp (e.g. now)

    Returns:
        Day difference, negative if b falls on an earlier day than a

    Examples:
        >>> days_between(datetime(2024, 2, 28), datetime(2024, 3, 1))
        2
        >>> days_between(EPOCH_ZERO, datetime(2024, 1, 1))
        738885
    """
    return day_count(b) - day_count(a)


def get_difference(a: datetime, b: datetime) -> tuple[int, int, int, int]:
    """
    Difference from a to b as days, hours, minutes and seconds.

    The clock difference is computed field by field and borrows like manual
    subtraction: negative seconds borrow a minute, negative minutes borrow
    an hour, and negative hours borrow a day.

    Args:
        a: Earlier timestamp
        b: Later timestamp

    Returns:
        Tuple of (days, hours, minutes, seconds)
    """
    days = days_between(a, b)

    hours = b.hour - a.hour
    minutes = b.minute - a.minute
    seconds = b.second - a.second

    if seconds < 0:
        seconds += 60
        minutes -= 1

    if minutes < 0:
        minutes += 60
        hours -= 1

    if hours < 0:
        hours += 24
        days -= 1

    return days, hours, minutes, seconds


__all__ = [
    "EPOCH_ZERO",
    "MONTH_DAYS",
    "day_count",
    "days_between",
    "get_difference",
    "leap_years",
]
