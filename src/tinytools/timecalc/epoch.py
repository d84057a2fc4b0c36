"""
Conversion between calendar fields and Unix epoch seconds.

The calendar is the proleptic Gregorian one, so dates before 1582 (and before
1970, giving negative seconds) convert consistently. Only whole seconds are
handled and no time zone is applied: callers pass wall-clock fields.
"""

from typing import Tuple

SECONDS_PER_DAY = 86400
EPOCH_YEAR = 1970

# Days before the first of each month in a common year
DAYS_BEFORE_MONTH = [0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334]
MONTH_DAYS = [31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]


def is_leap_year(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_month(year: int, month: int) -> int:
    if month == 2 and is_leap_year(year):
        return 29
    return MONTH_DAYS[month - 1]


def _leap_years_through(year: int) -> int:
    # Floor division keeps differences exact for years <= 0 as well
    return year // 4 - year // 100 + year // 400


def _days_before_year(year: int) -> int:
    """Days from 1970-01-01 to January 1st of `year` (negative before 1970)."""
    return (
        365 * (year - EPOCH_YEAR)
        + _leap_years_through(year - 1)
        - _leap_years_through(EPOCH_YEAR - 1)
    )


def date_to_seconds(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
) -> int:
    """
    Convert calendar fields to seconds since 1970-01-01T00:00:00.

    Fields outside their usual range are normalized the way mktime does:
    month 13 is January of the next year, day 32 of January is February 1st,
    hour 24 is midnight of the next day, and so on.
    """
    # Fold out-of-range months into the year first; the day table needs 1..12
    year += (month - 1) // 12
    month = (month - 1) % 12 + 1

    days = _days_before_year(year) + DAYS_BEFORE_MONTH[month - 1] + day - 1
    if month > 2 and is_leap_year(year):
        days += 1

    return days * SECONDS_PER_DAY + hour * 3600 + minute * 60 + second


def seconds_to_date(secs: int) -> Tuple[int, int, int, int, int, int]:
    """
    Convert epoch seconds back to (year, month, day, hour, minute, second).
    """
    days, secs_of_day = divmod(secs, SECONDS_PER_DAY)
    hour, remainder = divmod(secs_of_day, 3600)
    minute, second = divmod(remainder, 60)

    # 365-day years overestimate the year count for positive offsets and
    # underestimate it for negative ones; the loops correct either way.
    year = EPOCH_YEAR + days // 365
    while _days_before_year(year) > days:
        year -= 1
    while _days_before_year(year + 1) <= days:
        year += 1

    day_of_year = days - _days_before_year(year)
    month = 1
    while day_of_year >= days_in_month(year, month):
        day_of_year -= days_in_month(year, month)
        month += 1

    return year, month, day_of_year + 1, hour, minute, second
