"""
Date arithmetic for the datediff and dateadd tools.

All arithmetic goes through Unix epoch seconds computed by a hand-rolled
proleptic Gregorian converter (see epoch.py).
"""

from tinytools.timecalc.epoch import date_to_seconds, seconds_to_date, is_leap_year, days_in_month
from tinytools.timecalc.dates import DateTime, DateParseError, parse_datetime

__all__ = [
    "date_to_seconds",
    "seconds_to_date",
    "is_leap_year",
    "days_in_month",
    "DateTime",
    "DateParseError",
    "parse_datetime",
]
