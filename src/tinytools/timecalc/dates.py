"""
Wall-clock date/time values and the parser shared by datediff and dateadd.
"""

import re
import time
import logging
from dataclasses import dataclass
from datetime import MAXYEAR, MINYEAR, datetime
from typing import Optional

from tinytools.timecalc.epoch import (
    SECONDS_PER_DAY,
    date_to_seconds,
    days_in_month,
    seconds_to_date,
)

logger = logging.getLogger(__name__)

FORMAT_DIRECTIVE = re.compile(r"%(.)")


class DateParseError(ValueError):
    """Raised when a date/time string cannot be understood."""


def _current_seconds(utc: bool) -> int:
    """Current wall-clock time as epoch-style seconds, in UTC or local time."""
    now = int(time.time())
    if utc:
        return now
    return now + time.localtime(now).tm_gmtoff


@dataclass(frozen=True)
class DateTime:
    """A calendar date and time of day with whole-second precision."""

    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0

    @classmethod
    def from_seconds(cls, secs: int) -> "DateTime":
        return cls(*seconds_to_date(secs))

    @classmethod
    def now(cls, utc: bool = True) -> "DateTime":
        return cls.from_seconds(_current_seconds(utc))

    @classmethod
    def today(cls, utc: bool = True) -> "DateTime":
        now = cls.now(utc)
        return cls(now.year, now.month, now.day)

    @classmethod
    def yesterday(cls, utc: bool = True) -> "DateTime":
        return cls.from_seconds(cls.today(utc).to_seconds() - SECONDS_PER_DAY)

    @classmethod
    def tomorrow(cls, utc: bool = True) -> "DateTime":
        return cls.from_seconds(cls.today(utc).to_seconds() + SECONDS_PER_DAY)

    def to_seconds(self) -> int:
        return date_to_seconds(
            self.year, self.month, self.day, self.hour, self.minute, self.second
        )

    def strftime(self, fmt: str) -> str:
        # datetime only renders the fields here, no arithmetic
        if MINYEAR <= self.year <= MAXYEAR:
            return datetime(
                self.year, self.month, self.day, self.hour, self.minute, self.second
            ).strftime(fmt)
        return self._render_fields(fmt)

    def _render_fields(self, fmt: str) -> str:
        """Expand the numeric directives for years datetime cannot hold."""
        fields = {
            "Y": f"{self.year:04d}",
            "m": f"{self.month:02d}",
            "d": f"{self.day:02d}",
            "H": f"{self.hour:02d}",
            "M": f"{self.minute:02d}",
            "S": f"{self.second:02d}",
            "%": "%",
        }

        def expand(match):
            directive = match.group(1)
            if directive not in fields:
                raise DateParseError(
                    f"Format directive %{directive} is not supported for year {self.year}"
                )
            return fields[directive]

        return FORMAT_DIRECTIVE.sub(expand, fmt)

    def __str__(self) -> str:
        return (
            f"{self.year:04d}-{self.month:02d}-{self.day:02d} "
            f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}"
        )


KEYWORDS = {
    "now": DateTime.now,
    "today": DateTime.today,
    "yesterday": DateTime.yesterday,
    "tomorrow": DateTime.tomorrow,
}


def _parse_field(value: str, name: str) -> int:
    if not value.isdecimal():
        raise DateParseError(f"Invalid {name}")
    return int(value)


def _parse_time(text: str):
    time_parts = text.split(":")
    if len(time_parts) != 3:
        raise DateParseError("Invalid time format. Expected HH:MM:SS")

    hour = _parse_field(time_parts[0], "hour")
    minute = _parse_field(time_parts[1], "minute")
    second = _parse_field(time_parts[2], "second")

    if hour > 23:
        raise DateParseError("Hour must be between 0 and 23")
    if minute > 59:
        raise DateParseError("Minute must be between 0 and 59")
    if second > 59:
        raise DateParseError("Second must be between 0 and 59")
    return hour, minute, second


def _parse_date(text: str):
    date_parts = text.split("-")
    if len(date_parts) != 3:
        raise DateParseError("Invalid date format. Expected YYYY-MM-DD")

    year = _parse_field(date_parts[0], "year")
    month = _parse_field(date_parts[1], "month")
    day = _parse_field(date_parts[2], "day")

    if month < 1 or month > 12:
        raise DateParseError("Month must be between 1 and 12")
    last_day = days_in_month(year, month)
    if day < 1 or day > last_day:
        raise DateParseError(f"Day must be between 1 and {last_day}")
    return year, month, day


def parse_datetime(text: str, utc: bool = True, today: Optional[DateTime] = None) -> DateTime:
    """
    Parse a date/time string.

    Accepted forms:
        now, today, yesterday, tomorrow (case-insensitive)
        YYYY-MM-DD
        YYYY-MM-DD HH:MM:SS  (or with a "T" separator)
        HH:MM:SS             (today's date is assumed)

    Args:
        text: The string to parse
        utc: Resolve keywords and bare times against UTC instead of local time
        today: Date to use for a bare HH:MM:SS (defaults to the current day)

    Raises:
        DateParseError: If the string is not in one of the accepted forms
    """
    text = text.strip()
    keyword = KEYWORDS.get(text.lower())
    if keyword is not None:
        return keyword(utc)

    parts = text.replace("T", " ", 1).split()
    if not parts or len(parts) > 2:
        raise DateParseError("Invalid date format. Expected YYYY-MM-DD")

    if len(parts) == 1 and ":" in parts[0]:
        base = today or DateTime.today(utc)
        hour, minute, second = _parse_time(parts[0])
        return DateTime(base.year, base.month, base.day, hour, minute, second)

    year, month, day = _parse_date(parts[0])
    hour, minute, second = _parse_time(parts[1]) if len(parts) > 1 else (0, 0, 0)

    parsed = DateTime(year, month, day, hour, minute, second)
    logger.debug("Parsed %r as %s", text, parsed)
    return parsed
