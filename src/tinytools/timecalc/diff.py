"""
Difference between two DateTime values, and its textual forms.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from tinytools.timecalc.dates import DateTime
from tinytools.timecalc.epoch import SECONDS_PER_DAY


class TimeUnit(str, Enum):
    """Output units. Years and months are fixed 365 and 30 day spans."""
    YEARS = "years"
    MONTHS = "months"
    DAYS = "days"
    HOURS = "hours"
    MINUTES = "minutes"
    SECONDS = "seconds"


UNIT_SECONDS = {
    TimeUnit.YEARS: 365 * SECONDS_PER_DAY,
    TimeUnit.MONTHS: 30 * SECONDS_PER_DAY,
    TimeUnit.DAYS: SECONDS_PER_DAY,
    TimeUnit.HOURS: 3600,
    TimeUnit.MINUTES: 60,
    TimeUnit.SECONDS: 1,
}


def _tdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // b
    return q if a >= 0 else -q


def _tmod(a: int, b: int) -> int:
    return a - b * _tdiv(a, b)


@dataclass
class TimeDiff:
    years: int
    months: int
    days: int
    hours: int
    minutes: int
    seconds: int
    total_seconds: int

    @classmethod
    def from_seconds(cls, total_seconds: int) -> "TimeDiff":
        total_days = _tdiv(total_seconds, SECONDS_PER_DAY)
        remaining_days = _tmod(total_days, 365)
        remaining_seconds = _tmod(total_seconds, SECONDS_PER_DAY)
        return cls(
            years=_tdiv(total_days, 365),
            months=_tdiv(remaining_days, 30),
            days=_tmod(remaining_days, 30),
            hours=_tdiv(remaining_seconds, 3600),
            minutes=_tdiv(_tmod(remaining_seconds, 3600), 60),
            seconds=_tmod(remaining_seconds, 60),
            total_seconds=total_seconds,
        )


def calculate_diff(date1: DateTime, date2: DateTime) -> TimeDiff:
    """Return date2 - date1 broken down into calendar-ish parts."""
    return TimeDiff.from_seconds(date2.to_seconds() - date1.to_seconds())


def _detailed(diff: TimeDiff) -> str:
    if diff.total_seconds < 0:
        return "-" + _detailed(TimeDiff.from_seconds(-diff.total_seconds))

    parts = []
    for value, label in (
        (diff.years, "years"),
        (diff.months, "months"),
        (diff.days, "days"),
        (diff.hours, "hours"),
        (diff.minutes, "minutes"),
        (diff.seconds, "seconds"),
    ):
        if value > 0:
            parts.append(f"{value} {label}")

    if not parts:
        return "0 seconds"
    return ", ".join(parts)


def format_diff(
    diff: TimeDiff,
    unit: Optional[TimeUnit] = None,
    detailed: bool = False,
    simple: bool = False,
) -> str:
    """
    Render a TimeDiff.

    simple   -> bare integer count of `unit` (seconds when no unit)
    detailed -> "1 years, 2 months, 3 days, ..." skipping zero parts
    default  -> value in `unit` with two decimals (days when no unit)
    """
    if simple:
        per_unit = UNIT_SECONDS[unit] if unit else 1
        return str(_tdiv(diff.total_seconds, per_unit))

    if detailed:
        return _detailed(diff)

    unit = unit or TimeUnit.DAYS
    if unit == TimeUnit.SECONDS:
        return f"{diff.total_seconds} seconds"
    return f"{diff.total_seconds / UNIT_SECONDS[unit]:.2f} {unit.value}"
