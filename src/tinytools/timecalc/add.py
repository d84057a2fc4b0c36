"""
Adding or subtracting a number of calendar units to a DateTime.
"""

import logging

from tinytools.timecalc.dates import DateTime, parse_datetime

logger = logging.getLogger(__name__)

UNIT_ALIASES = {
    "y": "years", "year": "years", "years": "years",
    "m": "months", "month": "months", "months": "months",
    "w": "weeks", "week": "weeks", "weeks": "weeks",
    "d": "days", "day": "days", "days": "days",
    "h": "hours", "hour": "hours", "hours": "hours",
    "min": "minutes", "minute": "minutes", "minutes": "minutes",
    "s": "seconds", "second": "seconds", "seconds": "seconds",
}

FIXED_SECONDS = {
    "weeks": 7 * 86400,
    "days": 86400,
    "hours": 3600,
    "minutes": 60,
    "seconds": 1,
}


def normalize_unit(unit: str) -> str:
    try:
        return UNIT_ALIASES[unit.lower()]
    except KeyError:
        raise ValueError(f"Invalid unit: {unit}")


def add_to_date(date: DateTime, amount: int, unit: str) -> DateTime:
    """
    Shift `date` by `amount` units.

    Years and months keep the day of month; a day past the end of the target
    month rolls into the following month (2023-01-31 + 1 month = 2023-03-03).
    """
    unit = normalize_unit(unit)

    if unit in FIXED_SECONDS:
        return DateTime.from_seconds(date.to_seconds() + amount * FIXED_SECONDS[unit])

    year, month = date.year, date.month
    if unit == "years":
        year += amount
    else:
        month += amount

    # date_to_seconds folds month and day overflow forward
    shifted = DateTime(year, month, date.day, date.hour, date.minute, date.second)
    return DateTime.from_seconds(shifted.to_seconds())


def calculate(date_str: str, op: str, number: str, unit: str, utc: bool = True) -> DateTime:
    """
    Evaluate "<date> <+|-> <number> <unit>".

    Raises:
        ValueError: On a bad operator, number, unit or date
    """
    date = parse_datetime(date_str, utc=utc)

    try:
        amount = int(number)
    except ValueError:
        raise ValueError(f"Invalid number: {number}")

    if op == "-":
        amount = -amount
    elif op != "+":
        raise ValueError(f"Invalid operator: {op}")

    result = add_to_date(date, amount, unit)
    logger.debug("%s %s %s %s -> %s", date, op, number, unit, result)
    return result
