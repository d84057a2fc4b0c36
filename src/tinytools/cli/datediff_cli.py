"""Date and time difference calculator."""

import logging
from typing import Optional

import typer

from tinytools.cli import CONTEXT_SETTINGS, configure_logging, print_error
from tinytools.core.config import settings
from tinytools.timecalc.dates import DateParseError, parse_datetime
from tinytools.timecalc.diff import TimeUnit, calculate_diff, format_diff

logger = logging.getLogger(__name__)

app = typer.Typer(help="Date and time difference calculator", add_completion=False)


@app.command(context_settings=CONTEXT_SETTINGS)
def datediff(
    date1: str = typer.Argument(..., help="First date: YYYY-MM-DD [HH:MM:SS], HH:MM:SS, now, today, yesterday, tomorrow"),
    date2: Optional[str] = typer.Argument(None, help="Second date (defaults to now)"),
    now: bool = typer.Option(False, "--now", "-n", help="Use current time as second date"),
    unit: Optional[TimeUnit] = typer.Option(None, "--unit", "-u", case_sensitive=False, help="Output unit"),
    detailed: bool = typer.Option(False, "--format", "-f", help="Format output as detailed breakdown"),
    simple: bool = typer.Option(False, "--simple", "-s", help="Simple output (only numbers)"),
    utc: bool = typer.Option(settings.use_utc, "--utc/--local", help="Resolve 'now' and friends in UTC or local time"),
):
    """
    Print the time from DATE1 to DATE2.

    Examples:

        datediff 2024-01-01 2025-01-01

        datediff -u days 2024-01-01 2024-02-01

        datediff -f "2024-01-01 12:00:00" "2024-01-02 15:30:45"
    """
    if now or not date2:
        date2 = "now"

    try:
        first = parse_datetime(date1, utc=utc)
    except DateParseError as e:
        print_error(f"Error parsing first date: {e}")
        raise typer.Exit(1)

    try:
        second = parse_datetime(date2, utc=utc)
    except DateParseError as e:
        print_error(f"Error parsing second date: {e}")
        raise typer.Exit(1)

    diff = calculate_diff(first, second)
    logger.debug("%s -> %s = %d seconds", first, second, diff.total_seconds)
    typer.echo(format_diff(diff, unit=unit, detailed=detailed, simple=simple))


def main():
    configure_logging()
    app()


if __name__ == "__main__":
    main()
