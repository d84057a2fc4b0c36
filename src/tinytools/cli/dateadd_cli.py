"""Date calculator: add or subtract time units."""

import typer

from tinytools.cli import CONTEXT_SETTINGS, configure_logging, print_error
from tinytools.core.config import settings
from tinytools.timecalc.add import calculate

app = typer.Typer(help="Add or subtract time from a date", add_completion=False)


@app.command(context_settings=CONTEXT_SETTINGS)
def dateadd(
    date: str = typer.Argument(..., help="YYYY-MM-DD [HH:MM:SS], now, today, yesterday or tomorrow"),
    op: str = typer.Argument(..., help="+ or -"),
    number: str = typer.Argument(..., help="How many units"),
    unit: str = typer.Argument(..., help="y, m, w, d, h, min, s (or their long names)"),
    fmt: str = typer.Option(settings.date_format, "--format", "-f", help="strftime output format"),
    utc: bool = typer.Option(settings.use_utc, "--utc/--local", "-u", help="Use UTC instead of local time"),
):
    """
    Shift a date by a number of units.

    Examples:

        dateadd now + 1 day

        dateadd 2024-01-01 + 3 months

        dateadd -f "%Y-%m-%d %H:%M:%S" now + 1 hour
    """
    try:
        result = calculate(date, op, number, unit, utc=utc)
        typer.echo(result.strftime(fmt))
    except ValueError as e:
        print_error(e, tool="dateadd")
        raise typer.Exit(1)


def main():
    configure_logging()
    app()


if __name__ == "__main__":
    main()
