"""Command execution time estimation."""

import logging
from typing import List

import typer
from rich.progress import BarColumn, MofNCompleteColumn, Progress, TextColumn
from rich.table import Table

from tinytools.cli import CONTEXT_SETTINGS, configure_logging, console, print_error
from tinytools.core.config import settings
from tinytools.timing.estimate import ExecutionStats, estimate as run_estimate, format_duration, split_command

logger = logging.getLogger(__name__)

app = typer.Typer(help="Command execution time estimation tool", add_completion=False)

# Everything after the command name belongs to the command, including
# options such as "ls -la".
ESTIMATE_CONTEXT = dict(
    CONTEXT_SETTINGS,
    allow_interspersed_args=False,
    ignore_unknown_options=True,
)


def print_results(stats: ExecutionStats, argv: List[str], simple: bool):
    if simple:
        typer.echo(
            f"min={format_duration(stats.min)} max={format_duration(stats.max)} "
            f"avg={format_duration(stats.avg)} total={format_duration(stats.total_time)} "
            f"success={stats.success_count} fail={stats.fail_count}"
        )
        return

    console.print("\n[bold]=== Execution Summary ===[/bold]", highlight=False)
    console.print(f"Command: {' '.join(argv)}", markup=False, highlight=False)
    console.print(f"Iterations: {len(stats.times)}", highlight=False)
    console.print(f"Successful: {stats.success_count}", highlight=False)
    console.print(f"Failed: {stats.fail_count}", highlight=False)

    table = Table(title="Timings")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green", justify="right")
    table.add_row("Minimum", format_duration(stats.min))
    table.add_row("Maximum", format_duration(stats.max))
    table.add_row("Average", format_duration(stats.avg))
    table.add_row("Total", format_duration(stats.total_time))
    console.print(table)


@app.command(context_settings=ESTIMATE_CONTEXT)
def estimate(
    command: List[str] = typer.Argument(..., help="Command to run, followed by its arguments"),
    iterations: int = typer.Option(settings.estimate_iterations, "--iterations", "-n", min=1, help="Number of iterations for averaging"),
    warmup: int = typer.Option(settings.estimate_warmup, "--warmup", "-w", min=0, help="Number of warmup runs"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Quiet mode - only show final results"),
    simple: bool = typer.Option(False, "--simple", "-s", help="Simple output format"),
):
    """
    Run a command several times and report how long it takes.

    Examples:

        estimate -n 5 ls -la

        estimate -w 2 -n 3 find . -type f

        estimate -s "sleep 1"
    """
    try:
        argv = split_command(command)
    except ValueError as e:
        print_error(f"Cannot parse command: {e}", tool="estimate")
        raise typer.Exit(1)

    if not argv:
        print_error("No command specified", tool="estimate")
        raise typer.Exit(1)

    total_runs = warmup + iterations

    try:
        if quiet:
            stats = run_estimate(argv, iterations=iterations, warmup=warmup)
        else:
            console.print(
                f"Running '{argv[0]}' {total_runs} times (including {warmup} warmup runs)...",
                markup=False,
                highlight=False,
            )
            with Progress(
                TextColumn("Progress:"),
                BarColumn(),
                MofNCompleteColumn(),
                console=console,
                transient=True,
            ) as progress:
                task = progress.add_task("runs", total=total_runs)
                stats = run_estimate(
                    argv,
                    iterations=iterations,
                    warmup=warmup,
                    on_progress=lambda done, total: progress.update(task, completed=done),
                )
    except OSError as e:
        print_error(f"Error executing command: {e}")
        raise typer.Exit(1)

    print_results(stats, argv, simple)


def main():
    configure_logging()
    app()


if __name__ == "__main__":
    main()
