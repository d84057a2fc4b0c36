"""Kill processes using specified ports."""

from typing import List

import typer

from tinytools.cli import CONTEXT_SETTINGS, configure_logging, print_error
from tinytools.ports.killport import find_all, format_process, is_root, kill_process, needs_root

app = typer.Typer(help="Kill processes using specified ports", add_completion=False)


@app.command(context_settings=CONTEXT_SETTINGS)
def killport(
    ports: List[int] = typer.Argument(..., min=0, max=65535, help="Port numbers"),
    force: bool = typer.Option(False, "--force", "-f", help="Force kill (SIGKILL instead of SIGTERM)"),
    list_only: bool = typer.Option(False, "--list", "-l", help="Only list processes without killing"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show detailed information"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress all output except errors"),
):
    """
    Terminate the processes listening on the given ports.

    Root privileges are required for ports below 1024.

    Examples:

        killport 8080

        killport -f 3000 8080

        killport -l 80 443
    """
    if needs_root(ports) and not list_only and not is_root():
        print_error("Root privileges required for ports below 1024")
        raise typer.Exit(1)

    try:
        port_processes = find_all(ports)
    except RuntimeError as e:
        print_error(e)
        raise typer.Exit(1)

    if not port_processes:
        if not quiet:
            typer.echo("No processes found for specified ports")
        raise typer.Exit(0)

    failures = 0
    for port, processes in port_processes.items():
        for proc in processes:
            if not quiet:
                for line in format_process(proc, port, verbose):
                    typer.echo(line)

            if list_only:
                continue

            if kill_process(proc.pid, force):
                if not quiet:
                    typer.echo(f"Successfully terminated process {proc.name} (PID: {proc.pid})")
            else:
                failures += 1
                typer.echo(f"Failed to terminate process {proc.name} (PID: {proc.pid})", err=True)

    if failures:
        raise typer.Exit(1)


def main():
    configure_logging()
    app()


if __name__ == "__main__":
    main()
