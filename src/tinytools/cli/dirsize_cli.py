"""Directory size calculator."""

from pathlib import Path
from typing import List, Optional

import typer

from tinytools.cli import CONTEXT_SETTINGS, configure_logging, err_console
from tinytools.core.config import settings
from tinytools.fstree.dirsize import report_lines, scan_all

app = typer.Typer(help="Directory size calculator", add_completion=False)


@app.command(context_settings=CONTEXT_SETTINGS)
def dirsize(
    paths: Optional[List[Path]] = typer.Argument(None, help="Directories to size (default: current directory)"),
    show_all: bool = typer.Option(False, "--all", "-a", help="Include hidden files and directories"),
    summarize: bool = typer.Option(False, "--summarize", "-s", help="Display only the total for each directory"),
    depth: Optional[int] = typer.Option(None, "--depth", "-d", min=0, help="Max depth of recursion"),
    threshold: int = typer.Option(0, "--threshold", "-t", min=0, help="Show only items of at least N KB"),
    human: bool = typer.Option(False, "--human", "-u", help="Human readable sizes"),
    no_sort: bool = typer.Option(False, "--no-sort", help="Don't sort output by size"),
    threads: int = typer.Option(settings.dirsize_threads, "--threads", min=1, help="Directories sized in parallel"),
):
    """
    Show file sizes and per-directory totals.

    Examples:

        dirsize -u /home

        dirsize -d 2 /etc

        dirsize -t 1024
    """
    roots = []
    for path in paths or [Path.cwd()]:
        if path.exists():
            roots.append(path.absolute())
        else:
            err_console.print(f"Warning: path does not exist: {path}", markup=False)

    reports = scan_all(roots, show_all=show_all, max_depth=depth, threads=threads)
    for line in report_lines(
        reports,
        summarize=summarize,
        threshold=threshold * 1024,
        human=human,
        sort_output=not no_sort,
    ):
        typer.echo(line)


def main():
    configure_logging()
    app()


if __name__ == "__main__":
    main()
