"""File system tree visualizer."""

from pathlib import Path
from typing import Optional

import typer

from tinytools.cli import configure_logging, print_error
from tinytools.fstree.tree import TreeOptions, TreeStats, render_tree, summary_lines

app = typer.Typer(help="File system tree visualizer", add_completion=False)

# -h is taken by --hidden
FTREE_CONTEXT = {"help_option_names": ["--help"]}


@app.command(context_settings=FTREE_CONTEXT)
def ftree(
    directory: Path = typer.Argument(Path("."), help="Directory to show"),
    level: Optional[int] = typer.Option(None, "--level", "-L", min=0, help="Maximum display depth"),
    size: bool = typer.Option(False, "--size", "-s", help="Show file sizes"),
    hidden: bool = typer.Option(False, "--hidden", "-h", help="Show hidden files"),
    dirs_only: bool = typer.Option(False, "--dirs-only", "-d", help="Show directories only"),
    pattern: Optional[str] = typer.Option(None, "--pattern", "-p", help='Filter files by pattern (e.g. "*.py")'),
    ignore: Optional[str] = typer.Option(None, "--ignore", "-i", help='Ignore pattern (e.g. "build")'),
):
    """
    Print a directory tree followed by a summary.

    Examples:

        ftree -L 2 /path/to/dir

        ftree -s -h src/

        ftree -p "*.py" -i "__pycache__"
    """
    options = TreeOptions(
        max_depth=level,
        show_size=size,
        show_hidden=hidden,
        dirs_only=dirs_only,
        pattern=pattern,
        ignore=ignore,
    )
    stats = TreeStats()

    try:
        for line in render_tree(directory, options, stats):
            typer.echo(line)
    except FileNotFoundError as e:
        print_error(e)
        raise typer.Exit(1)

    for line in summary_lines(stats, show_size=size):
        typer.echo(line)


def main():
    configure_logging()
    app()


if __name__ == "__main__":
    main()
