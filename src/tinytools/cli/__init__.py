"""
Initialize the CLI package. Contains shared CLI utilities and configuration.
"""

import logging

from rich.console import Console
from rich.markup import escape

from tinytools.core.config import settings

# Raw tool output goes through typer.echo; rich is used for tables, progress
# and error reporting.
console = Console()
err_console = Console(stderr=True)

# Help flags for every tool except ftree, where -h means --hidden
CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


def configure_logging():
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(levelname)s %(name)s - %(message)s"
    )


def print_error(message, tool: str = None):
    """Report an error the same way in every tool."""
    err_console.print(f"[bold red]Error:[/bold red] {escape(str(message))}")
    if tool:
        err_console.print(f"Try '{tool} --help' for more information.")
