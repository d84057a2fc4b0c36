"""
Top-level CLI that aggregates every tool as a sub-command.
"""

import typer

from tinytools.cli import CONTEXT_SETTINGS, configure_logging
from tinytools.cli.colors_cli import colors
from tinytools.cli.datediff_cli import datediff
from tinytools.cli.dateadd_cli import dateadd
from tinytools.cli.dirsize_cli import dirsize
from tinytools.cli.estimate_cli import ESTIMATE_CONTEXT, estimate
from tinytools.cli.extract_cli import extract
from tinytools.cli.ftree_cli import FTREE_CONTEXT, ftree
from tinytools.cli.killport_cli import killport

main_app = typer.Typer(help="tinytools CLI", context_settings=CONTEXT_SETTINGS, add_completion=False)

# Each tool is also installed as its own console script
main_app.command("colors", context_settings=CONTEXT_SETTINGS)(colors)
main_app.command("datediff", context_settings=CONTEXT_SETTINGS)(datediff)
main_app.command("dateadd", context_settings=CONTEXT_SETTINGS)(dateadd)
main_app.command("estimate", context_settings=ESTIMATE_CONTEXT)(estimate)
main_app.command("extract", context_settings=CONTEXT_SETTINGS)(extract)
main_app.command("ftree", context_settings=FTREE_CONTEXT)(ftree)
main_app.command("dirsize", context_settings=CONTEXT_SETTINGS)(dirsize)
main_app.command("killport", context_settings=CONTEXT_SETTINGS)(killport)


def main():
    configure_logging()
    main_app()


if __name__ == "__main__":
    main()
