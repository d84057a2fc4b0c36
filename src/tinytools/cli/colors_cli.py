"""Terminal color demo."""

import typer

from tinytools.cli import CONTEXT_SETTINGS, configure_logging
from tinytools.terminal.colors import RESET, Section, render

app = typer.Typer(help="Display terminal colors and formatting options", add_completion=False)


@app.command(context_settings=CONTEXT_SETTINGS)
def colors(
    basic: bool = typer.Option(False, "--basic", "-b", help="Show basic colors (0-7)"),
    extended: bool = typer.Option(False, "--extended", "-e", help="Show extended colors (8-15)"),
    show_256: bool = typer.Option(False, "--256", "-2", help="Show 256 color palette"),
    rgb: bool = typer.Option(False, "--rgb", "-r", help="Show RGB color examples"),
    formatting: bool = typer.Option(False, "--format", "-f", help="Show text formatting options"),
    test: bool = typer.Option(False, "--test", "-t", help="'Hello World' in different styles"),
):
    """
    Display terminal colors and formatting options.

    Without options the basic, extended and formatting sections are shown.
    """
    selected = {
        Section.BASIC: basic,
        Section.EXTENDED: extended,
        Section.PALETTE_256: show_256,
        Section.RGB: rgb,
        Section.FORMAT: formatting,
        Section.TEST: test,
    }
    # Escapes are the point here, so keep them even when piped
    for line in render(section for section, wanted in selected.items() if wanted):
        typer.echo(line, color=True)

    # Leave the terminal with attributes reset
    typer.echo(RESET, nl=False, color=True)


def main():
    configure_logging()
    app()


if __name__ == "__main__":
    main()
