"""Universal archive extractor."""

from pathlib import Path
from typing import Optional

import typer

from tinytools.archive import ArchiveExtractor, ExtractError
from tinytools.cli import CONTEXT_SETTINGS, configure_logging, print_error

app = typer.Typer(help="Universal archive extractor", add_completion=False)


@app.command(context_settings=CONTEXT_SETTINGS)
def extract(
    archive: Path = typer.Argument(..., help="Archive to extract"),
    destination: Optional[Path] = typer.Argument(None, help="Directory to extract into"),
    list_only: bool = typer.Option(False, "--list", "-l", help="List contents without extracting"),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing files"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress output except errors"),
    keep: bool = typer.Option(False, "--keep", "-k", help="Keep archive after extraction"),
):
    """
    Extract or list an archive with the matching system tool.

    Supported formats: .zip, .tar, .tar.gz, .tgz, .tar.bz2, .tbz2,
    .tar.xz, .txz, .tar.zst, .7z, .rar
    """
    try:
        extractor = ArchiveExtractor(
            archive,
            destination=destination,
            list_only=list_only,
            force=force,
            quiet=quiet,
            keep=keep,
        )
        output, _ = extractor.run()
    except (FileNotFoundError, ExtractError) as e:
        print_error(e)
        raise typer.Exit(1)

    if not quiet:
        typer.echo(output)
        if not list_only:
            typer.echo("Extraction completed successfully.")


def main():
    configure_logging()
    app()


if __name__ == "__main__":
    main()
