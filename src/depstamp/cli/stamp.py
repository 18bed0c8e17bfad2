"""Stamp command — print the provenance marker for one file."""

from pathlib import Path
from typing import Optional

import typer

from ..api import stamp
from ..exceptions import DepstampError
from ..formatters import get_formatter
from ..logging_config import get_logger, setup_logging
from ..models import OutputMode
from . import app
from ._common import console, resolve_config

logger = get_logger(__name__)


def _version_callback(value: bool) -> None:
    if value:
        from .. import __version__

        console.print(f"[bold cyan]depstamp[/bold cyan] version [green]{__version__}[/green]")
        raise typer.Exit(0)


@app.command()
def stamp_command(
    file: Path = typer.Argument(
        ...,
        help="Monitored file (its directory holds the optional .deps.toml)",
        show_default=False,
    ),
    date: bool = typer.Option(
        False,
        "--date",
        help="Print the commit date (YYYY-MM-DD) instead of the hash",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug output (git commands, resolved pathspecs)",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Only report errors on stderr",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "-c",
        "--config",
        help="Tool settings file (TOML)",
        dir_okay=False,
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
):
    """
    Print the latest commit affecting FILE and its declared dependencies.

    Dependencies are read from [bold].deps.toml[/bold] in the directory of
    FILE. Without an entry for FILE the whole directory is tracked. A
    trailing [bold]DIRTY[/bold] means tracked files have uncommitted changes.

    [bold cyan]Examples:[/bold cyan]

      depstamp manual.typ

      depstamp manual.typ --date
    """
    setup_logging(verbose=verbose, quiet=quiet)

    try:
        settings = resolve_config(config=config, verbose=verbose, quiet=quiet)
        if settings.verbosity != "normal" and not (verbose or quiet):
            setup_logging(verbose=settings.verbose, quiet=settings.quiet)

        mode = OutputMode.DATE if date else OutputMode.HASH
        result = stamp(file, config=settings)
        line = get_formatter(mode, dirty_marker=settings.dirty_marker).format(result)

    except DepstampError as e:
        logger.error("Error [%s]: %s", e.kind, e)
        raise typer.Exit(1)

    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        raise typer.Exit(130)

    except Exception:
        logger.exception("Unexpected error")
        raise typer.Exit(1)

    typer.echo(line)
