"""CLI entry point — registers the stamp command."""

import typer

app = typer.Typer(
    name="depstamp",
    help="depstamp - latest commit for a document and its dependencies",
    add_completion=False,
    rich_markup_mode="rich",
)


# Import the command to register it
from .stamp import stamp_command as _stamp_command  # noqa: F401, E402


def main() -> None:
    app()


__all__ = ["app", "main"]
