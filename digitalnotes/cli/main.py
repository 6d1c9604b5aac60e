#!/usr/bin/env python
"""Command line interface for Digital Notes."""

import logging
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from digitalnotes.cli.commands import auth, dashboard, notes
from digitalnotes.cli.utils import auth as auth_utils

app = typer.Typer(help="Command Line Interface for Digital Notes")
console = Console()

# Add command groups
app.add_typer(auth.app, name="auth")
app.add_typer(notes.app, name="notes")
app.add_typer(dashboard.app, name="dashboard")


@app.callback()
def callback(
    api_url: Optional[str] = typer.Option(
        None, envvar="DIGITALNOTES_API_URL", help="Base URL of the notes API"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
):
    """Take notes from the terminal."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
        force=True,
    )
    auth_utils.api_url_override = api_url


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
