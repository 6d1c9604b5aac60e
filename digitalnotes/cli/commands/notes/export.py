"""Export command for the notes service."""

import os
from typing import Optional

import typer
from rich.console import Console

from digitalnotes.cli.utils import auth
from digitalnotes.exceptions import DigitalNotesException
from digitalnotes.services.notes import exporter
from digitalnotes.services.notes.domain import ALL_NOTES, FILTER_CHOICES

app = typer.Typer(
    help="Export notes as JSON",
    context_settings={"allow_interspersed_args": True},
)
console = Console()


@app.callback(invoke_without_command=True)
def main(
    note_id: Optional[str] = typer.Argument(
        None, help="ID of a single note; omit to export the filtered list"
    ),
    folder: str = typer.Option(
        ALL_NOTES, help=f"One of: {', '.join(FILTER_CHOICES)}"
    ),
    search: str = typer.Option("", help="Case-insensitive title search"),
    output_dir: str = typer.Option(
        ".", help="Directory to write the export file to"
    ),
):
    """Export one note, or every note matching the filters."""
    if folder not in FILTER_CHOICES:
        console.print(
            f"[bold red]Error:[/bold red] Unknown folder {folder!r}; "
            f"choose one of {', '.join(FILTER_CHOICES)}"
        )
        raise typer.Exit(1)

    api = auth.get_api_instance()

    try:
        api.notes.refresh()
        if note_id:
            path = exporter.export_note(api.notes.get(note_id), output_dir)
            count = 1
        else:
            notes = api.notes.filtered(folder=folder, query=search)
            path = exporter.export_notes(notes, output_dir)
            count = len(notes)
    except DigitalNotesException as e:
        auth.fail(e)
    except OSError as e:
        console.print(f"[bold red]Error:[/bold red] Could not write export: {e}")
        raise typer.Exit(1) from e

    console.print(f"Exported {count} note(s) to [bold]{os.path.abspath(path)}[/bold]")
