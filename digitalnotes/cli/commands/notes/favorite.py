"""Favorite command for the notes service."""

import typer
from rich.console import Console

from digitalnotes.cli.utils import auth
from digitalnotes.exceptions import DigitalNotesException

app = typer.Typer(
    help="Toggle a note's favorite flag",
    context_settings={"allow_interspersed_args": True},
)
console = Console()


@app.callback(invoke_without_command=True)
def main(note_id: str = typer.Argument(..., help="ID of the note")):
    """Add a note to favorites, or remove it."""
    api = auth.get_api_instance()

    try:
        api.notes.refresh()
        note = api.notes.toggle_favorite(note_id)
    except DigitalNotesException as e:
        auth.fail(e)

    if note.favorite:
        console.print(f"Added [bold]{note.title}[/bold] to favorites")
    else:
        console.print(f"Removed [bold]{note.title}[/bold] from favorites")
