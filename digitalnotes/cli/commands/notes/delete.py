"""Delete command for the notes service."""

import typer
from rich.console import Console

from digitalnotes.cli.utils import auth
from digitalnotes.exceptions import DigitalNotesException

app = typer.Typer(
    help="Delete a note",
    context_settings={"allow_interspersed_args": True},
)
console = Console()


@app.callback(invoke_without_command=True)
def main(
    note_id: str = typer.Argument(..., help="ID of the note to delete"),
    force: bool = typer.Option(
        False, "--force", "-f", help="Delete without confirmation"
    ),
):
    """Delete a note."""
    if not force:
        confirmed = typer.confirm(f"Are you sure you want to delete note {note_id}?")
        if not confirmed:
            console.print("Deletion cancelled")
            return

    api = auth.get_api_instance()

    try:
        api.notes.delete(note_id)
        console.print(f"Deleted note [bold]{note_id}[/bold]")
    except DigitalNotesException as e:
        auth.fail(e)
