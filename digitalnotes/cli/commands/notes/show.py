"""Show command for the notes service."""

import typer
from rich.console import Console

from digitalnotes.cli.utils import auth
from digitalnotes.cli.utils.render import note_panel
from digitalnotes.exceptions import DigitalNotesException

app = typer.Typer(
    help="Show a note",
    context_settings={"allow_interspersed_args": True},
)
console = Console()


@app.callback(invoke_without_command=True)
def main(
    note_id: str = typer.Argument(..., help="ID of the note"),
    plain: bool = typer.Option(
        False, help="Print title and content as plain text (for copying)"
    ),
):
    """Show a single note."""
    api = auth.get_api_instance()
    try:
        api.notes.refresh()
        note = api.notes.get(note_id)
    except DigitalNotesException as e:
        auth.fail(e)

    if plain:
        typer.echo(api.notes.copy_text(note))
        return
    console.print(note_panel(note))
