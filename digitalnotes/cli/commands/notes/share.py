"""Share command for the notes service."""

import typer

from digitalnotes.cli.utils import auth
from digitalnotes.exceptions import DigitalNotesException

app = typer.Typer(
    help="Print a mailto: link for sharing a note",
    context_settings={"allow_interspersed_args": True},
)


@app.callback(invoke_without_command=True)
def main(note_id: str = typer.Argument(..., help="ID of the note")):
    """Print a mailto: link with the note content as the body."""
    api = auth.get_api_instance()
    try:
        api.notes.refresh()
        note = api.notes.get(note_id)
    except DigitalNotesException as e:
        auth.fail(e)

    typer.echo(api.notes.share_link(note))
