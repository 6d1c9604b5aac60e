"""Edit command for the notes service."""

from typing import List, Optional

import typer
from rich.console import Console

from digitalnotes.cli.utils import auth
from digitalnotes.cli.utils.editing import apply_options
from digitalnotes.exceptions import DigitalNotesException
from digitalnotes.services.notes.domain import FOLDER_NAMES, FONTS

app = typer.Typer(
    help="Update a note",
    context_settings={"allow_interspersed_args": True},
)
console = Console()


@app.callback(invoke_without_command=True)
def main(
    note_id: str = typer.Argument(..., help="ID of the note"),
    title: Optional[str] = typer.Option(None, help="New title"),
    body: Optional[str] = typer.Option(None, help="New content"),
    folder: Optional[str] = typer.Option(
        None, help=f"One of: {', '.join(FOLDER_NAMES)}"
    ),
    font: Optional[str] = typer.Option(None, help=f"One of: {', '.join(FONTS)}"),
    color: Optional[int] = typer.Option(
        None, help="Background gradient from the palette (0-5)"
    ),
    bg_image: Optional[str] = typer.Option(None, help="Background image path or URL"),
    image: Optional[List[str]] = typer.Option(
        None, help="Attach an image path or URL (repeatable)"
    ),
    favorite: Optional[bool] = typer.Option(None, help="Mark as favorite"),
    from_file: Optional[str] = typer.Option(
        None, help="Overwrite fields from a JSON, TXT or CSV file"
    ),
):
    """Update an existing note."""
    api = auth.get_api_instance()

    try:
        editor = api.editor(note_id)
        apply_options(
            editor,
            title=title,
            body=body,
            folder=folder,
            font=font,
            color=color,
            bg_image=bg_image,
            images=image,
            favorite=favorite,
            from_file=from_file,
        )
        note = editor.save()
    except DigitalNotesException as e:
        auth.fail(e)

    console.print(
        f"Note updated successfully in [bold]{note.folder}[/bold] category!"
    )
