"""List command for the notes service."""

import typer
from rich.console import Console

from digitalnotes.cli.utils import auth
from digitalnotes.cli.utils.render import FOLDER_LABELS, notes_table
from digitalnotes.exceptions import DigitalNotesException
from digitalnotes.services.notes.domain import ALL_NOTES, FILTER_CHOICES

app = typer.Typer(help="List notes")
console = Console()


@app.callback(invoke_without_command=True)
def main(
    folder: str = typer.Option(
        ALL_NOTES, help=f"One of: {', '.join(FILTER_CHOICES)}"
    ),
    search: str = typer.Option("", help="Case-insensitive title search"),
    content: bool = typer.Option(False, help="Show note content"),
):
    """List notes, filtered by folder and title."""
    if folder not in FILTER_CHOICES:
        console.print(
            f"[bold red]Error:[/bold red] Unknown folder {folder!r}; "
            f"choose one of {', '.join(FILTER_CHOICES)}"
        )
        raise typer.Exit(1)

    api = auth.get_api_instance()
    try:
        api.notes.refresh()
    except DigitalNotesException as e:
        auth.fail(e)

    notes = api.notes.filtered(folder=folder, query=search)
    count = len(notes)
    if search:
        console.print(
            f"Found {count} note{'' if count == 1 else 's'} matching \"{search}\""
        )

    if not notes:
        if search:
            where = "any category" if folder == ALL_NOTES else folder
            console.print(f'No notes found matching "{search}" in {where}.')
        else:
            console.print("No notes found. Create your first note!")
        return

    console.print(f"[bold]{FOLDER_LABELS[folder]}[/bold] ({count} notes)")
    console.print(notes_table(notes, show_content=content))
