"""Notes commands for the Digital Notes CLI."""

import typer

from . import compose, delete, edit, export, favorite, list_notes, new, share, show

app = typer.Typer(help="Notes commands")
app.add_typer(list_notes.app, name="list")
app.add_typer(show.app, name="show")
app.add_typer(new.app, name="new")
app.add_typer(edit.app, name="edit")
app.add_typer(compose.app, name="compose")
app.add_typer(delete.app, name="delete")
app.add_typer(favorite.app, name="favorite")
app.add_typer(export.app, name="export")
app.add_typer(share.app, name="share")
