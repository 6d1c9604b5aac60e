"""Rich renderables for notes."""

from typing import Iterable

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from digitalnotes.services.notes import Note
from digitalnotes.services.notes.domain import ALL_NOTES, Folder
from digitalnotes.services.notes.editor import NoteEditor

FOLDER_LABELS = {
    ALL_NOTES: "All Notes",
    Folder.PERSONAL.value: "Personal",
    Folder.WORK.value: "Work",
    Folder.IMPORTANT.value: "Important",
    "Favorites": "Favorites",
}


def folder_badge(folder: str, favorite: bool) -> Text:
    style = "bold red" if folder == Folder.IMPORTANT.value else "cyan"
    badge = Text(folder, style=style)
    if favorite:
        badge.append(" ♥", style="red")
    return badge


def notes_table(notes: Iterable[Note], show_content: bool = False) -> Table:
    table = Table("ID", "Title", "Folder", "Date")
    if show_content:
        table.add_column("Content")
    for note in notes:
        row = [
            note.id or "",
            Text(note.title, style="bold" if note.favorite else ""),
            folder_badge(note.folder, note.favorite),
            note.date or "",
        ]
        if show_content:
            row.append(note.content)
        table.add_row(*row)
    return table


def note_panel(note: Note) -> Panel:
    body = Text(note.content or "")
    if note.images:
        body.append("\n\nImages:\n", style="dim")
        for url in note.images:
            body.append(f"  {url}\n", style="dim")
    subtitle = f"{note.folder} · {note.font or 'Arial'} · {note.date or ''}"
    title = f"{'♥ ' if note.favorite else ''}{note.title}"
    return Panel(body, title=title, subtitle=subtitle, border_style="magenta")


def editor_panel(editor: NoteEditor) -> Panel:
    body = Text(editor.body or "", style="")
    body.append("\n\n")
    body.append(f"Folder: {editor.folder}  Font: {editor.font}\n", style="dim")
    background = editor.bg_image or editor.bg_color
    body.append(f"Background: {background}\n", style="dim")
    for url in editor.images:
        body.append(f"Image: {url}\n", style="dim")
    mode = "Edit Note" if editor.is_edit_mode else "Create New Note"
    title = f"{'♥ ' if editor.favorite else ''}{editor.title or '(untitled)'}"
    return Panel(body, title=title, subtitle=mode, border_style="blue")
