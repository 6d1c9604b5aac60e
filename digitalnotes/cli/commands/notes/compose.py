"""Interactive editor for the notes service."""

from typing import Callable, Dict, Optional

import typer
from rich.console import Console
from rich.table import Table

from digitalnotes.cli.utils import auth
from digitalnotes.cli.utils.render import editor_panel
from digitalnotes.exceptions import DigitalNotesException
from digitalnotes.services.notes.dictation import Dictation
from digitalnotes.services.notes.domain import BACKGROUND_GRADIENTS
from digitalnotes.services.notes.editor import NoteEditor
from digitalnotes.services.notes.importers import ImportFormatError

app = typer.Typer(
    help="Compose a note interactively",
    context_settings={"allow_interspersed_args": True},
)
console = Console()

HELP_ROWS = (
    ("title TEXT", "Replace the title"),
    ("body TEXT", "Replace the content"),
    ("append TEXT", "Add a line to the content"),
    ("undo / redo", "Step through title/content edits"),
    ("folder NAME", "Personal, Work or Important"),
    ("font NAME", "Arial, Times New Roman, Courier New, Georgia, Verdana"),
    ("color N", f"Background gradient 0-{len(BACKGROUND_GRADIENTS) - 1}"),
    ("bg-image REF", "Background image path or URL"),
    ("image REF", "Attach an image path or URL"),
    ("favorite", "Toggle favorite"),
    ("import PATH", "Load a JSON, TXT or CSV file"),
    ("paste", "Type text; first line is the title, end with a lone '.'"),
    ("dictate", "Append speech from the microphone"),
    ("show", "Show the note"),
    ("save", "Save the note"),
    ("quit", "Leave the editor"),
)


class ComposeShell:
    """Line-oriented front end over a NoteEditor."""

    def __init__(self, editor: NoteEditor, dictation: Optional[Dictation] = None):
        self.editor = editor
        self._dictation = dictation
        self.running = True
        self.commands: Dict[str, Callable[[str], None]] = {
            "title": self.editor.set_title,
            "body": self.editor.set_body,
            "append": self._append,
            "undo": self._undo,
            "redo": self._redo,
            "folder": self.editor.set_folder,
            "font": self.editor.set_font,
            "color": self._color,
            "bg-image": self.editor.set_background_image,
            "image": self._image,
            "favorite": self._favorite,
            "import": self._import,
            "paste": self._paste,
            "dictate": self._dictate,
            "show": lambda _: console.print(editor_panel(self.editor)),
            "save": self._save,
            "help": self._help,
            "quit": self._quit,
            "exit": self._quit,
        }

    def handle(self, line: str) -> None:
        name, _, arg = line.strip().partition(" ")
        if not name:
            return
        command = self.commands.get(name.lower())
        if command is None:
            console.print(f"[yellow]Unknown command {name!r}.[/yellow] Type 'help'.")
            return
        try:
            command(arg)
        except ImportFormatError as e:
            console.print(
                "[bold red]Error importing file.[/bold red] "
                f"Please check the file format. ({e})"
            )
        except DigitalNotesException as e:
            console.print(f"[bold red]Error:[/bold red] {e}")

    def run(self) -> None:
        console.print(editor_panel(self.editor))
        console.print("Type 'help' for commands.")
        while self.running:
            self.handle(typer.prompt("note", default="", show_default=False))

    # ----- command handlers -----

    def _append(self, text: str) -> None:
        body = self.editor.body
        self.editor.set_body(f"{body}\n{text}" if body else text)

    def _undo(self, _: str) -> None:
        if not self.editor.undo():
            console.print("Nothing to undo")

    def _redo(self, _: str) -> None:
        if not self.editor.redo():
            console.print("Nothing to redo")

    def _color(self, arg: str) -> None:
        try:
            index = int(arg)
        except ValueError:
            console.print("[yellow]color takes a number[/yellow]")
            return
        self.editor.choose_background(index)

    def _image(self, ref: str) -> None:
        console.print(f"Attached {self.editor.add_image(ref)}")

    def _favorite(self, _: str) -> None:
        state = "on" if self.editor.toggle_favorite() else "off"
        console.print(f"Favorite {state}")

    def _import(self, path: str) -> None:
        self.editor.import_file(path.strip())
        console.print("[green]File imported successfully![/green]")

    def _paste(self, _: str) -> None:
        lines = []
        while True:
            line = typer.prompt("", default="", show_default=False, prompt_suffix="")
            if line == ".":
                break
            lines.append(line)
        self.editor.import_text("\n".join(lines))
        console.print("[green]Text imported successfully![/green]")

    def _dictate(self, _: str) -> None:
        if self._dictation is None:
            self._dictation = Dictation()
        console.print("Listening...")
        self.editor.append_dictation(self._dictation.listen_once())

    def _save(self, _: str) -> None:
        verb = "updated" if self.editor.is_edit_mode else "saved"
        note = self.editor.save()
        console.print(
            f"[green]Note {verb} successfully in {note.folder} category![/green] "
            f"(ID: {note.id})"
        )

    def _help(self, _: str) -> None:
        table = Table("Command", "Action")
        for row in HELP_ROWS:
            table.add_row(*row)
        console.print(table)

    def _quit(self, _: str) -> None:
        self.running = False


@app.callback(invoke_without_command=True)
def main(
    note_id: Optional[str] = typer.Argument(
        None, help="ID of a note to edit; omit to create a new one"
    ),
):
    """Open the interactive note editor."""
    api = auth.get_api_instance()
    try:
        editor = api.editor(note_id)
    except DigitalNotesException as e:
        auth.fail(e)

    ComposeShell(editor).run()
