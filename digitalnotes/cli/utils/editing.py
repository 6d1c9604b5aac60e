"""Apply command-line form options to a NoteEditor."""

from typing import List, Optional

from digitalnotes.services.notes.editor import NoteEditor


def apply_options(
    editor: NoteEditor,
    *,
    title: Optional[str] = None,
    body: Optional[str] = None,
    folder: Optional[str] = None,
    font: Optional[str] = None,
    color: Optional[int] = None,
    bg_image: Optional[str] = None,
    images: Optional[List[str]] = None,
    favorite: Optional[bool] = None,
    from_file: Optional[str] = None,
) -> None:
    # Imported values first so explicit options win.
    if from_file:
        editor.import_file(from_file)
    if title is not None:
        editor.set_title(title)
    if body is not None:
        editor.set_body(body)
    if folder is not None:
        editor.set_folder(folder)
    if font is not None:
        editor.set_font(font)
    if color is not None:
        editor.choose_background(color)
    if bg_image:
        editor.set_background_image(bg_image)
    for ref in images or []:
        editor.add_image(ref)
    if favorite is not None:
        editor.favorite = favorite
