"""
Note editor: form state, linear undo/redo, media and save.

Only the text fields (title, body) take part in undo/redo. Every edit through
``set_title``/``set_body`` records the pre-edit snapshot; imports, dictation
and formatting changes do not.
"""

from __future__ import annotations

import logging
import os
from collections import deque
from datetime import date as date_cls
from pathlib import Path
from typing import TYPE_CHECKING, Deque, Iterable, List, Optional

from pydantic import ValidationError

from .client import NotesError
from .domain import (
    BACKGROUND_GRADIENTS,
    DEFAULT_BACKGROUND,
    DEFAULT_FOLDER,
    DEFAULT_FONT,
    FALLBACK_BACKGROUND,
    FOLDER_NAMES,
    FONTS,
    EditSnapshot,
)
from .importers import parse_file, parse_pasted_text
from .models import ImportedNote, Note

if TYPE_CHECKING:  # pragma: no cover - import for type checking only
    from .service import NotesService

LOGGER = logging.getLogger(__name__)


class NoteValidationError(NotesError):
    pass


def display_date(day: Optional[date_cls] = None) -> str:
    """``M/D/YYYY``, the date string stored on saved notes."""
    day = day or date_cls.today()
    return f"{day.month}/{day.day}/{day.year}"


class EditHistory:
    """
    Two stacks of (title, body) snapshots.

    ``past`` keeps the most recent entry last; ``future`` keeps the most
    recently undone entry first. ``max_depth`` bounds ``past`` (oldest dropped).
    """

    def __init__(self, max_depth: Optional[int] = None):
        self.max_depth = max_depth
        self.past: List[EditSnapshot] = []
        self.future: Deque[EditSnapshot] = deque()

    def record(self, snapshot: EditSnapshot) -> None:
        self.past.append(snapshot)
        if self.max_depth is not None and len(self.past) > self.max_depth:
            del self.past[0]

    def undo(self, current: EditSnapshot) -> Optional[EditSnapshot]:
        if not self.past:
            return None
        previous = self.past.pop()
        self.future.appendleft(current)
        return previous

    def redo(self, current: EditSnapshot) -> Optional[EditSnapshot]:
        if not self.future:
            return None
        following = self.future.popleft()
        self.record(current)
        return following

    @property
    def can_undo(self) -> bool:
        return bool(self.past)

    @property
    def can_redo(self) -> bool:
        return bool(self.future)

    def clear(self) -> None:
        self.past.clear()
        self.future.clear()


class NoteEditor:
    """Create or edit a single note."""

    def __init__(
        self,
        notes: "NotesService",
        note_id: Optional[str] = None,
        *,
        max_history: Optional[int] = None,
    ):
        self._notes = notes
        self.note_id = note_id
        self.history = EditHistory(max_history)

        self.title = ""
        self.body = ""
        self.folder = DEFAULT_FOLDER
        self.bg_color = DEFAULT_BACKGROUND
        self.bg_image = ""
        self.images: List[str] = []
        self.font = DEFAULT_FONT
        self.favorite = False
        self._source: Optional[Note] = None

        if note_id is not None:
            self._load(notes.get(note_id))

    @property
    def is_edit_mode(self) -> bool:
        return self.note_id is not None

    def _load(self, note: Note) -> None:
        self._source = note
        self.title = note.title or ""
        self.body = note.content or ""
        self.folder = note.folder or DEFAULT_FOLDER
        self.bg_color = (note.bg_color or "").strip() or FALLBACK_BACKGROUND
        self.bg_image = note.bg_image or ""
        self.images = list(note.images or [])
        self.font = note.font or DEFAULT_FONT
        self.favorite = bool(note.favorite)
        LOGGER.debug("Loaded note %s for editing", note.id)

    # ----- text fields (undoable) -----

    def snapshot(self) -> EditSnapshot:
        return EditSnapshot(title=self.title, body=self.body)

    def _restore(self, snap: EditSnapshot) -> None:
        self.title = snap.title
        self.body = snap.body

    def set_title(self, value: str) -> None:
        self.history.record(self.snapshot())
        self.title = value

    def set_body(self, value: str) -> None:
        self.history.record(self.snapshot())
        self.body = value

    def undo(self) -> bool:
        previous = self.history.undo(self.snapshot())
        if previous is None:
            return False
        self._restore(previous)
        return True

    def redo(self) -> bool:
        following = self.history.redo(self.snapshot())
        if following is None:
            return False
        self._restore(following)
        return True

    # ----- formatting -----

    def set_folder(self, folder: str) -> None:
        if folder not in FOLDER_NAMES:
            raise NoteValidationError(
                f"Unknown folder {folder!r}; choose one of {', '.join(FOLDER_NAMES)}"
            )
        self.folder = folder

    def set_font(self, font: str) -> None:
        if font not in FONTS:
            raise NoteValidationError(
                f"Unknown font {font!r}; choose one of {', '.join(FONTS)}"
            )
        self.font = font

    def choose_background(self, index: int) -> str:
        """Pick one of the palette gradients; clears any background image."""
        if not 0 <= index < len(BACKGROUND_GRADIENTS):
            raise NoteValidationError(
                f"Background must be between 0 and {len(BACKGROUND_GRADIENTS) - 1}"
            )
        self.bg_color = BACKGROUND_GRADIENTS[index]
        self.bg_image = ""
        return self.bg_color

    def set_background_image(self, ref: str) -> str:
        self.bg_image = media_reference(ref)
        return self.bg_image

    def add_image(self, ref: str) -> str:
        url = media_reference(ref)
        self.images.append(url)
        return url

    def toggle_favorite(self) -> bool:
        self.favorite = not self.favorite
        return self.favorite

    # ----- dictation / import -----

    def append_dictation(self, transcript: str) -> None:
        self.body = f"{self.body} {transcript}"

    def apply_imports(self, entries: Iterable[ImportedNote]) -> int:
        applied = 0
        for entry in entries:
            self.title = entry.title
            self.body = entry.body
            if entry.folder is not None:
                self.folder = entry.folder
            if entry.bg_color is not None:
                self.bg_color = entry.bg_color
            if entry.font is not None:
                self.font = entry.font
            if entry.favorite is not None:
                self.favorite = entry.favorite
            applied += 1
        LOGGER.debug("Applied %d imported entries", applied)
        return applied

    def import_file(self, path: str) -> int:
        return self.apply_imports(parse_file(path))

    def import_text(self, text: str) -> int:
        return self.apply_imports(parse_pasted_text(text))

    # ----- save -----

    def to_note(self, today: Optional[date_cls] = None) -> Note:
        fields = {
            "title": self.title,
            "note": self.body,
            "date": display_date(today),
            "folder": self.folder,
            "font": self.font,
            "bgColor": self.bg_color,
            "bgImage": self.bg_image,
            "images": list(self.images),
            "favorite": self.favorite,
        }
        if self._source is not None:
            base = self._source.to_payload()
            base.update(fields)
            fields = base
        try:
            return Note.model_validate(fields)
        except ValidationError as e:
            LOGGER.error("Editor fields do not form a valid note: %s", e)
            raise NoteValidationError(f"Invalid note fields: {e}") from e

    def save(self) -> Note:
        if not self.title.strip() or not self.body.strip():
            raise NoteValidationError("Please enter both title and note content")

        note = self.to_note()
        if self.is_edit_mode:
            saved = self._notes.update(note)
        else:
            saved = self._notes.add(note)
            self.note_id = saved.id
        self._source = saved
        LOGGER.info("Saved note %s in %s", saved.id, self.folder)
        return saved


def media_reference(ref: str) -> str:
    """Local files become ``file://`` URIs; anything else stays as-is."""
    if os.path.isfile(ref):
        return Path(ref).resolve().as_uri()
    return ref
