"""
High-level Notes service: the in-memory notes store.

Public API:
  - NotesService.refresh() -> List[Note]
  - NotesService.notes -> List[Note]   (current in-memory list)
  - NotesService.get(note_id) -> Note
  - NotesService.add(note) -> Note
  - NotesService.update(note) -> Note
  - NotesService.delete(note_id) -> None
  - NotesService.toggle_favorite(note_id) -> Note
  - NotesService.filtered(folder="All", query="") -> List[Note]
  - NotesService.copy_text(note) / share_link(note) -> str
  - NotesService.raw -> NotesClient (escape hatch)

Every call that reaches the API first checks for a session token; a 401
clears the session and surfaces DigitalNotesSessionExpiredException.
"""

from __future__ import annotations

import logging
from typing import List, Optional
from urllib.parse import quote

from digitalnotes.services.base import BaseService

from .client import NotesClient, NotesError
from .domain import ALL_NOTES
from .filtering import filter_notes
from .models import Note

LOGGER = logging.getLogger(__name__)


# ----------------------------- Service Errors --------------------------------


class NoteNotFound(NotesError):
    pass


# ----------------------------- NotesService ----------------------------------


class NotesService(BaseService):
    """
    Holds the user's notes as fetched from the API and keeps the list in sync
    with every successful mutation.
    """

    def __init__(self, session, client: Optional[NotesClient] = None):
        super().__init__(session)
        self._raw = client or NotesClient(session)
        self._notes: List[Note] = []
        self._loaded = False

    @property
    def raw(self) -> NotesClient:
        return self._raw

    @property
    def notes(self) -> List[Note]:
        return list(self._notes)

    @property
    def loaded(self) -> bool:
        return self._loaded

    # -------------------------- Public API methods ---------------------------

    def refresh(self) -> List[Note]:
        """Replace the in-memory list with the server's."""
        self._require_token()
        self._notes = self._raw.list()
        self._loaded = True
        LOGGER.debug("Notes store holds %d notes", len(self._notes))
        return self.notes

    def ensure_loaded(self) -> List[Note]:
        if not self._loaded:
            return self.refresh()
        return self.notes

    def get(self, note_id: str) -> Note:
        for note in self._notes:
            if note.id == note_id:
                return note
        raise NoteNotFound(f"Note not found: {note_id}")

    def add(self, note: Note) -> Note:
        """Create ``note`` on the server; the saved copy goes to the front."""
        self._require_token("Please login to save notes")
        created = self._raw.create(note)
        self._notes.insert(0, created)
        LOGGER.info("Note %s added to store", created.id)
        return created

    def update(self, note: Note) -> Note:
        if not note.id:
            raise NoteNotFound("Cannot update a note that has not been saved")
        self._require_token("Please login to save notes")
        saved = self._raw.update(note.id, note)
        self._replace(note.id, saved)
        return saved

    def delete(self, note_id: str) -> None:
        self._require_token()
        self._raw.delete(note_id)
        self._notes = [n for n in self._notes if n.id != note_id]
        LOGGER.info("Note %s removed from store", note_id)

    def toggle_favorite(self, note_id: str) -> Note:
        note = self.get(note_id)
        self._require_token()
        flipped = note.model_copy(update={"favorite": not note.favorite})
        saved = self._raw.update(note_id, flipped)
        self._replace(note_id, saved)
        return saved

    def filtered(self, folder: str = ALL_NOTES, query: str = "") -> List[Note]:
        return filter_notes(self._notes, folder=folder, query=query)

    @staticmethod
    def copy_text(note: Note) -> str:
        return f"{note.title}\n{note.content or ''}"

    @staticmethod
    def share_link(note: Note) -> str:
        # Same escaping as encodeURIComponent.
        return "mailto:?body=" + quote(note.content or "", safe="-_.!~*'()")

    # ------------------------------ Internals --------------------------------

    def _replace(self, note_id: str, saved: Note) -> None:
        self._notes = [saved if n.id == note_id else n for n in self._notes]
