"""
Low-level REST client for ``/api/notes``.

Used internally by NotesService. Returns typed Pydantic models from
digitalnotes.services.notes.models and hides HTTP details; transport errors
(HTTP status, network, 401 session expiry) are raised by the session.
"""

from __future__ import annotations

import logging
from typing import Any, List

from pydantic import ValidationError

from digitalnotes.exceptions import DigitalNotesException

from .models import Note

LOGGER = logging.getLogger(__name__)


# ------------------------------- Errors --------------------------------------


class NotesError(DigitalNotesException):
    """Base Notes error."""


class NotesApiError(NotesError):
    """The API answered with something that is not a note."""

    def __init__(self, message: str, payload: object = None):
        super().__init__(message)
        self.payload = payload


# ------------------------------ Raw client -----------------------------------


class NotesClient:
    """
    Raw notes endpoints:
      - GET    /notes
      - POST   /notes
      - PUT    /notes/:id
      - DELETE /notes/:id
    """

    def __init__(self, session):
        self._session = session
        LOGGER.debug("NotesClient initialized for %s", session.url("notes"))

    def list(self) -> List[Note]:
        LOGGER.info("Fetching notes")
        data = self._session.request_json("GET", "notes")
        if data is None:
            return []
        if not isinstance(data, list):
            LOGGER.error("Notes listing is not an array")
            raise NotesApiError("Notes response validation failed", payload=data)
        notes = [self._to_note("notes.list", item) for item in data]
        LOGGER.info("Fetched %d notes", len(notes))
        return notes

    def create(self, note: Note) -> Note:
        LOGGER.info("Creating note %r", note.title)
        data = self._session.request_json("POST", "notes", json=note.to_payload())
        return self._to_note("notes.create", data)

    def update(self, note_id: str, note: Note) -> Note:
        LOGGER.info("Updating note %s", note_id)
        data = self._session.request_json(
            "PUT", f"notes/{note_id}", json=note.to_payload()
        )
        return self._to_note("notes.update", data)

    def delete(self, note_id: str) -> None:
        LOGGER.info("Deleting note %s", note_id)
        self._session.request_json("DELETE", f"notes/{note_id}")

    @staticmethod
    def _to_note(op: str, data: Any) -> Note:
        try:
            return Note.model_validate(data)
        except ValidationError as e:
            LOGGER.error("%s response validation failed: %s", op, e)
            raise NotesApiError(f"{op} response validation failed", payload=data)
