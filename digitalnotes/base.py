"""Library base file."""

from __future__ import annotations

import logging
import os
from typing import Optional

from digitalnotes.services import AuthService, DashboardService, NotesService
from digitalnotes.services.notes import NoteEditor
from digitalnotes.session import DEFAULT_TIMEOUT, DigitalNotesSession, SessionStore

LOGGER = logging.getLogger(__name__)

DEFAULT_API_URL = "http://localhost:5000"
API_URL_ENV = "DIGITALNOTES_API_URL"


class DigitalNotesService:
    """
    A Digital Notes account, as seen from the client.

    Owns the session context (persisted token + user fields) and the
    in-memory notes store, and hands both to the services that need them.

    Usage:
        from digitalnotes import DigitalNotesService
        api = DigitalNotesService(session_path="~/.config/digitalnotes/session.json")
        api.auth.login("me@example.com", "secret1")
        for note in api.notes.refresh():
            print(note.title)
    """

    def __init__(
        self,
        api_url: Optional[str] = None,
        session_path: Optional[str] = None,
        store: Optional[SessionStore] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self.api_url = (
            api_url or os.environ.get(API_URL_ENV) or DEFAULT_API_URL
        ).rstrip("/")
        if store is None:
            store = SessionStore(
                os.path.expanduser(session_path) if session_path else None
            )
        self.store = store
        self.session = DigitalNotesSession(store, self.api_url, timeout=timeout)
        LOGGER.debug("Digital Notes client for %s", self.api_url)

        self._auth: Optional[AuthService] = None
        self._notes: Optional[NotesService] = None
        self._dashboard: Optional[DashboardService] = None

    @property
    def auth(self) -> AuthService:
        if self._auth is None:
            self._auth = AuthService(self.session)
        return self._auth

    @property
    def notes(self) -> NotesService:
        if self._notes is None:
            self._notes = NotesService(self.session)
        return self._notes

    @property
    def dashboard(self) -> DashboardService:
        if self._dashboard is None:
            self._dashboard = DashboardService(self.session, self.notes)
        return self._dashboard

    def editor(self, note_id: Optional[str] = None, **kwargs) -> NoteEditor:
        """Editor for a new note, or for ``note_id`` (loads the list if needed)."""
        if note_id is not None:
            self.notes.ensure_loaded()
        return NoteEditor(self.notes, note_id, **kwargs)

    @property
    def is_logged_in(self) -> bool:
        return self.store.is_authenticated

    @property
    def account_name(self) -> Optional[str]:
        return self.store.username or self.store.email

    def __str__(self) -> str:
        return f"Digital Notes: {self.account_name or 'not logged in'}"

    def __repr__(self) -> str:
        return f"<{self}>"
