"""Read-only aggregate statistics over the user's notes."""

from __future__ import annotations

import logging

from digitalnotes.exceptions import DigitalNotesNotLoggedInException
from digitalnotes.services.base import BaseService
from digitalnotes.services.notes import NotesService
from digitalnotes.services.notes.domain import Folder
from digitalnotes.services.notes.models import DashboardSummary

LOGGER = logging.getLogger(__name__)

RECENT_COUNT = 3
DEFAULT_USERNAME = "User"
DEFAULT_EMAIL = "user@example.com"


class DashboardService(BaseService):
    def __init__(self, session, notes: NotesService):
        super().__init__(session)
        self._notes = notes

    def summary(self) -> DashboardSummary:
        if not self.store.user_id or not self.store.token:
            raise DigitalNotesNotLoggedInException("User not logged in")

        notes = self._notes.refresh()
        # Counts the resolved folder (category/tag/type fallback included),
        # the same value `filter_notes(folder="Important")` matches.
        summary = DashboardSummary(
            username=self.store.username or DEFAULT_USERNAME,
            email=self.store.email or DEFAULT_EMAIL,
            total=len(notes),
            important=sum(1 for n in notes if n.folder == Folder.IMPORTANT.value),
            favorites=sum(1 for n in notes if n.favorite),
            recent=notes[:RECENT_COUNT],
        )
        LOGGER.debug(
            "Dashboard: total=%d important=%d favorites=%d",
            summary.total,
            summary.important,
            summary.favorites,
        )
        return summary
