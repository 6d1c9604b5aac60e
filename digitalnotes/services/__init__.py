"""Services."""

from digitalnotes.services.auth import AuthService
from digitalnotes.services.dashboard import DashboardService
from digitalnotes.services.notes import NotesService

__all__ = ["AuthService", "DashboardService", "NotesService"]
