"""Public API for the Notes service."""

from .client import NotesApiError, NotesClient, NotesError
from .domain import Folder
from .editor import NoteEditor, NoteValidationError
from .importers import ImportFormatError
from .models import DashboardSummary, ImportedNote, Note
from .service import NoteNotFound, NotesService

__all__ = [
    "NotesService",
    "NotesClient",
    "NoteEditor",
    "Note",
    "ImportedNote",
    "DashboardSummary",
    "Folder",
    "NotesError",
    "NotesApiError",
    "NoteNotFound",
    "NoteValidationError",
    "ImportFormatError",
]
