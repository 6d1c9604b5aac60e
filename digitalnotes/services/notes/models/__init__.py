"""Public exports for Notes service data models."""

from __future__ import annotations

from .dto import DashboardSummary, ImportedNote
from .note import Note

__all__ = [
    "DashboardSummary",
    "ImportedNote",
    "Note",
]
