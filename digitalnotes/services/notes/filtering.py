"""Folder and title filters for the notes list."""

from __future__ import annotations

from typing import Iterable, List

from .domain import ALL_NOTES, FAVORITES
from .models import Note


def matches_folder(note: Note, folder: str) -> bool:
    if folder == ALL_NOTES:
        return True
    if folder == FAVORITES:
        return bool(note.favorite)
    return note.folder == folder


def matches_search(note: Note, query: str) -> bool:
    """Case-insensitive substring match on the title only."""
    if query == "":
        return True
    return query.lower() in (note.title or "").lower()


def filter_notes(
    notes: Iterable[Note], *, folder: str = ALL_NOTES, query: str = ""
) -> List[Note]:
    return [n for n in notes if matches_folder(n, folder) and matches_search(n, query)]
