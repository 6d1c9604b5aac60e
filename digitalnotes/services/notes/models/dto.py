"""High-level Notes data transfer objects."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from .note import Note


@dataclass(frozen=True)
class ImportedNote:
    """Field values recovered from an import file.

    ``None`` means "leave the editor field as it is".
    """

    title: str
    body: str
    folder: Optional[str] = None
    bg_color: Optional[str] = None
    font: Optional[str] = None
    favorite: Optional[bool] = None


@dataclass(frozen=True)
class DashboardSummary:
    """Aggregate counts shown on the dashboard."""

    username: str
    email: str
    total: int
    important: int
    favorites: int
    recent: List[Note] = field(default_factory=list)
