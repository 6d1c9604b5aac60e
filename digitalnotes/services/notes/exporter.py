"""
Exporter helpers for notes -> JSON files.

The export shape is the same one the JSON importer reads back:
{title, content, folder, date, bgColor, font}.
"""

from __future__ import annotations

import json
import logging
import os
from datetime import date as date_cls
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional

from digitalnotes.utils import slugify_filename

from .models import Note

LOGGER = logging.getLogger(__name__)


def export_payload(note: Note) -> Dict[str, Any]:
    return {
        "title": note.title,
        "content": note.content or "",
        "folder": note.folder,
        "date": note.date,
        "bgColor": note.bg_color,
        "font": note.font,
    }


def export_filename(note: Note) -> str:
    return f"{slugify_filename(note.title)}.json"


def bulk_export_filename(today: Optional[date_cls] = None) -> str:
    today = today or datetime.now(timezone.utc).date()
    return f"notes_export_{today.isoformat()}.json"


def dumps(payload: Any) -> str:
    return json.dumps(payload, indent=2, ensure_ascii=False)


def _write(path: str, payload: Any) -> str:
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(dumps(payload))
    LOGGER.info("Wrote export to %s", path)
    return path


def export_note(note: Note, output_dir: str = ".") -> str:
    """Write one note to ``<output_dir>/<slug>.json`` and return the path."""
    return _write(os.path.join(output_dir, export_filename(note)), export_payload(note))


def export_notes(
    notes: Iterable[Note],
    output_dir: str = ".",
    *,
    today: Optional[date_cls] = None,
) -> str:
    """Write an array of notes to ``notes_export_<date>.json``."""
    payload: List[Dict[str, Any]] = [export_payload(n) for n in notes]
    path = os.path.join(output_dir, bulk_export_filename(today))
    LOGGER.debug("Exporting %d notes", len(payload))
    return _write(path, payload)
