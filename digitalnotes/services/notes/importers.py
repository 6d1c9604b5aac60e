"""
Import parsers: external files -> editor field values.

Each parser returns the list of ImportedNote entries to apply, in order, to
the editor form. Applying several entries overwrites the same form state, so
for a JSON array only the last qualifying element stays visible.

Supported formats:
  - .json  one note object or an array of note objects
  - .txt   first line is the title, the rest is the body
  - .csv   title/body columns found by header name, first data row only
"""

from __future__ import annotations

import csv
import io
import json
import logging
import os
from typing import Any, Callable, Dict, List, Optional

from .client import NotesError
from .domain import DEFAULT_FOLDER, FOLDER_NAMES, FONTS, IMPORTED_TITLE
from .models import ImportedNote

LOGGER = logging.getLogger(__name__)


class ImportFormatError(NotesError):
    """The file could not be understood; nothing was applied."""


def _optional_text(data: Dict[str, Any], key: str) -> Optional[str]:
    value = data.get(key)
    if not value:
        return None
    if not isinstance(value, str):
        raise ImportFormatError(f"{key!r} must be text, got {type(value).__name__}")
    return value


def _from_json_object(data: Dict[str, Any]) -> List[ImportedNote]:
    if not (data.get("title") and data.get("content")):
        return []

    folder = _optional_text(data, "folder") or DEFAULT_FOLDER
    if folder not in FOLDER_NAMES:
        raise ImportFormatError(
            f"Unknown folder {folder!r}; expected one of {', '.join(FOLDER_NAMES)}"
        )
    font = _optional_text(data, "font")
    if font is not None and font not in FONTS:
        raise ImportFormatError(
            f"Unknown font {font!r}; expected one of {', '.join(FONTS)}"
        )

    return [
        ImportedNote(
            title=str(data["title"]),
            body=str(data["content"]),
            folder=folder,
            bg_color=_optional_text(data, "bgColor"),
            font=font,
            favorite=True if data.get("favorite") else None,
        )
    ]


def parse_json(content: str) -> List[ImportedNote]:
    try:
        data = json.loads(content)
    except ValueError as exc:
        raise ImportFormatError(f"Invalid JSON: {exc}") from exc

    if isinstance(data, dict):
        return _from_json_object(data)
    if isinstance(data, list):
        entries: List[ImportedNote] = []
        for index, item in enumerate(data):
            if not isinstance(item, dict):
                raise ImportFormatError(f"Element {index} is not a note object")
            entries.extend(_from_json_object(item))
        return entries
    raise ImportFormatError("Expected a note object or an array of notes")


def parse_text(content: str) -> List[ImportedNote]:
    lines = content.split("\n")
    return [ImportedNote(title=lines[0] or IMPORTED_TITLE, body="\n".join(lines[1:]))]


def parse_pasted_text(text: str) -> List[ImportedNote]:
    """Same as a .txt file, but blank input is refused."""
    if not text.strip():
        raise ImportFormatError("Please enter some text to import.")
    return parse_text(text)


def parse_csv(content: str) -> List[ImportedNote]:
    try:
        rows = list(csv.reader(io.StringIO(content)))
    except csv.Error as exc:
        raise ImportFormatError(f"Invalid CSV: {exc}") from exc
    if len(rows) < 2:
        return []

    headers = [h.lower() for h in rows[0]]
    data = rows[1]
    title_idx = next((i for i, h in enumerate(headers) if "title" in h), -1)
    body_idx = next(
        (i for i, h in enumerate(headers) if "content" in h or "note" in h), -1
    )
    if title_idx == -1 or body_idx == -1:
        LOGGER.debug("CSV headers %s have no title/content column", rows[0])
        return []

    def cell(idx: int) -> str:
        return data[idx] if idx < len(data) else ""

    return [ImportedNote(title=cell(title_idx) or IMPORTED_TITLE, body=cell(body_idx))]


PARSERS: Dict[str, Callable[[str], List[ImportedNote]]] = {
    ".json": parse_json,
    ".txt": parse_text,
    ".csv": parse_csv,
}


def parse_content(filename: str, content: str) -> List[ImportedNote]:
    ext = os.path.splitext(filename)[1].lower()
    parser = PARSERS.get(ext)
    if parser is None:
        raise ImportFormatError(
            f"Unsupported file type {ext or filename!r}; use JSON, TXT or CSV"
        )
    LOGGER.info("Importing %s as %s", filename, ext.lstrip("."))
    return parser(content)


def parse_file(path: str) -> List[ImportedNote]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            content = f.read()
    except UnicodeDecodeError as exc:
        raise ImportFormatError(f"{path} is not a text file") from exc
    except OSError as exc:
        raise ImportFormatError(f"Could not read {path}: {exc.strerror}") from exc
    return parse_content(path, content)
