# digitalnotes/services/notes/domain.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class Folder(str, Enum):
    PERSONAL = "Personal"
    WORK = "Work"
    IMPORTANT = "Important"


# Pseudo-folders understood by the list filter only.
ALL_NOTES = "All"
FAVORITES = "Favorites"

DEFAULT_FOLDER = Folder.PERSONAL.value
FOLDER_NAMES: Tuple[str, ...] = tuple(f.value for f in Folder)
FILTER_CHOICES: Tuple[str, ...] = (ALL_NOTES,) + FOLDER_NAMES + (FAVORITES,)

FONTS: Tuple[str, ...] = (
    "Arial",
    "Times New Roman",
    "Courier New",
    "Georgia",
    "Verdana",
)
DEFAULT_FONT = FONTS[0]

BACKGROUND_GRADIENTS: Tuple[str, ...] = (
    "linear-gradient(135deg, #667eea 0%, #764ba2 100%)",
    "linear-gradient(135deg, #f093fb 0%, #f5576c 100%)",
    "linear-gradient(135deg, #4facfe 0%, #00f2fe 100%)",
    "linear-gradient(135deg, #43e97b 0%, #38f9d7 100%)",
    "linear-gradient(135deg, #fa709a 0%, #fee140 100%)",
    "linear-gradient(135deg, #a8edea 0%, #fed6e3 100%)",
)
DEFAULT_BACKGROUND = BACKGROUND_GRADIENTS[0]
# Used when an existing note comes back without a background.
FALLBACK_BACKGROUND = "#E0BBE4"

IMPORTED_TITLE = "Imported Note"


@dataclass(frozen=True)
class EditSnapshot:
    """Text-field state captured for undo/redo."""

    title: str
    body: str
