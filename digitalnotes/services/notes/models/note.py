"""Pydantic model for the note objects exchanged with the REST API."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import AliasChoices, Field, model_validator

from ..domain import DEFAULT_FOLDER
from ._base import NotesModel

# The API has shipped the folder under several names over time.
_FOLDER_KEYS = ("folder", "category", "tag", "type")


class Note(NotesModel):
    """A single note as returned by ``/api/notes``.

    ``id`` is assigned by the server; it is ``None`` only for a note that has
    not been saved yet. Instances are frozen, use ``model_copy(update=...)``.
    """

    id: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("_id", "id"),
        serialization_alias="_id",
    )
    title: str = ""
    content: str = Field(
        default="",
        validation_alias=AliasChoices("note", "content"),
        serialization_alias="note",
    )
    folder: str = DEFAULT_FOLDER
    favorite: bool = False
    date: Optional[str] = None
    bg_color: Optional[str] = Field(default=None, alias="bgColor")
    bg_image: Optional[str] = Field(default=None, alias="bgImage")
    font: Optional[str] = None
    images: List[str] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _normalize(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)

        ident = data.pop("_id", None)
        alt = data.pop("id", None)
        if ident is None:
            ident = alt
        if ident is not None:
            data["_id"] = str(ident)

        body = data.pop("note", None) or data.pop("content", None) or ""
        data["note"] = body
        data.pop("content", None)

        folder = DEFAULT_FOLDER
        for key in _FOLDER_KEYS:
            if data.get(key):
                folder = data[key]
                break
        data["folder"] = folder

        if data.get("title") is None:
            data["title"] = ""
        if data.get("favorite") is None:
            data["favorite"] = False
        if data.get("images") is None:
            data["images"] = []
        return data

    @property
    def is_saved(self) -> bool:
        return self.id is not None

    def to_payload(self) -> Dict[str, Any]:
        """Wire representation used for POST/PUT bodies."""
        return self.model_dump(by_alias=True, exclude_none=True)


__all__ = ["Note"]
