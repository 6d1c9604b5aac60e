from __future__ import annotations

import os

from pydantic import BaseModel, ConfigDict

EXTRA_ENV = "DIGITALNOTES_EXTRA"
EXTRA_MODES = ("allow", "forbid", "ignore")


def _env_extra_mode(default: str = "allow") -> str:
    """Extra-field mode for note models, read from ``DIGITALNOTES_EXTRA``."""
    raw = (os.getenv(EXTRA_ENV) or default).strip().lower()
    return raw if raw in EXTRA_MODES else default


class NotesModel(BaseModel):
    """Base for note payloads; unknown server fields are kept by default."""

    model_config = ConfigDict(
        extra=_env_extra_mode(),
        populate_by_name=True,
        frozen=True,
    )


__all__ = ["NotesModel", "_env_extra_mode"]
