"""The digitalnotes library."""

import logging

from digitalnotes.base import DigitalNotesService

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = ["DigitalNotesService"]
