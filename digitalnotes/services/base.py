"""Base service."""

from digitalnotes.exceptions import DigitalNotesNotLoggedInException
from digitalnotes.session import DigitalNotesSession, SessionStore


class BaseService:
    """The base Digital Notes service."""

    def __init__(self, session: DigitalNotesSession) -> None:
        self._session = session

    @property
    def session(self) -> DigitalNotesSession:
        """The session this service talks through."""
        return self._session

    @property
    def store(self) -> SessionStore:
        """Persisted token and user fields."""
        return self._session.store

    def _require_token(self, message: str = "Please login to continue") -> None:
        if not self.store.token:
            raise DigitalNotesNotLoggedInException(message)
