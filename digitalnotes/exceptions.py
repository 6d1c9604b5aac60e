"""Library exceptions."""

from typing import Any, Optional


class DigitalNotesException(Exception):
    """Generic Digital Notes exception."""


class DigitalNotesAPIResponseException(DigitalNotesException):
    """Digital Notes API response exception."""

    def __init__(
        self,
        reason: Optional[str],
        code: Optional[int] = None,
        payload: Optional[Any] = None,
    ):
        self.reason = reason
        self.code = code
        self.payload = payload
        message = reason or ""
        if code:
            message += f" ({code})"
        super().__init__(message)


class DigitalNotesSessionExpiredException(DigitalNotesAPIResponseException):
    """The API rejected the bearer token (HTTP 401); the session was cleared."""


class DigitalNotesFailedLoginException(DigitalNotesException):
    """Digital Notes failed login exception."""


class DigitalNotesNotLoggedInException(DigitalNotesException):
    """No session token is stored; authenticated calls are refused."""


class DigitalNotesValidationException(DigitalNotesException):
    """A form failed client-side validation before any request was sent."""


class DigitalNotesNoStoredPasswordAvailableException(DigitalNotesException):
    """Digital Notes no stored password available exception."""
