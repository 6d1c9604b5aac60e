"""
Session context for the Digital Notes API.

Two pieces live here:
  - SessionStore: the persisted key-value storage holding the bearer token and
    the user display fields (userId, username, email).
  - DigitalNotesSession: a `requests.Session` that attaches the bearer token to
    authenticated requests, maps HTTP failures onto library exceptions and
    clears the store when the API answers 401.

The store is handed to the session explicitly; nothing reads ambient state.
"""

from __future__ import annotations

import json
import logging
import os
from typing import Any, Dict, Iterable, Optional

import requests

from .exceptions import (
    DigitalNotesAPIResponseException,
    DigitalNotesSessionExpiredException,
)

LOGGER = logging.getLogger(__name__)

TOKEN_KEY = "token"
USER_ID_KEY = "userId"
USERNAME_KEY = "username"
EMAIL_KEY = "email"

# "user" is a legacy key some clients wrote; it is removed with the rest.
SESSION_KEYS = (TOKEN_KEY, USER_ID_KEY, USERNAME_KEY, EMAIL_KEY, "user")

DEFAULT_TIMEOUT = 30.0


class SessionStore:
    """
    Small JSON-backed key-value store.

    With ``path=None`` the store is memory-only, which is what tests and
    one-shot scripts want.
    """

    def __init__(self, path: Optional[str] = None):
        self._path = path
        self._data: Dict[str, str] = {}
        self._load()

    @property
    def path(self) -> Optional[str]:
        return self._path

    def _load(self) -> None:
        if not self._path or not os.path.exists(self._path):
            return
        try:
            with open(self._path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as exc:
            LOGGER.warning("Ignoring unreadable session file %s: %s", self._path, exc)
            return
        if isinstance(data, dict):
            self._data = {str(k): str(v) for k, v in data.items() if v is not None}

    def _flush(self) -> None:
        if not self._path:
            return
        directory = os.path.dirname(self._path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(self._path, "w", encoding="utf-8") as f:
            json.dump(self._data, f, indent=2)
        os.chmod(self._path, 0o600)

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: Optional[str]) -> None:
        if value is None:
            self.remove(key)
            return
        self._data[key] = str(value)
        self._flush()

    def update(self, values: Dict[str, Optional[str]]) -> None:
        for key, value in values.items():
            if value is None:
                self._data.pop(key, None)
            else:
                self._data[key] = str(value)
        self._flush()

    def remove(self, *keys: str) -> None:
        changed = False
        for key in keys:
            if key in self._data:
                del self._data[key]
                changed = True
        if changed:
            self._flush()

    def clear(self, keys: Iterable[str] = SESSION_KEYS) -> None:
        """Drop the token and cached user fields."""
        LOGGER.debug("Clearing session keys")
        self.remove(*keys)

    def as_dict(self) -> Dict[str, str]:
        return dict(self._data)

    # ----- typed accessors -----

    @property
    def token(self) -> Optional[str]:
        return self.get(TOKEN_KEY)

    @property
    def user_id(self) -> Optional[str]:
        return self.get(USER_ID_KEY)

    @property
    def username(self) -> Optional[str]:
        return self.get(USERNAME_KEY)

    @property
    def email(self) -> Optional[str]:
        return self.get(EMAIL_KEY)

    @property
    def is_authenticated(self) -> bool:
        return bool(self.token)


class DigitalNotesSession(requests.Session):
    """Digital Notes session."""

    def __init__(
        self,
        store: SessionStore,
        api_root: str,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        super().__init__()
        self.store = store
        self.api_root = api_root.rstrip("/")
        self.timeout = timeout
        self.headers.update({"Content-Type": "application/json"})

    def url(self, path: str) -> str:
        return f"{self.api_root}/api/{path.lstrip('/')}"

    def request(self, method, url, *args, authenticated: bool = True, **kwargs):
        headers = dict(kwargs.pop("headers", None) or {})
        token = self.store.token if authenticated else None
        if token:
            headers["Authorization"] = f"Bearer {token}"
        kwargs.setdefault("timeout", self.timeout)

        LOGGER.debug("%s %s", method, url)
        try:
            response = super().request(method, url, *args, headers=headers, **kwargs)
        except requests.exceptions.RequestException as exc:
            LOGGER.error("%s %s failed: %s", method, url, exc)
            raise DigitalNotesAPIResponseException(f"Network error: {exc}") from exc

        code = response.status_code
        LOGGER.debug("%s %s returned status %d", method, url, code)
        if code == 401 and token:
            LOGGER.warning("Session token rejected by %s, clearing session", url)
            self.store.clear()
            raise DigitalNotesSessionExpiredException(
                "Session expired. Please login again.",
                code,
                payload=self._error_body(response),
            )
        if code >= 400:
            body = self._error_body(response)
            reason = self._error_reason(body) or response.reason or "Request failed"
            LOGGER.error("%s %s failed with code %d: %s", method, url, code, reason)
            raise DigitalNotesAPIResponseException(reason, code, payload=body)
        return response

    def request_json(self, method: str, path: str, **kwargs) -> Any:
        """Issue a request against ``/api/<path>`` and decode the JSON body."""
        response = self.request(method, self.url(path), **kwargs)
        if response.status_code == 204 or not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            LOGGER.error("Failed to parse JSON response from %s", path)
            raise DigitalNotesAPIResponseException(
                "Invalid JSON response", response.status_code, payload=response.text
            ) from exc

    @staticmethod
    def _error_body(response) -> Any:
        try:
            return response.json()
        except ValueError:
            return getattr(response, "text", None)

    @staticmethod
    def _error_reason(body: Any) -> Optional[str]:
        if isinstance(body, dict):
            return body.get("error") or body.get("message")
        return None
