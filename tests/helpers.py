"""Fake HTTP backend for exercising the client without a server."""

import json
from typing import Any, Dict, List, NamedTuple, Optional, Tuple, Union
from unittest import mock

import requests

from digitalnotes import DigitalNotesService
from digitalnotes.session import SessionStore

API_URL = "http://notes.test"

_NO_BODY = object()


class FakeResponse:
    """Just enough of requests.Response for the session layer."""

    def __init__(self, status_code: int = 200, data: Any = _NO_BODY, text=None):
        self.status_code = status_code
        self._data = data
        if text is None:
            text = "" if data is _NO_BODY else json.dumps(data)
        self.text = text
        self.content = text.encode("utf-8")
        self.reason = "OK" if status_code < 400 else "Error"

    def json(self):
        if self._data is _NO_BODY:
            return json.loads(self.text)
        return self._data


class Call(NamedTuple):
    method: str
    path: str
    headers: Dict[str, str]
    json: Any


class FakeBackend:
    """
    Routes ``(METHOD, path)`` to canned responses and records every call.

    ``path`` is the part after ``/api/``, e.g. ``"notes/abc"``.
    """

    def __init__(self):
        self.routes: Dict[Tuple[str, str], Union[FakeResponse, Exception]] = {}
        self.calls: List[Call] = []

    def on(self, method: str, path: str, status: int = 200, data: Any = None):
        self.routes[(method, path)] = FakeResponse(status, data)
        return self

    def fail(self, method: str, path: str, exc: Exception):
        self.routes[(method, path)] = exc
        return self

    def patch(self):
        backend = self

        def fake_request(session, method, url, *args, **kwargs):
            path = url.split("/api/", 1)[1]
            backend.calls.append(
                Call(method, path, dict(kwargs.get("headers") or {}), kwargs.get("json"))
            )
            route = backend.routes.get((method, path))
            if isinstance(route, Exception):
                raise route
            if route is None:
                return FakeResponse(404, {"error": "Not found"})
            return route

        return mock.patch.object(requests.Session, "request", new=fake_request)

    def paths(self) -> List[str]:
        return [f"{c.method} {c.path}" for c in self.calls]


def logged_in_store(token: Optional[str] = "tok-123") -> SessionStore:
    store = SessionStore()
    store.update(
        {
            "token": token,
            "userId": "u1",
            "username": "Ada Lovelace",
            "email": "ada@example.com",
        }
    )
    return store


def make_api(store: Optional[SessionStore] = None) -> DigitalNotesService:
    return DigitalNotesService(
        api_url=API_URL, store=store if store is not None else logged_in_store()
    )


def note_json(ident: str, title: str, **fields) -> Dict[str, Any]:
    data = {
        "_id": ident,
        "title": title,
        "note": fields.pop("note", f"{title} body"),
        "folder": fields.pop("folder", "Personal"),
        "favorite": fields.pop("favorite", False),
        "date": fields.pop("date", "1/2/2026"),
        "bgColor": fields.pop("bgColor", "#fff"),
        "font": fields.pop("font", "Arial"),
        "images": fields.pop("images", []),
    }
    data.update(fields)
    return data
