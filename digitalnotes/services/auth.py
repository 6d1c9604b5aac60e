"""Account registration, login and logout."""

from __future__ import annotations

import logging

from pydantic import ValidationError

from digitalnotes.exceptions import (
    DigitalNotesAPIResponseException,
    DigitalNotesFailedLoginException,
    DigitalNotesValidationException,
)
from digitalnotes.models.services.auth.auth_models import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    UserInfo,
)
from digitalnotes.services.base import BaseService
from digitalnotes.session import EMAIL_KEY, TOKEN_KEY, USER_ID_KEY, USERNAME_KEY

LOGGER = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6

SIGNUP_INVALID = (
    "Please fill all fields and make sure passwords match (min 6 characters)."
)
SIGNUP_FAILED = "Signup failed. Try again."
LOGIN_INCOMPLETE = "Please fill in all fields."
LOGIN_FAILED = "Login failed. Please check your credentials and try again."


def _server_message(exc: DigitalNotesAPIResponseException, *keys: str):
    if isinstance(exc.payload, dict):
        for key in keys:
            if exc.payload.get(key):
                return str(exc.payload[key])
    return None


class AuthService(BaseService):
    """Talks to ``/api/auth/*`` and owns the session fields in the store."""

    def register(
        self, username: str, email: str, password: str, confirm_password: str
    ) -> None:
        if (
            not username.strip()
            or not email.strip()
            or len(password) < MIN_PASSWORD_LENGTH
            or password != confirm_password
        ):
            raise DigitalNotesValidationException(SIGNUP_INVALID)

        payload = RegisterRequest(
            username=username,
            email=email,
            password=password,
            confirm_password=confirm_password,
        ).model_dump(by_alias=True)
        LOGGER.info("Registering account for %s", email)
        try:
            self.session.request_json(
                "POST", "auth/register", json=payload, authenticated=False
            )
        except DigitalNotesAPIResponseException as exc:
            message = _server_message(exc, "error") or SIGNUP_FAILED
            LOGGER.error("Signup failed for %s: %s", email, message)
            raise DigitalNotesAPIResponseException(
                message, exc.code, payload=exc.payload
            ) from exc

    def login(self, email: str, password: str) -> UserInfo:
        if email.strip() == "" or password.strip() == "":
            raise DigitalNotesValidationException(LOGIN_INCOMPLETE)

        payload = LoginRequest(email=email, password=password).model_dump(
            by_alias=True
        )
        LOGGER.info("Logging in as %s", email)
        try:
            data = self.session.request_json(
                "POST", "auth/login", json=payload, authenticated=False
            )
        except DigitalNotesAPIResponseException as exc:
            message = _server_message(exc, "error", "message") or LOGIN_FAILED
            LOGGER.error("Login failed for %s: %s", email, message)
            raise DigitalNotesFailedLoginException(message) from exc

        try:
            response = LoginResponse.model_validate(data)
        except ValidationError as exc:
            LOGGER.error("Login response validation failed: %s", exc)
            raise DigitalNotesFailedLoginException(LOGIN_FAILED) from exc

        user = response.user
        self.store.update(
            {
                TOKEN_KEY: response.token,
                USER_ID_KEY: user.id,
                USERNAME_KEY: user.username,
                EMAIL_KEY: user.email,
            }
        )
        LOGGER.info("Logged in as %s", user.username or user.email)
        return user

    def logout(self) -> None:
        self.store.clear()
        LOGGER.info("Logged out")

    @property
    def user(self) -> UserInfo:
        return UserInfo(
            id=self.store.user_id,
            username=self.store.username,
            email=self.store.email,
        )

    @property
    def is_logged_in(self) -> bool:
        return self.store.is_authenticated
