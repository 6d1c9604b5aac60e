"""
Pydantic models for the auth endpoints.

Models for these operations:
    - Register a new account  (POST /api/auth/register)
    - Log in                  (POST /api/auth/login)
"""

from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator

from digitalnotes.utils import underscore_to_camelcase


# ─── Base and Shared Config ──────────────────────────────────────────────────
class ConfigModel(BaseModel):
    """camelCase wire names; fields may also be set by their Python name."""

    model_config = ConfigDict(
        alias_generator=underscore_to_camelcase,
        populate_by_name=True,
        extra="allow",
    )


EXAMPLE_EMAIL = "user@example.com"
EXAMPLE_USERNAME = "Ada Lovelace"


# ─── Requests ───────────────────────────────────────────────────────────────
class RegisterRequest(ConfigModel):
    """Request payload for account registration."""

    username: str
    """Display name."""

    email: str
    """Login email."""

    password: str
    """Plain password, at least 6 characters."""

    confirm_password: str
    """Must equal ``password``; the server checks it again."""

    model_config = ConfigModel.model_config | ConfigDict(
        json_schema_extra={
            "example": {
                "username": EXAMPLE_USERNAME,
                "email": EXAMPLE_EMAIL,
                "password": "secret1",
                "confirmPassword": "secret1",
            }
        }
    )


class LoginRequest(ConfigModel):
    """Request payload for login."""

    email: str
    password: str

    model_config = ConfigModel.model_config | ConfigDict(
        json_schema_extra={
            "example": {"email": EXAMPLE_EMAIL, "password": "secret1"}
        }
    )


# ─── Responses ──────────────────────────────────────────────────────────────
class UserInfo(ConfigModel):
    """The user object returned with a login token."""

    id: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("_id", "id")
    )
    """Server-side user identifier."""

    username: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("username", "name")
    )
    """Display name (older servers call it ``name``)."""

    email: Optional[str] = None
    """Email the account is registered with."""

    @model_validator(mode="before")
    @classmethod
    def _prefer_populated(cls, data: Any) -> Any:
        # `_id || id` and `username || name`: skip empty values
        if not isinstance(data, dict):
            return data
        data = dict(data)
        ident = data.pop("_id", None) or data.pop("id", None)
        data.pop("id", None)
        if ident is not None:
            data["_id"] = str(ident)
        name = data.pop("username", None) or data.pop("name", None)
        data.pop("name", None)
        if name is not None:
            data["username"] = name
        return data


class LoginResponse(ConfigModel):
    """Response for a successful login."""

    token: str = Field(..., min_length=1)
    """Bearer token for subsequent requests."""

    user: UserInfo = Field(default_factory=UserInfo)
    """The logged-in user."""

    model_config = ConfigModel.model_config | ConfigDict(
        json_schema_extra={
            "example": {
                "token": "eyJhbGciOi...",
                "user": {
                    "_id": "65f0c0ffee",
                    "username": EXAMPLE_USERNAME,
                    "email": EXAMPLE_EMAIL,
                },
            }
        }
    )
