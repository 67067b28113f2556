"""
User Pydantic Schemas

Schemas:
- SignupRequest: Registration data (email, password)
- LoginRequest: Credentials for login
- AuthResponse: Returned by signup and login ({ok, uid, email})
- UserResponse: Public user data (never exposes the password hash)
- MeResponse: Envelope for GET /me
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from clookbook.config import get_settings
from clookbook.schemas.common import CamelModel

settings = get_settings()

SIGNUP_REQUIREMENTS_MESSAGE = (
    f"Email and a password of at least {settings.min_password_length} "
    "characters are required"
)


class SignupRequest(BaseModel):
    """
    Schema for user registration.

    Email is trimmed and lowercased before validation so the same address
    always maps to the same account.
    """

    email: EmailStr = Field(
        ...,
        description="User's email address",
        examples=["reader@example.com"],
    )

    password: str = Field(
        ...,
        max_length=128,
        description=f"Password (min {settings.min_password_length} chars)",
        examples=["secret123"],
    )

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, v):
        if isinstance(v, str):
            v = v.strip().lower()
        if not v:
            raise ValueError(SIGNUP_REQUIREMENTS_MESSAGE)
        return v

    @field_validator("password")
    @classmethod
    def password_long_enough(cls, v: str) -> str:
        if len(v) < settings.min_password_length:
            raise ValueError(SIGNUP_REQUIREMENTS_MESSAGE)
        return v


class LoginRequest(BaseModel):
    """
    Credentials for login.

    Deliberately loose: a malformed email or empty password just fails
    authentication with 401 instead of revealing validation details.
    """

    email: str = Field(default="", description="Registered email address")
    password: str = Field(default="", max_length=128, description="Account password")


class AuthResponse(BaseModel):
    """Returned by signup and login. The token itself travels in a cookie."""

    ok: bool = Field(default=True)
    uid: int = Field(..., description="Authenticated user id")
    email: str = Field(..., description="Authenticated user email")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"ok": True, "uid": 1, "email": "reader@example.com"}
        },
    )


class UserResponse(CamelModel):
    """
    Schema for user responses.

    SECURITY: Never includes the password hash.
    """

    id: int = Field(..., description="Unique user identifier")
    email: str = Field(..., description="User's email address")
    created_at: datetime = Field(..., description="When the user registered")


class MeResponse(BaseModel):
    """Envelope for the current user's profile."""

    user: UserResponse | None = None
