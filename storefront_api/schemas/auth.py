# storefront_api/schemas/auth.py
from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, field_validator
from sqlmodel import SQLModel, Field


class RegisterRequest(SQLModel):
    """
    Payload for POST /store/register.

    Validation rules:
      - email must be a valid EmailStr
      - name / phone cannot be empty or whitespace
      - password must satisfy Supabase's default minimum length (6)
    """

    model_config = ConfigDict(extra="forbid")

    name: str = Field(max_length=50)
    email: EmailStr
    phone: str = Field(max_length=30)
    password: str = Field(min_length=6)

    @field_validator("name", "phone")
    @classmethod
    def not_empty(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("field cannot be empty")
        return v


class LoginRequest(SQLModel):
    """
    Payload for POST /store/login and POST /login.
    """

    model_config = ConfigDict(extra="forbid")

    email: str
    password: str

    @field_validator("email", "password")
    @classmethod
    def not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("field cannot be empty")
        return v


class Identity(BaseModel):
    """
    Authenticated principal as returned by Supabase Auth.

    Only the fields we rely on are declared; everything else the
    provider returns (aud, app_metadata, ...) is kept as extra data so
    /store/me can echo it back.
    """

    model_config = ConfigDict(extra="allow")

    id: str
    email: str | None = None
    created_at: datetime | None = None


class AuthSession(BaseModel):
    """
    Session issued by Supabase on a successful password sign-in.
    """

    access_token: str
    expires_in: int
    identity: Identity


class MessageResponse(SQLModel):
    """Generic `{success, message}` acknowledgement."""

    success: bool = True
    message: str | None = None
