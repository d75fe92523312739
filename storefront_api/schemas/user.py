# storefront_api/schemas/user.py
from datetime import datetime
from typing import Literal

from pydantic import ConfigDict
from sqlmodel import SQLModel

# App-level roles. Anonymous visitors have no row.
Role = Literal["user", "admin"]


class ProfileCreate(SQLModel):
    """
    Row written to `users` right after a successful Supabase sign-up.

    role is always "user" here; admins are promoted outside the API.
    """

    model_config = ConfigDict(extra="forbid")

    supabase_id: str
    name: str
    phone: str
    email: str
    role: Role = "user"


class ProfileRead(SQLModel):
    """
    Profile block returned under `user.profile` by GET /store/me.
    """

    name: str | None = None
    phone: str | None = None
    email: str | None = None
    role: str
    created_at: datetime | None = None
