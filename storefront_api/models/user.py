# storefront_api/models/user.py
import uuid
from datetime import datetime, timezone

from sqlmodel import SQLModel, Field


class Profile(SQLModel, table=True):
    """
    Storefront / admin profile row.

    Identity:
      - supabase_id: MUST match Supabase auth.users.id

    Role:
      - "user" | "admin"
      - set to "user" at registration; admins are promoted by hand.

    This table is *not* responsible for password hashes. Supabase Auth
    stores the password in its own schema. We only keep contact data
    and the application role.
    """

    __tablename__ = "users"

    id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        primary_key=True,
    )

    supabase_id: uuid.UUID = Field(
        unique=True,
        index=True,
        description="Matches Supabase auth.users.id",
    )

    name: str = Field(
        max_length=50,
        description="Customer display name",
    )

    phone: str | None = Field(
        default=None,
        max_length=30,
        description="Contact phone number",
    )

    email: str = Field(
        index=True,
        description="Email given at registration",
    )

    # Application role (not Supabase RLS role)
    role: str = Field(
        default="user",
        index=True,
        description="Application role: user | admin",
    )

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Creation timestamp (UTC)",
    )
