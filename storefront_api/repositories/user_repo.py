# storefront_api/repositories/user_repo.py
from typing import Any

from supabase import Client

from storefront_api.schemas.user import ProfileCreate

TABLE = "users"

# Columns exposed under `user.profile` by GET /store/me
PROFILE_COLUMNS = "name, phone, email, created_at, role"


class ProfileRepository:
    """
    Data access layer for profiles (`users` table).

    Responsibilities:
      - Pure table operations through PostgREST
      - No FastAPI, no HTTP, no business logic

    PostgREST failures (postgrest.exceptions.APIError) are propagated.
    """

    def create(self, client: Client, profile: ProfileCreate) -> dict[str, Any]:
        """Insert a profile row and return it."""
        response = client.table(TABLE).insert(profile.model_dump()).execute()
        return response.data[0]

    def get_by_supabase_id(
        self,
        client: Client,
        supabase_id: str,
        columns: str = PROFILE_COLUMNS,
    ) -> dict[str, Any] | None:
        """Return the profile for an auth identity, or None if not found."""
        response = (
            client.table(TABLE)
            .select(columns)
            .eq("supabase_id", supabase_id)
            .limit(1)
            .execute()
        )
        return response.data[0] if response.data else None

    def get_role(self, client: Client, supabase_id: str) -> str | None:
        """Return the role stored for an identity, or None if it has no profile."""
        row = self.get_by_supabase_id(client, supabase_id, columns="role")
        if row is None:
            return None
        return row.get("role")
