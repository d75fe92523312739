# storefront_api/repositories/auth_repo.py
from typing import Any

from supabase import Client

from storefront_api.schemas.auth import AuthSession, Identity


def _to_identity(user: Any) -> Identity:
    """Convert a Supabase Auth user model into our Identity schema."""
    return Identity.model_validate(user.model_dump(mode="json"))


class AuthRepository:
    """
    Data access layer for Supabase Auth.

    Responsibilities:
      - Pure Auth API calls (sign up, sign in, token lookup, admin delete)
      - No FastAPI, no HTTP, no business logic

    Errors raised by the Auth API (supabase_auth.errors.AuthError) are
    propagated to the caller.
    """

    def sign_up(self, auth_client: Client, email: str, password: str) -> Identity | None:
        """
        Create an identity. Returns None if Supabase accepted the request
        but sent back no user.
        """
        response = auth_client.auth.sign_up({"email": email, "password": password})
        if response.user is None:
            return None
        return _to_identity(response.user)

    def sign_in(self, auth_client: Client, email: str, password: str) -> AuthSession:
        """Verify email/password and return the issued session."""
        response = auth_client.auth.sign_in_with_password(
            {"email": email, "password": password}
        )
        session = response.session
        return AuthSession(
            access_token=session.access_token,
            expires_in=session.expires_in,
            identity=_to_identity(response.user),
        )

    def get_identity(self, client: Client, token: str) -> Identity | None:
        """Resolve an access token to its identity, or None."""
        response = client.auth.get_user(token)
        if response is None or response.user is None:
            return None
        return _to_identity(response.user)

    def delete_identity(self, client: Client, identity_id: str) -> None:
        """Remove an identity through the admin API (service role only)."""
        client.auth.admin.delete_user(identity_id)
