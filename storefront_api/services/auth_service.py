# storefront_api/services/auth_service.py
import logging
from typing import Any

from fastapi import HTTPException, status
from postgrest.exceptions import APIError
from supabase import Client
from supabase_auth.errors import AuthError

from storefront_api.repositories.auth_repo import AuthRepository
from storefront_api.repositories.user_repo import ProfileRepository
from storefront_api.schemas.auth import (
    AuthSession,
    Identity,
    LoginRequest,
    RegisterRequest,
)
from storefront_api.schemas.user import ProfileCreate, ProfileRead

logger = logging.getLogger(__name__)


class AuthService:
    """
    Business logic for sign-up, sign-in and session lookups.

    Responsibilities:
      - orchestrate Supabase Auth + the `users` profile table
      - undo a sign-up whose profile row could not be written
      - map provider errors to HTTP errors

    Two clients are involved:
      - `auth_client` runs the password flows. Signing in stores the user
        session on the client it runs on, so it is kept apart from the
        service-role client.
      - `client` (service role) reads / writes tables and calls the
        admin Auth API.
    """

    def __init__(self, auth_repo: AuthRepository, profile_repo: ProfileRepository):
        self.auth_repo = auth_repo
        self.profile_repo = profile_repo

    # ----- Registration -----

    def register(
        self,
        client: Client,
        auth_client: Client,
        payload: RegisterRequest,
    ) -> dict[str, Any]:
        """
        Create the Supabase identity, then its profile row (role="user").

        The two writes are not atomic. If the profile insert fails, the
        identity is deleted again so the email can be reused.

        Raises:
            HTTPException(500): sign-up or profile insert failed.
        """
        logger.info(f"➡️ Registration attempt for: {payload.email}")

        try:
            identity = self.auth_repo.sign_up(
                auth_client, payload.email, payload.password
            )
        except AuthError as e:
            logger.error(f"💥 Sign-up failed for {payload.email}: {e.message}")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=e.message or "Registration failed",
            )

        if identity is None:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Signup successful but no user data returned.",
            )
        logger.info(f"✅ Auth user created: {identity.id}")

        profile = ProfileCreate(
            supabase_id=identity.id,
            name=payload.name,
            phone=payload.phone,
            email=payload.email,
            role="user",
        )
        try:
            self.profile_repo.create(client, profile)
        except APIError as e:
            logger.error(f"💥 Profile insert failed for {payload.email}: {e.message}")
            self._discard_identity(client, identity)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=e.message or "Registration failed",
            )

        logger.info(f"✅ Profile for {payload.email} created.")
        # No cookie here: the user must confirm their email first.
        return {
            "success": True,
            "message": "Registration successful. Please check your email to confirm.",
        }

    def _discard_identity(self, client: Client, identity: Identity) -> None:
        """Compensation step for a half-finished registration."""
        try:
            self.auth_repo.delete_identity(client, identity.id)
        except AuthError as e:
            logger.error(
                f"🚨 Could not remove orphaned auth user {identity.id}: {e.message}"
            )
            return
        logger.info(f"↩️ Removed orphaned auth user {identity.id}")

    # ----- Login -----

    def _sign_in(self, auth_client: Client, payload: LoginRequest) -> AuthSession:
        """
        Password sign-in.

        Raises:
            HTTPException(401): with Supabase's message verbatim.
        """
        try:
            return self.auth_repo.sign_in(auth_client, payload.email, payload.password)
        except AuthError as e:
            logger.warning(f"🚫 Login failed for {payload.email}: {e.message}")
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail=e.message or "Invalid credentials",
            )

    def login_storefront(self, auth_client: Client, payload: LoginRequest) -> AuthSession:
        """Storefront login; any valid account may sign in."""
        session = self._sign_in(auth_client, payload)
        logger.info(f"✅ Storefront user {payload.email} logged in.")
        return session

    def login_admin(
        self,
        client: Client,
        auth_client: Client,
        payload: LoginRequest,
    ) -> AuthSession:
        """
        Admin login: valid credentials AND a profile with role == "admin".

        Raises:
            HTTPException(401): bad credentials.
            HTTPException(403): no readable profile / not an admin.
        """
        session = self._sign_in(auth_client, payload)

        try:
            role = self.profile_repo.get_role(client, session.identity.id)
        except APIError as e:
            logger.error(f"🚨 Profile lookup failed for {payload.email}: {e.message}")
            role = None

        if role is None:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Profile not found.",
            )
        if role != "admin":
            logger.warning(f"🚫 Admin login refused for {payload.email}: role={role}")
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Not an administrator.",
            )

        logger.info(f"✅ Admin {payload.email} logged in.")
        return session

    # ----- Current session -----

    def current_session(self, client: Client, identity: Identity) -> dict[str, Any]:
        """
        Identity fields plus the profile under `profile`.

        Raises:
            HTTPException(404): identity has no profile row.
        """
        profile = self.profile_repo.get_by_supabase_id(client, identity.id)
        if profile is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="User profile not found.",
            )

        full_user = identity.model_dump(mode="json")
        full_user["profile"] = ProfileRead.model_validate(profile).model_dump(mode="json")
        logger.info(f"✅ Active storefront session for {identity.email}")
        return {"user": full_user}
