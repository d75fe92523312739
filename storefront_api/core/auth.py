# storefront_api/core/auth.py
import logging

from fastapi import Cookie, Depends, HTTPException, Response, status
from postgrest.exceptions import APIError
from supabase import Client
from supabase_auth.errors import AuthError

from storefront_api.core.config import get_settings
from storefront_api.core.supabase_client import get_supabase
from storefront_api.repositories.auth_repo import AuthRepository
from storefront_api.repositories.user_repo import ProfileRepository
from storefront_api.schemas.auth import AuthSession, Identity

logger = logging.getLogger(__name__)

# Two independent cookie namespaces:
#   - sf-token : storefront customers
#   - token    : admin panel
STOREFRONT_COOKIE = "sf-token"
ADMIN_COOKIE = "token"

auth_repo = AuthRepository()
profile_repo = ProfileRepository()


# -------- Cookie helpers --------


def set_session_cookie(response: Response, name: str, session: AuthSession) -> None:
    """
    Store the Supabase access token in an HttpOnly cookie.

    Max-Age follows the session lifetime reported by Supabase (expires_in,
    in seconds); we keep no expiry of our own.
    """
    response.set_cookie(
        key=name,
        value=session.access_token,
        max_age=session.expires_in,
        path="/",
        secure=get_settings().COOKIE_SECURE,
        httponly=True,
        samesite="lax",
    )


def clear_session_cookie(response: Response, name: str) -> None:
    """Expire a session cookie (empty value, Max-Age=0)."""
    response.delete_cookie(
        key=name,
        path="/",
        secure=get_settings().COOKIE_SECURE,
        httponly=True,
        samesite="lax",
    )


def _cleared_cookie_headers(name: str) -> dict[str, str]:
    """
    Set-Cookie header that expires `name`, for attaching to an
    HTTPException (dependencies can't touch the error response).
    """
    scratch = Response()
    clear_session_cookie(scratch, name)
    return {"set-cookie": scratch.headers["set-cookie"]}


# -------- Dependencies --------


def require_storefront_user(
    sf_token: str | None = Cookie(default=None, alias=STOREFRONT_COOKIE),
    client: Client = Depends(get_supabase),
) -> Identity:
    """
    Resolve the storefront customer from the `sf-token` cookie.

    Flow:
      1. No cookie => 401 "No active session".
      2. Token rejected by Supabase (or no user) => clear cookie, 401.
      3. Otherwise return the Identity.

    Raises:
        HTTPException(401)
    """
    if not sf_token:
        logger.warning("🚫 Storefront auth failed: missing token cookie")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="No active session",
        )

    try:
        identity = auth_repo.get_identity(client, sf_token)
    except AuthError as e:
        logger.warning(f"🚫 Storefront auth failed: {e.message}")
        identity = None

    if identity is None:
        # Log out on failure: drop the stale cookie
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid session",
            headers=_cleared_cookie_headers(STOREFRONT_COOKIE),
        )

    logger.info(f"✅ Storefront user authenticated: {identity.email}")
    return identity


def require_admin(
    token: str | None = Cookie(default=None, alias=ADMIN_COOKIE),
    client: Client = Depends(get_supabase),
) -> Identity:
    """
    Resolve the admin from the `token` cookie and enforce role == "admin".

    Unlike the storefront variant the cookie is left in place on failure.

    Raises:
        HTTPException(401): missing or invalid token.
        HTTPException(403): no readable profile, or role is not admin.
    """
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing admin token",
        )

    try:
        identity = auth_repo.get_identity(client, token)
    except AuthError as e:
        logger.warning(f"🚫 Admin auth failed: {e.message}")
        identity = None

    if identity is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid admin token",
        )

    try:
        role = profile_repo.get_role(client, identity.id)
    except APIError as e:
        logger.error(f"🚨 Admin profile lookup failed for {identity.email}: {e.message}")
        role = None

    if role is None:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin profile not found.",
        )
    if role != "admin":
        logger.warning(f"🚫 Non-admin {identity.email} tried an admin route")
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Access Denied: Not an admin.",
        )

    logger.info(f"✅ Admin user authenticated: {identity.email}")
    return identity
