# storefront_api/routers/admin_auth.py
from fastapi import APIRouter, Depends, Response
from supabase import Client

from storefront_api.core.auth import ADMIN_COOKIE, clear_session_cookie, set_session_cookie
from storefront_api.core.supabase_client import get_auth_client, get_supabase
from storefront_api.repositories.auth_repo import AuthRepository
from storefront_api.repositories.user_repo import ProfileRepository
from storefront_api.schemas.auth import LoginRequest, MessageResponse
from storefront_api.services.auth_service import AuthService

router = APIRouter(tags=["Admin Auth"])

service = AuthService(AuthRepository(), ProfileRepository())


@router.post("/login", response_model=MessageResponse)
def admin_login(
    payload: LoginRequest,
    response: Response,
    client: Client = Depends(get_supabase),
    auth_client: Client = Depends(get_auth_client),
):
    """
    Admin panel login.

    Only accounts whose profile has role='admin' get the `token` cookie.
    """
    session = service.login_admin(client, auth_client, payload)
    set_session_cookie(response, ADMIN_COOKIE, session)
    return MessageResponse()


@router.post("/logout", response_model=MessageResponse)
def admin_logout(response: Response):
    """Clear the admin `token` cookie."""
    clear_session_cookie(response, ADMIN_COOKIE)
    return MessageResponse(message="Logged out.")
