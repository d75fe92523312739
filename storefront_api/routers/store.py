# storefront_api/routers/store.py
from typing import Any

from fastapi import APIRouter, Depends, Response, status
from supabase import Client

from storefront_api.core.auth import (
    STOREFRONT_COOKIE,
    clear_session_cookie,
    require_storefront_user,
    set_session_cookie,
)
from storefront_api.core.supabase_client import get_auth_client, get_supabase
from storefront_api.repositories.auth_repo import AuthRepository
from storefront_api.repositories.order_repo import OrderRepository
from storefront_api.repositories.user_repo import ProfileRepository
from storefront_api.schemas.auth import (
    Identity,
    LoginRequest,
    MessageResponse,
    RegisterRequest,
)
from storefront_api.services.auth_service import AuthService
from storefront_api.services.order_service import OrderService

router = APIRouter(prefix="/store", tags=["Storefront"])

auth_service = AuthService(AuthRepository(), ProfileRepository())
order_service = OrderService(OrderRepository())


# -------- Session --------


@router.post(
    "/register",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
)
def register(
    payload: RegisterRequest,
    client: Client = Depends(get_supabase),
    auth_client: Client = Depends(get_auth_client),
):
    """
    Create a customer account (Supabase identity + profile row).

    No cookie is set: Supabase sends a confirmation email first.
    """
    return auth_service.register(client, auth_client, payload)


@router.post("/login", response_model=MessageResponse)
def login(
    payload: LoginRequest,
    response: Response,
    auth_client: Client = Depends(get_auth_client),
):
    """
    Storefront login. Sets the HttpOnly `sf-token` cookie.
    """
    session = auth_service.login_storefront(auth_client, payload)
    set_session_cookie(response, STOREFRONT_COOKIE, session)
    return MessageResponse(message="Login successful.")


@router.get("/me")
def read_me(
    client: Client = Depends(get_supabase),
    identity: Identity = Depends(require_storefront_user),
) -> dict[str, Any]:
    """
    Return the signed-in customer: auth fields + `profile`.

    Auth:
      - Requires a valid `sf-token` cookie.
    """
    return auth_service.current_session(client, identity)


@router.post("/logout", response_model=MessageResponse)
def logout(response: Response):
    """
    Clear the `sf-token` cookie. Always succeeds.
    """
    clear_session_cookie(response, STOREFRONT_COOKIE)
    return MessageResponse(message="Logged out.")


# -------- Orders --------


@router.get("/orders")
def list_my_orders(
    client: Client = Depends(get_supabase),
    identity: Identity = Depends(require_storefront_user),
) -> list[dict[str, Any]]:
    """
    List the authenticated customer's orders, newest first.
    """
    return order_service.list_user_orders(client, identity)
