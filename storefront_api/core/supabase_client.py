# storefront_api/core/supabase_client.py
from fastapi import Request
from supabase import Client, create_client

from storefront_api.core.config import Settings


def build_supabase(settings: Settings) -> Client:
    """
    Create a Supabase client with the service role key.

    Use cases:
      - password sign-up / sign-in and token lookups (Supabase Auth)
      - reads and writes on users / products / orders
      - admin Auth operations (removing an orphaned sign-up)

    WARNING:
      - The service role key bypasses RLS. Every query that must be scoped
        to a caller (e.g. orders) has to filter explicitly.
      - Never expose the service role key to the frontend.
    """
    return create_client(settings.SUPABASE_URL, settings.SUPABASE_SERVICE_ROLE_KEY)


def get_supabase(request: Request) -> Client:
    """
    FastAPI dependency returning the client built during app startup.

    Usage:

        from fastapi import Depends

        @router.get("/example")
        def example_endpoint(client: Client = Depends(get_supabase)):
            ...

    Tests swap it out through `app.dependency_overrides[get_supabase]`.
    """
    return request.app.state.supabase


def get_auth_client(request: Request) -> Client:
    """
    FastAPI dependency returning the client reserved for password flows.

    sign_in_with_password / sign_up keep the resulting user session on the
    client they ran on (and switch its PostgREST headers to that user),
    so they never run on the shared service-role client.
    """
    return request.app.state.supabase_auth
