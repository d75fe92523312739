"""Global test configuration for the storefront API."""

import os

# Settings are read when storefront_api.main is imported, so dummy values
# must be in place before any test module imports the app.
os.environ.setdefault("SUPABASE_URL", "https://test.supabase.co")
os.environ.setdefault("SUPABASE_SERVICE_ROLE_KEY", "test-service-role-key")

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from tests.fake_supabase import FakeSupabase


@pytest.fixture
def fake_supabase() -> FakeSupabase:
    """Fresh in-memory Supabase for every test."""
    return FakeSupabase()


@pytest_asyncio.fixture
async def client(fake_supabase: FakeSupabase):
    """HTTP client bound to the app, with both Supabase clients faked."""
    from storefront_api.core.supabase_client import get_auth_client, get_supabase
    from storefront_api.main import app

    app.dependency_overrides[get_supabase] = lambda: fake_supabase
    app.dependency_overrides[get_auth_client] = lambda: fake_supabase

    try:
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as c:
            yield c
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def customer(fake_supabase: FakeSupabase):
    """A registered customer with a profile and a live session token."""
    user = fake_supabase.auth.create_user("alice@example.com")
    fake_supabase.add_profile(user, role="user", name="Alice")
    token = fake_supabase.auth.issue_token(user)
    return user, token


@pytest.fixture
def admin(fake_supabase: FakeSupabase):
    """An admin account with a live session token."""
    user = fake_supabase.auth.create_user("admin@example.com")
    fake_supabase.add_profile(user, role="admin", name="Admin")
    token = fake_supabase.auth.issue_token(user)
    return user, token
