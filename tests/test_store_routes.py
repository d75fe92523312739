"""Tests for the /store/* endpoints."""

import pytest

from tests.fake_supabase import FakeSupabase, cookie


REGISTRATION = {
    "name": "Bob",
    "email": "bob@example.com",
    "phone": "0912345678",
    "password": "hunter22",
}


# ---------------------------------------------------------------------------
# TestRegister
# ---------------------------------------------------------------------------

class TestRegister:
    """POST /store/register"""

    @pytest.mark.asyncio
    async def test_creates_identity_and_user_profile(self, client, fake_supabase: FakeSupabase):
        resp = await client.post("/store/register", json=REGISTRATION)

        assert resp.status_code == 201
        assert resp.json()["success"] is True
        assert "set-cookie" not in resp.headers

        user, _ = fake_supabase.auth.users["bob@example.com"]
        profiles = fake_supabase.tables["users"]
        assert len(profiles) == 1
        assert profiles[0]["supabase_id"] == user.id
        assert profiles[0]["role"] == "user"
        assert profiles[0]["name"] == "Bob"
        assert profiles[0]["phone"] == "0912345678"

    @pytest.mark.asyncio
    async def test_duplicate_email_fails_without_profile(self, client, fake_supabase: FakeSupabase):
        fake_supabase.auth.create_user("bob@example.com")

        resp = await client.post("/store/register", json=REGISTRATION)

        assert resp.status_code == 500
        assert resp.json() == {"error": "User already registered"}
        assert fake_supabase.tables.get("users", []) == []

    @pytest.mark.asyncio
    async def test_profile_failure_removes_identity(self, client, fake_supabase: FakeSupabase):
        fake_supabase.fail("users", "insert", "duplicate key value violates unique constraint")

        resp = await client.post("/store/register", json=REGISTRATION)

        assert resp.status_code == 500
        assert resp.json() == {"error": "duplicate key value violates unique constraint"}
        assert "bob@example.com" not in fake_supabase.auth.users
        assert len(fake_supabase.auth.admin.deleted) == 1

    @pytest.mark.asyncio
    async def test_failed_cleanup_still_reports_profile_error(
        self, client, fake_supabase: FakeSupabase
    ):
        fake_supabase.fail("users", "insert", "relation \"users\" does not exist")
        fake_supabase.auth.admin.fail_with = "User not allowed"

        resp = await client.post("/store/register", json=REGISTRATION)

        assert resp.status_code == 500
        assert resp.json() == {"error": "relation \"users\" does not exist"}

    @pytest.mark.asyncio
    async def test_invalid_body_is_400(self, client, fake_supabase: FakeSupabase):
        body = dict(REGISTRATION, email="not-an-email")

        resp = await client.post("/store/register", json=body)

        assert resp.status_code == 400
        assert "email" in resp.json()["error"]
        assert fake_supabase.auth.users == {}

    @pytest.mark.asyncio
    async def test_missing_field_is_400(self, client):
        body = {k: v for k, v in REGISTRATION.items() if k != "phone"}

        resp = await client.post("/store/register", json=body)

        assert resp.status_code == 400
        assert "phone" in resp.json()["error"]


# ---------------------------------------------------------------------------
# TestLogin / TestLogout
# ---------------------------------------------------------------------------

class TestLogin:
    """POST /store/login"""

    @pytest.mark.asyncio
    async def test_sets_storefront_cookie(self, client, fake_supabase: FakeSupabase):
        fake_supabase.auth.create_user("alice@example.com", "secret123")

        resp = await client.post(
            "/store/login",
            json={"email": "alice@example.com", "password": "secret123"},
        )

        assert resp.status_code == 200
        assert resp.json()["success"] is True

        set_cookie = resp.headers["set-cookie"]
        token = set_cookie.split(";", 1)[0].split("=", 1)[1]
        assert set_cookie.startswith("sf-token=")
        assert token in fake_supabase.auth.tokens
        lowered = set_cookie.lower()
        assert "max-age=3600" in lowered
        assert "httponly" in lowered
        assert "samesite=lax" in lowered
        assert "path=/" in lowered
        assert "secure" not in lowered

    @pytest.mark.asyncio
    async def test_cookie_lifetime_follows_session(self, client, fake_supabase: FakeSupabase):
        fake_supabase.auth.create_user("alice@example.com", "secret123")
        fake_supabase.auth.expires_in = 600

        resp = await client.post(
            "/store/login",
            json={"email": "alice@example.com", "password": "secret123"},
        )

        assert "max-age=600" in resp.headers["set-cookie"].lower()

    @pytest.mark.asyncio
    async def test_wrong_password_is_401_without_cookie(self, client, fake_supabase: FakeSupabase):
        fake_supabase.auth.create_user("alice@example.com", "secret123")

        resp = await client.post(
            "/store/login",
            json={"email": "alice@example.com", "password": "nope"},
        )

        assert resp.status_code == 401
        assert resp.json() == {"error": "Invalid login credentials"}
        assert "set-cookie" not in resp.headers


class TestLogout:
    """POST /store/logout"""

    @pytest.mark.asyncio
    async def test_clears_cookie_without_session(self, client):
        resp = await client.post("/store/logout")

        assert resp.status_code == 200
        assert resp.json() == {"success": True, "message": "Logged out."}
        set_cookie = resp.headers["set-cookie"].lower()
        assert set_cookie.startswith("sf-token=")
        assert "max-age=0" in set_cookie


# ---------------------------------------------------------------------------
# TestMe
# ---------------------------------------------------------------------------

class TestMe:
    """GET /store/me"""

    @pytest.mark.asyncio
    async def test_no_cookie_is_401(self, client):
        resp = await client.get("/store/me")

        assert resp.status_code == 401
        assert resp.json() == {"error": "No active session"}

    @pytest.mark.asyncio
    async def test_invalid_token_is_401_and_clears_cookie(self, client):
        resp = await client.get("/store/me", headers=cookie("sf-token", "expired"))

        assert resp.status_code == 401
        assert resp.json() == {"error": "Invalid session"}
        assert "max-age=0" in resp.headers["set-cookie"].lower()

    @pytest.mark.asyncio
    async def test_identity_without_profile_is_404(self, client, fake_supabase: FakeSupabase):
        user = fake_supabase.auth.create_user("orphan@example.com")
        token = fake_supabase.auth.issue_token(user)

        resp = await client.get("/store/me", headers=cookie("sf-token", token))

        assert resp.status_code == 404
        assert resp.json() == {"error": "User profile not found."}

    @pytest.mark.asyncio
    async def test_returns_identity_merged_with_profile(self, client, customer):
        user, token = customer

        resp = await client.get("/store/me", headers=cookie("sf-token", token))

        assert resp.status_code == 200
        body = resp.json()["user"]
        assert body["id"] == user.id
        assert body["email"] == "alice@example.com"
        assert body["aud"] == "authenticated"
        assert set(body["profile"]) == {"name", "phone", "email", "created_at", "role"}
        assert body["profile"]["name"] == "Alice"
        assert body["profile"]["role"] == "user"


# ---------------------------------------------------------------------------
# TestOrders
# ---------------------------------------------------------------------------

class TestOrders:
    """GET /store/orders"""

    @pytest.mark.asyncio
    async def test_requires_session(self, client):
        resp = await client.get("/store/orders")

        assert resp.status_code == 401

    @pytest.mark.asyncio
    async def test_only_callers_orders_newest_first(self, client, fake_supabase: FakeSupabase, customer):
        alice, token = customer
        bob = fake_supabase.auth.create_user("bob@example.com")
        fake_supabase.add_profile(bob)
        bob_token = fake_supabase.auth.issue_token(bob)

        fake_supabase.add_order(alice.id, created_at="2024-01-01T10:00:00+00:00", total_amount=5.0)
        fake_supabase.add_order(bob.id, created_at="2024-01-02T10:00:00+00:00", total_amount=99.0)
        fake_supabase.add_order(alice.id, created_at="2024-01-03T10:00:00+00:00", total_amount=7.0)

        resp = await client.get("/store/orders", headers=cookie("sf-token", token))

        assert resp.status_code == 200
        orders = resp.json()
        assert [o["total_amount"] for o in orders] == [7.0, 5.0]
        assert all(o["user_id"] == alice.id for o in orders)

        resp = await client.get("/store/orders", headers=cookie("sf-token", bob_token))
        assert [o["user_id"] for o in resp.json()] == [bob.id]

    @pytest.mark.asyncio
    async def test_two_logged_in_customers_see_only_their_orders(
        self, client, fake_supabase: FakeSupabase
    ):
        tokens = {}
        for email in ("ann@example.com", "ben@example.com"):
            user = fake_supabase.auth.create_user(email, "secret123")
            fake_supabase.add_profile(user)
            fake_supabase.add_order(user.id, total_amount=1.0)
            fake_supabase.add_order(user.id, total_amount=2.0)

            resp = await client.post(
                "/store/login", json={"email": email, "password": "secret123"}
            )
            assert resp.status_code == 200
            set_cookie = resp.headers["set-cookie"]
            tokens[user.id] = set_cookie.split(";", 1)[0].split("=", 1)[1]

        for user_id, token in tokens.items():
            resp = await client.get("/store/orders", headers=cookie("sf-token", token))

            assert resp.status_code == 200
            orders = resp.json()
            assert len(orders) == 2
            assert {o["user_id"] for o in orders} == {user_id}

    @pytest.mark.asyncio
    async def test_no_orders_is_empty_list(self, client, customer):
        _, token = customer

        resp = await client.get("/store/orders", headers=cookie("sf-token", token))

        assert resp.status_code == 200
        assert resp.json() == []

    @pytest.mark.asyncio
    async def test_database_error_is_500_with_message(self, client, fake_supabase: FakeSupabase, customer):
        _, token = customer
        fake_supabase.fail("orders", "select", "permission denied for table orders", code="42501")

        resp = await client.get("/store/orders", headers=cookie("sf-token", token))

        assert resp.status_code == 500
        assert resp.json() == {"error": "permission denied for table orders"}
