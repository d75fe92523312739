# storefront_api/repositories/order_repo.py
from typing import Any

from supabase import Client

TABLE = "orders"


class OrderRepository:
    """
    Data access layer for orders.

    NOTE:
      - The service role key bypasses RLS, so the user_id filter below is
        the only thing keeping one customer's orders away from another.
    """

    def list_for_user(self, client: Client, user_id: str) -> list[dict[str, Any]]:
        """Orders belonging to `user_id`, newest first."""
        response = (
            client.table(TABLE)
            .select("*")
            .eq("user_id", user_id)
            .order("created_at", desc=True)
            .execute()
        )
        return response.data
