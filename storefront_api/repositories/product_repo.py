# storefront_api/repositories/product_repo.py
from typing import Any

from postgrest.types import CountMethod
from supabase import Client

TABLE = "products"


class ProductRepository:
    """
    Data access layer for products.

    - Pure PostgREST operations (CRUD + queries).
    - No FastAPI, no business logic.
    """

    def list_products(self, client: Client, only_active: bool = True) -> list[dict[str, Any]]:
        """All products, newest first."""
        query = client.table(TABLE).select("*")
        if only_active:
            query = query.eq("status", "active")
        response = query.order("created_at", desc=True).execute()
        return response.data

    def get_by_id(
        self,
        client: Client,
        product_id: str,
        only_active: bool = False,
    ) -> dict[str, Any] | None:
        query = client.table(TABLE).select("*").eq("id", product_id)
        if only_active:
            query = query.eq("status", "active")
        response = query.limit(1).execute()
        return response.data[0] if response.data else None

    def create(self, client: Client, values: dict[str, Any]) -> dict[str, Any]:
        response = client.table(TABLE).insert(values).execute()
        return response.data[0]

    def update(
        self,
        client: Client,
        product_id: str,
        values: dict[str, Any],
    ) -> dict[str, Any] | None:
        """Apply `values` to one row; None if no row has this id."""
        response = client.table(TABLE).update(values).eq("id", product_id).execute()
        return response.data[0] if response.data else None

    def delete(self, client: Client, product_id: str) -> int:
        """Delete by id and return the number of rows removed."""
        response = (
            client.table(TABLE)
            .delete(count=CountMethod.exact)
            .eq("id", product_id)
            .execute()
        )
        return response.count or 0

    def list_activity(self, client: Client) -> list[dict[str, Any]]:
        """status / images / timestamps for every product (overview stats)."""
        response = (
            client.table(TABLE)
            .select("status, images, created_at, updated_at")
            .execute()
        )
        return response.data
