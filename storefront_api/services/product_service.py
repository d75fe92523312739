# storefront_api/services/product_service.py
import uuid
from datetime import datetime, timezone
from typing import Any

from fastapi import HTTPException, status
from supabase import Client

from storefront_api.repositories.product_repo import ProductRepository
from storefront_api.schemas.product import ProductCreate, ProductUpdate


class ProductService:
    """
    Business logic for products.

    Responsibilities:
      - storefront visibility (status == "active")
      - partial updates with a server-set updated_at
      - admin-only operations (enforced at router via require_admin)
    """

    def __init__(self, repo: ProductRepository):
        self.repo = repo

    # ----- Storefront -----

    def list_active(self, client: Client) -> list[dict[str, Any]]:
        return self.repo.list_products(client, only_active=True)

    def get_active(self, client: Client, product_id: uuid.UUID) -> dict[str, Any]:
        """
        An inactive product is reported exactly like a missing one.
        """
        product = self.repo.get_by_id(client, str(product_id), only_active=True)
        if not product:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Product not found or not active.",
            )
        return product

    # ----- Admin -----

    def list_all(self, client: Client) -> list[dict[str, Any]]:
        return self.repo.list_products(client, only_active=False)

    def get_product(self, client: Client, product_id: uuid.UUID) -> dict[str, Any]:
        product = self.repo.get_by_id(client, str(product_id))
        if not product:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Product not found",
            )
        return product

    def create_product(self, client: Client, payload: ProductCreate) -> dict[str, Any]:
        return self.repo.create(client, payload.model_dump())

    def update_product(
        self,
        client: Client,
        product_id: uuid.UUID,
        payload: ProductUpdate,
    ) -> dict[str, Any]:
        """
        Partial update of a product.
        - Only fields sent by the client are written.
        - updated_at is always refreshed.
        """
        values = payload.model_dump(exclude_unset=True)
        values["updated_at"] = datetime.now(timezone.utc).isoformat()

        product = self.repo.update(client, str(product_id), values)
        if not product:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Product not found",
            )
        return product

    def delete_product(self, client: Client, product_id: uuid.UUID) -> None:
        deleted = self.repo.delete(client, str(product_id))
        if deleted == 0:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Product not found",
            )
