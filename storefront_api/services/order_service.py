# storefront_api/services/order_service.py
import logging
from typing import Any

from supabase import Client

from storefront_api.repositories.order_repo import OrderRepository
from storefront_api.schemas.auth import Identity

logger = logging.getLogger(__name__)


class OrderService:
    """
    Read-only order access for storefront customers.
    """

    def __init__(self, order_repo: OrderRepository):
        self.order_repo = order_repo

    def list_user_orders(self, client: Client, identity: Identity) -> list[dict[str, Any]]:
        """
        Orders owned by the authenticated identity, newest first.
        Returns [] when the customer has none.
        """
        orders = self.order_repo.list_for_user(client, identity.id)
        logger.info(f"✅ Fetched {len(orders)} orders for {identity.email}.")
        return orders
