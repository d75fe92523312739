# storefront_api/services/stats_service.py
from datetime import datetime, timezone

from supabase import Client

from storefront_api.repositories.product_repo import ProductRepository
from storefront_api.schemas.stats import OverviewStats, ProductActivity


def _as_utc(ts: datetime) -> datetime:
    """Timestamps stored without a zone are taken to be UTC."""
    if ts.tzinfo is None:
        return ts.replace(tzinfo=timezone.utc)
    return ts


class StatsService:
    """
    Aggregated numbers for the admin dashboard.
    """

    def __init__(self, repo: ProductRepository):
        self.repo = repo

    def get_overview(self, client: Client) -> OverviewStats:
        rows = [ProductActivity.model_validate(r) for r in self.repo.list_activity(client)]

        active = 0
        images = 0
        last_updated: datetime | None = None

        for row in rows:
            if row.status == "active":
                active += 1
            if isinstance(row.images, list):
                images += len(row.images)

            touched = row.updated_at or row.created_at
            if touched is None:
                continue
            touched = _as_utc(touched)
            if last_updated is None or touched > last_updated:
                last_updated = touched

        return OverviewStats(
            total_products=len(rows),
            active_products=active,
            total_images=images,
            last_updated=last_updated,
        )
