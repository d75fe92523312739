# storefront_api/routers/admin_stats.py
from fastapi import APIRouter, Depends
from supabase import Client

from storefront_api.core.auth import require_admin
from storefront_api.core.supabase_client import get_supabase
from storefront_api.repositories.product_repo import ProductRepository
from storefront_api.schemas.stats import OverviewStats
from storefront_api.services.stats_service import StatsService

router = APIRouter(prefix="/api", tags=["Admin Stats"])

repo = ProductRepository()
service = StatsService(repo)


@router.get(
    "/overview",
    response_model=OverviewStats,
    dependencies=[Depends(require_admin)],
)
def get_overview(client: Client = Depends(get_supabase)):
    """
    Catalog numbers for the admin dashboard:
      - totalProducts / activeProducts
      - totalImages (sum of image list lengths)
      - lastUpdated (latest updated_at, falling back to created_at)

    Only accessible to users with role='admin'.
    """
    return service.get_overview(client)
