# storefront_api/routers/products.py
import uuid

from fastapi import APIRouter, Depends
from supabase import Client

from storefront_api.core.supabase_client import get_supabase
from storefront_api.repositories.product_repo import ProductRepository
from storefront_api.schemas.product import ProductRead
from storefront_api.services.product_service import ProductService

router = APIRouter(tags=["Products"])

repo = ProductRepository()
service = ProductService(repo)


# -------- Public endpoints --------


@router.get("/products", response_model=list[ProductRead])
def list_products(client: Client = Depends(get_supabase)):
    """
    List active products, newest first.

    - Public endpoint.
    """
    return service.list_active(client)


@router.get("/product/{product_id}", response_model=ProductRead)
def get_product(
    product_id: uuid.UUID,
    client: Client = Depends(get_supabase),
):
    """
    Get a single active product by id.

    - Public endpoint.
    - Inactive products answer 404, same as unknown ids.
    """
    return service.get_active(client, product_id)
