# storefront_api/routers/admin_products.py
import uuid

from fastapi import APIRouter, Depends, status
from supabase import Client

from storefront_api.core.auth import require_admin
from storefront_api.core.supabase_client import get_supabase
from storefront_api.repositories.product_repo import ProductRepository
from storefront_api.schemas.auth import MessageResponse
from storefront_api.schemas.product import ProductCreate, ProductRead, ProductUpdate
from storefront_api.services.product_service import ProductService

router = APIRouter(
    prefix="/api/products",
    tags=["Admin Products"],
    dependencies=[Depends(require_admin)],
)

repo = ProductRepository()
service = ProductService(repo)


@router.get("", response_model=list[ProductRead])
def list_all_products(client: Client = Depends(get_supabase)):
    """
    List every product regardless of status (admin only).
    """
    return service.list_all(client)


@router.get("/{product_id}", response_model=ProductRead)
def get_product_admin(
    product_id: uuid.UUID,
    client: Client = Depends(get_supabase),
):
    """
    Get any product by id, active or not (admin only).
    """
    return service.get_product(client, product_id)


@router.post(
    "",
    response_model=ProductRead,
    status_code=status.HTTP_201_CREATED,
)
def create_product(
    payload: ProductCreate,
    client: Client = Depends(get_supabase),
):
    """
    Create a new product (admin only).
    """
    return service.create_product(client, payload)


@router.put("/{product_id}", response_model=ProductRead)
def update_product(
    product_id: uuid.UUID,
    payload: ProductUpdate,
    client: Client = Depends(get_supabase),
):
    """
    Update an existing product (admin only).

    Fields omitted from the body are left untouched.
    """
    return service.update_product(client, product_id, payload)


@router.delete("/{product_id}", response_model=MessageResponse)
def delete_product(
    product_id: uuid.UUID,
    client: Client = Depends(get_supabase),
):
    """
    Delete a product (admin only).
    """
    service.delete_product(client, product_id)
    return MessageResponse()
