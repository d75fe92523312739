# storefront_api/models/product.py
import uuid
from datetime import datetime, timezone

from sqlalchemy import JSON, Column
from sqlmodel import SQLModel, Field


class Product(SQLModel, table=True):
    """
    Product catalog entry.

    Columns:
      - id, name, description, status, images, price,
        created_at, updated_at

    Only rows with status == "active" are visible on the storefront.
    """

    __tablename__ = "products"

    id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        primary_key=True,
        index=True,
    )

    name: str = Field(
        max_length=255,
        index=True,
        description="Display name of the product",
    )

    description: str | None = Field(
        default=None,
        description="Optional long description / HTML",
    )

    # active | inactive
    status: str = Field(
        default="active",
        index=True,
        description="Storefront visibility",
    )

    # Ordered image URLs; the first one is the hero image
    images: list[str] | None = Field(
        default=None,
        sa_column=Column(JSON),
    )

    price: float = Field(
        ge=0,
        description="Unit price",
    )

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Creation timestamp (UTC)",
    )

    updated_at: datetime | None = Field(
        default=None,
        description="Set by the admin API on every update",
    )
