# storefront_api/schemas/stats.py
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from sqlmodel import SQLModel


class ProductActivity(SQLModel):
    """
    The slice of a product row the overview needs.

    `images` is left untyped: legacy rows may hold null or a non-list
    value, which simply counts as zero images.
    """

    status: str | None = None
    images: Any = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class OverviewStats(BaseModel):
    """
    Payload for the admin dashboard header.

    Serialized with camelCase keys (totalProducts, activeProducts, ...)
    to match what the admin panel reads.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    total_products: int
    active_products: int
    total_images: int
    last_updated: datetime | None = None
