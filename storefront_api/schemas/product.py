# storefront_api/schemas/product.py
import uuid
from datetime import datetime
from typing import Literal

from pydantic import ConfigDict, field_validator
from sqlmodel import SQLModel, Field

ProductStatus = Literal["active", "inactive"]


class ProductCreate(SQLModel):
    """
    Payload for creating a product (admin).
    """

    model_config = ConfigDict(extra="forbid")

    name: str = Field(max_length=255)
    description: str | None = None
    status: ProductStatus = "active"
    images: list[str] = Field(default_factory=list)
    price: float = Field(ge=0)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty")
        return v


class ProductUpdate(SQLModel):
    """
    Partial update payload for products.
    All fields are optional; only the ones present in the body are written.
    """

    model_config = ConfigDict(extra="forbid")

    name: str | None = Field(default=None, max_length=255)
    description: str | None = None
    status: ProductStatus | None = None
    images: list[str] | None = None
    price: float | None = Field(default=None, ge=0)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str | None) -> str | None:
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty")
        return v


class ProductRead(SQLModel):
    """
    Product representation for clients.
    """

    id: uuid.UUID
    name: str
    description: str | None = None
    status: str
    images: list[str] | None = None
    price: float
    created_at: datetime
    updated_at: datetime | None = None

    @field_validator("images", mode="before")
    @classmethod
    def coerce_images(cls, v):
        # Legacy rows may hold a bare string or object here
        if isinstance(v, list):
            return v
        return None
