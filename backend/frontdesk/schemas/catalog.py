"""Product catalog and room rate schemas."""

from decimal import Decimal
from typing import Optional

from pydantic import Field

from frontdesk.schemas.base import BaseSchema, IDMixin, TimestampMixin
from frontdesk.models.enums import ProductCategory, RoomCategory


class ProductCreate(BaseSchema):
    """Add a product to the catalog."""

    code: str = Field(..., min_length=1, max_length=20)
    name: str = Field(..., min_length=1, max_length=255)
    category: ProductCategory = ProductCategory.OTHER
    price: Decimal = Field(..., gt=0, decimal_places=2)
    stock: int = Field(default=0, ge=0)
    min_stock: int = Field(default=0, ge=0)
    description: Optional[str] = None


class ProductUpdate(BaseSchema):
    """Update product."""

    code: Optional[str] = Field(None, min_length=1, max_length=20)
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    category: Optional[ProductCategory] = None
    price: Optional[Decimal] = Field(None, gt=0, decimal_places=2)
    stock: Optional[int] = Field(None, ge=0)
    min_stock: Optional[int] = Field(None, ge=0)
    description: Optional[str] = None


class ProductResponse(BaseSchema, IDMixin, TimestampMixin):
    """Product response."""

    code: str
    name: str
    category: ProductCategory
    price: Decimal
    stock: int
    min_stock: int
    description: Optional[str] = None


class RoomRateUpdate(BaseSchema):
    daily_rate: Decimal = Field(..., ge=0, decimal_places=2)


class RoomRateResponse(BaseSchema):
    category: RoomCategory
    daily_rate: Decimal
