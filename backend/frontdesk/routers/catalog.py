"""Catalog router - products and room rates."""

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from frontdesk.core.database import get_db
from frontdesk.core.deps import get_front_desk
from frontdesk.models.enums import ProductCategory, RoomCategory
from frontdesk.schemas.catalog import (
    ProductCreate,
    ProductResponse,
    ProductUpdate,
    RoomRateResponse,
    RoomRateUpdate,
)
from frontdesk.services.catalog import CatalogService
from frontdesk.services.front_desk import FrontDesk

router = APIRouter(prefix="/catalog", tags=["catalog"])


@router.get("/products", response_model=List[ProductResponse])
async def list_products(
    category: Optional[ProductCategory] = None,
    db: AsyncSession = Depends(get_db),
):
    products = await CatalogService(db).list_products(category)
    return [ProductResponse.model_validate(p) for p in products]


@router.get("/products/search", response_model=List[ProductResponse])
async def search_products(
    q: str = Query(..., min_length=1),
    limit: int = Query(10, ge=1, le=50),
    db: AsyncSession = Depends(get_db),
):
    """Name search for consumption suggestions."""
    products = await CatalogService(db).search(q, limit)
    return [ProductResponse.model_validate(p) for p in products]


@router.post("/products", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
async def create_product(data: ProductCreate, db: AsyncSession = Depends(get_db)):
    product = await CatalogService(db).create_product(data.model_dump())
    await db.commit()
    await db.refresh(product)
    return ProductResponse.model_validate(product)


@router.get("/products/{product_id}", response_model=ProductResponse)
async def get_product(product_id: UUID, db: AsyncSession = Depends(get_db)):
    return ProductResponse.model_validate(await CatalogService(db).get_product(product_id))


@router.patch("/products/{product_id}", response_model=ProductResponse)
async def update_product(
    product_id: UUID,
    data: ProductUpdate,
    db: AsyncSession = Depends(get_db),
):
    product = await CatalogService(db).update_product(product_id, data.model_dump(exclude_unset=True))
    await db.commit()
    await db.refresh(product)
    return ProductResponse.model_validate(product)


@router.delete("/products/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(product_id: UUID, db: AsyncSession = Depends(get_db)):
    await CatalogService(db).delete_product(product_id)
    await db.commit()


@router.get("/rates", response_model=List[RoomRateResponse])
async def list_rates(
    db: AsyncSession = Depends(get_db),
    desk: FrontDesk = Depends(get_front_desk),
):
    """Effective daily rate per room category."""
    rates = await CatalogService(db).list_rates(desk.registry)
    return [RoomRateResponse(category=c, daily_rate=r) for c, r in rates.items()]


@router.put("/rates/{category}", response_model=RoomRateResponse)
async def set_rate(
    category: RoomCategory,
    data: RoomRateUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Configure the daily rate used when a check-in gives none."""
    rate = await CatalogService(db).set_rate(category, data.daily_rate)
    await db.commit()
    return RoomRateResponse(category=rate.category, daily_rate=rate.daily_rate)
