"""Product catalog and room pricing service."""

import logging
from decimal import Decimal
from typing import Any, Optional
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from frontdesk.models.catalog import Product, RoomRate
from frontdesk.models.enums import ProductCategory, RoomCategory
from frontdesk.services.errors import NotFound, ValidationFailed
from frontdesk.services.room_registry import RoomRegistry

logger = logging.getLogger(__name__)


class CatalogService:
    def __init__(self, db: AsyncSession):
        self.db = db

    # =========================================================================
    # PRODUCTS
    # =========================================================================

    async def list_products(self, category: Optional[ProductCategory] = None) -> list[Product]:
        query = select(Product).order_by(Product.name)
        if category is not None:
            query = query.where(Product.category == category)
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def search(self, term: str, limit: int = 10) -> list[Product]:
        """Case-insensitive name match, used for consumption suggestions."""
        term = (term or "").strip()
        if not term:
            return []
        result = await self.db.execute(
            select(Product)
            .where(func.lower(Product.name).contains(term.lower()))
            .order_by(Product.name)
            .limit(limit)
        )
        return list(result.scalars().all())

    async def get_product(self, product_id: UUID) -> Product:
        product = await self.db.get(Product, product_id)
        if product is None:
            raise NotFound(f"Product {product_id} not found")
        return product

    async def create_product(self, data: dict[str, Any]) -> Product:
        await self._check_code(data["code"])
        product = Product(**data)
        self.db.add(product)
        await self.db.flush()
        logger.info(f"[CATALOG] Added product {product.code} - {product.name}")
        return product

    async def update_product(self, product_id: UUID, changes: dict[str, Any]) -> Product:
        product = await self.get_product(product_id)
        if "code" in changes and changes["code"] != product.code:
            await self._check_code(changes["code"])
        for field, value in changes.items():
            setattr(product, field, value)
        await self.db.flush()
        return product

    async def delete_product(self, product_id: UUID) -> None:
        product = await self.get_product(product_id)
        await self.db.delete(product)
        await self.db.flush()

    async def _check_code(self, code: str) -> None:
        result = await self.db.execute(select(Product.id).where(Product.code == code))
        if result.scalar_one_or_none() is not None:
            raise ValidationFailed(f"Product code '{code}' is already in use")

    # =========================================================================
    # ROOM RATES
    # =========================================================================

    async def list_rates(self, registry: RoomRegistry) -> dict[RoomCategory, Decimal]:
        """Effective daily rate per category: configured, else floor-table base price."""
        result = await self.db.execute(select(RoomRate))
        configured = {r.category: r.daily_rate for r in result.scalars().all()}
        rates = {}
        for category in RoomCategory:
            rate = configured.get(category, registry.base_price(category))
            if rate is not None:
                rates[category] = rate
        return rates

    async def set_rate(self, category: RoomCategory, daily_rate: Decimal) -> RoomRate:
        if daily_rate < 0:
            raise ValidationFailed("Daily rate cannot be negative")
        rate = await self.db.get(RoomRate, category)
        if rate is None:
            rate = RoomRate(category=category, daily_rate=daily_rate)
            self.db.add(rate)
        else:
            rate.daily_rate = daily_rate
        await self.db.flush()
        logger.info(f"[CATALOG] Daily rate for {category.value} set to {daily_rate}")
        return rate

    async def daily_rate_for(self, category: RoomCategory, registry: RoomRegistry) -> Decimal:
        rate = await self.db.get(RoomRate, category)
        if rate is not None:
            return rate.daily_rate
        base = registry.base_price(category)
        if base is None:
            raise NotFound(f"No rate configured for {category.value}")
        return base
